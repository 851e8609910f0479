"""Primitivas de segurança usadas pela validação de formulários.

Funções puras: sanitização de texto, detecção de código malicioso,
validações elementares (email, número, data) e geração de identificadores.
"""

from __future__ import annotations

import math
import re
import uuid
from datetime import date
from decimal import Decimal
from typing import Any, Optional, Union

Numero = Union[int, float, Decimal]

_SUBSTITUICOES_HTML = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#x27;",
    "/": "&#x2F;",
    "`": "&#x60;",
    "\\": "&#x5C;",
}
_PADRAO_ESCAPE = re.compile("|".join(re.escape(c) for c in _SUBSTITUICOES_HTML))

_PADRAO_SCRIPT = re.compile(r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE)
_PADRAO_EVENTO_INLINE = re.compile(r"on\w+\s*=\s*[\"']?[^\"']*[\"']?", re.IGNORECASE)
_PADRAO_ESQUEMA_PERIGOSO = re.compile(r"(javascript|data)\s*:", re.IGNORECASE)

_PADRAO_EMAIL = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)

_PADROES_ALTO_RISCO = tuple(
    re.compile(padrao, re.IGNORECASE)
    for padrao in (
        r"<script[^>]*>[\s\S]*?</script>",
        r"javascript\s*:",
        r"data\s*:\s*text/html",
        r"data\s*:\s*application/javascript",
        r"\bon\w+\s*=\s*[\"']?[^\"']*[\"']?",
        r"\beval\s*\([^)]*\)",
        r"\bFunction\s*\(",
        r"\bsetTimeout\s*\(",
        r"\bsetInterval\s*\(",
        r"\bnew\s+Function\s*\(",
        r"\bdocument\.write(?:ln)?\s*\(",
        r"\b(?:window|document)\.location\s*=",
        r"\blocation\.href\s*=",
        r"\blocation\.(?:replace|assign)\s*\(",
        r"\bdocument\.cookie",
        r"\bdocument\.domain\s*=",
        r"\bimport\s*\(",
        r"\brequire\s*\(",
        r"\bexec\s*\(",
        r"\bchild_process",
        r"\bshell\s*:",
    )
)

_PADROES_MEDIO_RISCO = tuple(
    re.compile(padrao, re.IGNORECASE)
    for padrao in (
        r"\blocalStorage\s*\.",
        r"\bsessionStorage\s*\.",
        r"\bindexedDB\s*\.",
        r"\bfetch\s*\(",
        r"\bXMLHttpRequest",
        r"\bwindow\.open\s*\(",
        r"\bdocument\.createElement\s*\(\s*['\"]script['\"]\s*\)",
        r"\b__proto__",
        r"\bunescape\s*\(",
        r"\bdecodeURI(?:Component)?\s*\(",
        r"\batob\s*\(",
        r"\bblob:",
        r"\bvbscript:",
    )
)
_PADRAO_OFUSCACAO = re.compile(r"(?:\\x[\da-f]{2}|\\u[\da-f]{4}){3,}", re.IGNORECASE)
_PADRAO_ENTIDADE_HTML = re.compile(r"&(?:[a-z\d]+|#\d+|#x[a-f\d]+);", re.IGNORECASE)


def sanitizar_entrada(texto: Optional[str], permitir_html: bool = False) -> str:
    """Neutraliza HTML em texto livre.

    Sem `permitir_html`, escapa todos os caracteres especiais. Com
    `permitir_html`, remove blocos <script>, handlers inline e esquemas
    javascript:/data:, mantendo o restante da marcação.
    """
    if not texto:
        return ""
    if not permitir_html:
        return _PADRAO_ESCAPE.sub(lambda m: _SUBSTITUICOES_HTML[m.group(0)], texto)
    sem_script = _PADRAO_SCRIPT.sub("", texto)
    sem_eventos = _PADRAO_EVENTO_INLINE.sub("", sem_script)
    return _PADRAO_ESQUEMA_PERIGOSO.sub("removed:", sem_eventos)


def validar_email(email: Optional[str]) -> bool:
    if not email or len(email) > 254:
        return False
    return _PADRAO_EMAIL.match(email) is not None


def validar_valor_numerico(
    valor: Numero,
    minimo: Optional[Numero] = None,
    maximo: Optional[Numero] = None,
) -> bool:
    if isinstance(valor, Decimal):
        if valor.is_nan():
            return False
    elif math.isnan(valor):
        return False
    if minimo is not None and valor < minimo:
        return False
    if maximo is not None and valor > maximo:
        return False
    return True


def validar_data(valor: Any) -> bool:
    """Retorna True apenas para instâncias de date/datetime."""
    return isinstance(valor, date)


def contem_codigo_malicioso(texto: Optional[str], modo_estrito: bool = False) -> bool:
    """Detecta padrões de injeção de script no texto bruto e numa cópia normalizada."""
    if not texto:
        return False

    normalizado = re.sub(r"\s+", "", texto.lower())
    normalizado = re.sub(r"[\\\n\r]", "", normalizado)
    normalizado = _PADRAO_ENTIDADE_HTML.sub("", normalizado)

    padroes = _PADROES_ALTO_RISCO + (_PADROES_MEDIO_RISCO if modo_estrito else ())
    if any(p.search(texto) or p.search(normalizado) for p in padroes):
        return True

    return modo_estrito and _PADRAO_OFUSCACAO.search(texto) is not None


def gerar_id_seguro(prefixo: str = "id") -> str:
    """Gera um identificador curto e aleatório: "{prefixo}-{8 hex}"."""
    return f"{prefixo}-{uuid.uuid4().hex[:8]}"
