from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from datetime import date, datetime
from decimal import Decimal
from typing import Callable, Iterable, Optional, Union

from core.entities import Transacao
from core.shared.value_objects import converter_datetime, converter_decimal

_logger = logging.getLogger("financeiro.core.filtros")

Predicado = Callable[[Transacao], bool]

# Ordem em que os filtros ativos são exibidos
_CAMPOS_EXIBIVEIS = ("descricao", "data_inicio", "data_fim", "categoria", "valor_min", "valor_max")


def _como_texto(bruto: object) -> str:
    if bruto is None:
        return ""
    if isinstance(bruto, (date, datetime)):
        return bruto.isoformat()
    return str(bruto)


@dataclass(frozen=True, slots=True)
class FiltroTransacoes:
    """Critérios de filtro no formato do formulário (texto; vazio = inativo).

    `observacao` faz parte do estado do formulário mas não é aplicado
    por `filtrar_transacoes`.
    """

    descricao: str = ""
    data_inicio: str = ""
    data_fim: str = ""
    categoria: str = ""
    observacao: str = ""
    valor_min: str = ""
    valor_max: str = ""

    def __post_init__(self) -> None:
        # Aceita números e datas, normalizando tudo para texto
        for campo in fields(self):
            object.__setattr__(self, campo.name, _como_texto(getattr(self, campo.name)))

    def esta_vazio(self) -> bool:
        return not filtros_ativos(self)


@dataclass(frozen=True, slots=True)
class FiltroAtivo:
    campo: str
    valor: str


def _data_ou_none(texto: str) -> Optional[datetime]:
    try:
        return converter_datetime(texto)
    except ValueError:
        _logger.debug("Ignoring unparseable date bound", extra={"bound": texto})
        return None


def _decimal_ou_none(texto: str) -> Optional[Decimal]:
    try:
        return converter_decimal(texto)
    except ValueError:
        _logger.debug("Ignoring unparseable amount bound", extra={"bound": texto})
        return None


def predicados(filtro: FiltroTransacoes) -> list[Predicado]:
    """Monta um predicado por critério ativo; a combinação é um AND puro."""
    resultado: list[Predicado] = []

    descricao = filtro.descricao.strip().lower()
    if descricao:
        resultado.append(lambda t: descricao in t.descricao.lower())

    if filtro.data_inicio.strip():
        inicio = _data_ou_none(filtro.data_inicio)
        if inicio is not None:
            resultado.append(lambda t: not t.data < inicio)

    if filtro.data_fim.strip():
        fim = _data_ou_none(filtro.data_fim)
        if fim is not None:
            resultado.append(lambda t: not t.data > fim)

    categoria = filtro.categoria.strip().lower()
    if categoria:
        resultado.append(lambda t: t.categoria.strip().lower() == categoria)

    if filtro.valor_min.strip():
        minimo = _decimal_ou_none(filtro.valor_min)
        if minimo is not None:
            resultado.append(lambda t: not t.valor < minimo)

    if filtro.valor_max.strip():
        maximo = _decimal_ou_none(filtro.valor_max)
        if maximo is not None:
            resultado.append(lambda t: not t.valor > maximo)

    return resultado


def filtrar_transacoes(
    transacoes: Iterable[Transacao], filtro: Optional[FiltroTransacoes] = None
) -> list[Transacao]:
    if filtro is None:
        return list(transacoes)
    regras = predicados(filtro)
    return [t for t in transacoes if all(regra(t) for regra in regras)]


def filtros_ativos(filtro: FiltroTransacoes) -> list[FiltroAtivo]:
    return [
        FiltroAtivo(campo=campo, valor=getattr(filtro, campo))
        for campo in _CAMPOS_EXIBIVEIS
        if getattr(filtro, campo)
    ]


def remover_filtro(filtro: FiltroTransacoes, campo: str) -> FiltroTransacoes:
    if campo not in _CAMPOS_EXIBIVEIS:
        raise ValueError(f"Filtro desconhecido: '{campo}'.")
    return replace(filtro, **{campo: ""})


def aplicar_em_sequencia(
    transacoes: Iterable[Transacao], filtros: Iterable[FiltroTransacoes]
) -> list[Transacao]:
    """Aplica vários filtros um após o outro (equivalente a combiná-los)."""
    resultado: Union[list[Transacao], Iterable[Transacao]] = transacoes
    for filtro in filtros:
        resultado = filtrar_transacoes(resultado, filtro)
    return list(resultado)
