"""Validadores de campos de formulário.

Cada validador devolve um `ResultadoValidacao` e nunca levanta exceção:
o primeiro motivo de falha encontrado é reportado, e `validar_formulario`
combina vários resultados expondo apenas a primeira mensagem.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Iterable, Optional, Union

from core.shared.seguranca import (
    contem_codigo_malicioso,
    sanitizar_entrada,
    validar_data,
    validar_email,
    validar_valor_numerico,
)
from core.shared.value_objects import converter_datetime, converter_decimal

Numero = Union[int, float, Decimal]


@dataclass(frozen=True, slots=True)
class ResultadoValidacao:
    is_valid: bool
    message: str = ""

    @classmethod
    def valido(cls) -> "ResultadoValidacao":
        return cls(is_valid=True, message="")

    @classmethod
    def invalido(cls, mensagem: str) -> "ResultadoValidacao":
        return cls(is_valid=False, message=mensagem)

    def __bool__(self) -> bool:
        return self.is_valid


def _vazio(valor: object) -> bool:
    return valor is None or (isinstance(valor, str) and valor == "")


def validar_campo_texto(
    valor: Optional[str],
    nome_campo: str,
    *,
    required: bool = True,
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
    pattern: Optional[Union[str, re.Pattern[str]]] = None,
    pattern_message: Optional[str] = None,
) -> ResultadoValidacao:
    valor_sanitizado = sanitizar_entrada(valor)

    if required and valor_sanitizado.strip() == "":
        return ResultadoValidacao.invalido(f"O campo {nome_campo} é obrigatório")

    if min_length is not None and len(valor_sanitizado) < min_length:
        return ResultadoValidacao.invalido(
            f"O campo {nome_campo} deve ter pelo menos {min_length} caracteres"
        )

    if max_length is not None and len(valor_sanitizado) > max_length:
        return ResultadoValidacao.invalido(
            f"O campo {nome_campo} deve ter no máximo {max_length} caracteres"
        )

    if pattern is not None:
        padrao = re.compile(pattern) if isinstance(pattern, str) else pattern
        if padrao.search(valor_sanitizado) is None:
            return ResultadoValidacao.invalido(
                pattern_message or f"O campo {nome_campo} não está no formato correto"
            )

    # Verificação final sobre o texto já sanitizado
    if contem_codigo_malicioso(valor_sanitizado):
        return ResultadoValidacao.invalido(
            f"O campo {nome_campo} contém caracteres não permitidos"
        )

    return ResultadoValidacao.valido()


def validar_campo_email(email: Optional[str], required: bool = True) -> ResultadoValidacao:
    vazio = email is None or email.strip() == ""
    if vazio:
        if required:
            return ResultadoValidacao.invalido("O campo de email é obrigatório")
        return ResultadoValidacao.valido()

    if not validar_email(email):
        return ResultadoValidacao.invalido("Email inválido")

    return ResultadoValidacao.valido()


def validar_campo_numero(
    valor: Union[str, Numero, None],
    nome_campo: str,
    *,
    required: bool = True,
    min: Optional[Numero] = None,
    max: Optional[Numero] = None,
    integer: bool = False,
) -> ResultadoValidacao:
    if _vazio(valor):
        if required:
            return ResultadoValidacao.invalido(f"O campo {nome_campo} é obrigatório")
        return ResultadoValidacao.valido()

    try:
        numero = converter_decimal(valor)  # type: ignore[arg-type]
    except ValueError:
        return ResultadoValidacao.invalido(f"O campo {nome_campo} deve ser um número válido")

    if integer and numero != numero.to_integral_value():
        return ResultadoValidacao.invalido(f"O campo {nome_campo} deve ser um número inteiro")

    # Limites convertidos via str para comparar Decimal sem ruído binário de float
    if min is not None and not validar_valor_numerico(numero, minimo=Decimal(str(min))):
        return ResultadoValidacao.invalido(
            f"O campo {nome_campo} deve ser maior ou igual a {min}"
        )

    if max is not None and not validar_valor_numerico(numero, maximo=Decimal(str(max))):
        return ResultadoValidacao.invalido(
            f"O campo {nome_campo} deve ser menor ou igual a {max}"
        )

    return ResultadoValidacao.valido()


def validar_campo_data(
    valor: Union[str, date, datetime, None],
    nome_campo: str,
    *,
    required: bool = True,
    min_date: Optional[Union[date, datetime]] = None,
    max_date: Optional[Union[date, datetime]] = None,
) -> ResultadoValidacao:
    if _vazio(valor):
        if required:
            return ResultadoValidacao.invalido(f"O campo {nome_campo} é obrigatório")
        return ResultadoValidacao.valido()

    try:
        momento = converter_datetime(valor)  # type: ignore[arg-type]
    except ValueError:
        momento = None

    if not validar_data(momento):
        return ResultadoValidacao.invalido(f"O campo {nome_campo} deve ser uma data válida")

    # Comparação por instante completo, incluindo a hora do dia
    if min_date is not None and momento < converter_datetime(min_date):
        return ResultadoValidacao.invalido(
            f"O campo {nome_campo} deve ser posterior a {min_date.strftime('%d/%m/%Y')}"
        )

    if max_date is not None and momento > converter_datetime(max_date):
        return ResultadoValidacao.invalido(
            f"O campo {nome_campo} deve ser anterior a {max_date.strftime('%d/%m/%Y')}"
        )

    return ResultadoValidacao.valido()


def validar_formulario(resultados: Iterable[ResultadoValidacao]) -> ResultadoValidacao:
    """Combina resultados por AND, retornando a primeira mensagem de erro."""
    for resultado in resultados:
        if not resultado.is_valid:
            return ResultadoValidacao.invalido(resultado.message)
    return ResultadoValidacao.valido()
