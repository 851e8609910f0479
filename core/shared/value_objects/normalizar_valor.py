from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN
from typing import Union

ValorBruto = Union[str, int, float, Decimal]

CENTAVO = Decimal("0.01")

# Espaços e o símbolo da moeda
_PADRAO_RUIDO = re.compile(r"\s|R\$")


def _texto_para_decimal(texto: str) -> str:
    """Leva "1.234,56" / "1234,56" / "1234.56" ao formato aceito por Decimal.

    Com vírgula presente, ela é o separador decimal e os pontos são milhar.
    """
    limpo = _PADRAO_RUIDO.sub("", texto)
    if "," not in limpo:
        return limpo
    inteiro, _, fracao = limpo.rpartition(",")
    return f"{inteiro.replace('.', '')}.{fracao}"


def converter_decimal(bruto: ValorBruto) -> Decimal:
    """Converte texto/número bruto em `Decimal` finito, sem arredondar.

    Aceita "150", "150.00", "1.234,56", "R$ 40,00", int, float e Decimal.
    Levanta ValueError para texto sem número, NaN ou infinito.
    """
    if isinstance(bruto, bool) or not isinstance(bruto, (str, int, float, Decimal)):
        raise ValueError(f"Tipo de valor não suportado: {type(bruto).__name__}.")

    try:
        if isinstance(bruto, Decimal):
            valor = bruto
        elif isinstance(bruto, str):
            valor = Decimal(_texto_para_decimal(bruto))
        else:
            # float via str evita o ruído binário (0.1 -> Decimal("0.1"))
            valor = Decimal(str(bruto))
    except InvalidOperation as exc:
        raise ValueError(f"Valor inválido: '{bruto}'.") from exc

    if not valor.is_finite():
        raise ValueError(f"Valor inválido: '{bruto}'.")
    return valor


@dataclass(frozen=True, slots=True)
class ValorMonetario:
    """Quantia em reais com exatamente 2 casas (arredondamento bancário)."""

    valor: Decimal

    def __post_init__(self) -> None:
        try:
            normalizado = self.valor.quantize(CENTAVO, rounding=ROUND_HALF_EVEN)
        except InvalidOperation as exc:
            # Mais dígitos do que o contexto decimal comporta
            raise ValueError(f"Valor fora do intervalo suportado: '{self.valor}'.") from exc
        object.__setattr__(self, "valor", normalizado)

    @classmethod
    def from_bruto(cls, bruto: ValorBruto) -> "ValorMonetario":
        return cls(converter_decimal(bruto))

    def __str__(self) -> str:
        return f"{self.valor:.2f}"
