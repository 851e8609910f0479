"""VO de domínio para valores monetários de lançamentos.

Especializa o normalizador `ValorMonetario`, herdando o parsing de strings
("R$ 1.234,56"), inteiros, floats ou Decimal, e acrescenta a regra de que
todo lançamento tem valor estritamente positivo.
"""

from __future__ import annotations

from decimal import Decimal

from core.shared.value_objects import ValorMonetario
from core.shared.value_objects.normalizar_valor import ValorBruto


class Valor(ValorMonetario):
    """Value Object do domínio para um valor monetário positivo.

    - Utilize `Valor.criar_de_bruto(...)` para criar a partir de textos como
      "R$ 1.234,56" ou de números.
    - A propriedade `valor` expõe um `Decimal` com 2 casas.
    """

    # Impede construção direta; obrigatoriedade de usar fábricas da classe
    def __init__(self, *_args, **_kwargs) -> None:  # type: ignore[override]
        raise TypeError("Use as fábricas da classe (ex.: Valor.criar_de_bruto).")

    @classmethod
    def _criar_interno(cls, valor_normalizado: Decimal) -> "Valor":
        instancia = object.__new__(cls)
        # Inicializa campos do dataclass pai (frozen) garantindo quantização
        ValorMonetario.__init__(instancia, valor_normalizado)  # type: ignore[misc]
        if instancia.valor <= 0:
            raise ValueError("Valor deve ser maior que zero.")
        return instancia  # type: ignore[return-value]

    @classmethod
    def criar_de_bruto(cls, bruto: ValorBruto) -> "Valor":
        normalizado = ValorMonetario.from_bruto(bruto).valor
        return cls._criar_interno(normalizado)
