from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Iterable

from core.entities.transacao import Transacao


@dataclass(frozen=True, slots=True)
class Balanco:
    """Saldo derivado da coleção de lançamentos; nunca armazenado à parte."""

    saldo_atual: Decimal = Decimal("0.00")
    total_entradas: Decimal = Decimal("0.00")
    total_saidas: Decimal = Decimal("0.00")
    ultima_atualizacao: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def calcular(cls, transacoes: Iterable[Transacao]) -> "Balanco":
        total_entradas = Decimal("0.00")
        total_saidas = Decimal("0.00")
        for transacao in transacoes:
            if transacao.e_entrada():
                total_entradas += transacao.valor
            else:
                total_saidas += transacao.valor
        return cls(
            saldo_atual=total_entradas - total_saidas,
            total_entradas=total_entradas,
            total_saidas=total_saidas,
        )
