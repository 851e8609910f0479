from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal

from core.enums import ERecorrencia


@dataclass(frozen=True, slots=True)
class PagamentoProgramado:
    """Pagamento programado derivado de uma saída recorrente.

    Imutável: a única alteração de estado prevista é o `pago`, feita via
    `com_pago`, que devolve uma nova instância.
    """

    id: str
    descricao: str
    valor: Decimal
    data_vencimento: datetime
    pago: bool = False
    recorrencia: ERecorrencia = ERecorrencia.NENHUMA

    def com_pago(self, pago: bool) -> "PagamentoProgramado":
        return replace(self, pago=bool(pago))

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "descricao": self.descricao,
            "valor": self.valor,
            "data_vencimento": self.data_vencimento.isoformat(),
            "pago": self.pago,
            "recorrencia": self.recorrencia.value,
        }
