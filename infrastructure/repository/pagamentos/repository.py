from __future__ import annotations

import logging
from typing import Optional, Sequence

from application.financeiro.interface import AgendaPagamentosPort
from core.entities import PagamentoProgramado

_logger = logging.getLogger("financeiro.infrastructure.repository.pagamentos")


def _por_vencimento(pagamentos: Sequence[PagamentoProgramado]) -> list[PagamentoProgramado]:
    # sorted é estável: vencimentos iguais mantêm a ordem recebida
    return sorted(pagamentos, key=lambda p: p.data_vencimento)


class AgendaPagamentosEmMemoria(AgendaPagamentosPort):
    """Repositório em memória dos pagamentos programados, sempre por vencimento."""

    def __init__(self, pagamentos: Optional[Sequence[PagamentoProgramado]] = None) -> None:
        self._pagamentos: list[PagamentoProgramado] = _por_vencimento(pagamentos or [])

    def listar(self) -> list[PagamentoProgramado]:
        return list(self._pagamentos)

    def substituir(self, pagamentos: Sequence[PagamentoProgramado]) -> None:
        self._pagamentos = _por_vencimento(pagamentos)
        _logger.debug("Replaced scheduled payments", extra={"count": len(self._pagamentos)})
