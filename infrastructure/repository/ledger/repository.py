from __future__ import annotations

import logging
from typing import Optional, Sequence

from uuid_extensions import uuid7

from application.financeiro.interface import LedgerStorePort
from core.entities import Balanco, NovaTransacao, Transacao

_logger = logging.getLogger("financeiro.infrastructure.repository.ledger")


class LedgerEmMemoria(LedgerStorePort):
    """Ledger Store em memória; ids em UUIDv7 (ordenáveis pelo tempo)."""

    def __init__(self, transacoes: Optional[Sequence[Transacao]] = None) -> None:
        self._transacoes: list[Transacao] = list(transacoes or [])

    @property
    def transacoes(self) -> tuple[Transacao, ...]:
        return tuple(self._transacoes)

    @property
    def balanco(self) -> Balanco:
        return Balanco.calcular(self._transacoes)

    def adicionar_transacao(self, nova: NovaTransacao) -> Transacao:
        transacao = Transacao.criar(str(uuid7()), nova)
        self._transacoes.append(transacao)
        _logger.info(
            "Stored transaction",
            extra={"transaction_id": transacao.id, "kind": transacao.tipo.value},
        )
        return transacao

    def remover_transacao(self, transacao_id: str) -> None:
        antes = len(self._transacoes)
        self._transacoes = [t for t in self._transacoes if t.id != transacao_id]
        if len(self._transacoes) == antes:
            _logger.warning("Transaction not found for removal", extra={"transaction_id": transacao_id})
        else:
            _logger.info("Removed transaction", extra={"transaction_id": transacao_id})
