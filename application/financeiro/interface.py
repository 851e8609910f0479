# application/financeiro/interface.py

from __future__ import annotations

from typing import Protocol, Sequence

from core.entities import Balanco, NovaTransacao, PagamentoProgramado, Transacao


class LedgerStorePort(Protocol):
    """Dono único do estado mutável dos lançamentos."""

    @property
    def transacoes(self) -> Sequence[Transacao]:
        """Retorna um snapshot imutável dos lançamentos, na ordem de inclusão."""
        ...

    @property
    def balanco(self) -> Balanco:
        """Saldo derivado dos lançamentos atuais."""
        ...

    def adicionar_transacao(self, nova: NovaTransacao) -> Transacao:
        """
        Registra um lançamento, gerando seu identificador.

        Retorna:
            A transação criada.
        """
        ...

    def remover_transacao(self, transacao_id: str) -> None:
        """Remove o lançamento; ids inexistentes são ignorados."""
        ...


class AgendaPagamentosPort(Protocol):
    """Contrato de armazenamento dos pagamentos programados."""

    def listar(self) -> list[PagamentoProgramado]: ...

    def substituir(self, pagamentos: Sequence[PagamentoProgramado]) -> None: ...


class PermissaoPort(Protocol):
    def has_permission(self, escopo: str) -> bool: ...
