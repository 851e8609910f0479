from __future__ import annotations

from typing import Iterable

from application.financeiro.interface import PermissaoPort


class PermissoesEstaticas(PermissaoPort):
    """Permissões fixas do usuário corrente (aceita '*' como curinga)."""

    def __init__(self, escopos: Iterable[str] = ()) -> None:
        self._escopos = frozenset(escopos)

    def has_permission(self, escopo: str) -> bool:
        return "*" in self._escopos or escopo in self._escopos
