from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

_logger = logging.getLogger("financeiro.core.confirmacao")


@dataclass(frozen=True, slots=True)
class Ocioso:
    """Nenhuma ação destrutiva aguardando confirmação."""


@dataclass(frozen=True, slots=True)
class Pendente:
    titulo: str
    mensagem: str
    item_id: str
    on_confirm: Callable[[], Any]


EstadoConfirmacao = Union[Ocioso, Pendente]


class FluxoConfirmacao:
    """Fluxo em duas fases (solicitar -> confirmar) para ações destrutivas.

    `solicitar` apenas guarda a ação; somente `confirmar` a executa.
    """

    def __init__(self) -> None:
        self._estado: EstadoConfirmacao = Ocioso()

    @property
    def estado(self) -> EstadoConfirmacao:
        return self._estado

    @property
    def pendente(self) -> bool:
        return isinstance(self._estado, Pendente)

    def solicitar(
        self,
        titulo: str,
        mensagem: str,
        item_id: str,
        on_confirm: Callable[[], Any],
    ) -> Pendente:
        if isinstance(self._estado, Pendente):
            _logger.info(
                "Replacing pending confirmation",
                extra={"previous_item_id": self._estado.item_id, "item_id": item_id},
            )
        pendente = Pendente(titulo=titulo, mensagem=mensagem, item_id=item_id, on_confirm=on_confirm)
        self._estado = pendente
        return pendente

    def confirmar(self) -> Optional[Any]:
        estado = self._estado
        if not isinstance(estado, Pendente):
            _logger.debug("Confirm called with nothing pending")
            return None
        # Volta a Ocioso mesmo se a ação falhar
        self._estado = Ocioso()
        _logger.info("Confirmed pending action", extra={"item_id": estado.item_id})
        return estado.on_confirm()

    def cancelar(self) -> None:
        if isinstance(self._estado, Pendente):
            _logger.info("Cancelled pending action", extra={"item_id": self._estado.item_id})
        self._estado = Ocioso()
