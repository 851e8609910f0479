from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from application.financeiro.handlers import FinanceiroService
from application.financeiro.query import FinanceiroQuery
from infrastructure.configuracao import Configuracao
from infrastructure.logging_config import configure_logging
from infrastructure.permissoes import PermissoesEstaticas
from infrastructure.repository.ledger.repository import LedgerEmMemoria
from infrastructure.repository.pagamentos.repository import AgendaPagamentosEmMemoria

_logger = logging.getLogger("financeiro.infrastructure.bootstrap")


@dataclass(frozen=True, slots=True)
class Aplicacao:
    servico: FinanceiroService
    consulta: FinanceiroQuery
    configuracao: Configuracao


def init_aplicacao(
    escopos: Iterable[str],
    configuracao: Optional[Configuracao] = None,
    configurar_logs: bool = True,
) -> Aplicacao:
    """
    Wire configuration, logging and the in-memory stores into the use cases.
    - Only infrastructure knows the concrete store/permission implementations.
    - Call once on application startup.
    """
    configuracao = configuracao or Configuracao.carregar()
    if configurar_logs:
        configure_logging(configuracao.nivel_log)

    store = LedgerEmMemoria()
    agenda = AgendaPagamentosEmMemoria()
    servico = FinanceiroService(
        store=store,
        agenda=agenda,
        permissoes=PermissoesEstaticas(escopos),
        atraso_persistencia=configuracao.atraso_persistencia,
        escopo_edicao=configuracao.escopo_edicao,
        categoria_padrao=configuracao.categoria_padrao,
    )
    _logger.info("Ledger application initialised", extra={"component": "bootstrap"})
    return Aplicacao(
        servico=servico,
        consulta=FinanceiroQuery(store=store, agenda=agenda),
        configuracao=configuracao,
    )
