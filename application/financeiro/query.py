from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import pandas as pd

from core.agregacao import DadosGraficos, dados_graficos, resumo_mensal_como_dataframe
from core.entities import Balanco, PagamentoProgramado, Transacao
from core.filtros import FiltroTransacoes, filtrar_transacoes
from core.pagamentos import dias_para_vencer
from application.financeiro.interface import AgendaPagamentosPort, LedgerStorePort


@dataclass(slots=True)
class FinanceiroQuery:
    """Leituras derivadas do Ledger Store: listas filtradas, gráficos e saldo."""

    store: LedgerStorePort
    agenda: Optional[AgendaPagamentosPort] = None

    def transacoes_filtradas(self, filtro: Optional[FiltroTransacoes] = None) -> list[Transacao]:
        return filtrar_transacoes(self.store.transacoes, filtro)

    def graficos(
        self, ano_atual: Optional[int] = None, filtro: Optional[FiltroTransacoes] = None
    ) -> DadosGraficos:
        return dados_graficos(self.transacoes_filtradas(filtro), ano_atual)

    def tabela_mensal(self, ano_atual: Optional[int] = None) -> pd.DataFrame:
        return resumo_mensal_como_dataframe(self.graficos(ano_atual).por_mes)

    def balanco(self) -> Balanco:
        return self.store.balanco

    def pagamentos_com_prazo(
        self, referencia: Optional[datetime] = None
    ) -> list[tuple[PagamentoProgramado, Optional[int]]]:
        if self.agenda is None:
            return []
        return [(p, dias_para_vencer(p, referencia)) for p in self.agenda.listar()]
