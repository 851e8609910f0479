from .filtro_transacoes import (
    FiltroAtivo,
    FiltroTransacoes,
    aplicar_em_sequencia,
    filtrar_transacoes,
    filtros_ativos,
    predicados,
    remover_filtro,
)

__all__ = [
    "FiltroAtivo",
    "FiltroTransacoes",
    "aplicar_em_sequencia",
    "filtrar_transacoes",
    "filtros_ativos",
    "predicados",
    "remover_filtro",
]

# English aliases
filter_transactions = filtrar_transacoes
__all__ += ["filter_transactions"]
