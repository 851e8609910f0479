from .agregacao import (
    DIAS_SEMANA,
    MESES,
    DadosGraficos,
    ResumoDiaSemana,
    ResumoMensal,
    agregar_por_dia_semana,
    agregar_por_mes,
    dados_graficos,
    resumo_mensal_como_dataframe,
)

__all__ = [
    "DIAS_SEMANA",
    "MESES",
    "DadosGraficos",
    "ResumoDiaSemana",
    "ResumoMensal",
    "agregar_por_dia_semana",
    "agregar_por_mes",
    "dados_graficos",
    "resumo_mensal_como_dataframe",
]

# English aliases
aggregate_by_month = agregar_por_mes
aggregate_by_weekday = agregar_por_dia_semana
__all__ += ["aggregate_by_month", "aggregate_by_weekday"]
