"""Agregações para os gráficos do livro-caixa.

Dois redutores independentes sobre a mesma coleção de lançamentos:
- por mês: entradas e saídas em baldes "{mes} {ano}", com o ano corrente
  sempre completo (12 meses) e ordenação cronológica;
- por dia da semana: soma apenas das entradas.

Funções puras: cada chamada constrói seus próprios baldes.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional, Sequence

import pandas as pd

from core.entities import Transacao

MESES = ("jan", "fev", "mar", "abr", "mai", "jun", "jul", "ago", "set", "out", "nov", "dez")
DIAS_SEMANA = ("Domingo", "Segunda", "Terça", "Quarta", "Quinta", "Sexta", "Sábado")

_ZERO = Decimal("0.00")


@dataclass(frozen=True, slots=True)
class ResumoMensal:
    name: str
    entrada: Decimal
    saida: Decimal

    @property
    def saldo(self) -> Decimal:
        return self.entrada - self.saida

    def to_dict(self) -> dict:
        return {"name": self.name, "entrada": self.entrada, "saida": self.saida}


@dataclass(frozen=True, slots=True)
class ResumoDiaSemana:
    name: str
    valor: Decimal

    def to_dict(self) -> dict:
        return {"name": self.name, "valor": self.valor}


@dataclass(frozen=True, slots=True)
class DadosGraficos:
    por_mes: list[ResumoMensal]
    por_dia: list[ResumoDiaSemana]


def rotulo_mes(ano: int, mes: int) -> str:
    """Chave do balde mensal, ex.: (2024, 3) -> "mar 2024"."""
    return f"{MESES[mes - 1]} {ano}"


def indice_dia_semana(transacao: Transacao) -> int:
    """Índice com domingo = 0, como no calendário exibido."""
    return (transacao.data.weekday() + 1) % 7


def agregar_por_mes(
    transacoes: Iterable[Transacao], ano_atual: Optional[int] = None
) -> list[ResumoMensal]:
    ano_base = ano_atual if ano_atual is not None else date.today().year

    # (ano, mes) -> [entradas, saidas]; o ano corrente é pré-semeado
    baldes: dict[tuple[int, int], list[Decimal]] = {
        (ano_base, mes): [_ZERO, _ZERO] for mes in range(1, 13)
    }
    for transacao in transacoes:
        chave = (transacao.data.year, transacao.data.month)
        balde = baldes.setdefault(chave, [_ZERO, _ZERO])
        if transacao.e_entrada():
            balde[0] += transacao.valor
        else:
            balde[1] += transacao.valor

    # Ordenação pelo índice do mês, nunca pelo texto da chave
    return [
        ResumoMensal(name=rotulo_mes(ano, mes), entrada=entradas, saida=saidas)
        for (ano, mes), (entradas, saidas) in sorted(baldes.items())
    ]


def agregar_por_dia_semana(transacoes: Iterable[Transacao]) -> list[ResumoDiaSemana]:
    totais = [_ZERO] * len(DIAS_SEMANA)
    for transacao in transacoes:
        if transacao.e_entrada():
            totais[indice_dia_semana(transacao)] += transacao.valor
    return [ResumoDiaSemana(name=nome, valor=total) for nome, total in zip(DIAS_SEMANA, totais)]


def dados_graficos(
    transacoes: Sequence[Transacao], ano_atual: Optional[int] = None
) -> DadosGraficos:
    return DadosGraficos(
        por_mes=agregar_por_mes(transacoes, ano_atual),
        por_dia=agregar_por_dia_semana(transacoes),
    )


def resumo_mensal_como_dataframe(resumos: Sequence[ResumoMensal]) -> pd.DataFrame:
    """Tabela mensal (name, entrada, saida, saldo) em float para relatórios."""
    colunas = ["name", "entrada", "saida", "saldo"]
    if not resumos:
        return pd.DataFrame(columns=colunas)
    return pd.DataFrame(
        [
            {
                "name": r.name,
                "entrada": float(r.entrada),
                "saida": float(r.saida),
                "saldo": float(r.saldo),
            }
            for r in resumos
        ],
        columns=colunas,
    )
