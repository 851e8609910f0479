from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from core.entities import Transacao
from core.enums import ERecorrencia


def _data_de_hoje() -> str:
    return date.today().isoformat()


class FormularioTransacao(BaseModel):
    """Schema de entrada do formulário de lançamento (valores como digitados)."""

    valor: str = Field("", description="Valor digitado; aceita '150', '150.00' ou '1.234,56'.")
    data: str = Field(default_factory=_data_de_hoje, description="Data (YYYY-MM-DD ou DD/MM/YYYY).")
    descricao: str = Field("", description="Descrição do lançamento (3 a 100 caracteres).")
    categoria: str = Field("", description="Categoria; vazia vira a categoria padrão.")
    observacao: str = Field("", description="Observação livre; também usada como método de pagamento.")
    recorrencia: ERecorrencia = Field(
        ERecorrencia.NENHUMA, description="Recorrência; só gera pagamento programado para saídas."
    )

    @field_validator("valor", mode="before")
    @classmethod
    def _valor_como_texto(cls, valor: object) -> object:
        if valor is None:
            return ""
        if isinstance(valor, (int, float, Decimal)) and not isinstance(valor, bool):
            return str(valor)
        return valor

    @field_validator("data", mode="before")
    @classmethod
    def _data_como_texto(cls, valor: object) -> object:
        if valor is None:
            return ""
        if isinstance(valor, (date, datetime)):
            return valor.isoformat()
        return valor

    @field_validator("descricao", "categoria", "observacao", mode="before")
    @classmethod
    def _texto_opcional(cls, valor: object) -> object:
        return "" if valor is None else valor

    @classmethod
    def de_transacao(cls, transacao: Transacao) -> "FormularioTransacao":
        """Preenche o formulário a partir de um lançamento existente (edição)."""
        return cls(
            valor=str(transacao.valor),
            data=transacao.data.date().isoformat(),
            descricao=transacao.descricao,
            categoria=transacao.categoria,
            observacao=transacao.observacao or "",
            recorrencia=ERecorrencia.NENHUMA,
        )
