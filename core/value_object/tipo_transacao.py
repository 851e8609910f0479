from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from typing import Union

from core.enums.e_transacao import ETipoTransacao


@dataclass(frozen=True, slots=True)
class TipoTransacao:
    """Value Object de domínio para o tipo de lançamento (entrada/saída).

    Aceita "entrada", "saida", "saída" (com ou sem acento, qualquer caixa)
    ou o próprio enum. Imutável e com igualdade por valor.
    """

    tipo_transacao: ETipoTransacao

    def __init__(self, *_args, **_kwargs) -> None:  # type: ignore[override]
        raise TypeError("Use as fábricas da classe (ex.: TipoTransacao.criar_de_nome).")

    @classmethod
    def _criar_interno(cls, tipo: ETipoTransacao) -> "TipoTransacao":
        instancia = object.__new__(cls)
        object.__setattr__(instancia, "tipo_transacao", tipo)
        return instancia  # type: ignore[return-value]

    # Fábricas
    @classmethod
    def criar_de_nome(cls, nome: Union[str, ETipoTransacao]) -> "TipoTransacao":
        if isinstance(nome, ETipoTransacao):
            return cls._criar_interno(nome)
        sem_acento = unicodedata.normalize("NFKD", str(nome)).encode("ascii", "ignore").decode()
        try:
            tipo = ETipoTransacao(sem_acento.strip().lower())
        except ValueError:
            opcoes = ", ".join(e.value for e in ETipoTransacao)
            raise ValueError(f"Tipo inválido. Utilize um dos seguintes: {opcoes}.") from None
        return cls._criar_interno(tipo)

    def como_enum(self) -> ETipoTransacao:
        return self.tipo_transacao

    # Conveniências semânticas
    def e_entrada(self) -> bool:
        return self.tipo_transacao is ETipoTransacao.ENTRADA

    def e_saida(self) -> bool:
        return self.tipo_transacao is ETipoTransacao.SAIDA

    def rotulo(self) -> str:
        return "Entrada" if self.e_entrada() else "Saída"

    def __str__(self) -> str:
        return self.tipo_transacao.value
