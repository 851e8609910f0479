from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class Descricao:
    """Value Object de domínio para a descrição de um lançamento.

    Regras:
    - Entre 3 e 100 caracteres após normalização.
    - Normalização: trim e colapso de espaços em branco consecutivos.
    """

    descricao: str
    TAMANHO_MINIMO: ClassVar[int] = 3
    TAMANHO_MAXIMO: ClassVar[int] = 100

    def __init__(self, *_args, **_kwargs) -> None:  # type: ignore[override]
        raise TypeError("Use as fábricas da classe (ex.: Descricao.criar_de_texto).")

    @classmethod
    def _validar_e_normalizar_texto(cls, texto: str) -> str:
        if not isinstance(texto, str):
            raise TypeError("Descrição deve ser texto.")
        normalizado = " ".join(texto.strip().split())
        if len(normalizado) == 0:
            raise ValueError("Descrição não pode ser vazia.")
        if len(normalizado) < cls.TAMANHO_MINIMO:
            raise ValueError(f"Descrição deve ter pelo menos {cls.TAMANHO_MINIMO} caracteres.")
        if len(normalizado) > cls.TAMANHO_MAXIMO:
            raise ValueError(f"Descrição deve ter no máximo {cls.TAMANHO_MAXIMO} caracteres.")
        return normalizado

    @classmethod
    def _criar_interno(cls, descricao_normalizada: str) -> "Descricao":
        instancia = object.__new__(cls)
        object.__setattr__(instancia, "descricao", descricao_normalizada)
        return instancia  # type: ignore[return-value]

    # Fábrica
    @classmethod
    def criar_de_texto(cls, texto: str) -> "Descricao":
        return cls._criar_interno(cls._validar_e_normalizar_texto(texto))

    def como_texto(self) -> str:
        return self.descricao

    def __str__(self) -> str:
        return self.descricao
