from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

_logger = logging.getLogger("financeiro.infrastructure.config")


def _ler_float(nome: str, padrao: float) -> float:
    bruto = os.getenv(nome)
    if bruto is None or bruto.strip() == "":
        return padrao
    try:
        valor = float(bruto)
    except ValueError:
        raise RuntimeError(f"{nome} deve ser numérico (recebido: '{bruto}').") from None
    if valor < 0:
        raise RuntimeError(f"{nome} não pode ser negativo.")
    return valor


@dataclass(frozen=True, slots=True)
class Configuracao:
    """Configuração da aplicação lida do ambiente (e de um .env, se existir).

    Variáveis:
    - LOG_LEVEL (default: INFO)
    - FINANCEIRO_ATRASO_PERSISTENCIA: segundos da persistência simulada (default: 0.5)
    - FINANCEIRO_ESCOPO_EDICAO: escopo exigido para alterar o livro-caixa (default: financeiro.editar)
    - FINANCEIRO_CATEGORIA_PADRAO: categoria para lançamentos sem categoria (default: Sem categoria)
    """

    nivel_log: str = "INFO"
    atraso_persistencia: float = 0.5
    escopo_edicao: str = "financeiro.editar"
    categoria_padrao: str = "Sem categoria"

    @classmethod
    def carregar(cls, caminho_env: Optional[str] = None) -> "Configuracao":
        load_dotenv(caminho_env)  # sem caminho, procura um .env acima deste módulo
        configuracao = cls(
            nivel_log=os.getenv("LOG_LEVEL", "INFO").upper(),
            atraso_persistencia=_ler_float("FINANCEIRO_ATRASO_PERSISTENCIA", 0.5),
            escopo_edicao=os.getenv("FINANCEIRO_ESCOPO_EDICAO", "financeiro.editar"),
            categoria_padrao=os.getenv("FINANCEIRO_CATEGORIA_PADRAO", "Sem categoria"),
        )
        _logger.debug(
            "Configuration loaded",
            extra={
                "log_level": configuracao.nivel_log,
                "persistence_delay": configuracao.atraso_persistencia,
            },
        )
        return configuracao
