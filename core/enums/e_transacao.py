
from enum import Enum


class ETipoTransacao(str, Enum):
    """Enumeração para categorizar lançamentos do livro-caixa."""
    ENTRADA = "entrada"
    SAIDA = "saida"
