from .data_lancamento import DataLancamento
from .data_lancamento import DataLancamento as EntryDate
from .descricao import Descricao
from .descricao import Descricao as Description
from .tipo_transacao import TipoTransacao
from .tipo_transacao import TipoTransacao as TransactionType
from .valor import Valor
from .valor import Valor as MonetaryValue

__all__ = [
    "DataLancamento",
    "Descricao",
    "TipoTransacao",
    "Valor",
    # English aliases
    "EntryDate",
    "Description",
    "TransactionType",
    "MonetaryValue",
]
