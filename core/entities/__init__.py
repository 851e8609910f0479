from .balanco import Balanco
from .pagamento_programado import PagamentoProgramado
from .transacao import CATEGORIA_PADRAO, NovaTransacao, Transacao

__all__ = [
    "Balanco",
    "CATEGORIA_PADRAO",
    "NovaTransacao",
    "PagamentoProgramado",
    "Transacao",
]
