from .e_recorrencia import ERecorrencia
from .e_transacao import ETipoTransacao

__all__ = ["ERecorrencia", "ETipoTransacao"]
