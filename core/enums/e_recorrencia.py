
from enum import Enum


class ERecorrencia(str, Enum):
    """Cadência declarada de um pagamento programado."""
    NENHUMA = "nenhuma"
    QUINZENAL = "quinzenal"
    MENSAL = "mensal"
    TRIMESTRAL = "trimestral"
