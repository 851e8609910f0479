from .normalizar_data import NormalizarData, converter_datetime
from .normalizar_valor import ValorMonetario, converter_decimal

__all__ = [
    "NormalizarData",
    "ValorMonetario",
    "converter_datetime",
    "converter_decimal",
]
