from __future__ import annotations

from core.shared.value_objects.normalizar_data import DataBruta, NormalizarData


class DataLancamento(NormalizarData):
    """Domain Value Object for the instant of a ledger entry.

    - Inherits parsing (ISO or DD/MM/YYYY) and UTC normalization from NormalizarData.
    - Keeps the time of day; nothing here truncates to the calendar day.
    """

    def __init__(self, *_args, **_kwargs) -> None:  # type: ignore[override]
        raise TypeError("Use the class factory DataLancamento.criar.")

    @classmethod
    def _criar_interno(cls, bruto: DataBruta) -> "DataLancamento":
        base = NormalizarData(bruto)
        instancia = object.__new__(cls)
        # Copy normalized state from base Value Object
        object.__setattr__(instancia, "bruto", base.bruto)
        object.__setattr__(instancia, "momento", base.momento)
        return instancia  # type: ignore[return-value]

    @classmethod
    def criar(cls, bruto: DataBruta) -> "DataLancamento":
        """Accepts ISO text, DD/MM/YYYY text, date or datetime."""
        return cls._criar_interno(bruto)
