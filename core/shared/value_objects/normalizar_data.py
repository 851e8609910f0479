from __future__ import annotations

from dataclasses import dataclass
import re
from datetime import date, datetime, timezone
from typing import Union

DataBruta = Union[str, date, datetime]

# Regex compilada para melhor desempenho em parsing repetido
_PADRAO_DATA_DD_MM_YYYY = re.compile(
    r"^(\d{1,2})/(\d{1,2})/(\d{4})(?:\s+(\d{1,2}):(\d{2})(?::(\d{2}))?)?$"
)


def converter_datetime(bruto: DataBruta) -> datetime:
    """Converte texto/date/datetime em `datetime` ingênuo (sem fuso).

    - Aceita ISO ("2024-03-05", "2024-03-05T10:30:00", com ou sem "Z").
    - Aceita o formato brasileiro "05/03/2024" (hora opcional "05/03/2024 10:30").
    - `date` vira meia-noite do dia; datetimes com fuso são levados para UTC.
    - A hora do dia é preservada (não há normalização para o dia civil).
    """
    if isinstance(bruto, datetime):
        momento = bruto
    elif isinstance(bruto, date):
        momento = datetime(bruto.year, bruto.month, bruto.day)
    elif isinstance(bruto, str):
        texto = bruto.strip()
        if not texto:
            raise ValueError("Data não pode ser vazia.")
        correspondencia = _PADRAO_DATA_DD_MM_YYYY.match(texto)
        if correspondencia:
            dia, mes, ano, hora, minuto, segundo = correspondencia.groups()
            try:
                momento = datetime(
                    int(ano),
                    int(mes),
                    int(dia),
                    int(hora or 0),
                    int(minuto or 0),
                    int(segundo or 0),
                )
            except ValueError as erro:
                raise ValueError(f"Data inválida: {erro}") from None
        else:
            if texto.endswith(("Z", "z")):
                texto = texto[:-1] + "+00:00"
            try:
                momento = datetime.fromisoformat(texto)
            except ValueError:
                raise ValueError(
                    f"Data inválida: '{bruto}'. Esperado YYYY-MM-DD ou DD/MM/YYYY."
                ) from None
    else:
        raise ValueError("Tipo de data não suportado.")

    if momento.tzinfo is not None:
        momento = momento.astimezone(timezone.utc).replace(tzinfo=None)
    return momento


@dataclass(frozen=True, slots=True)
class NormalizarData:
    """Value Object para um instante (data + hora) de lançamento.

    - Aceita str (ISO ou DD/MM/YYYY), date ou datetime.
    - `bruto` é reescrito para o ISO normalizado, garantindo igualdade por valor.
    """

    bruto: DataBruta
    momento: datetime = datetime.min

    def __post_init__(self) -> None:
        momento = converter_datetime(self.bruto)
        # Atribuição em dataclass congelado
        object.__setattr__(self, "momento", momento)
        object.__setattr__(self, "bruto", momento.isoformat())

    def __str__(self) -> str:  # pragma: no cover
        return self.bruto  # type: ignore[return-value]

    def as_datetime(self) -> datetime:
        return self.momento
