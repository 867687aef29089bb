from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import MAXYEAR, date, timedelta

from app.core.legal_constants import DIAS_POR_ANIO


@dataclass(frozen=True)
class ServicePeriod:
    start: date
    end: date
    antiquity_days_total: int
    antiquity_years: float
    completed_years: int


def inclusive_days(since: date, until: date) -> int:
    """Días entre dos fechas contando ambos extremos (puede ser <= 0)."""
    return (until - since).days + 1


def resolve_service_period(start: date | None, end: date | None) -> ServicePeriod | None:
    """
    Antigüedad de la relación laboral. None si falta una fecha o si el
    ingreso es posterior a la separación.
    """
    if start is None or end is None or start > end:
        return None
    days_total = inclusive_days(start, end)
    years = days_total / DIAS_POR_ANIO
    return ServicePeriod(
        start=start,
        end=end,
        antiquity_days_total=days_total,
        antiquity_years=years,
        completed_years=math.floor(years),
    )


def last_anniversary(start: date, completed_years: int) -> date | None:
    """
    Aniversario número `completed_years` desde el ingreso. None si cae
    después del último año representable, es decir, después de cualquier
    fecha de separación posible.
    """
    year = start.year + completed_years
    if year > MAXYEAR:
        return None
    # Un ingreso en 29 de febrero cae en 1 de marzo en años no bisiestos.
    first_of_month = date(year, start.month, 1)
    return first_of_month + timedelta(days=start.day - 1)


def split_years_days(antiquity_years: float) -> tuple[int, int]:
    """Antigüedad como (años completos, días restantes) para mostrar."""
    if antiquity_years <= 0:
        return 0, 0
    years = math.floor(antiquity_years)
    days = math.floor((antiquity_years - years) * DIAS_POR_ANIO)
    return years, days
