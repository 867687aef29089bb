from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from app.core.legal_constants import (
    DIAS_POR_ANIO,
    PRIMA_ANTIGUEDAD_DIAS_POR_ANIO,
    PRIMA_ANTIGUEDAD_TOPE_VECES_SALARIO_MINIMO,
    dias_vacaciones,
)
from app.services.service_duration import ServicePeriod, inclusive_days, last_anniversary


@dataclass(frozen=True)
class AguinaldoShare:
    days_worked: int
    amount: float


@dataclass(frozen=True)
class VacationAccrual:
    entitled_current_year: int
    days_since_anniversary: int
    total_days_earned: float
    net_days_to_pay: float
    amount: float
    premium: float


def _clamp_days(days: int) -> int:
    return min(DIAS_POR_ANIO, max(0, days))


def proportional_aguinaldo(
    period: ServicePeriod, aguinaldo_days: float, base_daily: float
) -> AguinaldoShare:
    """Art. 87 LFT: parte proporcional del año calendario de la separación."""
    jan_first = date(period.end.year, 1, 1)
    since = max(period.start, jan_first)
    days_worked = _clamp_days(inclusive_days(since, period.end))
    amount = (aguinaldo_days / DIAS_POR_ANIO) * days_worked * base_daily
    return AguinaldoShare(days_worked=days_worked, amount=amount)


def vacation_accrual(
    period: ServicePeriod,
    days_taken: float,
    premium_pkg: float,
    base_daily: float,
) -> VacationAccrual:
    """
    Vacaciones devengadas en toda la relación: años completos según la
    tabla más la parte proporcional del año trunco, menos lo disfrutado.
    """
    completed = period.completed_years
    total = float(sum(dias_vacaciones(year) for year in range(1, completed + 1)))

    entitled = dias_vacaciones(completed + 1)
    anniversary = last_anniversary(period.start, completed)
    if anniversary is None:
        since_anniversary = 0
    else:
        since_anniversary = _clamp_days(inclusive_days(anniversary, period.end))
    total += (since_anniversary / DIAS_POR_ANIO) * entitled

    net_days = max(0.0, total - days_taken)
    amount = net_days * base_daily
    return VacationAccrual(
        entitled_current_year=entitled,
        days_since_anniversary=since_anniversary,
        total_days_earned=total,
        net_days_to_pay=net_days,
        amount=amount,
        premium=amount * (premium_pkg / 100),
    )


def seniority_premium(antiquity_years: float, salary_basis: float, minimum_wage: float) -> float:
    """
    Art. 162 LFT: 12 días por año sobre el salario topado al doble del mínimo.
    En modo costo de nómina el salario base es el bruto, no el neto.
    """
    cap = PRIMA_ANTIGUEDAD_TOPE_VECES_SALARIO_MINIMO * minimum_wage
    capped = min(salary_basis, cap)
    return PRIMA_ANTIGUEDAD_DIAS_POR_ANIO * antiquity_years * capped
