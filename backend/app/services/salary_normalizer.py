"""Resolución del salario base y del Salario Diario Integrado (SDI).

Dos modos excluyentes:

* Costo de nómina (``monthly_payroll_cost > 0``): el costo se convierte a
  sueldo neto y bruto con factores de calibración. El salario base (neto
  diario) paga el finiquito; el SDI parte del bruto. El SDI manual se ignora.
* Manual: el salario base es ``daily_salary``; el SDI es el capturado si es
  positivo, o el calculado con el factor de integración.
"""

from __future__ import annotations

from dataclasses import dataclass

from app.core.legal_constants import (
    DIAS_AGUINALDO,
    DIAS_POR_ANIO,
    DIAS_POR_MES,
    FACTOR_COSTO_A_BRUTO,
    FACTOR_COSTO_A_NETO,
    dias_vacaciones,
)
from app.schemas.liquidation import EmployeeRecord


@dataclass(frozen=True)
class NormalizedSalary:
    base_daily: float
    gross_daily: float
    sdi: float
    is_sdi_manual: bool
    integration_factor: float


def effective_aguinaldo_days(aguinaldo_days: float) -> float:
    """Art. 87 LFT: nunca menos de 15 días."""
    return max(float(DIAS_AGUINALDO), aguinaldo_days)


def integration_factor(aguinaldo_days: float, vacation_days: int, premium_pkg: float) -> float:
    """Factor = 1 + (días aguinaldo + días vacaciones * %prima) / 365."""
    return 1 + (aguinaldo_days + vacation_days * (premium_pkg / 100)) / DIAS_POR_ANIO


def normalize_salary(record: EmployeeRecord, completed_years: int) -> NormalizedSalary:
    aguinaldo = effective_aguinaldo_days(record.aguinaldo_days)
    # Vacaciones del ciclo en curso (año completed_years + 1).
    factor = integration_factor(
        aguinaldo,
        dias_vacaciones(completed_years + 1),
        record.vacation_premium_pkg,
    )

    if record.monthly_payroll_cost > 0:
        gross_daily = record.monthly_payroll_cost / FACTOR_COSTO_A_BRUTO / DIAS_POR_MES
        net_daily = record.monthly_payroll_cost / FACTOR_COSTO_A_NETO / DIAS_POR_MES
        return NormalizedSalary(
            base_daily=net_daily,
            gross_daily=gross_daily,
            sdi=gross_daily * factor,
            is_sdi_manual=False,
            integration_factor=factor,
        )

    base = record.daily_salary
    if record.manual_sdi > 0:
        return NormalizedSalary(
            base_daily=base,
            gross_daily=base,
            sdi=record.manual_sdi,
            is_sdi_manual=True,
            integration_factor=factor,
        )
    return NormalizedSalary(
        base_daily=base,
        gross_daily=base,
        sdi=base * factor,
        is_sdi_manual=False,
        integration_factor=factor,
    )
