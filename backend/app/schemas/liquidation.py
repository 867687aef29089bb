"""Modelos Pydantic para el cálculo de finiquito y liquidación (LFT México).

`EmployeeRecord` es el registro de entrada, inmutable: cada campo se valida
de forma individual y los cambios se hacen con setters explícitos que
devuelven un registro nuevo. `CalculationResult` es la salida del motor y
se construye completa en cada llamada.
"""

from __future__ import annotations

import math
from datetime import date, datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, field_validator

from app.core.legal_constants import (
    DIAS_AGUINALDO,
    DIAS_POR_MES,
    FACTOR_COSTO_A_BRUTO,
    PORCENTAJE_PRIMA_VACACIONAL,
    SALARIO_MINIMO_GENERAL,
)


def _coalesce_number(value: Any) -> float:
    """None, texto vacío, valores no numéricos, NaN e infinitos valen 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def _coerce_date(value: Any) -> date | None:
    """Fecha calendario sin hora; lo que no se pueda interpretar queda en None."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        value = value.strip()
        try:
            return date.fromisoformat(value)
        except ValueError:
            pass
        # Se acepta fecha con hora; la cadena completa debe ser ISO-8601 válida.
        try:
            return datetime.fromisoformat(value).date()
        except ValueError:
            return None
    return None


# ---------------------------------------------------------------------------
# Registro del colaborador
# ---------------------------------------------------------------------------
class EmployeeRecord(BaseModel):
    """Datos de un colaborador para calcular su finiquito/liquidación.

    Attributes:
        daily_salary: Salario diario capturado directamente.
        monthly_payroll_cost: Costo de nómina mensual; si es positivo manda
            sobre `daily_salary` y `manual_sdi`.
        manual_sdi: SDI capturado manualmente (0 = calcularlo).
        start_date: Fecha de ingreso.
        end_date: Fecha de separación.
        aguinaldo_days: Días de aguinaldo de la empresa (mínimo legal 15,
            aplicado por el motor).
        vacation_premium_pkg: Prima vacacional en porcentaje (0-100).
        minimum_wage: Salario mínimo diario, tope de prima de antigüedad.
        vacation_days_taken: Días de vacaciones ya disfrutados en la relación.
        pending_bonuses: Bonos pendientes de pago.
        notes: Prestaciones adicionales en texto libre, no entra al cálculo.
    """

    model_config = ConfigDict(frozen=True)

    id: str = "1"
    name: str = "Nuevo Colaborador"
    daily_salary: float = 0.0
    monthly_payroll_cost: float = 0.0
    manual_sdi: float = 0.0
    start_date: date | None = None
    end_date: date | None = None
    aguinaldo_days: float = float(DIAS_AGUINALDO)
    vacation_premium_pkg: float = PORCENTAJE_PRIMA_VACACIONAL
    minimum_wage: float = SALARIO_MINIMO_GENERAL
    vacation_days_taken: float = 0.0
    pending_bonuses: float = 0.0
    notes: str = ""

    @field_validator(
        "daily_salary",
        "monthly_payroll_cost",
        "manual_sdi",
        "aguinaldo_days",
        "minimum_wage",
        "pending_bonuses",
        mode="before",
    )
    @classmethod
    def numero_o_cero(cls, v: Any) -> float:
        return _coalesce_number(v)

    @field_validator("vacation_days_taken", mode="before")
    @classmethod
    def dias_no_negativos(cls, v: Any) -> float:
        """Los días disfrutados no pueden aumentar lo devengado."""
        return max(0.0, _coalesce_number(v))

    @field_validator("vacation_premium_pkg", mode="before")
    @classmethod
    def porcentaje_en_rango(cls, v: Any) -> float:
        """La prima vacacional es un porcentaje entre 0 y 100."""
        return min(100.0, max(0.0, _coalesce_number(v)))

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def fecha_calendario(cls, v: Any) -> date | None:
        return _coerce_date(v)

    @field_validator("id", "name", "notes", mode="before")
    @classmethod
    def texto(cls, v: Any) -> str:
        return "" if v is None else str(v)

    # -- setters explícitos -------------------------------------------------
    def _replace(self, **changes: Any) -> "EmployeeRecord":
        # model_copy no revalida; se reconstruye para aplicar los validadores.
        return type(self).model_validate({**self.model_dump(), **changes})

    def with_name(self, name: str) -> "EmployeeRecord":
        return self._replace(name=name)

    def with_notes(self, notes: str) -> "EmployeeRecord":
        return self._replace(notes=notes)

    def with_dates(self, start_date: Any, end_date: Any) -> "EmployeeRecord":
        return self._replace(start_date=start_date, end_date=end_date)

    def with_daily_salary(self, daily_salary: Any) -> "EmployeeRecord":
        return self._replace(daily_salary=daily_salary)

    def with_manual_sdi(self, manual_sdi: Any) -> "EmployeeRecord":
        return self._replace(manual_sdi=manual_sdi)

    def with_monthly_payroll_cost(self, cost: Any) -> "EmployeeRecord":
        """Captura el costo de nómina como dato maestro.

        Un costo positivo recalcula el salario diario bruto y borra el SDI
        manual, para que no quede un valor viejo al regresar al modo manual.
        """
        cost = _coalesce_number(cost)
        if cost <= 0:
            return self._replace(monthly_payroll_cost=0.0)
        return self._replace(
            monthly_payroll_cost=cost,
            daily_salary=cost / FACTOR_COSTO_A_BRUTO / DIAS_POR_MES,
            manual_sdi=0.0,
        )

    def with_aguinaldo_days(self, days: Any) -> "EmployeeRecord":
        return self._replace(aguinaldo_days=days)

    def with_vacation_premium_pkg(self, pkg: Any) -> "EmployeeRecord":
        return self._replace(vacation_premium_pkg=pkg)

    def with_minimum_wage(self, minimum_wage: Any) -> "EmployeeRecord":
        return self._replace(minimum_wage=minimum_wage)

    def with_vacation_days_taken(self, days: Any) -> "EmployeeRecord":
        return self._replace(vacation_days_taken=days)

    def with_pending_bonuses(self, amount: Any) -> "EmployeeRecord":
        return self._replace(pending_bonuses=amount)


# ---------------------------------------------------------------------------
# Resultado del motor
# ---------------------------------------------------------------------------
class CalculationResult(BaseModel):
    """Desglose completo de finiquito, indemnizaciones y escenarios.

    Los montos van sin redondeo; el formato de moneda es responsabilidad
    de quien presenta el resultado.
    """

    model_config = ConfigDict(frozen=True)

    sdi: float
    is_sdi_manual: bool
    effective_daily_salary: float
    antiquity_years: float
    antiquity_days_total: int
    completed_years: int
    vacation_days_entitled_current_year: int
    days_worked_since_anniversary: int

    proportional_aguinaldo: float
    effective_aguinaldo_days: float
    aguinaldo_days_worked: int

    total_vacation_days_earned_history: float
    net_vacation_days_to_pay: float
    proportional_vacation: float
    vacation_premium: float
    seniority_premium: float

    indemnification_3_months: float
    indemnification_20_days: float
    lost_wages: float

    scenario1_total: float
    scenario2_total: float
    scenario2_total_without_20_days: float
    scenario3_total: float

    @classmethod
    def sentinel(cls, effective_aguinaldo_days: float = float(DIAS_AGUINALDO)) -> "CalculationResult":
        """Resultado en ceros para fechas inválidas o invertidas."""
        return cls(
            sdi=0.0,
            is_sdi_manual=False,
            effective_daily_salary=0.0,
            antiquity_years=0.0,
            antiquity_days_total=0,
            completed_years=0,
            vacation_days_entitled_current_year=0,
            days_worked_since_anniversary=0,
            proportional_aguinaldo=0.0,
            effective_aguinaldo_days=effective_aguinaldo_days,
            aguinaldo_days_worked=0,
            total_vacation_days_earned_history=0.0,
            net_vacation_days_to_pay=0.0,
            proportional_vacation=0.0,
            vacation_premium=0.0,
            seniority_premium=0.0,
            indemnification_3_months=0.0,
            indemnification_20_days=0.0,
            lost_wages=0.0,
            scenario1_total=0.0,
            scenario2_total=0.0,
            scenario2_total_without_20_days=0.0,
            scenario3_total=0.0,
        )


# ---------------------------------------------------------------------------
# Respuestas del API
# ---------------------------------------------------------------------------
class ServiceBreakdown(BaseModel):
    years: int
    days: int


class NegotiationSummary(BaseModel):
    """Margen de negociación del Escenario 2 (con y sin 20 días por año)."""

    model_config = ConfigDict(frozen=True)

    total_with_20_days: float
    total_without_20_days: float
    negotiation_margin: float


class LiquidationResponse(BaseModel):
    record_id: str
    valid_period: bool
    service: ServiceBreakdown
    result: CalculationResult
    negotiation: NegotiationSummary


SALARY_AMOUNT_TYPE = Literal["cost", "gross", "net"]


class SalaryEstimateRequest(BaseModel):
    amount: float
    amount_type: SALARY_AMOUNT_TYPE = "cost"

    @field_validator("amount", mode="before")
    @classmethod
    def monto_o_cero(cls, v: Any) -> float:
        return _coalesce_number(v)


class SalaryEstimate(BaseModel):
    """Sueldo bruto mensual y salario diario estimados desde otro monto."""

    model_config = ConfigDict(frozen=True)

    amount_type: SALARY_AMOUNT_TYPE
    gross_monthly: float
    daily_salary: float


class VacationTableRow(BaseModel):
    year: int
    days: int
