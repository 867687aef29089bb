from __future__ import annotations

from app.core.legal_constants import DIAS_POR_MES, FACTOR_COSTO_A_BRUTO, FACTOR_NETO_SOBRE_BRUTO
from app.schemas.liquidation import SALARY_AMOUNT_TYPE, SalaryEstimate


def gross_monthly_from(amount: float, amount_type: SALARY_AMOUNT_TYPE) -> float:
    if amount_type == "gross":
        return amount
    if amount_type == "net":
        return amount / FACTOR_NETO_SOBRE_BRUTO
    if amount_type == "cost":
        return amount / FACTOR_COSTO_A_BRUTO
    raise ValueError(f"Tipo de monto inválido: {amount_type}. Usa: cost, gross, net.")


def estimate_daily_salary(amount: float, amount_type: SALARY_AMOUNT_TYPE = "cost") -> SalaryEstimate:
    """
    Calculadora inversa: de costo de nómina, sueldo bruto o sueldo neto
    mensual a sueldo bruto mensual y salario diario (30 días por mes).
    """
    if amount is None or amount <= 0:
        return SalaryEstimate(amount_type=amount_type, gross_monthly=0.0, daily_salary=0.0)
    gross = gross_monthly_from(amount, amount_type)
    return SalaryEstimate(amount_type=amount_type, gross_monthly=gross, daily_salary=gross / DIAS_POR_MES)
