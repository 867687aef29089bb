from __future__ import annotations

from dataclasses import dataclass

from app.core.legal_constants import (
    INDEMNIZACION_CONSTITUCIONAL_DIAS,
    INDEMNIZACION_DIAS_POR_ANIO,
    INTERESES_MESES_BASE,
    INTERESES_MESES_ESTIMADOS,
    INTERESES_TASA_MENSUAL,
    DIAS_POR_MES,
    SALARIOS_VENCIDOS_DIAS,
)
from app.schemas.liquidation import CalculationResult, NegotiationSummary


@dataclass(frozen=True)
class ScenarioTotals:
    indemnification_3_months: float
    indemnification_20_days: float
    lost_wages: float
    scenario1_total: float
    scenario2_total_without_20_days: float
    scenario2_total: float
    scenario3_total: float


def estimate_lost_wages(sdi: float) -> float:
    """
    Art. 48 LFT: 12 meses de salarios vencidos más 2% mensual sobre
    15 meses de salario. Estimación conservadora, no vinculante.
    """
    back_pay = SALARIOS_VENCIDOS_DIAS * sdi
    interest_base = INTERESES_MESES_BASE * DIAS_POR_MES * sdi
    return back_pay + interest_base * INTERESES_TASA_MENSUAL * INTERESES_MESES_ESTIMADOS


def aggregate_scenarios(
    *,
    aguinaldo: float,
    vacation: float,
    vacation_premium: float,
    seniority_premium: float,
    pending_bonuses: float,
    sdi: float,
    antiquity_years: float,
) -> ScenarioTotals:
    # Escenario 1: finiquito (derechos adquiridos).
    scenario1 = aguinaldo + vacation + vacation_premium + seniority_premium + pending_bonuses

    # Escenario 2: despido injustificado negociado.
    three_months = INDEMNIZACION_CONSTITUCIONAL_DIAS * sdi
    twenty_days = INDEMNIZACION_DIAS_POR_ANIO * antiquity_years * sdi
    scenario2_without_20 = scenario1 + three_months
    scenario2 = scenario2_without_20 + twenty_days

    # Escenario 3: juicio perdido.
    lost_wages = estimate_lost_wages(sdi)
    scenario3 = scenario2 + lost_wages

    return ScenarioTotals(
        indemnification_3_months=three_months,
        indemnification_20_days=twenty_days,
        lost_wages=lost_wages,
        scenario1_total=scenario1,
        scenario2_total_without_20_days=scenario2_without_20,
        scenario2_total=scenario2,
        scenario3_total=scenario3,
    )


def build_negotiation_summary(result: CalculationResult) -> NegotiationSummary:
    """Los 20 días por año son el margen a negociar en el Escenario 2."""
    return NegotiationSummary(
        total_with_20_days=result.scenario2_total,
        total_without_20_days=result.scenario2_total - result.indemnification_20_days,
        negotiation_margin=result.indemnification_20_days,
    )
