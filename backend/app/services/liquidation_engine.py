"""Motor de cálculo de finiquito y liquidación (LFT México).

Ejecuta en orden: antigüedad, salario base/SDI, prestaciones proporcionales
y escenarios. Es una función pura: no guarda estado ni hace E/S más allá
del log, y dos llamadas con el mismo registro dan el mismo resultado.

Fechas inválidas o invertidas no lanzan excepción: regresan el resultado en
ceros (`CalculationResult.sentinel`). Quien llama no puede distinguir "no se
debe nada" de "entrada inválida" solo por el resultado; por eso se registra
una advertencia y el API expone `valid_period`.
"""

from __future__ import annotations

import logging

from app.schemas.liquidation import CalculationResult, EmployeeRecord
from app.services.entitlements import proportional_aguinaldo, seniority_premium, vacation_accrual
from app.services.salary_normalizer import effective_aguinaldo_days, normalize_salary
from app.services.scenarios import aggregate_scenarios
from app.services.service_duration import resolve_service_period

logger = logging.getLogger(__name__)


def calculate_liquidation(record: EmployeeRecord) -> CalculationResult:
    aguinaldo_days = effective_aguinaldo_days(record.aguinaldo_days)

    period = resolve_service_period(record.start_date, record.end_date)
    if period is None:
        logger.warning(
            "liquidation_invalid_dates record_id=%s start_date=%s end_date=%s",
            record.id,
            record.start_date,
            record.end_date,
        )
        return CalculationResult.sentinel(aguinaldo_days)

    salary = normalize_salary(record, period.completed_years)

    aguinaldo = proportional_aguinaldo(period, aguinaldo_days, salary.base_daily)
    vacation = vacation_accrual(
        period,
        record.vacation_days_taken,
        record.vacation_premium_pkg,
        salary.base_daily,
    )
    seniority = seniority_premium(period.antiquity_years, salary.gross_daily, record.minimum_wage)

    totals = aggregate_scenarios(
        aguinaldo=aguinaldo.amount,
        vacation=vacation.amount,
        vacation_premium=vacation.premium,
        seniority_premium=seniority,
        pending_bonuses=record.pending_bonuses,
        sdi=salary.sdi,
        antiquity_years=period.antiquity_years,
    )

    logger.debug(
        "liquidation_calculated record_id=%s days=%s sdi=%.4f manual_sdi=%s scenario3=%.2f",
        record.id,
        period.antiquity_days_total,
        salary.sdi,
        salary.is_sdi_manual,
        totals.scenario3_total,
    )

    return CalculationResult(
        sdi=salary.sdi,
        is_sdi_manual=salary.is_sdi_manual,
        effective_daily_salary=salary.base_daily,
        antiquity_years=period.antiquity_years,
        antiquity_days_total=period.antiquity_days_total,
        completed_years=period.completed_years,
        vacation_days_entitled_current_year=vacation.entitled_current_year,
        days_worked_since_anniversary=vacation.days_since_anniversary,
        proportional_aguinaldo=aguinaldo.amount,
        effective_aguinaldo_days=aguinaldo_days,
        aguinaldo_days_worked=aguinaldo.days_worked,
        total_vacation_days_earned_history=vacation.total_days_earned,
        net_vacation_days_to_pay=vacation.net_days_to_pay,
        proportional_vacation=vacation.amount,
        vacation_premium=vacation.premium,
        seniority_premium=seniority,
        indemnification_3_months=totals.indemnification_3_months,
        indemnification_20_days=totals.indemnification_20_days,
        lost_wages=totals.lost_wages,
        scenario1_total=totals.scenario1_total,
        scenario2_total=totals.scenario2_total,
        scenario2_total_without_20_days=totals.scenario2_total_without_20_days,
        scenario3_total=totals.scenario3_total,
    )
