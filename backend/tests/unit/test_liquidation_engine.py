from __future__ import annotations

import pytest

from app.schemas.liquidation import CalculationResult, EmployeeRecord
from app.services.liquidation_engine import calculate_liquidation
from app.services.scenarios import build_negotiation_summary, estimate_lost_wages
from tests.fixtures.synthetic_records import (
    RECORD_FOUR_YEARS,
    RECORD_GARBAGE_NUMBERS,
    RECORD_INVERTED_DATES,
    RECORD_LOW_WAGE_MID_YEAR,
    RECORD_PAYROLL_COST,
)


def _calc(data: dict, **changes) -> CalculationResult:
    return calculate_liquidation(EmployeeRecord.model_validate({**data, **changes}))


def _assert_ordered(result: CalculationResult) -> None:
    assert result.scenario1_total <= result.scenario2_total_without_20_days
    assert result.scenario2_total_without_20_days <= result.scenario2_total
    assert result.scenario2_total <= result.scenario3_total


def test_four_year_golden_case():
    result = _calc(RECORD_FOUR_YEARS)
    years = 1462 / 365
    sdi = 500 * (1 + 20 / 365)

    assert result.antiquity_days_total == 1462
    assert result.antiquity_years == pytest.approx(4.0055, abs=1e-4)
    assert result.completed_years == 4
    assert result.vacation_days_entitled_current_year == 20
    assert result.days_worked_since_anniversary == 1
    assert result.aguinaldo_days_worked == 1
    assert result.sdi == pytest.approx(sdi)
    assert result.effective_daily_salary == 500

    assert result.proportional_aguinaldo == pytest.approx(15 / 365 * 500)
    assert result.total_vacation_days_earned_history == pytest.approx(60 + 20 / 365)
    assert result.proportional_vacation == pytest.approx((60 + 20 / 365) * 500)
    assert result.vacation_premium == pytest.approx((60 + 20 / 365) * 500 * 0.25)
    # 500 supera el tope de 2 salarios mínimos (497.86).
    assert result.seniority_premium == pytest.approx(12 * years * 497.86)

    assert result.indemnification_3_months == pytest.approx(90 * sdi)
    assert result.indemnification_20_days == pytest.approx(20 * years * sdi)
    assert result.lost_wages == pytest.approx(473 * sdi)

    assert result.scenario1_total == pytest.approx(61484.81, abs=0.01)
    assert result.scenario2_total_without_20_days == pytest.approx(108950.56, abs=0.01)
    assert result.scenario2_total == pytest.approx(151200.14, abs=0.01)
    assert result.scenario3_total == pytest.approx(400659.05, abs=0.01)
    _assert_ordered(result)


def test_mid_year_termination_with_days_taken_and_bonuses():
    result = _calc(RECORD_LOW_WAGE_MID_YEAR)
    assert result.antiquity_days_total == 1235
    assert result.completed_years == 3
    assert result.aguinaldo_days_worked == 213
    assert result.days_worked_since_anniversary == 139
    assert result.vacation_days_entitled_current_year == 18

    earned = 12 + 14 + 16 + 139 / 365 * 18
    assert result.total_vacation_days_earned_history == pytest.approx(earned)
    assert result.net_vacation_days_to_pay == pytest.approx(earned - 20)
    assert result.proportional_aguinaldo == pytest.approx(15 / 365 * 213 * 300)
    # Debajo del tope: se usa el salario completo.
    assert result.seniority_premium == pytest.approx(12 * (1235 / 365) * 300)
    assert result.scenario1_total == pytest.approx(
        result.proportional_aguinaldo
        + result.proportional_vacation
        + result.vacation_premium
        + result.seniority_premium
        + 1500
    )
    _assert_ordered(result)


def test_payroll_cost_mode_uses_net_for_benefits_and_gross_for_seniority():
    result = _calc(RECORD_PAYROLL_COST)
    net_daily = 33400 / 1.6135 / 30
    gross_daily = 33400 / 1.336 / 30

    assert result.is_sdi_manual is False
    assert result.effective_daily_salary == pytest.approx(net_daily)
    assert result.sdi == pytest.approx(gross_daily * (1 + 41 / 365))
    assert result.completed_years == 5
    # El aniversario (2024-06-01) es posterior a la baja.
    assert result.days_worked_since_anniversary == 0
    assert result.total_vacation_days_earned_history == pytest.approx(80)
    assert result.net_vacation_days_to_pay == pytest.approx(40)
    assert result.proportional_vacation == pytest.approx(40 * net_daily)
    assert result.vacation_premium == pytest.approx(40 * net_daily * 0.5)
    assert result.effective_aguinaldo_days == 30
    assert result.seniority_premium == pytest.approx(12 * (1827 / 365) * min(gross_daily, 497.86))
    _assert_ordered(result)


def test_seniority_premium_uses_gross_when_below_cap():
    # Bruto diario ~374.25 queda debajo del tope; el neto sería menor.
    result = _calc(RECORD_PAYROLL_COST, monthly_payroll_cost=15000, minimum_wage=248.93)
    gross_daily = 15000 / 1.336 / 30
    assert result.seniority_premium == pytest.approx(12 * result.antiquity_years * gross_daily)
    assert result.effective_daily_salary < gross_daily


def test_start_equals_end():
    result = _calc(RECORD_FOUR_YEARS, start_date="2024-05-10", end_date="2024-05-10")
    assert result.antiquity_days_total == 1
    assert result.completed_years == 0
    assert result.aguinaldo_days_worked == 1
    assert result.days_worked_since_anniversary == 1
    _assert_ordered(result)


def test_inverted_dates_return_sentinel():
    result = _calc(RECORD_INVERTED_DATES)
    assert result == CalculationResult.sentinel(20)
    assert result.scenario3_total == 0
    assert result.sdi == 0
    assert result.effective_aguinaldo_days == 20


@pytest.mark.parametrize(
    "changes",
    [
        {"start_date": "2020-13-45"},
        {"end_date": ""},
        {"start_date": None},
        {"end_date": "ayer"},
    ],
)
def test_unparseable_dates_return_sentinel(changes):
    result = _calc(RECORD_FOUR_YEARS, **changes)
    assert result == CalculationResult.sentinel()


def test_effective_aguinaldo_days_has_legal_floor():
    for raw, expected in ((-5, 15), ("abc", 15), (None, 15), (10, 15), (15, 15), (40, 40)):
        assert _calc(RECORD_FOUR_YEARS, aguinaldo_days=raw).effective_aguinaldo_days == expected
        assert _calc(RECORD_INVERTED_DATES, aguinaldo_days=raw).effective_aguinaldo_days == expected


def test_net_vacation_days_never_negative():
    result = _calc(RECORD_FOUR_YEARS, vacation_days_taken=1000)
    assert result.net_vacation_days_to_pay == 0
    assert result.proportional_vacation == 0
    assert result.vacation_premium == 0
    _assert_ordered(result)


def test_garbage_numbers_still_produce_a_full_result():
    result = _calc(RECORD_GARBAGE_NUMBERS)
    assert result.antiquity_days_total == 365
    assert result.completed_years == 1
    assert result.effective_aguinaldo_days == 15
    assert result.scenario3_total == 0
    _assert_ordered(result)


def test_full_calendar_year_caps_aguinaldo_days():
    result = _calc(RECORD_FOUR_YEARS, start_date="2018-01-01", end_date="2024-12-31")
    assert result.aguinaldo_days_worked == 365
    assert result.proportional_aguinaldo == pytest.approx(15 * 500)


def test_scenario_deltas():
    result = _calc(RECORD_LOW_WAGE_MID_YEAR)
    sdi = result.sdi
    years = result.antiquity_years
    assert result.scenario2_total - result.scenario1_total == pytest.approx(90 * sdi + 20 * years * sdi)
    assert result.scenario3_total - result.scenario2_total == pytest.approx(result.lost_wages)
    assert result.lost_wages == pytest.approx(estimate_lost_wages(sdi))


def test_identical_input_identical_output():
    record = EmployeeRecord.model_validate(RECORD_PAYROLL_COST)
    first = calculate_liquidation(record)
    second = calculate_liquidation(record)
    assert first == second
    assert first is not second


def test_negotiation_summary():
    result = _calc(RECORD_FOUR_YEARS)
    summary = build_negotiation_summary(result)
    assert summary.total_with_20_days == result.scenario2_total
    assert summary.total_without_20_days == pytest.approx(result.scenario2_total_without_20_days)
    assert summary.negotiation_margin == result.indemnification_20_days


def test_vacation_table_steps_across_anniversary():
    before = _calc(RECORD_FOUR_YEARS, start_date="2019-01-01", end_date="2023-12-30")
    after = _calc(RECORD_FOUR_YEARS, start_date="2019-01-01", end_date="2024-12-31")
    assert before.vacation_days_entitled_current_year <= after.vacation_days_entitled_current_year


def test_malformed_end_date_returns_sentinel():
    result = _calc(RECORD_FOUR_YEARS, end_date="2024-01-015")
    assert result == CalculationResult.sentinel()


def test_negative_days_taken_do_not_inflate_vacation():
    baseline = _calc(RECORD_FOUR_YEARS)
    result = _calc(RECORD_FOUR_YEARS, vacation_days_taken=-50)
    assert result.net_vacation_days_to_pay == pytest.approx(baseline.total_vacation_days_earned_history)
    assert result.proportional_vacation == pytest.approx(baseline.proportional_vacation)


def test_extreme_calendar_range_does_not_raise():
    result = _calc(RECORD_FOUR_YEARS, start_date="8400-01-01", end_date="9999-12-31")
    assert result.antiquity_days_total > 0
    assert result.days_worked_since_anniversary == 0
    assert result.aguinaldo_days_worked == 365
    _assert_ordered(result)
