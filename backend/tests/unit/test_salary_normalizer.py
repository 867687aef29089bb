from __future__ import annotations

import pytest

from app.schemas.liquidation import EmployeeRecord
from app.services.salary_normalizer import effective_aguinaldo_days, integration_factor, normalize_salary
from app.services.salary_estimator import estimate_daily_salary
from tests.fixtures.synthetic_records import RECORD_FOUR_YEARS, RECORD_PAYROLL_COST


def test_minimum_aguinaldo_is_enforced():
    assert effective_aguinaldo_days(0) == 15
    assert effective_aguinaldo_days(-10) == 15
    assert effective_aguinaldo_days(30) == 30


def test_integration_factor_uses_upcoming_year_vacations():
    record = EmployeeRecord.model_validate(RECORD_FOUR_YEARS)
    salary = normalize_salary(record, completed_years=4)
    # Año 5 de servicio: 20 días de vacaciones, 25% de prima.
    assert salary.integration_factor == pytest.approx(1 + 20 / 365)
    assert salary.sdi == pytest.approx(500 * (1 + 20 / 365))
    assert salary.base_daily == 500
    assert salary.gross_daily == 500
    assert salary.is_sdi_manual is False


def test_manual_sdi_wins_in_manual_mode():
    record = EmployeeRecord.model_validate(RECORD_FOUR_YEARS).with_manual_sdi(610.5)
    salary = normalize_salary(record, completed_years=4)
    assert salary.sdi == 610.5
    assert salary.is_sdi_manual is True
    assert salary.base_daily == 500


def test_payroll_cost_mode_ignores_manual_sdi():
    record = EmployeeRecord.model_validate(RECORD_PAYROLL_COST)
    salary = normalize_salary(record, completed_years=5)
    gross_daily = 33400 / 1.336 / 30
    assert salary.gross_daily == pytest.approx(gross_daily)
    assert salary.base_daily == pytest.approx(33400 / 1.6135 / 30)
    assert salary.sdi == pytest.approx(gross_daily * (1 + (30 + 22 * 0.5) / 365))
    assert salary.is_sdi_manual is False


def test_integration_factor_formula():
    assert integration_factor(15, 12, 25) == pytest.approx(1 + 18 / 365)
    assert integration_factor(15, 12, 0) == pytest.approx(1 + 15 / 365)


def test_salary_estimator_modes():
    cost = estimate_daily_salary(33400, "cost")
    assert cost.gross_monthly == pytest.approx(25000)
    assert cost.daily_salary == pytest.approx(25000 / 30)

    gross = estimate_daily_salary(25000, "gross")
    assert gross.daily_salary == pytest.approx(25000 / 30)

    net = estimate_daily_salary(20700, "net")
    assert net.gross_monthly == pytest.approx(25000)


def test_salary_estimator_non_positive_amount():
    estimate = estimate_daily_salary(0, "net")
    assert estimate.gross_monthly == 0
    assert estimate.daily_salary == 0
