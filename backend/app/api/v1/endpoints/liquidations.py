"""Liquidation calculation endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query

from app.core.legal_constants import dias_vacaciones
from app.schemas.liquidation import (
    EmployeeRecord,
    LiquidationResponse,
    SalaryEstimate,
    SalaryEstimateRequest,
    ServiceBreakdown,
    VacationTableRow,
)
from app.services.liquidation_engine import calculate_liquidation
from app.services.salary_estimator import estimate_daily_salary
from app.services.scenarios import build_negotiation_summary
from app.services.service_duration import split_years_days

logger = logging.getLogger(__name__)

router = APIRouter(tags=["liquidations"])


@router.post("/calculate", response_model=LiquidationResponse)
def calculate_endpoint(record: EmployeeRecord) -> LiquidationResponse:
    result = calculate_liquidation(record)
    # Todo periodo válido cuenta al menos un día; el resultado centinela cuenta cero.
    valid_period = result.antiquity_days_total > 0
    years, days = split_years_days(result.antiquity_years)
    logger.info(
        "liquidation_request record_id=%s valid_period=%s scenario1=%.2f scenario3=%.2f",
        record.id,
        valid_period,
        result.scenario1_total,
        result.scenario3_total,
    )
    return LiquidationResponse(
        record_id=record.id,
        valid_period=valid_period,
        service=ServiceBreakdown(years=years, days=days),
        result=result,
        negotiation=build_negotiation_summary(result),
    )


@router.post("/salary-estimate", response_model=SalaryEstimate)
def salary_estimate_endpoint(payload: SalaryEstimateRequest) -> SalaryEstimate:
    try:
        return estimate_daily_salary(payload.amount, payload.amount_type)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@router.get("/vacation-table", response_model=list[VacationTableRow])
def vacation_table_endpoint(max_years: int = Query(35, ge=1, le=100)) -> list[VacationTableRow]:
    return [VacationTableRow(year=year, days=dias_vacaciones(year)) for year in range(1, max_years + 1)]
