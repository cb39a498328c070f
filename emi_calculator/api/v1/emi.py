"""POST /v1/emi - EMI calculation endpoint, GET /v1/limits - input bounds for the page"""

import time

from fastapi import APIRouter, Request

from emi_calculator.api.dependencies import get_request_id
from emi_calculator.api.v1.schemas import EmiRequest, EmiResponse, ErrorResponse, FormattedResult, LimitsResponse
from emi_calculator.config import settings
from emi_calculator.domain.formatting import format_result
from emi_calculator.domain.input_filter import input_limits
from emi_calculator.domain.state import CalculatorState
from emi_calculator.infrastructure.observability.logging import log_calculation
from emi_calculator.infrastructure.observability.metrics import record_calculation

router = APIRouter()


@router.post(
    "/emi",
    response_model=EmiResponse,
    responses={422: {"model": ErrorResponse}},
)
def calculate_emi(request_body: EmiRequest, request: Request):
    """
    Calculate the monthly installment for a loan.

    Flow:
    1. Load the three raw inputs into a calculator state
    2. Submit: validate, apply the input policy bounds, compute
    3. Format currency strings for display

    A rejected submit re-raises its DomainException, which the application's
    exception handler turns into a 422 response.
    """
    start_time = time.time()

    state = CalculatorState(
        principal=request_body.principal or "",
        rate=request_body.annual_rate or "",
        tenure=request_body.tenure_months or "",
    )
    result = state.submit()
    if result is None:
        raise state.error

    duration_ms = (time.time() - start_time) * 1000
    record_calculation(result.principal)
    log_calculation(get_request_id(request), "computed", duration_ms)

    return EmiResponse(
        principal=result.principal,
        monthly_installment=result.monthly_installment,
        total_interest=result.total_interest,
        total_payment=result.total_payment,
        formatted=FormattedResult(
            **format_result(result, settings.digit_grouping, settings.currency_symbol)
        ),
    )


@router.get("/limits", response_model=LimitsResponse)
def get_limits():
    """Input bounds the page uses for its keystroke masks"""
    return LimitsResponse(**input_limits())
