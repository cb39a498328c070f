"""Pydantic schemas for API request/response validation"""

from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator


class EmiRequest(BaseModel):
    """Request body for POST /v1/emi. Values are raw form text; the engine validates them."""

    principal: Optional[str] = Field(None, description="Loan amount")
    annual_rate: Optional[str] = Field(None, description="Annual interest rate in percent")
    tenure_months: Optional[str] = Field(None, description="Loan tenure in months")

    @field_validator("principal", "annual_rate", "tenure_months", mode="before")
    @classmethod
    def coerce_to_text(cls, value: Union[str, int, float, None]) -> Optional[str]:
        if value is None or isinstance(value, str):
            return value
        # bool is an int subclass; true/false is not an amount
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        raise ValueError("must be a string or number")


class FormattedResult(BaseModel):
    """Currency strings for display"""

    principal: str
    monthly_installment: str
    total_interest: str
    total_payment: str


class EmiResponse(BaseModel):
    """Response for POST /v1/emi"""

    principal: float
    monthly_installment: float
    total_interest: float
    total_payment: float
    formatted: FormattedResult


class ErrorResponse(BaseModel):
    """Input error returned with status 422"""

    error: str
    field: str
    message: str


class LimitsResponse(BaseModel):
    """Response for GET /v1/limits"""

    max_principal: float
    max_principal_digits: int
    max_rate_percent: float
    rate_decimal_places: int
    max_tenure_months: int
    max_tenure_digits: int
    require_positive_rate: bool
