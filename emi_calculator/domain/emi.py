"""
EMI engine - validation of raw inputs and the closed-form amortization formula.

EMI = P * R * (1+R)^N / ((1+R)^N - 1)
where R = annual_rate_percent / 12 / 100, P = principal, N = tenure in months.
"""

import math
import re
from typing import Optional

from emi_calculator.domain.exceptions import MissingField, NonPositive, NotNumeric
from emi_calculator.domain.models import LoanInput, LoanResult

_DECIMAL_PATTERN = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$", re.ASCII)


def _parse_number(field: str, raw: str) -> float:
    text = raw.strip()
    if not _DECIMAL_PATTERN.fullmatch(text):
        raise NotNumeric(field, f"{raw!r} is not a decimal number")
    value = float(text)
    if not math.isfinite(value):
        raise NotNumeric(field, f"{raw!r} is out of range")
    return value


def validate(
    raw_principal: Optional[str],
    raw_rate: Optional[str],
    raw_tenure: Optional[str],
) -> LoanInput:
    """
    Turn three raw text inputs into a LoanInput.

    Checks run in three passes over all fields, so an empty field is reported
    before a malformed one and a malformed one before a non-positive one.

    Raises:
        MissingField: Any value is None, empty or whitespace only
        NotNumeric: Any value is not a decimal number, or tenure is fractional
        NonPositive: principal <= 0, rate < 0 or tenure <= 0
    """
    raw = {
        "principal": raw_principal,
        "annual_rate_percent": raw_rate,
        "tenure_months": raw_tenure,
    }

    for field, value in raw.items():
        if value is None or not str(value).strip():
            raise MissingField(field)

    parsed = {field: _parse_number(field, str(value)) for field, value in raw.items()}

    tenure = parsed["tenure_months"]
    if not tenure.is_integer():
        raise NotNumeric("tenure_months", "tenure must be a whole number of months")

    if parsed["principal"] <= 0:
        raise NonPositive("principal")
    if parsed["annual_rate_percent"] < 0:
        raise NonPositive("annual_rate_percent")
    if tenure <= 0:
        raise NonPositive("tenure_months")

    return LoanInput(
        principal=parsed["principal"],
        annual_rate_percent=parsed["annual_rate_percent"],
        tenure_months=int(tenure),
    )


def compute(loan: LoanInput) -> LoanResult:
    """Return installment, total interest and total payment. No rounding is applied."""
    p = loan.principal
    n = loan.tenure_months
    r = loan.annual_rate_percent / 12 / 100

    # Zero interest: the formula's denominator vanishes
    if r == 0:
        return LoanResult(
            principal=p,
            monthly_installment=p / n,
            total_interest=0.0,
            total_payment=p,
        )

    # Same formula divided through by (1+R)^N: P*R / (1 - (1+R)^-N).
    # log1p/expm1 keep the denominator non-zero for tiny R and finite for huge R.
    emi = p * r / -math.expm1(-n * math.log1p(r))
    total_payment = emi * n

    return LoanResult(
        principal=p,
        monthly_installment=emi,
        total_interest=total_payment - p,
        total_payment=total_payment,
    )


def calculate(
    raw_principal: Optional[str],
    raw_rate: Optional[str],
    raw_tenure: Optional[str],
) -> LoanResult:
    """Validate raw inputs and compute the result in one step"""
    return compute(validate(raw_principal, raw_rate, raw_tenure))
