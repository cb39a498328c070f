"""Domain models - pure Python dataclasses representing loan calculations"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LoanInput:
    """Parsed and validated loan parameters for a single calculation"""

    principal: float
    annual_rate_percent: float
    tenure_months: int


@dataclass(frozen=True)
class LoanResult:
    """Output of an EMI calculation. Values are unrounded."""

    principal: float
    monthly_installment: float
    total_interest: float
    total_payment: float
