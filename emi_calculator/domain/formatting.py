"""Currency formatting and user-facing messages for the display boundary"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Dict

from emi_calculator.domain.exceptions import DomainException, PolicyViolation
from emi_calculator.domain.models import LoanResult

GROUPING_INDIAN = "indian"
GROUPING_INTERNATIONAL = "international"

ERROR_MESSAGES = {
    "MissingField": "Please fill in all fields",
    "NotNumeric": "Please enter valid numeric values",
    "NonPositive": "Please enter positive values only",
}

FIELD_LABELS = {
    "principal": "Loan amount",
    "annual_rate_percent": "Annual interest rate",
    "tenure_months": "Loan tenure",
}


def _group_digits(digits: str, grouping: str) -> str:
    if grouping == GROUPING_INDIAN:
        # Lakh style: last three digits, then pairs (12,34,567)
        if len(digits) <= 3:
            return digits
        head, tail = digits[:-3], digits[-3:]
        pairs = []
        while len(head) > 2:
            pairs.insert(0, head[-2:])
            head = head[:-2]
        return ",".join([head] + pairs + [tail])
    if grouping == GROUPING_INTERNATIONAL:
        return f"{int(digits):,}"
    raise ValueError(f"Unknown digit grouping: {grouping}")


def format_currency(amount: float, grouping: str = GROUPING_INDIAN) -> str:
    """
    Format a number with exactly two decimal places and grouped digits.

    Rounds half up on the shortest decimal representation of the float,
    so 8333.333333333334 -> "8,333.33" and 0.125 -> "0.13".

    Example:
        format_currency(500000) -> "5,00,000.00"
        format_currency(500000, "international") -> "500,000.00"
    """
    rounded = Decimal(repr(float(amount))).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    whole, fraction = f"{abs(rounded):f}".split(".")
    return f"{sign}{_group_digits(whole, grouping)}.{fraction}"


def format_result(result: LoanResult, grouping: str = GROUPING_INDIAN, symbol: str = "₹") -> Dict[str, str]:
    """Display strings for the four result fields"""
    return {
        "principal": f"{symbol}{format_currency(result.principal, grouping)}",
        "monthly_installment": f"{symbol}{format_currency(result.monthly_installment, grouping)}",
        "total_interest": f"{symbol}{format_currency(result.total_interest, grouping)}",
        "total_payment": f"{symbol}{format_currency(result.total_payment, grouping)}",
    }


def error_message(error: DomainException) -> str:
    """Human-readable message for an input error"""
    if isinstance(error, PolicyViolation):
        label = FIELD_LABELS.get(error.field, error.field)
        return f"{label} {error.detail}" if error.detail else f"{label} is out of range"
    return ERROR_MESSAGES.get(error.kind, "Please check your input")
