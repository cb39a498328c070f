"""Input-capture boundary: keystroke masks and policy bounds applied around the EMI engine"""

import re
from typing import Any, Dict

from emi_calculator.config import settings
from emi_calculator.domain.exceptions import PolicyViolation
from emi_calculator.domain.models import LoanInput

RATE_DECIMAL_PLACES = 2

_DIGITS = re.compile(r"^\d+$", re.ASCII)
_RATE = re.compile(r"^\d*\.?\d{0,2}$", re.ASCII)


def input_limits() -> Dict[str, Any]:
    """Bounds shared by the keystroke masks here and on the page"""
    return {
        "max_principal": settings.max_principal,
        "max_principal_digits": len(str(int(settings.max_principal))),
        "max_rate_percent": settings.max_rate_percent,
        "rate_decimal_places": RATE_DECIMAL_PLACES,
        "max_tenure_months": settings.max_tenure_months,
        "max_tenure_digits": len(str(settings.max_tenure_months)),
        "require_positive_rate": settings.require_positive_rate,
    }


def accept_principal(value: str, max_principal: float | None = None) -> bool:
    """Whole amounts only, not above max_principal (9,999,999 by default)"""
    if value == "":
        return True
    limit = input_limits()["max_principal"] if max_principal is None else max_principal
    return bool(_DIGITS.fullmatch(value)) and int(value) <= limit


def accept_rate(value: str, max_rate: float | None = None) -> bool:
    """Up to two decimal places, not above max_rate. A partial entry like '7.' is allowed."""
    if value == "":
        return True
    if not _RATE.fullmatch(value):
        return False
    try:
        rate = float(value)
    except ValueError:
        # A lone "." matches the pattern but is not a number yet
        return False
    limit = input_limits()["max_rate_percent"] if max_rate is None else max_rate
    return rate <= limit


def accept_tenure(value: str, max_tenure: int | None = None) -> bool:
    """Whole months only, not above max_tenure"""
    if value == "":
        return True
    limit = input_limits()["max_tenure_months"] if max_tenure is None else max_tenure
    return bool(_DIGITS.fullmatch(value)) and int(value) <= limit


def enforce_policy(
    loan: LoanInput,
    max_principal: float | None = None,
    max_rate: float | None = None,
    max_tenure: int | None = None,
    require_positive_rate: bool | None = None,
) -> LoanInput:
    """
    Check a validated LoanInput against the configured input policy.

    The engine accepts any positive principal and tenure and a zero rate;
    the capture boundary is stricter. Unset arguments fall back to settings.

    Raises:
        PolicyViolation: A value exceeds its bound, or the rate is 0 while
            positive rates are required
    """
    max_principal = settings.max_principal if max_principal is None else max_principal
    max_rate = settings.max_rate_percent if max_rate is None else max_rate
    max_tenure = settings.max_tenure_months if max_tenure is None else max_tenure
    if require_positive_rate is None:
        require_positive_rate = settings.require_positive_rate

    if loan.principal > max_principal:
        raise PolicyViolation("principal", max_principal, f"must not exceed {max_principal:,.0f}")
    if loan.annual_rate_percent > max_rate:
        raise PolicyViolation("annual_rate_percent", max_rate, f"must not exceed {max_rate:g}%")
    if require_positive_rate and loan.annual_rate_percent == 0:
        raise PolicyViolation("annual_rate_percent", 0, "must be greater than 0")
    if loan.tenure_months > max_tenure:
        raise PolicyViolation("tenure_months", max_tenure, f"must not exceed {max_tenure} months")

    return loan
