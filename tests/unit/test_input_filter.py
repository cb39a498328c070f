"""Unit tests for keystroke masks and input policy"""

import pytest

from emi_calculator.config import settings
from emi_calculator.domain.exceptions import PolicyViolation
from emi_calculator.domain.input_filter import (
    accept_principal,
    accept_rate,
    accept_tenure,
    enforce_policy,
    input_limits,
)
from emi_calculator.domain.models import LoanInput


@pytest.mark.parametrize("value", ["", "1", "500000", "9999999"])
def test_principal_mask_accepts(value):
    assert accept_principal(value)


@pytest.mark.parametrize("value", ["10000000", "12.5", "-1", "1e5", "abc", "1 000", "٣"])
def test_principal_mask_rejects(value):
    assert not accept_principal(value)


@pytest.mark.parametrize("value", ["", "0", "7", "7.", "7.5", "10.25", ".5", "100", "100.00"])
def test_rate_mask_accepts(value):
    assert accept_rate(value)


@pytest.mark.parametrize("value", [".", "10.255", "100.01", "101", "-1", "abc", "1e2"])
def test_rate_mask_rejects(value):
    assert not accept_rate(value)


@pytest.mark.parametrize("value", ["", "1", "60", "360"])
def test_tenure_mask_accepts(value):
    assert accept_tenure(value)


@pytest.mark.parametrize("value", ["361", "12.5", "-12", "x", "12\n"])
def test_tenure_mask_rejects(value):
    assert not accept_tenure(value)


def test_masks_take_explicit_limits():
    """Test limits can be overridden per call"""
    assert accept_rate("30", max_rate=36)
    assert not accept_rate("40", max_rate=36)
    assert accept_tenure("480", max_tenure=480)


def test_enforce_policy_passes_within_bounds(sample_loan: LoanInput):
    assert enforce_policy(sample_loan) is sample_loan


@pytest.mark.parametrize(
    "loan,field",
    [
        (LoanInput(10_000_000, 10, 12), "principal"),
        (LoanInput(1_000, 100.5, 12), "annual_rate_percent"),
        (LoanInput(1_000, 10, 361), "tenure_months"),
    ],
)
def test_enforce_policy_rejects_out_of_bounds(loan, field):
    """Test values beyond the configured bounds raise PolicyViolation"""
    with pytest.raises(PolicyViolation) as exc_info:
        enforce_policy(loan)

    assert exc_info.value.field == field
    assert exc_info.value.kind == "PolicyViolation"


def test_zero_rate_allowed_unless_positive_rate_required():
    """Test the stricter rate > 0 rule is opt-in"""
    loan = LoanInput(100_000, 0, 12)

    assert enforce_policy(loan) is loan
    with pytest.raises(PolicyViolation) as exc_info:
        enforce_policy(loan, require_positive_rate=True)
    assert exc_info.value.field == "annual_rate_percent"


def test_enforce_policy_upper_bounds_are_inclusive():
    loan = LoanInput(9_999_999, 100, 360)
    assert enforce_policy(loan) is loan


def test_input_limits_come_from_settings(monkeypatch: pytest.MonkeyPatch):
    """Test the shared bounds and the masks follow configuration"""
    monkeypatch.setattr(settings, "max_tenure_months", 480)
    monkeypatch.setattr(settings, "max_principal", 25_000_000)

    limits = input_limits()
    assert limits["max_tenure_months"] == 480
    assert limits["max_tenure_digits"] == 3
    assert limits["max_principal_digits"] == 8

    assert accept_tenure("480")
    assert not accept_tenure("481")
    assert accept_principal("25000000")
    assert not accept_principal("25000001")


def test_principal_mask_takes_explicit_limit():
    assert accept_principal("50000", max_principal=50_000)
    assert not accept_principal("50001", max_principal=50_000)
