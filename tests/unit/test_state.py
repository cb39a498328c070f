"""Unit tests for calculator form state"""

from emi_calculator.domain.exceptions import MissingField
from emi_calculator.domain.state import CalculatorState


def filled_state(principal="500000", rate="10.5", tenure="60") -> CalculatorState:
    state = CalculatorState()
    state.set_principal(principal)
    state.set_rate(rate)
    state.set_tenure(tenure)
    return state


def test_new_state_is_empty():
    state = CalculatorState()
    assert (state.principal, state.rate, state.tenure) == ("", "", "")
    assert state.result is None
    assert state.show_result is False


def test_setters_apply_masks():
    """Test rejected keystrokes leave the previous value in place"""
    state = CalculatorState()

    assert state.set_principal("12345")
    assert not state.set_principal("12345678")
    assert state.principal == "12345"

    assert state.set_rate("7.2")
    assert not state.set_rate("7.255")
    assert state.rate == "7.2"

    assert state.set_tenure("360")
    assert not state.set_tenure("361")
    assert state.tenure == "360"


def test_submit_stores_and_shows_result():
    state = filled_state()

    result = state.submit()

    assert result is not None
    assert state.result is result
    assert state.show_result is True
    assert state.message is None
    assert 10_700 < result.monthly_installment < 10_800


def test_submit_missing_field_sets_message():
    state = filled_state(tenure="")

    assert state.submit() is None
    assert state.show_result is False
    assert state.message == "Please fill in all fields"


def test_failed_submit_hides_previous_result():
    """Test a later invalid submit suppresses the earlier result"""
    state = filled_state()
    state.submit()
    assert state.show_result

    state.set_principal("0")
    assert state.submit() is None
    assert state.result is None
    assert state.show_result is False
    assert state.message == "Please enter positive values only"


def test_new_result_supersedes_old():
    state = filled_state()
    first = state.submit()

    state.set_rate("0")
    second = state.submit()

    assert second is not first
    assert state.result is second
    assert second.total_interest == 0


def test_trailing_dot_rate_submits():
    """Test a partially typed rate like '7.' is computed as 7%"""
    state = filled_state(rate="7.")
    assert state.submit() is not None
    assert state.result.monthly_installment > 500_000 / 60


def test_submit_can_skip_policy_bounds():
    """Test direct field assignment bypasses masks and policy when bounds are off"""
    state = CalculatorState(principal="50000000", rate="12", tenure="12")

    assert state.submit() is None
    assert state.message == "Loan amount must not exceed 9,999,999"

    assert state.submit(enforce_bounds=False) is not None


def test_clear_resets_everything():
    state = filled_state()
    state.submit()

    state.clear()

    assert state == CalculatorState()


def test_failed_submit_keeps_error_until_success():
    """Test the rejection is kept for the caller and cleared by the next good submit"""
    state = filled_state(principal="")

    state.submit()
    assert isinstance(state.error, MissingField)
    assert state.error.field == "principal"

    state.set_principal("100000")
    state.submit()
    assert state.error is None
