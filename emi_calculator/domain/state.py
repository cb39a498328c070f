"""Calculator form state: raw inputs, last result and its visibility"""

from dataclasses import dataclass
from typing import Optional

from emi_calculator.domain.emi import compute, validate
from emi_calculator.domain.exceptions import DomainException
from emi_calculator.domain.formatting import error_message
from emi_calculator.domain.input_filter import accept_principal, accept_rate, accept_tenure, enforce_policy
from emi_calculator.domain.models import LoanResult


@dataclass
class CalculatorState:
    """
    State owned by a single calculator form.

    The setters pass values through the keystroke masks before storing them.
    Fields assigned directly (an API request body) go to the engine as typed.
    A failed submit hides and drops any earlier result and keeps the error.
    """

    principal: str = ""
    rate: str = ""
    tenure: str = ""
    result: Optional[LoanResult] = None
    show_result: bool = False
    message: Optional[str] = None
    error: Optional[DomainException] = None

    def set_principal(self, value: str) -> bool:
        if not accept_principal(value):
            return False
        self.principal = value
        return True

    def set_rate(self, value: str) -> bool:
        if not accept_rate(value):
            return False
        self.rate = value
        return True

    def set_tenure(self, value: str) -> bool:
        if not accept_tenure(value):
            return False
        self.tenure = value
        return True

    def submit(self, enforce_bounds: bool = True) -> Optional[LoanResult]:
        """Run the calculation for the current inputs. Returns None on invalid input."""
        try:
            loan = validate(self.principal, self.rate, self.tenure)
            if enforce_bounds:
                enforce_policy(loan)
        except DomainException as e:
            self.result = None
            self.show_result = False
            self.message = error_message(e)
            self.error = e
            return None

        self.result = compute(loan)
        self.show_result = True
        self.message = None
        self.error = None
        return self.result

    def clear(self) -> None:
        self.principal = ""
        self.rate = ""
        self.tenure = ""
        self.result = None
        self.show_result = False
        self.message = None
        self.error = None
