"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    kind = "DomainException"

    def __init__(self, field: str, detail: str = ""):
        self.field = field
        self.detail = detail
        super().__init__(f"{self.kind}: {field}" + (f" ({detail})" if detail else ""))


class ValidationError(DomainException):
    """Raw loan input was rejected before computation"""

    pass


class MissingField(ValidationError):
    """A required input is empty or absent"""

    kind = "MissingField"


class NotNumeric(ValidationError):
    """An input does not parse as a decimal number"""

    kind = "NotNumeric"


class NonPositive(ValidationError):
    """Principal or tenure is <= 0, or rate is negative"""

    kind = "NonPositive"


class PolicyViolation(DomainException):
    """Valid input that exceeds the bounds accepted at the capture boundary"""

    kind = "PolicyViolation"

    def __init__(self, field: str, limit: float, detail: str = ""):
        self.limit = limit
        super().__init__(field, detail)
