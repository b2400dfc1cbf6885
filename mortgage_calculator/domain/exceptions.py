"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class BusinessRuleViolation(DomainException):
    """Request is well-formed but rejected by a lending rule"""

    pass


class InitialPaymentTooLowError(BusinessRuleViolation):
    """Initial payment is below the required share of the object cost"""

    message = "the initial payment should be more"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class UnknownProgramError(DomainException):
    """Program has no configured rate"""

    pass
