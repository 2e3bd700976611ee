from app.schemas import FieldError


class PaymentRejectedError(Exception):
    """Raised when a payment request fails validation. Carries every violated rule."""

    def __init__(self, errors: list[FieldError]):
        self.errors = list(errors)
        super().__init__(f"Payment rejected with {len(self.errors)} validation error(s)")


class BankError(Exception):
    """The exchange with the acquiring bank failed (transport error, timeout or error status)."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class BankUnavailableError(BankError):
    """The acquiring bank reported that it is temporarily unavailable."""
