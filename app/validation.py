"""Field rules for incoming payment requests."""

from collections.abc import Callable, Iterable
from datetime import datetime, timezone

from app.constants import (
    CARD_NUMBER_MAX_LENGTH,
    CARD_NUMBER_MIN_LENGTH,
    CURRENCY_LENGTH,
    CVV_MAX_LENGTH,
    CVV_MIN_LENGTH,
    SUPPORTED_CURRENCIES,
)
from app.schemas import FieldError, PaymentRequest


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _is_numeric(value: str) -> bool:
    # str.isdigit() also accepts superscripts and other unicode digits
    return value.isascii() and value.isdigit()


class PaymentValidator:
    """
    Checks a payment request against every field rule.

    Rules are independent and all of them run, so the caller sees every
    violation at once. Errors come back in a fixed order: card number,
    expiry, amount, currency, CVV. Never raises for bad input.

    Args:
        supported_currencies: Currency codes accepted by the gateway
        clock: Returns the current time; used by the expiry checks
    """

    def __init__(
        self,
        supported_currencies: Iterable[str] = SUPPORTED_CURRENCIES,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.supported_currencies = frozenset(supported_currencies)
        self.clock = clock
        self._currency_list = ", ".join(sorted(self.supported_currencies))

    def validate(self, request: PaymentRequest) -> list[FieldError]:
        """Return every violated rule for the request; an empty list means valid."""
        # one reading of the clock per request
        now = self.clock()
        return [
            *self.validate_card_number(request.card_number),
            *self.validate_expiry_date(request.expiry_month, request.expiry_year, now),
            *self.validate_amount(request.amount),
            *self.validate_currency(request.currency),
            *self.validate_cvv(request.cvv),
        ]

    def validate_card_number(self, card_number: str) -> list[FieldError]:
        if not card_number:
            return [FieldError(field="card_number", message="card number is required")]

        errors = []
        if not CARD_NUMBER_MIN_LENGTH <= len(card_number) <= CARD_NUMBER_MAX_LENGTH:
            errors.append(
                FieldError(
                    field="card_number",
                    message=(
                        f"card number must be between {CARD_NUMBER_MIN_LENGTH}-"
                        f"{CARD_NUMBER_MAX_LENGTH} characters long"
                    ),
                )
            )
        if not _is_numeric(card_number):
            errors.append(
                FieldError(
                    field="card_number",
                    message="card number must contain only numeric characters",
                )
            )
        return errors

    def validate_expiry_date(self, month: int, year: int, now: datetime) -> list[FieldError]:
        """Year checks, then month range, then the combined must-be-in-the-future check."""
        errors = [*self.validate_expiry_year(year, now), *self.validate_expiry_month(month)]
        if year == now.year and month < now.month:
            errors.append(
                FieldError(field="expiry_month", message="expiry date must be in the future")
            )
        return errors

    def validate_expiry_year(self, year: int, now: datetime) -> list[FieldError]:
        if year == 0:
            return [FieldError(field="expiry_year", message="expiry year is required")]
        if year < now.year:
            return [FieldError(field="expiry_year", message="expiry year must be in the future")]
        return []

    def validate_expiry_month(self, month: int) -> list[FieldError]:
        if not 1 <= month <= 12:
            return [FieldError(field="expiry_month", message="expiry month must be between 1-12")]
        return []

    def validate_amount(self, amount: int) -> list[FieldError]:
        if amount <= 0:
            return [FieldError(field="amount", message="amount must be a positive integer")]
        return []

    def validate_currency(self, currency: str) -> list[FieldError]:
        if not currency:
            return [FieldError(field="currency", message="currency is required")]

        errors = []
        if len(currency) != CURRENCY_LENGTH:
            errors.append(
                FieldError(
                    field="currency",
                    message=f"currency must be {CURRENCY_LENGTH} characters",
                )
            )
        if currency not in self.supported_currencies:
            errors.append(
                FieldError(
                    field="currency",
                    message=f"currency must be one of: {self._currency_list}",
                )
            )
        return errors

    def validate_cvv(self, cvv: str) -> list[FieldError]:
        if not cvv:
            return [FieldError(field="cvv", message="cvv is required")]

        errors = []
        if not CVV_MIN_LENGTH <= len(cvv) <= CVV_MAX_LENGTH:
            errors.append(
                FieldError(
                    field="cvv",
                    message=f"cvv must be {CVV_MIN_LENGTH}-{CVV_MAX_LENGTH} characters long",
                )
            )
        if not _is_numeric(cvv):
            errors.append(
                FieldError(field="cvv", message="cvv must contain only numeric characters")
            )
        return errors
