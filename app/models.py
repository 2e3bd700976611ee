from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator


class PaymentStatus(str, Enum):
    """Outcome of a payment request."""

    AUTHORIZED = "Authorized"
    DECLINED = "Declined"
    # Only ever reported back to the caller, never stored
    REJECTED = "Rejected"


class PaymentRecord(BaseModel):
    """
    Stored payment.

    Created once after a completed bank exchange and immutable afterwards.
    Holds the masked card only; the full card number and CVV are dropped
    before a record is built.
    """

    id: str
    status: PaymentStatus
    card_number_last_four: str
    expiry_month: int
    expiry_year: int
    currency: str
    amount: int
    authorization_code: str = ""

    model_config = ConfigDict(frozen=True)

    @field_validator("status")
    @classmethod
    def validate_status(cls, v: PaymentStatus) -> PaymentStatus:
        if v is PaymentStatus.REJECTED:
            raise ValueError("rejected payments are never stored")
        return v
