from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.models import PaymentStatus


class PaymentRequest(BaseModel):
    """
    Card payment request accepted from merchants.

    Every field carries an empty default so that a missing value is reported
    by the payment validator alongside every other violated rule, rather than
    being rejected early by the framework with only a partial picture.
    """

    card_number: str = Field("", description="Full card number (14-19 digits)")
    expiry_month: int = Field(0, description="Card expiry month (1-12)")
    expiry_year: int = Field(0, description="Card expiry year (4 digits)")
    currency: str = Field("", description="ISO 4217 currency code (USD, GBP or EUR)")
    amount: int = Field(0, description="Amount in minor currency units (e.g. pence)")
    cvv: str = Field("", description="Card verification value (3-4 digits)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "card_number": "2222405343248877",
                "expiry_month": 4,
                "expiry_year": 2030,
                "currency": "GBP",
                "amount": 100,
                "cvv": "123",
            }
        }
    )

    @field_validator("card_number", "currency", "cvv", mode="before")
    @classmethod
    def validate_null_text(cls, v):
        # JSON null is reported like a missing field
        return "" if v is None else v

    @field_validator("expiry_month", "expiry_year", "amount", mode="before")
    @classmethod
    def validate_null_number(cls, v):
        return 0 if v is None else v


class FieldError(BaseModel):
    """One violated input rule."""

    field: str
    message: str


class PaymentResponse(BaseModel):
    """Public view of a processed payment. Never includes the full card or CVV."""

    id: str
    status: PaymentStatus
    card_number_last_four: str
    expiry_month: int
    expiry_year: int
    currency: str
    amount: int


class ErrorResponse(BaseModel):
    error: str
    errors: list[FieldError] | None = None
