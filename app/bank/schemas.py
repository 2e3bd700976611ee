from pydantic import BaseModel, field_validator


class BankRequest(BaseModel):
    """Payment request in the format expected by the acquiring bank."""

    card_number: str
    expiry_date: str  # MM/YY
    currency: str
    amount: int
    cvv: str


class BankOutcome(BaseModel):
    """Result of one successful exchange with the bank. A decline is not an error."""

    authorized: bool = False
    authorization_code: str = ""

    @field_validator("authorization_code", mode="before")
    @classmethod
    def validate_authorization_code(cls, v):
        # Declines may come back with a null code
        return "" if v is None else v
