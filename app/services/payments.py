"""Payment orchestration: validate, ask the bank, store, respond."""

import logging
import uuid
from collections.abc import Callable

from app.bank.client import BankClient
from app.exceptions import BankError, PaymentRejectedError
from app.models import PaymentRecord, PaymentStatus
from app.schemas import PaymentRequest, PaymentResponse
from app.store import PaymentStore
from app.utils import mask_card_number
from app.validation import PaymentValidator

logger = logging.getLogger(__name__)


def to_response(record: PaymentRecord) -> PaymentResponse:
    """Build the public view of a stored payment (no authorization code)."""
    return PaymentResponse(
        id=record.id,
        status=record.status,
        card_number_last_four=record.card_number_last_four,
        expiry_month=record.expiry_month,
        expiry_year=record.expiry_year,
        currency=record.currency,
        amount=record.amount,
    )


class PaymentService:
    """
    Turns an untrusted payment request into a bank-authorized, stored payment.

    Order within one request is strict: the bank is only called once
    validation passes and a record is only written after the bank answered.
    A failure at either step leaves the store untouched.
    """

    def __init__(
        self,
        validator: PaymentValidator,
        bank_client: BankClient,
        store: PaymentStore,
        id_factory: Callable[[], uuid.UUID] = uuid.uuid4,
    ):
        self.validator = validator
        self.bank_client = bank_client
        self.store = store
        self.id_factory = id_factory

    async def create_payment(self, request: PaymentRequest) -> PaymentResponse:
        """
        Process a payment request.

        Returns:
            PaymentResponse: The stored payment, either Authorized or Declined

        Raises:
            PaymentRejectedError: If the request fails validation; the bank is not called
            BankError: If the bank exchange fails; nothing is stored
        """
        errors = self.validator.validate(request)
        if errors:
            logger.info(f"Payment rejected with {len(errors)} validation error(s)")
            raise PaymentRejectedError(errors)

        card_last_four = mask_card_number(request.card_number)
        try:
            outcome = await self.bank_client.authorize(request)
        except BankError as e:
            logger.warning(f"Bank exchange failed {card_last_four = }: {e}")
            raise

        status = PaymentStatus.AUTHORIZED if outcome.authorized else PaymentStatus.DECLINED

        record = PaymentRecord(
            id=str(self.id_factory()),
            status=status,
            card_number_last_four=card_last_four,
            expiry_month=request.expiry_month,
            expiry_year=request.expiry_year,
            currency=request.currency,
            amount=request.amount,
            authorization_code=outcome.authorization_code,
        )
        self.store.put(record)
        logger.info(
            "Payment stored",
            extra={"payment_id": record.id, "status": record.status.value},
        )

        return to_response(record)

    def get_payment(self, payment_id: str) -> PaymentResponse | None:
        """Look up a payment by id. Returns None when there is no such payment."""
        record = self.store.get(payment_id)
        if record is None:
            return None
        return to_response(record)
