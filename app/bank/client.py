import asyncio
import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from app.bank.constants import PAYMENTS_PATH
from app.bank.schemas import BankOutcome, BankRequest
from app.config import get_settings
from app.exceptions import BankError, BankUnavailableError
from app.schemas import PaymentRequest
from app.utils import format_expiry_date, mask_card_number

logger = logging.getLogger(__name__)


class BankClient:
    """Single request/response exchange with the acquiring bank."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    @staticmethod
    def build_request(request: PaymentRequest) -> BankRequest:
        """Convert a payment request to the bank's wire format."""
        return BankRequest(
            card_number=request.card_number,
            expiry_date=format_expiry_date(request.expiry_month, request.expiry_year),
            currency=request.currency,
            amount=request.amount,
            cvv=request.cvv,
        )

    async def authorize(self, request: PaymentRequest) -> BankOutcome:
        """
        Ask the bank to authorize a payment.

        A declined payment is a successful exchange and comes back as an
        outcome with authorized=False.

        Raises:
            BankUnavailableError: If the bank answers 503
            BankError: On transport failure, timeout, any other non-200 status
                or an unreadable response
        """
        payload = self.build_request(request).model_dump(mode="json")
        card_last_four = mask_card_number(request.card_number)

        logger.debug(f"Sending payment to bank {card_last_four = }")
        try:
            # httpx timeouts apply per phase; this bounds the whole exchange
            async with asyncio.timeout(self.timeout):
                response = await self._client.post(f"/{PAYMENTS_PATH}", json=payload)
        except (TimeoutError, httpx.TimeoutException) as e:
            raise BankError("bank request timed out") from e
        except httpx.HTTPError as e:
            raise BankError(f"failed to send request to bank: {e}") from e

        if response.status_code != httpx.codes.OK:
            if response.status_code == httpx.codes.SERVICE_UNAVAILABLE:
                raise BankUnavailableError(
                    "bank service unavailable", status_code=response.status_code
                )
            raise BankError(
                f"bank returned error status {response.status_code}: {response.text}",
                status_code=response.status_code,
            )

        try:
            outcome = BankOutcome.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise BankError(f"failed to parse bank response: {e}") from e

        logger.debug(f"Bank responded {card_last_four = }, {outcome.authorized = }")
        return outcome

    async def close(self):
        """Graceful shutdown"""
        await self._client.aclose()


def create_bank_client(transport: Optional[httpx.AsyncBaseTransport] = None) -> BankClient:
    settings = get_settings()
    return BankClient(
        base_url=settings.get_bank_url(),
        timeout=settings.bank_timeout_seconds,
        transport=transport,
    )
