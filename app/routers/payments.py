import logging
import uuid
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from app.dependencies import get_payment_service
from app.exceptions import BankError, BankUnavailableError, PaymentRejectedError
from app.models import PaymentStatus
from app.schemas import ErrorResponse, PaymentRequest, PaymentResponse
from app.services.payments import PaymentService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/payments", tags=["payments"])


def _error_response(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@router.post(
    "",
    response_model=PaymentResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_502_BAD_GATEWAY: {"model": ErrorResponse},
        status.HTTP_503_SERVICE_UNAVAILABLE: {"model": ErrorResponse},
    },
)
async def create_payment(
    payment: PaymentRequest,
    service: Annotated[PaymentService, Depends(get_payment_service)],
):
    """
    Process a card payment through the acquiring bank.

    Returns the stored payment (Authorized or Declined). A request that fails
    validation is Rejected with every violated rule and never reaches the bank.
    """

    try:
        return await service.create_payment(payment)
    except PaymentRejectedError as e:
        return _error_response(
            status.HTTP_400_BAD_REQUEST,
            ErrorResponse(error=PaymentStatus.REJECTED.value, errors=e.errors),
        )
    except BankUnavailableError as e:
        return _error_response(
            status.HTTP_503_SERVICE_UNAVAILABLE,
            ErrorResponse(error=f"Payment processing failed: {e}"),
        )
    except BankError as e:
        return _error_response(
            status.HTTP_502_BAD_GATEWAY,
            ErrorResponse(error=f"Payment processing failed: {e}"),
        )
    except Exception as e:
        logger.exception("Unexpected error while processing payment")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to process payment",
        ) from e


@router.get(
    "/{payment_id}",
    response_model=PaymentResponse,
    responses={status.HTTP_404_NOT_FOUND: {"description": "Payment not found"}},
)
async def get_payment(
    payment_id: str,
    service: Annotated[PaymentService, Depends(get_payment_service)],
):
    """Retrieve details of a previously made payment by its id."""

    try:
        uuid.UUID(payment_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Payment id must be a UUID",
        )

    payment = service.get_payment(payment_id)
    if payment is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Payment not found")
    return payment
