from fastapi import Request

from app.services.payments import PaymentService


def get_payment_service(request: Request) -> PaymentService:
    """
    FastAPI dependency for getting the payment service.

    The service is built by the application lifespan and kept on app.state.

    Returns:
        PaymentService: Shared payment service
    """
    return request.app.state.payment_service
