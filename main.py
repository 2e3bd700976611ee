import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.bank.client import create_bank_client
from app.config import get_settings
from app.routers import payments
from app.services.payments import PaymentService
from app.store import PaymentStore
from app.validation import PaymentValidator

settings = get_settings()

logging.basicConfig(level=settings.log_level, format="%(asctime)s - %(levelname)s - %(message)s")


@asynccontextmanager
async def lifespan(app: FastAPI):
    bank_client = create_bank_client()
    app.state.payment_service = PaymentService(
        validator=PaymentValidator(supported_currencies=settings.supported_currencies),
        bank_client=bank_client,
        store=PaymentStore(),
    )
    yield
    await bank_client.close()


def initialize_app() -> FastAPI:
    """Initialize the FastAPI application."""

    _app = FastAPI(title=settings.app_name, lifespan=lifespan)

    _app.include_router(payments.router)

    @_app.get("/", tags=["general"])
    @_app.get("/healthcheck", tags=["general"])
    def health_check():
        return {"status": "alive"}

    @_app.get("/ping", tags=["general"])
    def ping():
        return {"message": "pong"}

    return _app


app = initialize_app()
