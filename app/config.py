from functools import lru_cache

from pydantic_settings import BaseSettings

from app.constants import DEFAULT_BANK_TIMEOUT_SECONDS, DEFAULT_BANK_URL, SUPPORTED_CURRENCIES


class Settings(BaseSettings):
    app_name: str = "Payment Gateway"
    log_level: str = "INFO"

    # Acquiring bank settings
    bank_url: str = DEFAULT_BANK_URL
    bank_timeout_seconds: float = DEFAULT_BANK_TIMEOUT_SECONDS

    # Validation settings
    supported_currencies: frozenset[str] = SUPPORTED_CURRENCIES

    class Config:
        env_file = ".env"
        extra = "ignore"

    def get_bank_url(self) -> str:
        """Get the bank base URL, falling back to the default when left empty."""
        return self.bank_url or DEFAULT_BANK_URL


@lru_cache
def get_settings():
    return Settings()
