# Currencies the gateway accepts (ISO 4217)
SUPPORTED_CURRENCIES = frozenset({"USD", "GBP", "EUR"})

CARD_NUMBER_MIN_LENGTH = 14
CARD_NUMBER_MAX_LENGTH = 19

CVV_MIN_LENGTH = 3
CVV_MAX_LENGTH = 4

CURRENCY_LENGTH = 3

# Only this many trailing card digits are ever retained
MASKED_CARD_DIGITS = 4

DEFAULT_BANK_URL = "http://localhost:8080"
DEFAULT_BANK_TIMEOUT_SECONDS = 10.0
