from app.bank.constants import EXPIRY_DATE_FORMAT
from app.constants import MASKED_CARD_DIGITS


def mask_card_number(card_number: str) -> str:
    """Return the last four characters of a card number, or all of it if shorter."""
    return card_number[-MASKED_CARD_DIGITS:]


def format_expiry_date(month: int, year: int) -> str:
    """
    Format expiry month and year as MM/YY for the bank API.

    Only the last two digits of the year are sent, so 2030 and 30 both become "30".
    """
    return EXPIRY_DATE_FORMAT.format(month=month, year=year % 100)
