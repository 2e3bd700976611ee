"""Module containing constants relevant for the acquiring bank API"""

PAYMENTS_PATH = "payments"

# expiry_date on the wire is MM/YY
EXPIRY_DATE_FORMAT = "{month:02d}/{year:02d}"
