import threading
from typing import Optional

from app.models import PaymentRecord


class PaymentStore:
    """
    In-memory payment table keyed by payment id.

    A single lock guards the whole table and is held only for the dict access
    itself, never across a call to the bank. Reads take the same lock as
    writes, so concurrent readers are serialized too; each hold is one dict
    lookup. Records live for the lifetime of the process.
    """

    def __init__(self):
        self._payments: dict[str, PaymentRecord] = {}
        self._lock = threading.Lock()

    def put(self, record: PaymentRecord) -> None:
        # last write wins on a duplicate id
        with self._lock:
            self._payments[record.id] = record

    def get(self, payment_id: str) -> Optional[PaymentRecord]:
        """Return the stored record, or None when no payment has that id."""
        with self._lock:
            return self._payments.get(payment_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._payments)
