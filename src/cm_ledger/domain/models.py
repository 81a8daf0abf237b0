"""Domain models for cm_ledger — pure dataclasses, no SQLAlchemy dependency."""

from dataclasses import dataclass


@dataclass
class PayableJob:
    """An unpaid job, row-locked for the current transaction, with its contract parties."""

    id: int
    price: int          # cents
    contract_id: int
    client_id: int
    contractor_id: int
