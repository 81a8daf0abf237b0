"""Domain models for cm_contract — pure dataclasses, no SQLAlchemy dependency."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Contract:
    id: int
    terms: str
    status: str          # ContractStatus value
    client_id: int
    contractor_id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class Job:
    id: int
    description: str
    price: int                            # cents, > 0
    paid: bool
    contract_id: int
    payment_date: datetime | None = None  # set iff paid
    created_at: datetime | None = None
    updated_at: datetime | None = None
