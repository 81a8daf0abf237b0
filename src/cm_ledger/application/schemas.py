"""Pydantic schemas for cm_ledger API."""

from datetime import datetime

from pydantic import BaseModel, Field

from src.cm_common.cents import cents_to_display

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class DepositRequest(BaseModel):
    # Positivity is checked by the service so direct callers get the same error
    amount: int = Field(..., description="Amount to deposit in cents")


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class PaymentResponse(BaseModel):
    job_id: int
    paid_cents: int
    paid_display: str
    payment_date: str  # ISO8601 string

    @classmethod
    def from_result(cls, job_id: int, amount: int, paid_at: datetime) -> "PaymentResponse":
        return cls(
            job_id=job_id,
            paid_cents=amount,
            paid_display=cents_to_display(amount),
            payment_date=paid_at.isoformat(),
        )


class DepositResponse(BaseModel):
    client_id: int
    balance_cents: int
    balance_display: str
    deposited_cents: int
    deposited_display: str
    deposit_ceiling_cents: int

    @classmethod
    def from_result(
        cls, client_id: int, balance: int, amount: int, ceiling: int
    ) -> "DepositResponse":
        return cls(
            client_id=client_id,
            balance_cents=balance,
            balance_display=cents_to_display(balance),
            deposited_cents=amount,
            deposited_display=cents_to_display(amount),
            deposit_ceiling_cents=ceiling,
        )
