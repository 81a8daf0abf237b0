"""Pydantic schemas for cm_contract API responses."""

from pydantic import BaseModel

from src.cm_common.cents import cents_to_display
from src.cm_contract.domain.models import Contract, Job


class ContractItem(BaseModel):
    id: int
    terms: str
    status: str
    client_id: int
    contractor_id: int

    @classmethod
    def from_domain(cls, contract: Contract) -> "ContractItem":
        return cls(
            id=contract.id,
            terms=contract.terms,
            status=contract.status,
            client_id=contract.client_id,
            contractor_id=contract.contractor_id,
        )


class ContractListResponse(BaseModel):
    items: list[ContractItem]
    total: int


class JobItem(BaseModel):
    id: int
    description: str
    price_cents: int
    price_display: str
    paid: bool
    payment_date: str | None  # ISO8601 string
    contract_id: int

    @classmethod
    def from_domain(cls, job: Job) -> "JobItem":
        return cls(
            id=job.id,
            description=job.description,
            price_cents=job.price,
            price_display=cents_to_display(job.price),
            paid=job.paid,
            payment_date=job.payment_date.isoformat() if job.payment_date else None,
            contract_id=job.contract_id,
        )


class JobListResponse(BaseModel):
    items: list[JobItem]
    total: int
