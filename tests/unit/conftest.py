"""Unit-test fixtures: an in-memory ledger store conforming to LedgerRepositoryProtocol."""

from dataclasses import dataclass
from datetime import datetime
from unittest.mock import AsyncMock

import pytest

from src.cm_ledger.domain.models import PayableJob
from src.cm_profile.domain.models import Profile


@dataclass
class _Job:
    id: int
    price: int
    contract_id: int
    paid: bool = False
    payment_date: datetime | None = None


class InMemoryLedgerRepository:
    """Dict-backed ledger store. Locks are no-ops; a single test drives it serially."""

    def __init__(self) -> None:
        self.profiles: dict[int, Profile] = {}
        self.contracts: dict[int, tuple[int, int, str]] = {}  # id -> (client, contractor, status)
        self.jobs: dict[int, _Job] = {}

    # -- seeding helpers ------------------------------------------------

    def add_profile(self, profile_id: int, type_: str, balance: int = 0) -> Profile:
        profile = Profile(
            id=profile_id,
            first_name=f"First{profile_id}",
            last_name=f"Last{profile_id}",
            profession="Programmer",
            balance=balance,
            type=type_,
        )
        self.profiles[profile_id] = profile
        return profile

    def add_contract(
        self, contract_id: int, client_id: int, contractor_id: int, status: str = "in_progress"
    ) -> None:
        self.contracts[contract_id] = (client_id, contractor_id, status)

    def add_job(self, job_id: int, contract_id: int, price: int, paid: bool = False) -> None:
        self.jobs[job_id] = _Job(id=job_id, price=price, contract_id=contract_id, paid=paid)

    def balance(self, profile_id: int) -> int:
        return self.profiles[profile_id].balance

    # -- LedgerRepositoryProtocol ---------------------------------------

    async def lock_unpaid_job(self, db, job_id):
        job = self.jobs.get(job_id)
        if job is None or job.paid:
            return None
        client_id, contractor_id, _ = self.contracts[job.contract_id]
        return PayableJob(
            id=job.id,
            price=job.price,
            contract_id=job.contract_id,
            client_id=client_id,
            contractor_id=contractor_id,
        )

    async def lock_profile_balances(self, db, profile_ids):
        return {pid: self.profiles[pid].balance for pid in profile_ids if pid in self.profiles}

    async def lock_client_balance(self, db, client_id):
        profile = self.profiles.get(client_id)
        if profile is None or profile.type != "client":
            return None
        return profile.balance

    async def get_outstanding_work_total(self, db, client_id):
        total = 0
        for job in self.jobs.values():
            owner, _, status = self.contracts[job.contract_id]
            if owner == client_id and status == "in_progress" and not job.paid:
                total += job.price
        return total

    async def debit_balance(self, db, profile_id, amount):
        profile = self.profiles[profile_id]
        if profile.balance < amount:
            return None
        profile.balance -= amount
        return profile.balance

    async def credit_balance(self, db, profile_id, amount):
        profile = self.profiles[profile_id]
        profile.balance += amount
        return profile.balance

    async def mark_job_paid(self, db, job_id, paid_at):
        job = self.jobs[job_id]
        if job.paid:
            return False
        job.paid = True
        job.payment_date = paid_at
        return True


@pytest.fixture
def store() -> InMemoryLedgerRepository:
    """Client 1 (1000) and contractor 2 (0) on in_progress contract 10."""
    repo = InMemoryLedgerRepository()
    repo.add_profile(1, "client", 1000)
    repo.add_profile(2, "contractor", 0)
    repo.add_profile(3, "admin", 0)
    repo.add_contract(10, client_id=1, contractor_id=2)
    return repo


@pytest.fixture
def db() -> AsyncMock:
    return AsyncMock()
