"""Repository Protocol — dependency inversion for testability.

Unit tests inject a fake that conforms to this Protocol.
Infrastructure layer provides the real implementation.

Every method runs inside the caller's transaction. The `lock_*` methods take
row locks that are held until the caller commits or rolls back.
"""

from datetime import datetime
from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.cm_ledger.domain.models import PayableJob


class LedgerRepositoryProtocol(Protocol):
    async def lock_unpaid_job(
        self, db: AsyncSession, job_id: int
    ) -> PayableJob | None: ...

    async def lock_profile_balances(
        self, db: AsyncSession, profile_ids: list[int]
    ) -> dict[int, int]: ...

    async def lock_client_balance(
        self, db: AsyncSession, client_id: int
    ) -> int | None: ...

    async def get_outstanding_work_total(
        self, db: AsyncSession, client_id: int
    ) -> int: ...

    async def debit_balance(
        self, db: AsyncSession, profile_id: int, amount: int
    ) -> int | None: ...

    async def credit_balance(
        self, db: AsyncSession, profile_id: int, amount: int
    ) -> int: ...

    async def mark_job_paid(
        self, db: AsyncSession, job_id: int, paid_at: datetime
    ) -> bool: ...
