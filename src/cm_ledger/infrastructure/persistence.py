"""LedgerRepository — concrete implementation of LedgerRepositoryProtocol.

Balance writes are explicit UPDATE ... RETURNING statements naming only the
balance column (profiles.updated_at is maintained by trigger). Reads that feed
a balance check take row locks with SELECT ... FOR UPDATE so a concurrent
operation on the same profile waits for this transaction to finish.

Transaction ownership: the CALLER (application service) commits or rolls back.
"""

from datetime import datetime

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.cm_common.enums import ContractStatus, ProfileType
from src.cm_common.errors import InternalError
from src.cm_ledger.domain.models import PayableJob

# ---------------------------------------------------------------------------
# SQL: locking reads
# ---------------------------------------------------------------------------

_LOCK_UNPAID_JOB_SQL = text("""
    SELECT j.id, j.price, j.contract_id, c.client_id, c.contractor_id
    FROM jobs AS j
    JOIN contracts AS c ON c.id = j.contract_id
    WHERE j.id = :job_id AND j.paid = FALSE
    FOR UPDATE OF j
""")

# Lock in primary-key order so two transfers between the same pair cannot deadlock
_LOCK_PROFILE_PAIR_SQL = text("""
    SELECT id, balance
    FROM profiles
    WHERE id IN (:first_id, :second_id)
    ORDER BY id
    FOR UPDATE
""")

_LOCK_CLIENT_SQL = text("""
    SELECT id, balance
    FROM profiles
    WHERE id = :client_id AND type = :client_type
    FOR UPDATE
""")

_OUTSTANDING_WORK_SQL = text("""
    SELECT COALESCE(SUM(j.price), 0) AS total
    FROM jobs AS j
    JOIN contracts AS c ON c.id = j.contract_id
    WHERE c.client_id = :client_id
      AND c.status = :in_progress
      AND j.paid = FALSE
""")

# ---------------------------------------------------------------------------
# SQL: mutations
# ---------------------------------------------------------------------------

_DEBIT_SQL = text("""
    UPDATE profiles
    SET balance = balance - :amount
    WHERE id = :profile_id AND balance >= :amount
    RETURNING balance
""")

_CREDIT_SQL = text("""
    UPDATE profiles
    SET balance = balance + :amount
    WHERE id = :profile_id
    RETURNING balance
""")

_MARK_JOB_PAID_SQL = text("""
    UPDATE jobs
    SET paid = TRUE,
        payment_date = :paid_at
    WHERE id = :job_id AND paid = FALSE
    RETURNING id
""")


class LedgerRepository:
    """Concrete repository — balance checks and writes are atomic at the SQL level."""

    async def lock_unpaid_job(
        self, db: AsyncSession, job_id: int
    ) -> PayableJob | None:
        result = await db.execute(_LOCK_UNPAID_JOB_SQL, {"job_id": job_id})
        row = result.fetchone()
        if row is None:
            return None
        return PayableJob(
            id=row.id,
            price=row.price,
            contract_id=row.contract_id,
            client_id=row.client_id,
            contractor_id=row.contractor_id,
        )

    async def lock_profile_balances(
        self, db: AsyncSession, profile_ids: list[int]
    ) -> dict[int, int]:
        if len(profile_ids) != 2:
            raise ValueError(f"expected a pair of profile ids, got {profile_ids}")
        first_id, second_id = sorted(profile_ids)
        result = await db.execute(
            _LOCK_PROFILE_PAIR_SQL, {"first_id": first_id, "second_id": second_id}
        )
        return {row.id: row.balance for row in result.fetchall()}

    async def lock_client_balance(
        self, db: AsyncSession, client_id: int
    ) -> int | None:
        result = await db.execute(
            _LOCK_CLIENT_SQL,
            {"client_id": client_id, "client_type": ProfileType.CLIENT.value},
        )
        row = result.fetchone()
        return row.balance if row else None

    async def get_outstanding_work_total(
        self, db: AsyncSession, client_id: int
    ) -> int:
        result = await db.execute(
            _OUTSTANDING_WORK_SQL,
            {"client_id": client_id, "in_progress": ContractStatus.IN_PROGRESS.value},
        )
        row = result.fetchone()
        return int(row.total) if row else 0

    async def debit_balance(
        self, db: AsyncSession, profile_id: int, amount: int
    ) -> int | None:
        """Returns the new balance, or None if the balance is below `amount`."""
        result = await db.execute(_DEBIT_SQL, {"profile_id": profile_id, "amount": amount})
        row = result.fetchone()
        return row.balance if row else None

    async def credit_balance(
        self, db: AsyncSession, profile_id: int, amount: int
    ) -> int:
        result = await db.execute(_CREDIT_SQL, {"profile_id": profile_id, "amount": amount})
        row = result.fetchone()
        if row is None:
            raise InternalError(f"Profile {profile_id} vanished while locked")
        return row.balance

    async def mark_job_paid(
        self, db: AsyncSession, job_id: int, paid_at: datetime
    ) -> bool:
        result = await db.execute(_MARK_JOB_PAID_SQL, {"job_id": job_id, "paid_at": paid_at})
        return result.fetchone() is not None
