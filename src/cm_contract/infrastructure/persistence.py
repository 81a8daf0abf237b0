"""ContractRepository — concrete implementation of ContractRepositoryProtocol.

All queries are read-only raw text() SQL. Every query is scoped to rows where
the given profile is the contract's client or contractor.
"""

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.cm_common.enums import ContractStatus
from src.cm_contract.domain.models import Contract, Job

# ---------------------------------------------------------------------------
# SQL
# ---------------------------------------------------------------------------

_LIST_ACTIVE_CONTRACTS_SQL = text("""
    SELECT id, terms, status, client_id, contractor_id, created_at, updated_at
    FROM contracts
    WHERE (client_id = :profile_id OR contractor_id = :profile_id)
      AND status <> :terminated
    ORDER BY id
""")

_GET_CONTRACT_SQL = text("""
    SELECT id, terms, status, client_id, contractor_id, created_at, updated_at
    FROM contracts
    WHERE id = :contract_id
      AND (client_id = :profile_id OR contractor_id = :profile_id)
""")

_LIST_UNPAID_JOBS_SQL = text("""
    SELECT j.id, j.description, j.price, j.paid, j.payment_date, j.contract_id,
           j.created_at, j.updated_at
    FROM jobs AS j
    JOIN contracts AS c ON c.id = j.contract_id
    WHERE j.paid = FALSE
      AND c.status = :in_progress
      AND (c.client_id = :profile_id OR c.contractor_id = :profile_id)
    ORDER BY j.id
""")

# ---------------------------------------------------------------------------
# Row mappers
# ---------------------------------------------------------------------------


def _row_to_contract(row: object) -> Contract:
    return Contract(
        id=row.id,  # type: ignore[attr-defined]
        terms=row.terms,  # type: ignore[attr-defined]
        status=row.status,  # type: ignore[attr-defined]
        client_id=row.client_id,  # type: ignore[attr-defined]
        contractor_id=row.contractor_id,  # type: ignore[attr-defined]
        created_at=row.created_at,  # type: ignore[attr-defined]
        updated_at=row.updated_at,  # type: ignore[attr-defined]
    )


def _row_to_job(row: object) -> Job:
    return Job(
        id=row.id,  # type: ignore[attr-defined]
        description=row.description,  # type: ignore[attr-defined]
        price=row.price,  # type: ignore[attr-defined]
        paid=row.paid,  # type: ignore[attr-defined]
        contract_id=row.contract_id,  # type: ignore[attr-defined]
        payment_date=row.payment_date,  # type: ignore[attr-defined]
        created_at=row.created_at,  # type: ignore[attr-defined]
        updated_at=row.updated_at,  # type: ignore[attr-defined]
    )


# ---------------------------------------------------------------------------
# Repository
# ---------------------------------------------------------------------------

class ContractRepository:
    """Concrete repository — all operations are read-only SQL queries."""

    async def list_active_contracts_for_party(
        self, db: AsyncSession, profile_id: int
    ) -> list[Contract]:
        result = await db.execute(
            _LIST_ACTIVE_CONTRACTS_SQL,
            {"profile_id": profile_id, "terminated": ContractStatus.TERMINATED.value},
        )
        return [_row_to_contract(row) for row in result.fetchall()]

    async def get_contract_for_party(
        self, db: AsyncSession, profile_id: int, contract_id: int
    ) -> Contract | None:
        result = await db.execute(
            _GET_CONTRACT_SQL, {"profile_id": profile_id, "contract_id": contract_id}
        )
        row = result.fetchone()
        return _row_to_contract(row) if row else None

    async def list_unpaid_jobs_for_party(
        self, db: AsyncSession, profile_id: int
    ) -> list[Job]:
        result = await db.execute(
            _LIST_UNPAID_JOBS_SQL,
            {"profile_id": profile_id, "in_progress": ContractStatus.IN_PROGRESS.value},
        )
        return [_row_to_job(row) for row in result.fetchall()]
