"""ContractApplicationService — caller-scoped views of contracts and jobs.

All methods are read-only; no commit/rollback needed. An empty result is a
valid answer, never an error.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from src.cm_common.errors import ContractNotFoundError
from src.cm_common.ids import is_serial_id
from src.cm_contract.application.schemas import (
    ContractItem,
    ContractListResponse,
    JobItem,
    JobListResponse,
)
from src.cm_contract.domain.repository import ContractRepositoryProtocol
from src.cm_contract.infrastructure.persistence import ContractRepository


class ContractApplicationService:
    def __init__(self, repo: ContractRepositoryProtocol | None = None) -> None:
        self._repo: ContractRepositoryProtocol = repo or ContractRepository()

    async def list_contracts(self, db: AsyncSession, caller_id: int) -> ContractListResponse:
        """Non-terminated contracts where the caller is client or contractor."""
        contracts = await self._repo.list_active_contracts_for_party(db, caller_id)
        items = [ContractItem.from_domain(c) for c in contracts]
        return ContractListResponse(items=items, total=len(items))

    async def get_contract(
        self, db: AsyncSession, caller_id: int, contract_id: int
    ) -> ContractItem:
        if not is_serial_id(contract_id):
            raise ContractNotFoundError()
        # A contract the caller is not party to is indistinguishable from a missing one
        contract = await self._repo.get_contract_for_party(db, caller_id, contract_id)
        if contract is None:
            raise ContractNotFoundError()
        return ContractItem.from_domain(contract)

    async def list_unpaid_jobs(self, db: AsyncSession, caller_id: int) -> JobListResponse:
        """Unpaid jobs on the caller's in_progress contracts."""
        jobs = await self._repo.list_unpaid_jobs_for_party(db, caller_id)
        items = [JobItem.from_domain(j) for j in jobs]
        return JobListResponse(items=items, total=len(items))
