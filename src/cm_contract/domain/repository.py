"""Repository Protocol — dependency inversion for testability.

Unit tests inject a mock that conforms to this Protocol.
Infrastructure layer provides the real implementation.
"""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.cm_contract.domain.models import Contract, Job


class ContractRepositoryProtocol(Protocol):
    async def list_active_contracts_for_party(
        self, db: AsyncSession, profile_id: int
    ) -> list[Contract]: ...

    async def get_contract_for_party(
        self, db: AsyncSession, profile_id: int, contract_id: int
    ) -> Contract | None: ...

    async def list_unpaid_jobs_for_party(
        self, db: AsyncSession, profile_id: int
    ) -> list[Job]: ...
