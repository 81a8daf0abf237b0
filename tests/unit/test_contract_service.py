"""Unit tests for ContractApplicationService using a mock repository."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.cm_common.errors import ContractNotFoundError
from src.cm_contract.application.schemas import (
    ContractItem,
    ContractListResponse,
    JobListResponse,
)
from src.cm_contract.application.service import ContractApplicationService
from src.cm_contract.domain.models import Contract, Job


def _make_contract(contract_id: int = 1, status: str = "in_progress") -> Contract:
    return Contract(
        id=contract_id,
        terms="bla bla bla",
        status=status,
        client_id=1,
        contractor_id=5,
    )


def _make_job(job_id: int = 1, price: int = 20100) -> Job:
    return Job(id=job_id, description="work", price=price, paid=False, contract_id=1)


class TestListContracts:
    async def test_returns_caller_contracts(self) -> None:
        mock_repo = AsyncMock()
        mock_repo.list_active_contracts_for_party.return_value = [
            _make_contract(1),
            _make_contract(2, "new"),
        ]
        svc = ContractApplicationService(repo=mock_repo)

        result = await svc.list_contracts(MagicMock(), 1)

        assert isinstance(result, ContractListResponse)
        assert result.total == 2
        assert [c.id for c in result.items] == [1, 2]
        mock_repo.list_active_contracts_for_party.assert_awaited_once()

    async def test_empty_is_not_an_error(self) -> None:
        mock_repo = AsyncMock()
        mock_repo.list_active_contracts_for_party.return_value = []
        svc = ContractApplicationService(repo=mock_repo)

        result = await svc.list_contracts(MagicMock(), 1)

        assert result.items == []
        assert result.total == 0


class TestGetContract:
    async def test_returns_visible_contract(self) -> None:
        mock_repo = AsyncMock()
        mock_repo.get_contract_for_party.return_value = _make_contract(3)
        svc = ContractApplicationService(repo=mock_repo)

        result = await svc.get_contract(MagicMock(), 1, 3)

        assert isinstance(result, ContractItem)
        assert result.id == 3
        assert result.client_id == 1

    async def test_foreign_contract_is_not_found(self) -> None:
        mock_repo = AsyncMock()
        mock_repo.get_contract_for_party.return_value = None
        svc = ContractApplicationService(repo=mock_repo)

        with pytest.raises(ContractNotFoundError) as exc_info:
            await svc.get_contract(MagicMock(), 7, 3)
        assert exc_info.value.http_status == 404

    async def test_id_outside_serial_range_is_not_found(self) -> None:
        mock_repo = AsyncMock()
        svc = ContractApplicationService(repo=mock_repo)

        with pytest.raises(ContractNotFoundError):
            await svc.get_contract(MagicMock(), 1, 2_147_483_648)
        mock_repo.get_contract_for_party.assert_not_awaited()


class TestListUnpaidJobs:
    async def test_returns_jobs_with_display_price(self) -> None:
        mock_repo = AsyncMock()
        mock_repo.list_unpaid_jobs_for_party.return_value = [_make_job(1), _make_job(2, 121)]
        svc = ContractApplicationService(repo=mock_repo)

        result = await svc.list_unpaid_jobs(MagicMock(), 1)

        assert isinstance(result, JobListResponse)
        assert result.total == 2
        assert result.items[0].price_cents == 20100
        assert result.items[0].price_display == "$201.00"
        assert result.items[1].paid is False
        assert result.items[1].payment_date is None


class TestContractModel:
    def test_job_item_serializes_payment_date(self) -> None:
        from src.cm_contract.application.schemas import JobItem

        paid_at = datetime(2026, 8, 15, 19, 11, tzinfo=UTC)
        job = Job(id=1, description="w", price=5, paid=True, contract_id=1, payment_date=paid_at)
        assert JobItem.from_domain(job).payment_date == paid_at.isoformat()
