"""Integration-test fixtures (requires a migrated PostgreSQL at DATABASE_URL).

Pre-condition: alembic upgrade head

All integration tests share a single event-loop so that the module-level
SQLAlchemy async engine pool (created at import time) remains valid across
the entire test session.
"""

import random
import uuid
from dataclasses import dataclass
from datetime import date

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import text

from src.cm_common.database import async_session_factory
from src.main import app

_INSERT_PROFILE_SQL = text("""
    INSERT INTO profiles (first_name, last_name, profession, balance, type)
    VALUES (:first_name, :last_name, :profession, :balance, :type)
    RETURNING id
""")

_INSERT_CONTRACT_SQL = text("""
    INSERT INTO contracts (terms, status, client_id, contractor_id)
    VALUES ('integration', :status, :client_id, :contractor_id)
    RETURNING id
""")

_INSERT_JOB_SQL = text("""
    INSERT INTO jobs (description, price, contract_id)
    VALUES ('integration', :price, :contract_id)
    RETURNING id
""")

_INSERT_PAID_JOB_SQL = text("""
    INSERT INTO jobs (description, price, contract_id, paid, payment_date)
    VALUES ('integration', :price, :contract_id, TRUE, :paid_at)
    RETURNING id
""")


@dataclass
class Marketplace:
    client_id: int
    contractor_id: int
    contract_id: int
    profession: str


@pytest_asyncio.fixture(loop_scope="session", scope="session")
async def client() -> AsyncClient:  # type: ignore[override]
    """Session-scoped async HTTP client — keeps the engine pool alive."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def _insert(sql, params) -> int:
    async with async_session_factory() as session:
        row = (await session.execute(sql, params)).fetchone()
        await session.commit()
        return int(row.id)


async def _add_job(contract_id: int, price: int) -> int:
    return await _insert(_INSERT_JOB_SQL, {"price": price, "contract_id": contract_id})


@pytest.fixture
def add_job():
    """Insert an unpaid job and return its id: `await add_job(contract_id, price)`."""
    return _add_job


@pytest_asyncio.fixture(loop_scope="session")
async def market() -> Marketplace:
    """Fresh client (balance 1000) and contractor on an in_progress contract."""
    profession = f"Tester-{uuid.uuid4().hex[:8]}"
    client_id = await _insert(
        _INSERT_PROFILE_SQL,
        {"first_name": "Int", "last_name": "Client", "profession": "Buyer",
         "balance": 1000, "type": "client"},
    )
    contractor_id = await _insert(
        _INSERT_PROFILE_SQL,
        {"first_name": "Int", "last_name": "Contractor", "profession": profession,
         "balance": 0, "type": "contractor"},
    )
    contract_id = await _insert(
        _INSERT_CONTRACT_SQL,
        {"status": "in_progress", "client_id": client_id, "contractor_id": contractor_id},
    )
    return Marketplace(client_id, contractor_id, contract_id, profession)


async def _add_profile(
    type_: str, profession: str, last_name: str = "Party", balance: int = 0
) -> int:
    return await _insert(
        _INSERT_PROFILE_SQL,
        {"first_name": "Int", "last_name": last_name, "profession": profession,
         "balance": balance, "type": type_},
    )


async def _add_contract(client_id: int, contractor_id: int) -> int:
    return await _insert(
        _INSERT_CONTRACT_SQL,
        {"status": "in_progress", "client_id": client_id, "contractor_id": contractor_id},
    )


async def _add_paid_job(contract_id: int, price: int, paid_at) -> int:
    return await _insert(
        _INSERT_PAID_JOB_SQL, {"price": price, "contract_id": contract_id, "paid_at": paid_at}
    )


@pytest.fixture
def add_profile():
    """Insert a profile and return its id: `await add_profile("client", "Buyer")`."""
    return _add_profile


@pytest.fixture
def add_contract():
    """Insert an in_progress contract and return its id."""
    return _add_contract


@pytest.fixture
def add_paid_job():
    """Insert a job already paid at `paid_at`: `await add_paid_job(contract_id, price, paid_at)`."""
    return _add_paid_job


@pytest.fixture
def report_day() -> date:
    """A far-future day no other test run is likely to have paid anything on."""
    return date(random.randint(3000, 9000), random.randint(1, 12), random.randint(1, 27))
