"""LedgerApplicationService — job payment and client deposit.

Each operation is one transaction: lock the rows involved, re-read balances,
check, write, commit. Any failure rolls the whole transaction back. Transient
store failures retry the operation from scratch (see src/cm_common/retry.py).
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from config.settings import settings
from src.cm_common.datetime_utils import utc_now
from src.cm_common.enums import ProfileType
from src.cm_common.errors import (
    ClientNotFoundError,
    ContractorNotFoundError,
    DepositLimitExceededError,
    DepositProfileNotFoundError,
    InsufficientFundsError,
    InternalError,
    InvalidAmountError,
    JobNotFoundError,
    NotContractClientError,
)
from src.cm_common.ids import is_serial_id
from src.cm_common.retry import run_with_retry
from src.cm_ledger.application.schemas import DepositResponse, PaymentResponse
from src.cm_ledger.domain.repository import LedgerRepositoryProtocol
from src.cm_ledger.infrastructure.persistence import LedgerRepository
from src.cm_profile.domain.models import Profile

logger = logging.getLogger("cm.ledger")


class LedgerApplicationService:
    def __init__(
        self,
        repo: LedgerRepositoryProtocol | None = None,
        *,
        max_attempts: int | None = None,
        retry_backoff_ms: int | None = None,
        require_contract_client: bool | None = None,
    ) -> None:
        self._repo: LedgerRepositoryProtocol = repo or LedgerRepository()
        self._max_attempts = (
            max_attempts if max_attempts is not None else settings.LEDGER_MAX_ATTEMPTS
        )
        self._retry_backoff_ms = (
            retry_backoff_ms if retry_backoff_ms is not None else settings.LEDGER_RETRY_BACKOFF_MS
        )
        self._require_contract_client = (
            require_contract_client
            if require_contract_client is not None
            else settings.PAY_REQUIRES_CONTRACT_CLIENT
        )

    # ------------------------------------------------------------------
    # Pay job
    # ------------------------------------------------------------------

    async def pay_job(self, db: AsyncSession, caller: Profile, job_id: int) -> PaymentResponse:
        """Move job.price from the client's balance to the contractor's and mark the job paid."""
        if not is_serial_id(job_id):
            raise JobNotFoundError()
        return await run_with_retry(
            lambda: self._pay_job_once(db, caller, job_id),
            attempts=self._max_attempts,
            backoff_ms=self._retry_backoff_ms,
            name="pay_job",
        )

    async def _pay_job_once(
        self, db: AsyncSession, caller: Profile, job_id: int
    ) -> PaymentResponse:
        try:
            result = await self._settle_job(db, caller, job_id)
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        logger.info(
            "job %d paid: %d cents, caller=%d", job_id, result.paid_cents, caller.id
        )
        return result

    async def _settle_job(
        self, db: AsyncSession, caller: Profile, job_id: int
    ) -> PaymentResponse:
        job = await self._repo.lock_unpaid_job(db, job_id)
        if job is None:
            raise JobNotFoundError()

        if (
            self._require_contract_client
            and caller.type != ProfileType.ADMIN
            and caller.id != job.client_id
        ):
            raise NotContractClientError()

        balances = await self._repo.lock_profile_balances(
            db, [job.client_id, job.contractor_id]
        )
        if job.client_id not in balances:
            raise ClientNotFoundError()
        if job.contractor_id not in balances:
            raise ContractorNotFoundError()

        client_balance = balances[job.client_id]
        if client_balance < job.price:
            raise InsufficientFundsError(job.price, client_balance)

        if await self._repo.debit_balance(db, job.client_id, job.price) is None:
            raise InsufficientFundsError(job.price, client_balance)
        await self._repo.credit_balance(db, job.contractor_id, job.price)

        paid_at = utc_now()
        if not await self._repo.mark_job_paid(db, job.id, paid_at):
            raise InternalError(f"Job {job.id} was paid while locked")

        return PaymentResponse.from_result(job.id, job.price, paid_at)

    # ------------------------------------------------------------------
    # Deposit
    # ------------------------------------------------------------------

    async def deposit(self, db: AsyncSession, client_id: int, amount: int) -> DepositResponse:
        """Credit a client's balance, capped by the client's outstanding unpaid work."""
        if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
            raise InvalidAmountError()
        if not is_serial_id(client_id):
            raise DepositProfileNotFoundError()
        return await run_with_retry(
            lambda: self._deposit_once(db, client_id, amount),
            attempts=self._max_attempts,
            backoff_ms=self._retry_backoff_ms,
            name="deposit",
        )

    async def _deposit_once(
        self, db: AsyncSession, client_id: int, amount: int
    ) -> DepositResponse:
        try:
            result = await self._credit_within_ceiling(db, client_id, amount)
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        logger.info(
            "client %d deposited %d cents (ceiling %d)",
            client_id,
            amount,
            result.deposit_ceiling_cents,
        )
        return result

    async def _credit_within_ceiling(
        self, db: AsyncSession, client_id: int, amount: int
    ) -> DepositResponse:
        # Lock first: the ceiling must be computed against the same state the credit lands on
        if await self._repo.lock_client_balance(db, client_id) is None:
            raise DepositProfileNotFoundError()

        ceiling = await self._repo.get_outstanding_work_total(db, client_id)
        if amount > ceiling:
            raise DepositLimitExceededError(amount, ceiling)

        balance = await self._repo.credit_balance(db, client_id, amount)
        return DepositResponse.from_result(client_id, balance, amount, ceiling)
