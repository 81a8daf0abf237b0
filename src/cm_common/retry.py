"""Bounded retry for write transactions that hit a transient store failure.

The wrapped operation must own its whole transaction (re-read, check, write,
commit) so that a retry starts from scratch against current balances.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from sqlalchemy.exc import DBAPIError, OperationalError

from src.cm_common.errors import StoreUnavailableError

logger = logging.getLogger("cm.retry")

T = TypeVar("T")

# serialization_failure, deadlock_detected
_TRANSIENT_SQLSTATES = frozenset({"40001", "40P01"})


def is_transient(exc: BaseException) -> bool:
    """True if a DB error is safe to retry (no partial effect survives rollback)."""
    if isinstance(exc, OperationalError):
        return True
    if isinstance(exc, DBAPIError):
        if exc.connection_invalidated:
            return True
        orig = exc.orig
        sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
        return sqlstate in _TRANSIENT_SQLSTATES
    return False


async def run_with_retry(
    operation: Callable[[], Awaitable[T]],
    *,
    attempts: int,
    backoff_ms: int,
    name: str,
) -> T:
    """Run `operation` up to `attempts` times while it fails transiently.

    Non-transient errors propagate on the first occurrence. When every attempt
    fails transiently, StoreUnavailableError is raised from the last failure.
    """
    for attempt in range(1, attempts + 1):
        try:
            return await operation()
        except DBAPIError as exc:
            if not is_transient(exc):
                raise
            if attempt == attempts:
                logger.error("%s: store unavailable after %d attempts", name, attempts)
                raise StoreUnavailableError() from exc
            logger.warning(
                "%s: transient store failure (attempt %d/%d): %s",
                name,
                attempt,
                attempts,
                exc.__class__.__name__,
            )
            await asyncio.sleep(backoff_ms * attempt / 1000)
    raise StoreUnavailableError()
