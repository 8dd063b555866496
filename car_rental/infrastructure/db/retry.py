"""
Retry utilities for write conflicts.

Retries a whole check-then-act unit when the persistence layer reports a
concurrent modification (optimistic lock conflict) or a transient
database deadlock. Domain rule violations are never retried.
"""

import asyncio
import logging
from collections.abc import Awaitable
from typing import Callable, TypeVar

from sqlalchemy.exc import DBAPIError, OperationalError

from car_rental.domain.errors import OptimisticLockError

logger = logging.getLogger(__name__)

T = TypeVar('T')

# MySQL error codes
MYSQL_DEADLOCK_ERROR = "1213"
MYSQL_LOCK_WAIT_TIMEOUT = "1205"


def is_deadlock_error(error: Exception) -> bool:
    """
    Check if an exception is a database deadlock or lock wait timeout.

    Args:
        error: The exception to check

    Returns:
        True if the error is a deadlock that should be retried
    """
    if isinstance(error, (OperationalError, DBAPIError)):
        error_str = str(error)
        return MYSQL_DEADLOCK_ERROR in error_str or MYSQL_LOCK_WAIT_TIMEOUT in error_str
    return False


def is_conflict_error(error: Exception) -> bool:
    return isinstance(error, OptimisticLockError) or is_deadlock_error(error)


async def retry_on_conflict(
    func: Callable[[], Awaitable[T]],
    max_attempts: int = 3,
    base_delay: float = 0.05,
) -> T:
    """
    Retry a function if it fails due to a write conflict.

    Uses exponential backoff: base_delay * (2 ** attempt)

    Args:
        func: The async function to execute (must re-read its snapshot)
        max_attempts: Maximum number of attempts (default: 3)
        base_delay: Base delay in seconds for exponential backoff (default: 0.05)

    Returns:
        The result of the function call

    Raises:
        The original exception if max attempts exceeded or non-conflict error
    """
    for attempt in range(max_attempts):
        try:
            return await func()
        except Exception as e:
            if not is_conflict_error(e):
                raise

            if attempt >= max_attempts - 1:
                logger.error(
                    "Write conflict persists after max retries",
                    extra={
                        "attempts": max_attempts,
                        "error": str(e),
                    }
                )
                raise

            delay = base_delay * (2 ** attempt)
            logger.warning(
                "Write conflict detected, retrying",
                extra={
                    "attempt": attempt + 1,
                    "max_attempts": max_attempts,
                    "retry_delay": delay,
                    "error": str(e),
                }
            )
            await asyncio.sleep(delay)

    raise RuntimeError("retry_on_conflict called with max_attempts < 1")
