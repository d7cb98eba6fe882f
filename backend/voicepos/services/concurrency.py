# Overview: Serialization point and the commit helper for store mutations.

from __future__ import annotations

import threading
import time
from functools import wraps

from sqlalchemy.exc import OperationalError
from sqlalchemy.orm.exc import StaleDataError

from ..extensions import db

# One mutation at a time per process. Reentrant so a serialized
# function may call another one (e.g. seeding inside a reset).
_mutation_lock = threading.RLock()

# Lock contention on the store; the whole unit of work is safe to replay.
RETRYABLE_ERRORS = (OperationalError, StaleDataError)


def serialized(func):
    """Run func while holding the store's mutation lock."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        with _mutation_lock:
            return func(*args, **kwargs)
    return wrapper


def commit_unit_of_work(stage, *, attempts: int = 3, backoff_base: float = 0.05):
    """
    Run stage() and commit what it staged, as one unit of work.

    Any failure rolls the session back before the exception leaves, so a
    rejected utterance never leaves half-applied balances or quantities
    behind. Only RETRYABLE_ERRORS are replayed; everything else propagates
    after the first rollback.

    Returns whatever stage() returned.
    """
    for attempt in range(attempts):
        try:
            result = stage()
            db.session.commit()
            return result
        except RETRYABLE_ERRORS:
            db.session.rollback()
            if attempt >= attempts - 1:
                raise
            time.sleep(backoff_base * (2 ** attempt))
        except Exception:
            db.session.rollback()
            raise
