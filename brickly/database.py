from contextlib import contextmanager
from datetime import datetime, timezone
from uuid import uuid4

from flask import current_app


def new_id() -> str:
    return str(uuid4())


def utcnow() -> datetime:
    # naive UTC; every DateTime column is timezone-less
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_cents(amount) -> int:
    return int(round(amount * 100))


def from_cents(cents):
    if cents is None:
        return None
    return cents / 100.0


@contextmanager
def atomic(session):
    """
    Commit everything done inside the block as one unit of work.
    Any exception rolls the whole unit back and is re-raised to the caller.
    """
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        current_app.logger.debug("Transaction rolled back", exc_info=True)
        raise
