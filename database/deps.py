"""FastAPI dependency providers.

`get_db_write` / `get_db_read` yield request-scoped sessions (reads may go
to a replica when READ_DATABASE_URL is set) and `get_ai_coach` hands out the
shared AI coach, which tests replace with one built around a fake client.
"""

from .database import get_read_session, get_write_session


def get_db_write():
    """Yield a write-capable DB session for FastAPI dependency injection."""
    yield from get_write_session()


def get_db_read():
    """Yield a read-only DB session for FastAPI dependency injection."""
    yield from get_read_session()


def get_ai_coach():
    from services.ai_coach import ai_coach
    return ai_coach
