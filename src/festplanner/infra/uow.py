"""
Unit of Work boundary for festplanner's durable state.

All writes to the key/value slots go through :func:`session`.
"""

from __future__ import annotations

import contextlib
from collections.abc import Generator

from sqlalchemy.orm import Session

from .db import get_sessionmaker


@contextlib.contextmanager
def session(db_url: str | None = None) -> Generator[Session, None, None]:
    """
    Database session context manager.

    Provides Unit of Work semantics:
    - Opens a DB session
    - Yields it for use
    - On success: commits the transaction
    - On exception: rolls back and re-raises the exception
    - Always closes the session

    Usage:
        with session() as db:
            db.add(some_object)
    """
    db = get_sessionmaker(db_url)()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
