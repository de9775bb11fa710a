"""Shared utilities for SQLAlchemy repositories."""

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import InterfaceError, OperationalError

from vidshare.domain.shared.exceptions import PersistenceUnavailableError


@contextmanager
def translate_connection_errors() -> Iterator[None]:
    """Re-raise driver connectivity failures as PersistenceUnavailableError."""
    try:
        yield
    except (OperationalError, InterfaceError) as e:
        raise PersistenceUnavailableError(details={"error": str(e.orig)}) from e
