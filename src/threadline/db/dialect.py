# src/threadline/db/dialect.py
"""Dialect-aware statement builders for conflict-tolerant inserts."""

from __future__ import annotations

from typing import Any

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session


def insert_for(session: Session, model: Any) -> Any:
    """Return an ``INSERT`` construct supporting ``ON CONFLICT`` for the session's backend.

    Raises:
        NotImplementedError: If the bound database has no ``ON CONFLICT`` clause.
    """
    dialect = session.get_bind().dialect.name
    if dialect == "postgresql":
        return postgresql.insert(model)
    if dialect == "sqlite":
        return sqlite.insert(model)
    raise NotImplementedError(f"ON CONFLICT inserts are not supported on {dialect}")
