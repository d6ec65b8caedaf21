# src/threadline/db/columns.py
"""Column factories shared by the ORM models."""

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import DateTime
from sqlalchemy.orm import mapped_column


def created_at_column(*, index: bool = False) -> Any:
    """Non-null creation timestamp, stamped in UTC by the application on insert."""
    return mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(UTC),
        index=index,
    )
