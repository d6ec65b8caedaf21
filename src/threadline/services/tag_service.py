"""Tag catalog: default seeding and listing."""
from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from threadline.models.tag import Tag
from threadline.services.errors import persistence_guard

__all__ = ["DEFAULT_TAGS", "TagService"]

logger = logging.getLogger(__name__)

DEFAULT_TAGS: tuple[str, ...] = (
    "fix", "solve", "confusing", "bug", "stack", "efficient",
    "code", "refresh", "errors", "time", "loop", "beautiful",
    "quick", "slow", "crash", "render",
)


class TagService:
    """Read access to the tag catalog plus one-time seeding."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def seed_defaults(self) -> int:
        """Insert :data:`DEFAULT_TAGS` when the catalog is empty.

        Returns:
            Number of tags inserted (0 when the catalog was already populated).
        """
        with persistence_guard(self.session, "seed default tags", logger):
            existing = self.session.scalar(select(func.count()).select_from(Tag)) or 0
            if existing:
                return 0
            self.session.add_all(Tag(name=name) for name in DEFAULT_TAGS)
            self.session.commit()
        logger.info("Inserted %d default tags", len(DEFAULT_TAGS))
        return len(DEFAULT_TAGS)

    def list_all(self) -> Sequence[Tag]:
        """Return every tag in insertion order."""
        with persistence_guard(self.session, "list tags", logger):
            return self.session.scalars(select(Tag).order_by(Tag.id)).all()
