"""Announcement read-tracker.

Announcements are written once and then acknowledged by users. Each
acknowledgement is a row in ``announcement_seen`` keyed by
``(announcement_id, identity)``; the rows of one announcement are its
seen-by set.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable

from sqlalchemy import exists, func, literal, select
from sqlalchemy.orm import Session

from threadline.db.dialect import insert_for
from threadline.models.announcement import Announcement, AnnouncementSeen
from threadline.services.errors import persistence_guard, require_fields

__all__ = ["AnnouncementTracker"]

logger = logging.getLogger(__name__)


class AnnouncementTracker:
    """Creates announcements and tracks who has seen them."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(
        self,
        *,
        author_name: str | None,
        author_email: str | None,
        title: str | None,
        description: str | None,
        author_image: str | None = None,
    ) -> Announcement:
        """Store a new announcement with an empty seen-by set.

        Raises:
            ValidationError: If a required field is missing or blank.
        """
        require_fields(
            author_name=author_name,
            author_email=author_email,
            title=title,
            description=description,
        )
        announcement = Announcement(
            author_name=author_name,
            author_email=author_email,
            author_image=author_image or "",
            title=title,
            description=description,
        )
        with persistence_guard(self.session, "create announcement", logger):
            self.session.add(announcement)
            self.session.commit()
            self.session.refresh(announcement)
        logger.info("Announcement %s published by %s", announcement.id, author_email)
        return announcement

    def list_all(self) -> list[Announcement]:
        """Return every announcement, newest first."""
        with persistence_guard(self.session, "list announcements", logger):
            return list(
                self.session.scalars(
                    select(Announcement).order_by(
                        Announcement.created_at.desc(),
                        Announcement.id.desc(),
                    )
                )
            )

    def seen_by(self, announcement_ids: Iterable[int]) -> dict[int, list[str]]:
        """Return the seen-by set of each requested announcement."""
        ids = list(announcement_ids)
        seen: dict[int, list[str]] = {aid: [] for aid in ids}
        if not ids:
            return seen
        with persistence_guard(self.session, "load read receipts", logger):
            rows = self.session.execute(
                select(AnnouncementSeen.announcement_id, AnnouncementSeen.identity)
                .where(AnnouncementSeen.announcement_id.in_(ids))
                .order_by(AnnouncementSeen.identity)
            ).all()
        for announcement_id, identity in rows:
            seen[announcement_id].append(identity)
        return seen

    def unseen_count_for(self, identity: str) -> int:
        """Return how many announcements ``identity`` has not acknowledged."""
        already_seen = exists().where(
            AnnouncementSeen.announcement_id == Announcement.id,
            AnnouncementSeen.identity == identity,
        )
        with persistence_guard(self.session, "count unseen announcements", logger):
            return self.session.scalar(
                select(func.count()).select_from(Announcement).where(~already_seen)
            ) or 0

    def mark_all_seen_for(self, identity: str) -> int:
        """Record ``identity`` as having seen every announcement.

        Runs as one ``INSERT ... SELECT`` that skips receipts already present,
        so repeating the call changes nothing.

        Returns:
            Number of receipts newly recorded.
        """
        require_fields(identity=identity)
        already_seen = exists().where(
            AnnouncementSeen.announcement_id == Announcement.id,
            AnnouncementSeen.identity == identity,
        )
        pending = select(Announcement.id, literal(identity)).where(~already_seen)
        stmt = (
            insert_for(self.session, AnnouncementSeen)
            .from_select(["announcement_id", "identity"], pending)
            .on_conflict_do_nothing(index_elements=["announcement_id", "identity"])
        )
        with persistence_guard(self.session, "mark announcements seen", logger):
            inserted = self.session.execute(stmt).rowcount
            self.session.commit()
        logger.debug("Marked %d announcements seen for %s", inserted, identity)
        return inserted
