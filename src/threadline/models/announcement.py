# src/threadline/models/announcement.py
"""SQLAlchemy models for announcements and their read receipts."""

from datetime import datetime

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from threadline.db.session import Base
from threadline.db.columns import created_at_column


class Announcement(Base):
    """Moderator-published notice that every user is expected to acknowledge."""

    __tablename__ = "announcement"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    author_name: Mapped[str] = mapped_column(Text, nullable=False)
    author_email: Mapped[str] = mapped_column(String(320), nullable=False)
    author_image: Mapped[str] = mapped_column(Text, nullable=False, default="")

    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = created_at_column(index=True)


class AnnouncementSeen(Base):
    """Read receipt: ``identity`` has acknowledged ``announcement_id``.

    The rows for one announcement form its seen-by set.
    """

    __tablename__ = "announcement_seen"

    announcement_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("announcement.id", ondelete="CASCADE"),
        primary_key=True,
    )
    identity: Mapped[str] = mapped_column(String(320), primary_key=True, index=True)
