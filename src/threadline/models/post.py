# src/threadline/models/post.py
"""SQLAlchemy models for posts and related attributes."""

from datetime import datetime

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from threadline.db.session import Base
from threadline.db.columns import created_at_column


class Post(Base):
    """Primary content entity produced by users.

    Votes live in ``post_vote`` and comments in ``comment``; neither is
    mirrored onto the post row, so popularity and comment counts are always
    derived at read time.
    """

    __tablename__ = "post"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    author_name: Mapped[str] = mapped_column(Text, nullable=False)
    author_email: Mapped[str] = mapped_column(String(320), nullable=False, index=True)
    author_image: Mapped[str] = mapped_column(Text, nullable=False, default="")

    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    # Free reference into the tag catalog; not a foreign key.
    tag: Mapped[str] = mapped_column(String(64), nullable=False, index=True)

    created_at: Mapped[datetime] = created_at_column(index=True)
