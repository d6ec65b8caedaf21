# src/threadline/models/comment.py
"""SQLAlchemy model for comments attached to posts."""

from datetime import datetime

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from threadline.db.session import Base
from threadline.db.columns import created_at_column


class Comment(Base):
    """Immutable comment referencing a post by id."""

    __tablename__ = "comment"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("post.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # Copied from the post when the comment is written.
    post_title: Mapped[str] = mapped_column(Text, nullable=False)

    body: Mapped[str] = mapped_column(Text, nullable=False)
    commenter_name: Mapped[str] = mapped_column(Text, nullable=False, default="")
    commenter_email: Mapped[str] = mapped_column(String(320), nullable=False)
    commenter_image: Mapped[str] = mapped_column(Text, nullable=False, default="")

    created_at: Mapped[datetime] = created_at_column()
