# src/threadline/models/vote.py
"""Models capturing voting interactions on posts."""

from sqlalchemy import (
    CheckConstraint,
    ForeignKey,
    Index,
    Integer,
    SmallInteger,
    String,
)
from sqlalchemy.orm import Mapped, mapped_column

from threadline.db.session import Base

VOTE_UP = 1
VOTE_DOWN = -1


class PostVote(Base):
    """One voter's entry in a post's vote ledger.

    The rows with ``direction = 1`` form the post's upvoters and the rows with
    ``direction = -1`` its downvoters.
    """

    __tablename__ = "post_vote"
    __table_args__ = (
        CheckConstraint("direction IN (1, -1)", name="ck_post_vote_direction"),
        Index("ix_post_vote_post_id", "post_id"),
    )

    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("post.id", ondelete="CASCADE"),
        primary_key=True,
    )

    # Composite primary key keeps a voter in at most one of the two sets.
    voter_email: Mapped[str] = mapped_column(String(320), primary_key=True)

    # 1 = upvote, -1 = downvote.
    direction: Mapped[int] = mapped_column(SmallInteger, nullable=False)
