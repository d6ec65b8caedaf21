"""Popularity scoring for posts.

Every read path that exposes a post derives its score and comment count
through :func:`score`; nothing here is persisted.
"""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass

from sqlalchemy import ColumnElement, func, select

from threadline.models.vote import PostVote


@dataclass(frozen=True)
class PostMetrics:
    """Read-time figures attached to a post."""

    popularity_score: int
    comment_count: int


def score(
    upvoters: Collection[str],
    downvoters: Collection[str],
    comment_count: int,
) -> PostMetrics:
    """Return the popularity score and comment count for one post."""
    return PostMetrics(
        popularity_score=len(upvoters) - len(downvoters),
        comment_count=comment_count,
    )


def popularity_expression(post_id_column: ColumnElement[int]) -> ColumnElement[int]:
    """Return a correlated SQL expression equal to ``score(...).popularity_score``.

    Only used to order pages before pagination; the values shown to clients
    still come from :func:`score`.
    """
    # direction is +1 or -1, so the sum is upvotes minus downvotes.
    net = func.coalesce(func.sum(PostVote.direction), 0)
    return (
        select(net)
        .where(PostVote.post_id == post_id_column)
        .correlate_except(PostVote)
        .scalar_subquery()
    )
