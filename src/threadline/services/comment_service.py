"""Comment store: append-only comments referencing posts."""
from __future__ import annotations

import logging
from collections.abc import Iterable

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from threadline.models.comment import Comment
from threadline.models.post import Post
from threadline.services.errors import (
    NotFoundError,
    parse_record_id,
    persistence_guard,
    require_fields,
)

__all__ = ["CommentStore"]

logger = logging.getLogger(__name__)


class CommentStore:
    """Owns comment rows; posts are looked up by id, never by back-reference."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def append(
        self,
        post_id: str | int,
        *,
        commenter_email: str | None,
        body: str | None,
        commenter_name: str | None = None,
        commenter_image: str | None = None,
    ) -> tuple[Comment, int]:
        """Attach a comment to a post.

        The post title is copied onto the comment at this instant.

        Returns:
            The stored comment and the post's comment count, which includes it.

        Raises:
            InvalidIdError: If ``post_id`` is malformed.
            ValidationError: If the body or commenter email is missing.
            NotFoundError: If the post does not exist.
        """
        pid = parse_record_id(post_id, "post")
        require_fields(comment=body, commenter_email=commenter_email)
        with persistence_guard(self.session, "append comment", logger):
            title = self.session.scalar(select(Post.title).where(Post.id == pid))
            if title is None:
                raise NotFoundError("Post not found")
            comment = Comment(
                post_id=pid,
                post_title=title,
                body=body,
                commenter_name=commenter_name or "",
                commenter_email=commenter_email,
                commenter_image=commenter_image or "",
            )
            self.session.add(comment)
            self.session.commit()
            self.session.refresh(comment)
            count = self.count_for_post(pid)
        logger.info("Comment %s added to post %s by %s", comment.id, pid, commenter_email)
        return comment, count

    def list_for_post(self, post_id: str | int) -> list[Comment]:
        """Return a post's comments, newest first."""
        pid = parse_record_id(post_id, "post")
        with persistence_guard(self.session, "list comments", logger):
            return list(
                self.session.scalars(
                    select(Comment)
                    .where(Comment.post_id == pid)
                    .order_by(Comment.created_at.desc(), Comment.id.desc())
                )
            )

    def count_for_post(self, post_id: int) -> int:
        """Return how many comments reference ``post_id``."""
        return self.session.scalar(
            select(func.count()).select_from(Comment).where(Comment.post_id == post_id)
        ) or 0

    def counts_for(self, post_ids: Iterable[int]) -> dict[int, int]:
        """Return comment counts for many posts in one grouped query."""
        ids = list(post_ids)
        counts = dict.fromkeys(ids, 0)
        if not ids:
            return counts
        with persistence_guard(self.session, "count comments", logger):
            rows = self.session.execute(
                select(Comment.post_id, func.count())
                .where(Comment.post_id.in_(ids))
                .group_by(Comment.post_id)
            ).all()
        counts.update({post_id: total for post_id, total in rows})
        return counts
