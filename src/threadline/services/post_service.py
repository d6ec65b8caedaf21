"""Post store: creation, lookup, paging and the vote ledger."""
from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass, field

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from threadline.db.dialect import insert_for
from threadline.models.post import Post
from threadline.models.vote import VOTE_DOWN, VOTE_UP, PostVote
from threadline.services.errors import (
    NotFoundError,
    PersistenceError,
    ValidationError,
    parse_record_id,
    persistence_guard,
    require_fields,
)
from threadline.services.scoring import popularity_expression
from threadline.services.user_service import UserService

__all__ = ["Ledger", "PostPage", "PostStore", "SORT_MODES", "VOTE_TYPES"]

logger = logging.getLogger(__name__)

SORT_MODES: tuple[str, ...] = ("newest", "popularity")
VOTE_TYPES: dict[str, int] = {"upvote": VOTE_UP, "downvote": VOTE_DOWN}


@dataclass
class Ledger:
    """Upvoter and downvoter identities of one post."""

    upvoters: list[str] = field(default_factory=list)
    downvoters: list[str] = field(default_factory=list)


@dataclass
class PostPage:
    """One page of posts plus the figures needed to render pagination."""

    items: list[Post]
    current_page: int
    total_pages: int
    total_count: int


class PostStore:
    """Owns post rows and their vote ledgers."""

    def __init__(self, session: Session, users: UserService | None = None) -> None:
        self.session = session
        self.users = users or UserService(session)

    def create(
        self,
        *,
        author_name: str | None,
        author_email: str | None,
        title: str | None,
        description: str | None,
        tag: str | None,
        author_image: str | None = None,
    ) -> Post:
        """Insert a new post with an empty ledger.

        The author's post counter is bumped afterwards on a best-effort basis:
        a failure there is logged and does not undo the post.

        Raises:
            ValidationError: If a required field is missing or blank.
        """
        require_fields(
            author_name=author_name,
            author_email=author_email,
            title=title,
            description=description,
            tag=tag,
        )
        post = Post(
            author_name=author_name,
            author_email=author_email,
            author_image=author_image or "",
            title=title,
            description=description,
            tag=tag,
        )
        with persistence_guard(self.session, "create post", logger):
            self.session.add(post)
            self.session.commit()
            self.session.refresh(post)
        logger.info("Created post %s by %s", post.id, author_email)

        try:
            self.users.increment_post_count(author_email)
        except PersistenceError:
            logger.warning(
                "Post %s was created but the post counter of %s was not updated",
                post.id,
                author_email,
            )
        return post

    def get_by_id(self, post_id: str | int) -> Post:
        """Return a post by identifier.

        Raises:
            InvalidIdError: If ``post_id`` is malformed.
            NotFoundError: If no post has that id.
        """
        pid = parse_record_id(post_id, "post")
        with persistence_guard(self.session, "load post", logger):
            post = self.session.get(Post, pid)
        if post is None:
            raise NotFoundError("Post not found")
        return post

    def get_page(self, page: int, page_size: int, sort_mode: str = "newest") -> PostPage:
        """Return one page of posts ordered by ``sort_mode``.

        ``total_count`` counts every post, independent of the page requested.
        Pages past the end come back empty with valid totals.
        """
        if page < 1 or page_size < 1:
            raise ValidationError("page and limit must be positive integers")
        if sort_mode not in SORT_MODES:
            raise ValidationError(f"sortBy must be one of: {', '.join(SORT_MODES)}")

        if sort_mode == "popularity":
            order_by = (
                popularity_expression(Post.id).desc(),
                Post.created_at.desc(),
                Post.id.desc(),
            )
        else:
            order_by = (Post.created_at.desc(), Post.id.desc())

        offset = (page - 1) * page_size
        with persistence_guard(self.session, "list posts", logger):
            total_count = self.session.scalar(select(func.count()).select_from(Post)) or 0
            # Past the last page; also keeps huge offsets out of the driver.
            if offset >= total_count:
                items = []
            else:
                items = self.session.scalars(
                    select(Post).order_by(*order_by).offset(offset).limit(page_size)
                ).all()

        return PostPage(
            items=list(items),
            current_page=page,
            total_pages=math.ceil(total_count / page_size),
            total_count=total_count,
        )

    def ledgers_for(self, post_ids: Iterable[int]) -> dict[int, Ledger]:
        """Return the vote ledger of every requested post (empty when unvoted)."""
        ids = list(post_ids)
        ledgers = {pid: Ledger() for pid in ids}
        if not ids:
            return ledgers
        with persistence_guard(self.session, "load vote ledgers", logger):
            rows = self.session.execute(
                select(PostVote.post_id, PostVote.voter_email, PostVote.direction)
                .where(PostVote.post_id.in_(ids))
                .order_by(PostVote.voter_email)
            ).all()
        for post_id, voter, direction in rows:
            target = ledgers[post_id].upvoters if direction == VOTE_UP else ledgers[post_id].downvoters
            target.append(voter)
        return ledgers

    def ledger_for(self, post_id: int) -> Ledger:
        """Return the vote ledger of a single post."""
        return self.ledgers_for([post_id])[post_id]

    def toggle_vote(self, post_id: str | int, voter: str, vote_type: str | None) -> Post:
        """Toggle ``voter``'s ``vote_type`` vote on a post.

        A matching vote is retracted; otherwise the vote is recorded, replacing
        any opposite vote. Both branches are conditional statements inside one
        transaction, so the ledger is never rewritten from a stale read and the
        voter never ends up in both sets.

        Raises:
            ValidationError: If ``vote_type`` is not ``upvote`` or ``downvote``.
            NotFoundError: If the post does not exist.
        """
        direction = VOTE_TYPES.get(vote_type or "")
        if direction is None:
            raise ValidationError("Invalid vote type")
        require_fields(voter=voter)
        post = self.get_by_id(post_id)

        with persistence_guard(self.session, "toggle vote", logger):
            retracted = self.session.execute(
                delete(PostVote)
                .where(
                    PostVote.post_id == post.id,
                    PostVote.voter_email == voter,
                    PostVote.direction == direction,
                )
                .execution_options(synchronize_session=False)
            ).rowcount
            if not retracted:
                stmt = insert_for(self.session, PostVote).values(
                    post_id=post.id,
                    voter_email=voter,
                    direction=direction,
                )
                self.session.execute(
                    stmt.on_conflict_do_update(
                        index_elements=[PostVote.post_id, PostVote.voter_email],
                        set_={"direction": stmt.excluded.direction},
                    )
                )
            self.session.commit()

        logger.debug(
            "Vote %s on post %s by %s %s",
            vote_type,
            post.id,
            voter,
            "retracted" if retracted else "recorded",
        )
        return post
