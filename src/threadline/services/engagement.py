"""Engagement façade.

Composes the post store, comment store and popularity scorer so that every
read path that exposes a post attaches the same freshly derived figures.
"""
from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session

from threadline.models.comment import Comment
from threadline.models.post import Post
from threadline.services.comment_service import CommentStore
from threadline.services.post_service import Ledger, PostStore
from threadline.services.scoring import PostMetrics, score

__all__ = ["EngagementService", "PostPageView", "PostView"]


@dataclass
class PostView:
    """A post together with its ledger and read-time metrics."""

    post: Post
    ledger: Ledger
    metrics: PostMetrics


@dataclass
class PostPageView:
    """A page of decorated posts."""

    items: list[PostView]
    current_page: int
    total_pages: int
    total_count: int


class EngagementService:
    """Cross-store operations on posts, votes and comments."""

    def __init__(
        self,
        session: Session,
        posts: PostStore | None = None,
        comments: CommentStore | None = None,
    ) -> None:
        self.posts = posts or PostStore(session)
        self.comments = comments or CommentStore(session)

    def _decorate(self, posts: list[Post]) -> list[PostView]:
        ids = [post.id for post in posts]
        ledgers = self.posts.ledgers_for(ids)
        comment_counts = self.comments.counts_for(ids)
        views = []
        for post in posts:
            ledger = ledgers[post.id]
            views.append(
                PostView(
                    post=post,
                    ledger=ledger,
                    metrics=score(ledger.upvoters, ledger.downvoters, comment_counts[post.id]),
                )
            )
        return views

    def get_page(self, page: int, page_size: int, sort_mode: str = "newest") -> PostPageView:
        """Return a page of posts with comment counts and popularity."""
        result = self.posts.get_page(page, page_size, sort_mode)
        return PostPageView(
            items=self._decorate(result.items),
            current_page=result.current_page,
            total_pages=result.total_pages,
            total_count=result.total_count,
        )

    def get_post(self, post_id: str | int) -> tuple[PostView, list[Comment]]:
        """Return one decorated post and its comments (newest first)."""
        post = self.posts.get_by_id(post_id)
        (view,) = self._decorate([post])
        return view, self.comments.list_for_post(post.id)

    def toggle_vote(self, post_id: str | int, voter: str, vote_type: str | None) -> PostView:
        """Toggle the caller's vote and return the post with recomputed figures."""
        post = self.posts.toggle_vote(post_id, voter, vote_type)
        (view,) = self._decorate([post])
        return view

    def describe(self, post: Post) -> PostView:
        """Attach ledger and metrics to an already loaded post."""
        (view,) = self._decorate([post])
        return view
