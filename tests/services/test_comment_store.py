# tests/services/test_comment_store.py
"""Tests for the comment store."""

import pytest

from threadline.services import CommentStore
from threadline.services.errors import InvalidIdError, NotFoundError, ValidationError


@pytest.fixture()
def comment_store(db_session) -> CommentStore:
    return CommentStore(db_session)


def test_append_returns_comment_and_count(comment_store, test_post) -> None:
    comment, count = comment_store.append(
        test_post.id,
        commenter_email="x@example.com",
        commenter_name="Xavier",
        body="Increment the counter inside the loop.",
    )
    assert count == 1
    assert comment.post_id == test_post.id
    assert comment.post_title == test_post.title
    assert comment.commenter_email == "x@example.com"

    comments = comment_store.list_for_post(test_post.id)
    assert len(comments) == 1
    assert comments[0].commenter_email == "x@example.com"


def test_count_includes_every_comment(comment_store, test_post) -> None:
    for i in range(3):
        _, count = comment_store.append(test_post.id, commenter_email="x@example.com", body=f"#{i}")
    assert count == 3
    assert comment_store.counts_for([test_post.id]) == {test_post.id: 3}


def test_list_is_newest_first(comment_store, test_post) -> None:
    for body in ("first", "second", "third"):
        comment_store.append(test_post.id, commenter_email="x@example.com", body=body)
    bodies = [comment.body for comment in comment_store.list_for_post(test_post.id)]
    assert bodies == ["third", "second", "first"]


def test_list_for_post_without_comments(comment_store, test_post) -> None:
    assert comment_store.list_for_post(test_post.id) == []


def test_counts_for_posts_without_comments(comment_store, test_post) -> None:
    assert comment_store.counts_for([test_post.id, 12345]) == {test_post.id: 0, 12345: 0}


def test_append_to_missing_post(comment_store) -> None:
    with pytest.raises(NotFoundError):
        comment_store.append(99999, commenter_email="x@example.com", body="hello")


def test_append_requires_body(comment_store, test_post) -> None:
    with pytest.raises(ValidationError):
        comment_store.append(test_post.id, commenter_email="x@example.com", body="")


def test_append_rejects_malformed_post_id(comment_store) -> None:
    with pytest.raises(InvalidIdError):
        comment_store.append("not-an-id", commenter_email="x@example.com", body="hello")
