# tests/v1/test_posts.py
"""Tests for post endpoints."""

import pytest
from fastapi import status

from threadline.services.comment_service import CommentStore


def _post_payload(**overrides):
    payload = {
        "title": "Segfault in my parser",
        "description": "It crashes on empty input.",
        "tag": "bug",
        "author_name": "Alice",
        "author_email": "alice@example.com",
        "author_image": "https://img.example.com/alice.png",
    }
    payload.update(overrides)
    return payload


def test_create_post(client, auth_token) -> None:
    """Test creating a post as the caller."""
    response = client.post("/api/v1/posts/", json=_post_payload(), headers=auth_token)
    assert response.status_code == status.HTTP_201_CREATED

    data = response.json()
    assert isinstance(data["id"], str)
    assert data["title"] == "Segfault in my parser"
    assert data["upvoters"] == []
    assert data["downvoters"] == []
    assert data["popularity_score"] == 0
    assert data["comment_count"] == 0


def test_create_post_increments_author_counter(client, auth_token, test_user, db_session) -> None:
    client.post("/api/v1/posts/", json=_post_payload(), headers=auth_token)
    db_session.refresh(test_user)
    assert test_user.posts == 1


def test_create_post_as_another_user(client, other_auth_token) -> None:
    """Test that author_email must match the token's email."""
    response = client.post("/api/v1/posts/", json=_post_payload(), headers=other_auth_token)
    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json()["detail"] == "Forbidden: Cannot post as another user"


@pytest.mark.parametrize("missing", ["title", "description", "tag", "author_name"])
def test_create_post_missing_field(client, auth_token, missing) -> None:
    payload = _post_payload()
    del payload[missing]
    response = client.post("/api/v1/posts/", json=payload, headers=auth_token)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert missing in response.json()["detail"]


def test_create_post_unauthenticated(client) -> None:
    response = client.post("/api/v1/posts/", json=_post_payload())
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["detail"] == "Unauthorized: No token provided"


def test_create_post_with_bad_token(client) -> None:
    response = client.post(
        "/api/v1/posts/",
        json=_post_payload(),
        headers={"Authorization": "Bearer not-a-jwt"},
    )
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["detail"] == "Unauthorized: Invalid token"


def test_list_posts_envelope(client, test_post) -> None:
    response = client.get("/api/v1/posts/")
    assert response.status_code == status.HTTP_200_OK

    data = response.json()
    assert data["current_page"] == 1
    assert data["total_pages"] == 1
    assert data["total_count"] == 1
    assert [item["id"] for item in data["items"]] == [str(test_post.id)]
    assert data["items"][0]["comment_count"] == 0


def test_list_posts_paginates(client, post_store, test_user) -> None:
    for i in range(5):
        post_store.create(
            author_name=test_user.name,
            author_email=test_user.email,
            title=f"Post {i}",
            description="body",
            tag="code",
        )
    response = client.get("/api/v1/posts/", params={"page": 3, "limit": 2})
    data = response.json()
    assert response.status_code == status.HTTP_200_OK
    assert data["total_count"] == 5
    assert data["total_pages"] == 3
    assert len(data["items"]) == 1


def test_list_posts_by_popularity(client, post_store, test_user) -> None:
    quiet = post_store.create(
        author_name="Alice", author_email=test_user.email, title="Quiet", description="x", tag="code"
    )
    loved = post_store.create(
        author_name="Alice", author_email=test_user.email, title="Loved", description="x", tag="code"
    )
    post_store.toggle_vote(quiet.id, "v@example.com", "downvote")
    post_store.toggle_vote(loved.id, "v@example.com", "upvote")

    response = client.get("/api/v1/posts/", params={"sortBy": "popularity"})
    titles = [item["title"] for item in response.json()["items"]]
    assert titles == ["Loved", "Quiet"]


@pytest.mark.parametrize(
    "params",
    [{"page": 0}, {"limit": 0}, {"sortBy": "hottest"}],
)
def test_list_posts_invalid_arguments(client, params) -> None:
    response = client.get("/api/v1/posts/", params=params)
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_get_post_with_comments(client, test_post, db_session) -> None:
    comments = CommentStore(db_session)
    comments.append(test_post.id, commenter_email="c@example.com", body="older")
    comments.append(test_post.id, commenter_email="d@example.com", body="newer")

    response = client.get(f"/api/v1/posts/{test_post.id}")
    assert response.status_code == status.HTTP_200_OK

    data = response.json()
    assert data["id"] == str(test_post.id)
    assert data["comment_count"] == 2
    assert [comment["body"] for comment in data["comments"]] == ["newer", "older"]
    assert all(comment["post_id"] == str(test_post.id) for comment in data["comments"])


def test_get_nonexistent_post(client) -> None:
    response = client.get("/api/v1/posts/99999")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "Post not found"


def test_get_post_invalid_id(client) -> None:
    response = client.get("/api/v1/posts/not-an-id")
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_list_posts_huge_page(client, test_post) -> None:
    response = client.get("/api/v1/posts/", params={"page": 10**20, "limit": 5})
    assert response.status_code == status.HTTP_200_OK

    data = response.json()
    assert data["items"] == []
    assert data["total_count"] == 1
    assert data["total_pages"] == 1


def test_missing_fields_reported_before_identity(client, auth_token) -> None:
    """Another user's email with missing fields is a 400, not a 403."""
    response = client.post(
        "/api/v1/posts/",
        json={"author_email": "bob@example.com", "author_name": "Bob"},
        headers=auth_token,
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "Missing required fields: title, description, tag"
