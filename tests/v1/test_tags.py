# tests/v1/test_tags.py
"""Tests for the tag catalog."""

from fastapi import status

from threadline.services import TagService
from threadline.services.tag_service import DEFAULT_TAGS


def test_list_tags_empty(client) -> None:
    response = client.get("/api/v1/tags/")
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == []


def test_seeded_tags_are_listed(client, db_session) -> None:
    assert TagService(db_session).seed_defaults() == len(DEFAULT_TAGS)

    response = client.get("/api/v1/tags/")
    assert [tag["name"] for tag in response.json()] == list(DEFAULT_TAGS)


def test_seeding_twice_inserts_nothing(db_session) -> None:
    service = TagService(db_session)
    service.seed_defaults()
    assert service.seed_defaults() == 0
    assert len(service.list_all()) == len(DEFAULT_TAGS)
