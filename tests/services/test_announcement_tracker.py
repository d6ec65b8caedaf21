# tests/services/test_announcement_tracker.py
"""Tests for announcement creation and read tracking."""

import pytest

from threadline.services import AnnouncementTracker
from threadline.services.errors import ValidationError


@pytest.fixture()
def tracker(db_session) -> AnnouncementTracker:
    return AnnouncementTracker(db_session)


def _publish(tracker: AnnouncementTracker, title: str):
    return tracker.create(
        author_name="Mod",
        author_email="mod@example.com",
        title=title,
        description=f"{title} details",
    )


def test_create_starts_with_empty_seen_by(tracker) -> None:
    announcement = _publish(tracker, "Maintenance")
    assert tracker.seen_by([announcement.id]) == {announcement.id: []}


def test_create_requires_fields(tracker) -> None:
    with pytest.raises(ValidationError):
        tracker.create(author_name="Mod", author_email="mod@example.com", title="", description="x")


def test_list_all_is_newest_first(tracker) -> None:
    _publish(tracker, "Old")
    _publish(tracker, "New")
    assert [item.title for item in tracker.list_all()] == ["New", "Old"]


def test_unseen_then_mark_all_seen(tracker) -> None:
    _publish(tracker, "One")
    _publish(tracker, "Two")

    assert tracker.unseen_count_for("u@example.com") == 2
    assert tracker.mark_all_seen_for("u@example.com") == 2
    assert tracker.unseen_count_for("u@example.com") == 0


def test_mark_all_seen_is_idempotent(tracker) -> None:
    first = _publish(tracker, "One")
    tracker.mark_all_seen_for("u@example.com")
    before = tracker.seen_by([first.id])

    assert tracker.mark_all_seen_for("u@example.com") == 0
    assert tracker.seen_by([first.id]) == before == {first.id: ["u@example.com"]}


def test_marking_is_per_identity(tracker) -> None:
    _publish(tracker, "One")
    tracker.mark_all_seen_for("u@example.com")
    assert tracker.unseen_count_for("v@example.com") == 1


def test_new_announcement_is_unseen_again(tracker) -> None:
    _publish(tracker, "One")
    tracker.mark_all_seen_for("u@example.com")
    _publish(tracker, "Two")
    assert tracker.unseen_count_for("u@example.com") == 1
    assert tracker.mark_all_seen_for("u@example.com") == 1


def test_mark_all_seen_with_no_announcements(tracker) -> None:
    assert tracker.mark_all_seen_for("u@example.com") == 0
    assert tracker.unseen_count_for("u@example.com") == 0
