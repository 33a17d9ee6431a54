"""Unit tests for change events and purge notifications."""

from __future__ import annotations

from cdn_keys.kernel.content import (
    Author,
    ChangeEvent,
    ChangeKind,
    ContentRepository,
    ContentState,
    Post,
    PurgeNotifier,
    SurrogateKeysCleared,
    Term,
)
from cdn_keys.testing.fakes import InMemoryContentRepository, RecordingPurgeNotifier


class TestChangeEvent:
    def test_kind_coerced_from_string(self) -> None:
        event = ChangeEvent(Post(1), "updated")  # type: ignore[arg-type]
        assert event.kind is ChangeKind.UPDATED

    def test_metadata_generated(self) -> None:
        event = ChangeEvent(Post(1), ChangeKind.CREATED)
        assert event.event_id
        assert event.occurred_at.tzinfo is not None

    def test_equality_ignores_metadata(self) -> None:
        a = ChangeEvent(Post(1), ChangeKind.UPDATED, before=ContentState(), after=ContentState())
        b = ChangeEvent(Post(1), ChangeKind.UPDATED, before=ContentState(), after=ContentState())
        assert a.event_id != b.event_id
        assert a == b

    def test_states_skips_missing(self) -> None:
        after = ContentState(author=Author(1))
        assert ChangeEvent(Post(1), ChangeKind.CREATED, after=after).states == (after,)
        assert ChangeEvent(Post(1), ChangeKind.UPDATED).states == ()

    def test_affected_normalised_to_tuple(self) -> None:
        event = ChangeEvent(Term("post_tag", 2), ChangeKind.DELETED, affected=[Post(1)])  # type: ignore[arg-type]
        assert event.affected == (Post(1),)


class TestSurrogateKeysCleared:
    def test_sorted_keys(self) -> None:
        event = ChangeEvent(Post(1), ChangeKind.UPDATED)
        notification = SurrogateKeysCleared(frozenset({"post-1", "author-1"}), event)
        assert notification.sorted_keys() == ["author-1", "post-1"]
        assert notification.source is event


class TestPorts:
    def test_fakes_satisfy_ports(self) -> None:
        assert isinstance(InMemoryContentRepository(), ContentRepository)
        assert isinstance(RecordingPurgeNotifier(), PurgeNotifier)
