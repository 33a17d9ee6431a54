"""Testing fakes – in-memory doubles for the collaborator ports."""
from cdn_keys.testing.fakes.content import InMemoryContentRepository
from cdn_keys.testing.fakes.notifier import RecordingPurgeNotifier

__all__ = ["InMemoryContentRepository", "RecordingPurgeNotifier"]
