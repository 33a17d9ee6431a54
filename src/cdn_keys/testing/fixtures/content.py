"""Testing fixtures – fake_content_repository, recording_notifier, blog_scenario."""
from __future__ import annotations

import pytest


@pytest.fixture
def fake_content_repository():
    from cdn_keys.testing.fakes import InMemoryContentRepository
    return InMemoryContentRepository()


@pytest.fixture
def recording_notifier():
    from cdn_keys.testing.fakes import RecordingPurgeNotifier
    return RecordingPurgeNotifier()


@pytest.fixture
def blog_scenario():
    from cdn_keys.testing.fixtures.scenario import build_blog_scenario
    return build_blog_scenario()


__all__ = ["blog_scenario", "fake_content_repository", "recording_notifier"]
