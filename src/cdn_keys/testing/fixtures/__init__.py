"""Testing fixtures – pytest fixtures for the fakes and the blog scenario.

Load them from ``conftest.py``::

    pytest_plugins = ["cdn_keys.testing.fixtures"]
"""
from cdn_keys.testing.fixtures.content import (
    blog_scenario,
    fake_content_repository,
    recording_notifier,
)
from cdn_keys.testing.fixtures.scenario import BlogScenario, build_blog_scenario

__all__ = [
    "BlogScenario",
    "blog_scenario",
    "build_blog_scenario",
    "fake_content_repository",
    "recording_notifier",
]
