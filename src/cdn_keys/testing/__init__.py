"""Testing support – fakes, fixtures and hypothesis strategies.

Import in your ``conftest.py``::

    pytest_plugins = ["cdn_keys.testing.fixtures"]
"""

from cdn_keys.testing.fakes import InMemoryContentRepository, RecordingPurgeNotifier

__all__ = ["InMemoryContentRepository", "RecordingPurgeNotifier"]
