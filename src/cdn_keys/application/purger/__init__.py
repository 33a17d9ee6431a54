"""Application purger – change events to purge key sets."""
from cdn_keys.application.purger.resolver import InvalidationResolver

__all__ = ["InvalidationResolver"]
