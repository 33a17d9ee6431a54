"""Content model seen by the key computations: references, snapshots, events, ports."""

from cdn_keys.kernel.content.events import ChangeEvent, ChangeKind, SurrogateKeysCleared
from cdn_keys.kernel.content.ports import ContentRepository, PurgeNotifier
from cdn_keys.kernel.content.references import (
    SITE,
    Author,
    ContentEntity,
    DateBucket,
    EntityReference,
    Granularity,
    Page,
    Post,
    Site,
    Term,
)
from cdn_keys.kernel.content.snapshots import ContentState

__all__ = [
    "SITE",
    "Author",
    "ChangeEvent",
    "ChangeKind",
    "ContentEntity",
    "ContentRepository",
    "ContentState",
    "DateBucket",
    "EntityReference",
    "Granularity",
    "Page",
    "Post",
    "PurgeNotifier",
    "Site",
    "SurrogateKeysCleared",
    "Term",
]
