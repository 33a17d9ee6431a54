"""Change events published by the content repository, and the purge notification."""

from __future__ import annotations

import dataclasses
from datetime import UTC, datetime
from enum import Enum
from uuid import uuid4

from cdn_keys.kernel.content.references import ContentEntity, EntityReference
from cdn_keys.kernel.content.snapshots import ContentState


class ChangeKind(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
    STATUS_CHANGED = "status_changed"


@dataclasses.dataclass(frozen=True)
class ChangeEvent:
    """One committed mutation of a content entity.

    ``before`` / ``after`` snapshot the attributes that were mutated.
    ``affected`` lists the posts that referenced a deleted term or author,
    when the repository could enumerate them cheaply.

    Example::

        ChangeEvent(
            entity=Post(1),
            kind=ChangeKind.UPDATED,
            before=ContentState(author=Author(1)),
            after=ContentState(author=Author(2)),
        )
    """

    entity: EntityReference
    kind: ChangeKind
    before: ContentState | None = None
    after: ContentState | None = None
    affected: tuple[ContentEntity, ...] | None = None
    event_id: str = dataclasses.field(default_factory=lambda: str(uuid4()), compare=False)
    occurred_at: datetime = dataclasses.field(
        default_factory=lambda: datetime.now(UTC), compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", ChangeKind(self.kind))
        if self.affected is not None and not isinstance(self.affected, tuple):
            object.__setattr__(self, "affected", tuple(self.affected))

    @property
    def states(self) -> tuple[ContentState, ...]:
        return tuple(s for s in (self.before, self.after) if s is not None)


@dataclasses.dataclass(frozen=True)
class SurrogateKeysCleared:
    """Outbound notification: every key to purge for one change event."""

    keys: frozenset[str]
    source: ChangeEvent

    def sorted_keys(self) -> list[str]:
        return sorted(self.keys)


__all__ = ["ChangeEvent", "ChangeKind", "SurrogateKeysCleared"]
