"""Collaborator ports — the content repository and the purge dispatcher."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from cdn_keys.kernel.content.events import SurrogateKeysCleared
from cdn_keys.kernel.content.references import Author, ContentEntity, Term
from cdn_keys.kernel.content.snapshots import ContentState


@runtime_checkable
class ContentRepository(Protocol):
    """Port: point-in-time reads from the content store.

    Implementations raise :class:`~cdn_keys.kernel.errors.ContentLookupError`
    when a lookup cannot be answered.
    """

    def author_of(self, entity: ContentEntity) -> Author | None: ...

    def terms_of(self, entity: ContentEntity) -> Sequence[Term]: ...

    def state_of(self, entity: ContentEntity) -> ContentState | None: ...

    def posts_referencing(self, entity: Term | Author) -> Sequence[ContentEntity]: ...


@runtime_checkable
class PurgeNotifier(Protocol):
    """Port: hands a resolved key set to the purge-dispatch collaborator."""

    def notify(self, notification: SurrogateKeysCleared) -> None: ...


__all__ = ["ContentRepository", "PurgeNotifier"]
