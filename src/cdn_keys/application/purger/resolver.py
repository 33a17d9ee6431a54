"""Application purger – InvalidationResolver, the write-path fan-out.

Given one committed change, decide which surrogate keys must be purged so
that every cached view depending on the changed entity is evicted, while a
routine edit purges nothing but the entity's own key.

Rules for posts and pages:

* the entity's own key, always;
* created / deleted: full-visibility fan-out;
* author changed: old and new author;
* terms changed: every term in the union of old and new terms;
* publish date changed or visibility crossed: full-visibility fan-out;
* missing snapshot: full-visibility fan-out over whatever state is known.

Full-visibility fan-out adds ``front-page``, the year/month/day buckets of
every known publish date, every known author and every known term.

Deleting a term or an author purges its own key plus the key of every post
that referenced it.
"""
from __future__ import annotations

from collections.abc import Iterable

from cdn_keys.application.keys import KeyVocabulary
from cdn_keys.config.settings import KeySettings
from cdn_keys.kernel.content import (
    SITE,
    Author,
    ChangeEvent,
    ChangeKind,
    ContentRepository,
    ContentState,
    EntityReference,
    Page,
    Post,
    PurgeNotifier,
    SurrogateKeysCleared,
    Term,
)
from cdn_keys.kernel.errors import ContentLookupError, IncompleteChangeEventError
from cdn_keys.observability.logging import get_logger

__all__ = ["InvalidationResolver"]

logger = get_logger(__name__)

_REQUIRED_STATES: dict[ChangeKind, tuple[str, ...]] = {
    ChangeKind.CREATED: ("after",),
    ChangeKind.DELETED: ("before",),
    ChangeKind.UPDATED: ("before", "after"),
    ChangeKind.STATUS_CHANGED: ("before", "after"),
}


class InvalidationResolver:
    """Resolve change events into purge sets and report them.

    Register :meth:`handle` (or the resolver itself) as the content
    repository's change handler; it sends exactly one
    :class:`SurrogateKeysCleared` per event to *notifier*.  If resolution
    itself fails, the entity's own key and ``front-page`` are purged instead.
    """

    def __init__(
        self,
        notifier: PurgeNotifier,
        repository: ContentRepository | None = None,
        vocabulary: KeyVocabulary | None = None,
        settings: KeySettings | None = None,
    ) -> None:
        self._notifier = notifier
        self._repository = repository
        self._vocabulary = vocabulary or KeyVocabulary()
        self._public_statuses = (settings or KeySettings()).public_statuses

    def handle(self, event: ChangeEvent) -> frozenset[str]:
        try:
            keys = self.resolve(event)
        except Exception:  # noqa: BLE001 – a resolution failure must not fail the save
            logger.exception(
                "invalidation_failed",
                event_id=event.event_id,
                entity=repr(event.entity),
                change_kind=event.kind.value,
            )
            keys = frozenset(self._vocabulary.keys_for_all((event.entity, SITE)))
        try:
            self._notifier.notify(SurrogateKeysCleared(keys=keys, source=event))
        except Exception:  # noqa: BLE001 – a purge failure must not fail the save
            logger.exception(
                "purge_notification_failed",
                event_id=event.event_id,
                keys=sorted(keys),
            )
        return keys

    __call__ = handle

    def resolve(self, event: ChangeEvent) -> frozenset[str]:
        match event.entity:
            case Post() | Page():
                references = self._content_fanout(event)
            case Term() | Author():
                references = self._owner_fanout(event)
            case _:
                references = [event.entity]

        keys = frozenset(self._vocabulary.keys_for_all(references))
        logger.info(
            "invalidation_resolved",
            entity=repr(event.entity),
            change_kind=event.kind.value,
            keys=len(keys),
        )
        return keys

    # ------------------------------------------------------------------
    # posts and pages
    # ------------------------------------------------------------------

    def _content_fanout(self, event: ChangeEvent) -> list[EntityReference]:
        references: list[EntityReference] = [event.entity]
        try:
            self._require_states(event)
        except IncompleteChangeEventError as exc:
            logger.warning("incomplete_change_event", entity=repr(event.entity), **exc.detail)
            references.extend(self._full_visibility(self._known_states(event)))
            return references

        if event.kind in (ChangeKind.CREATED, ChangeKind.DELETED):
            references.extend(self._full_visibility(event.states))
            return references

        before, after = event.before, event.after
        if (
            before.published_at != after.published_at
            or before.is_public(self._public_statuses) != after.is_public(self._public_statuses)
        ):
            references.extend(self._full_visibility((before, after)))
            return references

        if before.author != after.author:
            references.extend(a for a in (before.author, after.author) if a is not None)
        if before.terms != after.terms:
            references.extend(_ordered_terms(before.terms | after.terms))
        return references

    @staticmethod
    def _require_states(event: ChangeEvent) -> None:
        missing = tuple(
            name for name in _REQUIRED_STATES[event.kind] if getattr(event, name) is None
        )
        if missing:
            raise IncompleteChangeEventError(event.kind.value, missing)

    def _known_states(self, event: ChangeEvent) -> tuple[ContentState, ...]:
        if event.states or self._repository is None:
            return event.states
        try:
            current = self._repository.state_of(event.entity)
        except ContentLookupError as exc:
            logger.warning("content_lookup_failed", lookup=exc.lookup, entity=repr(event.entity))
            return ()
        return () if current is None else (current,)

    @staticmethod
    def _full_visibility(states: Iterable[ContentState]) -> list[EntityReference]:
        references: list[EntityReference] = [SITE]
        terms: set[Term] = set()
        for state in states:
            references.extend(state.date_buckets())
            if state.author is not None:
                references.append(state.author)
            terms |= state.terms
        references.extend(_ordered_terms(terms))
        return references

    # ------------------------------------------------------------------
    # terms and authors
    # ------------------------------------------------------------------

    def _owner_fanout(self, event: ChangeEvent) -> list[EntityReference]:
        references: list[EntityReference] = [event.entity]
        if event.kind is not ChangeKind.DELETED:
            return references

        affected = event.affected
        if affected is None and self._repository is not None:
            try:
                affected = tuple(self._repository.posts_referencing(event.entity))
            except ContentLookupError as exc:
                logger.warning(
                    "content_lookup_failed", lookup=exc.lookup, entity=repr(event.entity)
                )
        if affected is None:
            logger.warning("affected_posts_unknown", entity=repr(event.entity))
            return references

        references.extend(affected)
        return references


def _ordered_terms(terms: Iterable[Term]) -> list[Term]:
    return sorted(terms, key=lambda t: (t.taxonomy, t.id))
