"""Application emitter – KeyEmitter, the read-path surrogate key computation."""
from __future__ import annotations

from cdn_keys.application.emitter.view import ViewContext, ViewKind
from cdn_keys.application.keys import KeyVocabulary
from cdn_keys.kernel.content import (
    SITE,
    ContentEntity,
    ContentRepository,
    EntityReference,
    Term,
)
from cdn_keys.kernel.errors import ContentLookupError, ListingUnavailableError
from cdn_keys.observability.logging import get_logger

__all__ = ["KeyEmitter"]

logger = get_logger(__name__)


class KeyEmitter:
    """Compute the surrogate keys that describe a rendered view's dependencies.

    * home: ``front-page`` (plus a static front page's own key) and each listed post;
    * singular post/page: the entity, its terms and its author;
    * term / author / date archive: the archive's own key and each listed post.

    Listed posts contribute their own key only, never their terms or author.
    The result is ordered and free of duplicates; nothing here raises into
    the renderer.

    Example::

        emitter = KeyEmitter(repository)
        emitter.compute_view_keys(ViewContext.singular(Post(1)))
        # ("post-1", "term-post_tag-2", "author-1")
    """

    def __init__(
        self,
        repository: ContentRepository,
        vocabulary: KeyVocabulary | None = None,
    ) -> None:
        self._repository = repository
        self._vocabulary = vocabulary or KeyVocabulary()

    def compute_view_keys(self, view: ViewContext) -> tuple[str, ...]:
        try:
            references = self._references_of(view)
        except Exception:  # noqa: BLE001 – a key failure must not fail the render
            logger.exception("view_keys_failed", view_kind=view.kind.value, subject=repr(view.subject))
            references = self._identity_of(view)

        keys = self._vocabulary.keys_for_all(references)
        logger.debug("view_keys_computed", view_kind=view.kind.value, keys=len(keys))
        return keys

    __call__ = compute_view_keys

    def _references_of(self, view: ViewContext) -> list[EntityReference]:
        references = self._identity_of(view)
        if view.kind in (ViewKind.SINGULAR_POST, ViewKind.SINGULAR_PAGE):
            references.extend(self._dependencies_of(view.subject))

        if view.is_listing:
            try:
                references.extend(self._listing_of(view))
            except ListingUnavailableError as exc:
                logger.warning("listing_unavailable", **exc.detail)
        return references

    @staticmethod
    def _identity_of(view: ViewContext) -> list[EntityReference]:
        if view.kind is ViewKind.HOME:
            return [SITE] if view.subject is None else [SITE, view.subject]
        return [view.subject]

    def _dependencies_of(self, entity: ContentEntity) -> list[EntityReference]:
        dependencies: list[EntityReference] = []
        try:
            terms: list[Term] = list(self._repository.terms_of(entity))
        except ContentLookupError as exc:
            logger.warning("content_lookup_failed", lookup=exc.lookup, entity=repr(entity))
        else:
            dependencies.extend(sorted(terms, key=lambda t: (t.taxonomy, t.id)))
        try:
            author = self._repository.author_of(entity)
        except ContentLookupError as exc:
            logger.warning("content_lookup_failed", lookup=exc.lookup, entity=repr(entity))
        else:
            if author is not None:
                dependencies.append(author)
        return dependencies

    @staticmethod
    def _listing_of(view: ViewContext) -> tuple[ContentEntity, ...]:
        if view.listing is None:
            raise ListingUnavailableError(view.kind.value)
        return view.listing
