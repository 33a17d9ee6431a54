"""Application keys – KeyVocabulary, the canonical entity → surrogate key mapping.

Key formats::

    Post(42)                        -> post-42
    Page(7)                         -> page-7
    Term("category", 7)             -> term-category-7
    Author(3)                       -> author-3
    DateBucket.of_year(2016)        -> archive-year-2016
    DateBucket.of_month(2016, 10)   -> archive-month-2016-10
    DateBucket.of_day(2016, 10, 14) -> archive-day-2016-10-14
    SITE                            -> front-page
"""
from __future__ import annotations

from collections.abc import Iterable

from cdn_keys.kernel.content import (
    Author,
    DateBucket,
    EntityReference,
    Granularity,
    Page,
    Post,
    Site,
    Term,
)
from cdn_keys.kernel.errors import UnknownEntityKindError
from cdn_keys.observability.logging import get_logger

__all__ = ["FRONT_PAGE_KEY", "KeyVocabulary"]

FRONT_PAGE_KEY = "front-page"

logger = get_logger(__name__)


class KeyVocabulary:
    """Deterministic, side-effect-free naming of entity references.

    :meth:`key_for` is strict and raises :class:`UnknownEntityKindError`;
    :meth:`keys_for` and :meth:`keys_for_all` are the forms callers on the
    render and save paths use, where an unknown kind contributes no key.
    """

    def key_for(self, reference: EntityReference) -> str:
        match reference:
            case Post(id=post_id):
                return f"post-{post_id}"
            case Page(id=page_id):
                return f"page-{page_id}"
            case Term(taxonomy=taxonomy, id=term_id):
                return f"term-{taxonomy}-{term_id}"
            case Author(user_id=user_id):
                return f"author-{user_id}"
            case DateBucket():
                return self._bucket_key(reference)
            case Site():
                return FRONT_PAGE_KEY
            case _:
                raise UnknownEntityKindError(reference)

    def keys_for(self, reference: EntityReference) -> tuple[str, ...]:
        try:
            return (self.key_for(reference),)
        except UnknownEntityKindError as exc:
            logger.warning("unknown_entity_kind", **exc.detail)
            return ()

    def keys_for_all(self, references: Iterable[EntityReference]) -> tuple[str, ...]:
        """Ordered, de-duplicated keys for a sequence such as an archive listing."""
        seen: dict[str, None] = {}
        for reference in references:
            for key in self.keys_for(reference):
                seen.setdefault(key, None)
        return tuple(seen)

    @staticmethod
    def _bucket_key(bucket: DateBucket) -> str:
        if bucket.granularity is Granularity.YEAR:
            return f"archive-year-{bucket.year:04d}"
        if bucket.granularity is Granularity.MONTH:
            return f"archive-month-{bucket.year:04d}-{bucket.month:02d}"
        return f"archive-day-{bucket.year:04d}-{bucket.month:02d}-{bucket.day:02d}"
