"""Application emitter – ViewContext, the explicitly passed request outcome."""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from enum import Enum

from cdn_keys.kernel.content import (
    Author,
    ContentEntity,
    DateBucket,
    EntityReference,
    Page,
    Post,
    Term,
)
from cdn_keys.kernel.errors import ValidationError

__all__ = ["ViewContext", "ViewKind"]


class ViewKind(str, Enum):
    HOME = "home"
    SINGULAR_POST = "singular_post"
    SINGULAR_PAGE = "singular_page"
    TERM_ARCHIVE = "term_archive"
    AUTHOR_ARCHIVE = "author_archive"
    DATE_ARCHIVE = "date_archive"


_SUBJECT_TYPES: dict[ViewKind, tuple[type, ...]] = {
    ViewKind.HOME: (Page,),
    ViewKind.SINGULAR_POST: (Post,),
    ViewKind.SINGULAR_PAGE: (Page,),
    ViewKind.TERM_ARCHIVE: (Term,),
    ViewKind.AUTHOR_ARCHIVE: (Author,),
    ViewKind.DATE_ARCHIVE: (DateBucket,),
}

_LISTING_KINDS = frozenset(
    {ViewKind.HOME, ViewKind.TERM_ARCHIVE, ViewKind.AUTHOR_ARCHIVE, ViewKind.DATE_ARCHIVE}
)


@dataclasses.dataclass(frozen=True)
class ViewContext:
    """A resolved request: what kind of view, for which entity, listing what.

    ``subject`` is the entity the view is about (``None`` for a home page that
    lists posts, a :class:`Page` for a static front page).  ``listing`` holds
    the posts shown on the queried page of a listing view; ``None`` means the
    listing could not be fetched.
    """

    kind: ViewKind
    subject: EntityReference | None = None
    listing: tuple[ContentEntity, ...] | None = ()

    def __post_init__(self) -> None:
        try:
            kind = ViewKind(self.kind)
        except ValueError as exc:
            raise ValidationError(
                f"unknown view kind {self.kind!r}",
                errors=[{"field": "kind", "value": repr(self.kind)}],
                cause=exc,
            ) from exc
        object.__setattr__(self, "kind", kind)

        if self.subject is None:
            if kind is not ViewKind.HOME:
                raise ValidationError(f"{kind.value} view requires a subject")
        elif not isinstance(self.subject, _SUBJECT_TYPES[kind]):
            raise ValidationError(
                f"{kind.value} view cannot have a {type(self.subject).__name__} subject",
                errors=[{"field": "subject", "value": repr(self.subject)}],
            )

        if self.listing is not None:
            listing = tuple(self.listing)
            if listing and kind not in _LISTING_KINDS:
                raise ValidationError(f"{kind.value} view does not list posts")
            object.__setattr__(self, "listing", listing)

    @property
    def is_listing(self) -> bool:
        return self.kind in _LISTING_KINDS

    @classmethod
    def home(
        cls,
        listing: Iterable[ContentEntity] | None = (),
        front_page: Page | None = None,
    ) -> "ViewContext":
        return cls(ViewKind.HOME, front_page, _as_listing(listing))

    @classmethod
    def singular(cls, entity: ContentEntity) -> "ViewContext":
        kind = ViewKind.SINGULAR_PAGE if isinstance(entity, Page) else ViewKind.SINGULAR_POST
        return cls(kind, entity)

    @classmethod
    def term_archive(cls, term: Term, listing: Iterable[ContentEntity] | None = ()) -> "ViewContext":
        return cls(ViewKind.TERM_ARCHIVE, term, _as_listing(listing))

    @classmethod
    def author_archive(
        cls, author: Author, listing: Iterable[ContentEntity] | None = ()
    ) -> "ViewContext":
        return cls(ViewKind.AUTHOR_ARCHIVE, author, _as_listing(listing))

    @classmethod
    def date_archive(
        cls, bucket: DateBucket, listing: Iterable[ContentEntity] | None = ()
    ) -> "ViewContext":
        return cls(ViewKind.DATE_ARCHIVE, bucket, _as_listing(listing))


def _as_listing(listing: Iterable[ContentEntity] | None) -> tuple[ContentEntity, ...] | None:
    return None if listing is None else tuple(listing)
