"""Point-in-time snapshot of the post/page attributes that drive fan-out."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from datetime import date

from cdn_keys.kernel.content.references import Author, DateBucket, Term


@dataclasses.dataclass(frozen=True)
class ContentState:
    """Author, terms, publish date and status of a post or page.

    Supplied by the content repository's change hooks as the ``before`` and
    ``after`` halves of a :class:`~cdn_keys.kernel.content.events.ChangeEvent`.
    """

    author: Author | None = None
    terms: frozenset[Term] = frozenset()
    published_at: date | None = None
    status: str = "publish"

    def __post_init__(self) -> None:
        if not isinstance(self.terms, frozenset):
            object.__setattr__(self, "terms", frozenset(self.terms))

    def is_public(self, public_statuses: Iterable[str]) -> bool:
        return self.status in tuple(public_statuses)

    def date_buckets(self) -> tuple[DateBucket, ...]:
        if self.published_at is None:
            return ()
        return DateBucket.buckets_for(self.published_at)


__all__ = ["ContentState"]
