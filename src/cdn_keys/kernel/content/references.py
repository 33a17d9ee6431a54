"""Entity references — the closed set of content identities that own a key.

Every variant is a frozen, slotted dataclass, so references compare and hash
by value and can be collected into sets.  Ids are positive integers and are
always the last component of a key, which keeps keys unambiguous even when a
taxonomy name contains dashes.
"""

from __future__ import annotations

import dataclasses
import re
from datetime import date
from enum import Enum

from cdn_keys.kernel.errors import ValidationError

_TAXONOMY_RE = re.compile(r"^[a-z0-9_-]+$")


def _require_id(owner: str, field: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(
            f"{owner}.{field} must be a positive integer",
            errors=[{"field": field, "value": value}],
        )


class Granularity(str, Enum):
    YEAR = "year"
    MONTH = "month"
    DAY = "day"


@dataclasses.dataclass(frozen=True, slots=True)
class Post:
    id: int

    def __post_init__(self) -> None:
        _require_id("Post", "id", self.id)


@dataclasses.dataclass(frozen=True, slots=True)
class Page:
    id: int

    def __post_init__(self) -> None:
        _require_id("Page", "id", self.id)


@dataclasses.dataclass(frozen=True, slots=True)
class Term:
    """A taxonomy term, e.g. ``Term("post_tag", 7)`` or ``Term("category", 1)``."""

    taxonomy: str
    id: int

    def __post_init__(self) -> None:
        if not isinstance(self.taxonomy, str) or not _TAXONOMY_RE.match(self.taxonomy):
            raise ValidationError(
                "Term.taxonomy must be a lowercase slug",
                errors=[{"field": "taxonomy", "value": self.taxonomy}],
            )
        _require_id("Term", "id", self.id)


@dataclasses.dataclass(frozen=True, slots=True)
class Author:
    user_id: int

    def __post_init__(self) -> None:
        _require_id("Author", "user_id", self.user_id)


@dataclasses.dataclass(frozen=True, slots=True)
class DateBucket:
    """A year, month or day archive bucket.

    Only the fields required by ``granularity`` may be set::

        DateBucket(Granularity.YEAR, 2016)
        DateBucket(Granularity.MONTH, 2016, 10)
        DateBucket(Granularity.DAY, 2016, 10, 14)
    """

    granularity: Granularity
    year: int
    month: int | None = None
    day: int | None = None

    def __post_init__(self) -> None:
        try:
            granularity = Granularity(self.granularity)
        except ValueError as exc:
            raise ValidationError(
                f"unknown date granularity {self.granularity!r}",
                errors=[{"field": "granularity", "value": repr(self.granularity)}],
                cause=exc,
            ) from exc
        object.__setattr__(self, "granularity", granularity)
        wants_month = granularity is not Granularity.YEAR
        wants_day = granularity is Granularity.DAY
        if (self.month is not None) != wants_month or (self.day is not None) != wants_day:
            raise ValidationError(
                f"DateBucket({granularity.value}) has the wrong set of date fields",
                errors=[{"field": "granularity", "value": granularity.value}],
            )
        try:
            date(self.year, self.month or 1, self.day or 1)
        except (TypeError, ValueError) as exc:
            raise ValidationError(
                f"DateBucket({self.year}, {self.month}, {self.day}) is not a calendar date",
                cause=exc,
            ) from exc

    @classmethod
    def of_year(cls, year: int) -> "DateBucket":
        return cls(Granularity.YEAR, year)

    @classmethod
    def of_month(cls, year: int, month: int) -> "DateBucket":
        return cls(Granularity.MONTH, year, month)

    @classmethod
    def of_day(cls, year: int, month: int, day: int) -> "DateBucket":
        return cls(Granularity.DAY, year, month, day)

    @classmethod
    def buckets_for(cls, when: date) -> tuple["DateBucket", "DateBucket", "DateBucket"]:
        """Return the year, month and day buckets a publish date falls into.

        Accepts ``datetime`` as well, since it is a ``date`` subclass.
        """
        return (
            cls.of_year(when.year),
            cls.of_month(when.year, when.month),
            cls.of_day(when.year, when.month, when.day),
        )


@dataclasses.dataclass(frozen=True, slots=True)
class Site:
    """The homepage / front-page singleton."""


SITE = Site()

EntityReference = Post | Page | Term | Author | DateBucket | Site

#: Variants that carry an author, terms, a publish date and a status.
ContentEntity = Post | Page


__all__ = [
    "SITE",
    "Author",
    "ContentEntity",
    "DateBucket",
    "EntityReference",
    "Granularity",
    "Page",
    "Post",
    "Site",
    "Term",
]
