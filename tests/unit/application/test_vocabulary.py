"""Unit tests for the surrogate key vocabulary."""

from __future__ import annotations

import pytest
from hypothesis import given
from structlog.testing import capture_logs

from cdn_keys.application.keys import FRONT_PAGE_KEY, KeyVocabulary
from cdn_keys.kernel.content import SITE, Author, DateBucket, Page, Post, Term
from cdn_keys.kernel.errors import UnknownEntityKindError
from cdn_keys.testing.generators import entity_reference_strategy


vocabulary = KeyVocabulary()


# ---------------------------------------------------------------------------
# Canonical formats
# ---------------------------------------------------------------------------


class TestKeyFormats:
    @pytest.mark.parametrize(
        "reference, key",
        [
            (Post(42), "post-42"),
            (Page(7), "page-7"),
            (Term("category", 7), "term-category-7"),
            (Term("post_tag", 3), "term-post_tag-3"),
            (Author(3), "author-3"),
            (DateBucket.of_year(2016), "archive-year-2016"),
            (DateBucket.of_month(2016, 10), "archive-month-2016-10"),
            (DateBucket.of_day(2016, 10, 14), "archive-day-2016-10-14"),
            (DateBucket.of_day(2015, 1, 5), "archive-day-2015-01-05"),
            (SITE, "front-page"),
        ],
    )
    def test_key_for(self, reference: object, key: str) -> None:
        assert vocabulary.key_for(reference) == key  # type: ignore[arg-type]

    def test_front_page_constant(self) -> None:
        assert vocabulary.key_for(SITE) == FRONT_PAGE_KEY

    def test_dashed_taxonomy_does_not_collide(self) -> None:
        assert vocabulary.key_for(Term("a-1", 1)) != vocabulary.key_for(Term("a", 11))


# ---------------------------------------------------------------------------
# Unknown kinds
# ---------------------------------------------------------------------------


class TestUnknownEntityKind:
    def test_key_for_raises(self) -> None:
        with pytest.raises(UnknownEntityKindError):
            vocabulary.key_for("post-1")  # type: ignore[arg-type]

    def test_keys_for_degrades_to_empty(self) -> None:
        assert vocabulary.keys_for(object()) == ()  # type: ignore[arg-type]

    def test_keys_for_logs_warning(self) -> None:
        with capture_logs() as logs:
            vocabulary.keys_for(3.14)  # type: ignore[arg-type]
        assert logs[0]["event"] == "unknown_entity_kind"
        assert logs[0]["kind"] == "float"
        assert logs[0]["log_level"] == "warning"

    def test_keys_for_all_skips_unknown(self) -> None:
        keys = vocabulary.keys_for_all([Post(1), object(), Author(2)])  # type: ignore[list-item]
        assert keys == ("post-1", "author-2")


# ---------------------------------------------------------------------------
# Listings
# ---------------------------------------------------------------------------


class TestKeysForAll:
    def test_one_key_per_member_in_order(self) -> None:
        assert vocabulary.keys_for_all([Post(3), Post(1), Post(2)]) == ("post-3", "post-1", "post-2")

    def test_duplicates_removed(self) -> None:
        assert vocabulary.keys_for_all([Post(1), Author(1), Post(1)]) == ("post-1", "author-1")

    def test_empty(self) -> None:
        assert vocabulary.keys_for_all([]) == ()


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


class TestVocabularyProperties:
    @given(entity_reference_strategy(), entity_reference_strategy())
    def test_injective(self, a: object, b: object) -> None:
        assert (vocabulary.key_for(a) == vocabulary.key_for(b)) == (a == b)  # type: ignore[arg-type]

    @given(entity_reference_strategy())
    def test_deterministic_across_instances(self, reference: object) -> None:
        assert KeyVocabulary().key_for(reference) == KeyVocabulary().key_for(reference)  # type: ignore[arg-type]

    @given(entity_reference_strategy())
    def test_keys_are_lowercase_without_spaces(self, reference: object) -> None:
        key = vocabulary.key_for(reference)  # type: ignore[arg-type]
        assert key == key.lower()
        assert " " not in key
