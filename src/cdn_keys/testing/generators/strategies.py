"""Testing generators – Hypothesis property-based testing strategies.

Requires the ``hypothesis`` package:

    pip install "cdn-keys[test]"
"""
from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy  # type: ignore[import-untyped]

    from cdn_keys.kernel.content import (
        Author,
        ContentState,
        DateBucket,
        EntityReference,
        Page,
        Post,
        Term,
    )


def _require_hypothesis() -> Any:
    """Lazy import guard – raises a clear error when hypothesis is absent."""
    try:
        import hypothesis.strategies as st  # type: ignore[import-untyped]
        return st
    except ImportError as exc:
        raise ImportError(
            "Install 'hypothesis' to use property-based testing strategies: "
            "pip install hypothesis"
        ) from exc


_TAXONOMY_ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789_-"


def _ids() -> "SearchStrategy[int]":
    return _require_hypothesis().integers(min_value=1, max_value=10**9)


def post_strategy() -> "SearchStrategy[Post]":
    from cdn_keys.kernel.content import Post

    return _ids().map(Post)


def page_strategy() -> "SearchStrategy[Page]":
    from cdn_keys.kernel.content import Page

    return _ids().map(Page)


def author_strategy() -> "SearchStrategy[Author]":
    from cdn_keys.kernel.content import Author

    return _ids().map(Author)


def term_strategy(taxonomies: list[str] | None = None) -> "SearchStrategy[Term]":
    """Terms in *taxonomies*, or in arbitrary slug taxonomies (dashes included).

    Example::

        @given(term_strategy(["category", "post_tag"]))
        def test_term_key_prefix(term):
            assert KeyVocabulary().key_for(term).startswith("term-")
    """
    from cdn_keys.kernel.content import Term

    st = _require_hypothesis()
    taxonomy_st = (
        st.sampled_from(taxonomies)
        if taxonomies
        else st.text(alphabet=_TAXONOMY_ALPHABET, min_size=1, max_size=12)
    )
    return st.builds(Term, taxonomy=taxonomy_st, id=_ids())


def date_bucket_strategy() -> "SearchStrategy[DateBucket]":
    from cdn_keys.kernel.content import DateBucket

    st = _require_hypothesis()
    return st.dates(min_value=date(1970, 1, 1), max_value=date(2100, 12, 31)).flatmap(
        lambda d: st.sampled_from(DateBucket.buckets_for(d))
    )


def entity_reference_strategy() -> "SearchStrategy[EntityReference]":
    """Any variant of the entity reference union, the site singleton included."""
    from cdn_keys.kernel.content import SITE

    st = _require_hypothesis()
    return st.one_of(
        post_strategy(),
        page_strategy(),
        term_strategy(),
        author_strategy(),
        date_bucket_strategy(),
        st.just(SITE),
    )


def content_state_strategy() -> "SearchStrategy[ContentState]":
    from cdn_keys.kernel.content import ContentState

    st = _require_hypothesis()
    return st.builds(
        ContentState,
        author=st.none() | author_strategy(),
        terms=st.frozensets(term_strategy(["category", "post_tag"]), max_size=4),
        published_at=st.none() | st.datetimes(),
        status=st.sampled_from(["publish", "draft", "pending", "private", "trash"]),
    )


__all__ = [
    "author_strategy",
    "content_state_strategy",
    "date_bucket_strategy",
    "entity_reference_strategy",
    "page_strategy",
    "post_strategy",
    "term_strategy",
]
