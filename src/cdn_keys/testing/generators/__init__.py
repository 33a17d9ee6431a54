"""Testing generators – hypothesis strategies for entity references and snapshots."""
from cdn_keys.testing.generators.strategies import (
    author_strategy,
    content_state_strategy,
    date_bucket_strategy,
    entity_reference_strategy,
    page_strategy,
    post_strategy,
    term_strategy,
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
