"""Application layer – key vocabulary, emitter and invalidation resolver."""
from cdn_keys.application.emitter import KeyEmitter, ViewContext, ViewKind
from cdn_keys.application.keys import FRONT_PAGE_KEY, KeyVocabulary
from cdn_keys.application.purger import InvalidationResolver

__all__ = [
    "FRONT_PAGE_KEY",
    "InvalidationResolver",
    "KeyEmitter",
    "KeyVocabulary",
    "ViewContext",
    "ViewKind",
]
