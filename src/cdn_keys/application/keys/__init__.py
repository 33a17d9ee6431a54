"""Application keys – surrogate key vocabulary."""
from cdn_keys.application.keys.vocabulary import FRONT_PAGE_KEY, KeyVocabulary

__all__ = ["FRONT_PAGE_KEY", "KeyVocabulary"]
