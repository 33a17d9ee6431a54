"""
cdn_keys – surrogate-key computation and invalidation fan-out.

Import path convention::

    from cdn_keys.kernel.content import Post, Term, ChangeEvent, ChangeKind
    from cdn_keys.application.keys import KeyVocabulary
    from cdn_keys.application.emitter import KeyEmitter, ViewContext
    from cdn_keys.application.purger import InvalidationResolver
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
