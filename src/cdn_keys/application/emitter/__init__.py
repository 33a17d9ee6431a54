"""Application emitter – view contexts and their surrogate keys."""
from cdn_keys.application.emitter.emitter import KeyEmitter
from cdn_keys.application.emitter.view import ViewContext, ViewKind

__all__ = ["KeyEmitter", "ViewContext", "ViewKind"]
