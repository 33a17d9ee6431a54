"""Infrastructure errors — failures of external collaborators."""

from __future__ import annotations

from typing import Any

from cdn_keys.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class ContentLookupError(InfrastructureError):
    """The content repository could not answer a lookup."""

    default_code = "content_lookup_error"

    def __init__(
        self,
        lookup: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Content lookup '{lookup}' failed", **kwargs)
        self.lookup = lookup


__all__ = ["ContentLookupError", "InfrastructureError"]
