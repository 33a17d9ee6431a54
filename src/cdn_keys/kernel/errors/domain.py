"""Domain errors — invalid entity references and degraded key computations."""

from __future__ import annotations

from typing import Any

from cdn_keys.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class SurrogateKeyError(DomainError):
    """A key computation could not be completed precisely.

    Never surfaced to a renderer or change publisher: the component that
    raises it converts it into a degraded-but-safe key set.
    """

    default_code = "surrogate_key_error"


class UnknownEntityKindError(SurrogateKeyError):
    """The vocabulary has no key for this kind of reference."""

    default_code = "unknown_entity_kind"

    def __init__(self, reference: object, **kwargs: Any) -> None:
        super().__init__(
            f"No surrogate key for entity kind '{type(reference).__name__}'",
            detail={"kind": type(reference).__name__},
            **kwargs,
        )
        self.reference = reference


class IncompleteChangeEventError(SurrogateKeyError):
    """A change event lacks the snapshot needed for precise fan-out."""

    default_code = "incomplete_change_event"

    def __init__(self, kind: str, missing: tuple[str, ...], **kwargs: Any) -> None:
        super().__init__(
            f"Change event '{kind}' is missing {', '.join(missing)} state",
            detail={"change_kind": kind, "missing": list(missing)},
            **kwargs,
        )
        self.missing = missing


class ListingUnavailableError(SurrogateKeyError):
    """The posts listed on an archive page could not be fetched."""

    default_code = "listing_unavailable"

    def __init__(self, view_kind: str, **kwargs: Any) -> None:
        super().__init__(
            f"Listing for '{view_kind}' view is unavailable",
            detail={"view_kind": view_kind},
            **kwargs,
        )
        self.view_kind = view_kind


__all__ = [
    "DomainError",
    "IncompleteChangeEventError",
    "ListingUnavailableError",
    "SurrogateKeyError",
    "UnknownEntityKindError",
    "ValidationError",
]
