"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   ├── ValidationError
    │   └── SurrogateKeyError
    │       ├── UnknownEntityKindError
    │       ├── IncompleteChangeEventError
    │       └── ListingUnavailableError
    ├── ApplicationError         (application.py)
    └── InfrastructureError      (infrastructure.py)
        └── ContentLookupError
"""

from cdn_keys.kernel.errors.application import ApplicationError
from cdn_keys.kernel.errors.base import BaseError
from cdn_keys.kernel.errors.domain import (
    DomainError,
    IncompleteChangeEventError,
    ListingUnavailableError,
    SurrogateKeyError,
    UnknownEntityKindError,
    ValidationError,
)
from cdn_keys.kernel.errors.infrastructure import ContentLookupError, InfrastructureError

__all__ = [
    "ApplicationError",
    "BaseError",
    "ContentLookupError",
    "DomainError",
    "IncompleteChangeEventError",
    "InfrastructureError",
    "ListingUnavailableError",
    "SurrogateKeyError",
    "UnknownEntityKindError",
    "ValidationError",
]
