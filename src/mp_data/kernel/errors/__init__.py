"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    └── DomainError              (domain.py)
        └── ValidationError
            ├── InvalidPageSizeError
            ├── InvalidPageError
            ├── UnknownColumnError
            └── InvalidKeySelectorError

Configuration errors live in :mod:`mp_data.config.validation`.  Errors raised
by a data source (SQLAlchemy, DB-API drivers) are never wrapped.
"""

from mp_data.kernel.errors.base import BaseError
from mp_data.kernel.errors.domain import (
    DomainError,
    InvalidKeySelectorError,
    InvalidPageError,
    InvalidPageSizeError,
    UnknownColumnError,
    ValidationError,
)

__all__ = [
    "BaseError",
    "DomainError",
    "InvalidKeySelectorError",
    "InvalidPageError",
    "InvalidPageSizeError",
    "UnknownColumnError",
    "ValidationError",
]
