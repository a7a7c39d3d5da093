"""Kernel – framework-agnostic building blocks."""

from mp_data.kernel.ddd import ValueObject
from mp_data.kernel.errors import (
    BaseError,
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
    "ValueObject",
]
