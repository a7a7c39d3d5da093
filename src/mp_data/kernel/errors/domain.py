"""Domain errors – caller-programming and validation failures.

All of these are raised synchronously, before any data source is touched,
and are never retried.
"""

from __future__ import annotations

from typing import Any, Iterable

from mp_data.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a rule of the sorting / pagination model is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input does not meet validation rules."""

    default_code = "validation_error"


class InvalidPageSizeError(ValidationError):
    """Page size is below 1 (or above the configured maximum)."""

    default_code = "invalid_page_size"

    def __init__(self, page_size: Any, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            message or "Page size should be at least 1.",
            detail={"page_size": page_size},
            **kwargs,
        )
        self.page_size = page_size


class InvalidPageError(ValidationError):
    """Current page number is below 1."""

    default_code = "invalid_page"

    def __init__(self, page: Any, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            message or "Current page should be at least 1.",
            detail={"page": page},
            **kwargs,
        )
        self.page = page


class UnknownColumnError(ValidationError):
    """A sort column was referenced that was never declared."""

    default_code = "unknown_column"

    def __init__(
        self,
        column: str,
        available: Iterable[str] = (),
        **kwargs: Any,
    ) -> None:
        available = sorted(available)
        super().__init__(
            f"Unknown sort column '{column}'",
            detail={"column": column, "available": available},
            **kwargs,
        )
        self.column = column
        self.available = available


class InvalidKeySelectorError(ValidationError):
    """A key selector is neither a field name nor a callable."""

    default_code = "invalid_key_selector"

    def __init__(self, selector: Any, **kwargs: Any) -> None:
        super().__init__(
            'The key selector must be of type "str" or "callable", '
            f"got {type(selector).__name__}",
            detail={"selector_type": type(selector).__name__},
            **kwargs,
        )
        self.selector = selector


__all__ = [
    "DomainError",
    "InvalidKeySelectorError",
    "InvalidPageError",
    "InvalidPageSizeError",
    "UnknownColumnError",
    "ValidationError",
]
