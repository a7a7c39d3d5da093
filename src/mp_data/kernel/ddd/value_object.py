"""ValueObject base class."""

from __future__ import annotations

import dataclasses
from typing import Any, TypeVar

TValue = TypeVar("TValue", bound="ValueObject")


@dataclasses.dataclass(frozen=True)
class ValueObject:
    """Base class for immutable, copy-on-write value objects.

    Subclasses should be ``@dataclass(frozen=True)``.  Equality is structural
    (dataclass default).  Invariants are checked in :meth:`_validate`, which
    runs on construction and therefore on every :meth:`copy_with` as well.
    """

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field invariant checks."""

    def copy_with(self: TValue, **changes: Any) -> TValue:
        """Return a new instance with given fields replaced."""
        return dataclasses.replace(self, **changes)


__all__ = ["ValueObject"]
