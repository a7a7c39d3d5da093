"""Application sorting – SortDirection, OrderTerm."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Union


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

    @property
    def opposite(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC

    @classmethod
    def parse(cls, value: Any) -> "SortDirection":
        """Coerce ``"asc"`` / ``"DESC"`` / a :class:`SortDirection` to a member."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        raise ValueError(f"Invalid sort direction {value!r}; expected 'ASC' or 'DESC'")


@dataclasses.dataclass(frozen=True)
class OrderTerm:
    """One physical ordering criterion: a field and its direction."""
    field: str
    direction: SortDirection = SortDirection.ASC

    def __str__(self) -> str:
        return f"{self.field} {self.direction.value}"


# A flattened ORDER BY entry: a field term, or a raw dialect-specific expression.
OrderItem = Union[OrderTerm, str]


__all__ = ["OrderItem", "OrderTerm", "SortDirection"]
