"""Memory adapter – ArrayDataSource."""
from __future__ import annotations

import numbers
from typing import Any, Callable, Generic, Iterable, Mapping, Sequence, TypeVar

from mp_data.application.sorting import OrderItem, OrderTerm, SortDirection
from mp_data.observability.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def _field_value(row: Any, field: str) -> Any:
    if isinstance(row, Mapping):
        return row.get(field)
    return getattr(row, field, None)


def _sort_key(field: str) -> Callable[[Any], tuple[int, str, Any]]:
    # None first, then numbers, then other values grouped by type name
    def key(row: Any) -> tuple[int, str, Any]:
        value = _field_value(row, field)
        if value is None:
            return (0, "", None)
        if isinstance(value, numbers.Number):
            return (1, "", value)
        return (2, type(value).__name__, value)

    return key


class ArrayDataSource(Generic[T]):
    """Data source over an in-memory sequence of mappings or objects.

    Sorting is a stable multi-key sort applied from the lowest-priority term
    to the highest; ``None`` sorts before any value in ascending order.  Raw
    expression strings cannot be evaluated in memory and are skipped.
    """

    def __init__(self, rows: Iterable[T]) -> None:
        self._rows: list[T] = list(rows)

    @property
    def rows(self) -> list[T]:
        return list(self._rows)

    def count(self) -> int:
        return len(self._rows)

    def fetch_page(self, limit: int, offset: int, order_by: Sequence[OrderItem]) -> list[T]:
        rows = self.sort_rows(self._rows, order_by)
        return rows[offset:offset + limit]

    @staticmethod
    def sort_rows(rows: Iterable[T], order_by: Sequence[OrderItem]) -> list[T]:
        result = list(rows)
        terms: list[OrderTerm] = []
        for item in order_by:
            if isinstance(item, OrderTerm):
                terms.append(item)
            else:
                logger.warning("array_data_source.raw_order_skipped", expression=item)
        for term in reversed(terms):
            result.sort(
                key=_sort_key(term.field),
                reverse=term.direction is SortDirection.DESC,
            )
        return result


__all__ = ["ArrayDataSource"]
