"""Application pagination – Page."""
from __future__ import annotations

import dataclasses
import math
from typing import Any, Callable, Generic, TypeVar

from mp_data.application.pagination.page_spec import PageSpec

T = TypeVar("T")


@dataclasses.dataclass
class Page(Generic[T]):
    """One page of rows, their keys and the navigation state around them."""

    items: list[T]
    total: int
    page: int
    size: int
    keys: list[Any] = dataclasses.field(default_factory=list)

    @property
    def total_pages(self) -> int:
        if self.size <= 0 or self.total <= 0:
            return 0
        return math.ceil(self.total / self.size)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    def map(self, fn: Callable[[T], Any]) -> "Page[Any]":
        """Return a new :class:`Page` with each item transformed by *fn*; keys are kept."""
        return Page(
            items=[fn(item) for item in self.items],
            total=self.total,
            page=self.page,
            size=self.size,
            keys=list(self.keys),
        )

    @classmethod
    def of(cls, items: list[T], spec: PageSpec, keys: list[Any] | None = None) -> "Page[T]":
        """Wrap already-fetched *items* using the window and total count of *spec*."""
        return cls(
            items=items,
            total=spec.total_count,
            page=spec.current_page,
            size=spec.page_size,
            keys=list(keys) if keys is not None else list(range(len(items))),
        )


__all__ = ["Page"]
