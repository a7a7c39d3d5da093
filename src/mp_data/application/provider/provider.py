"""Application provider – DataProvider.

Composes a :class:`DataSource` with a :class:`SortSpec`, a :class:`PageSpec`
and a :class:`KeySelector`::

    provider = (
        DataProvider(ArrayDataSource(users))
        .with_sort(SortSpec().with_columns(["username"]))
        .with_params({"sort": "-username", "page": "2", "per-page": "20"})
    )
    page = provider.page()

Every read goes straight to the source: nothing is retried or cached, and a
failing source fails the read.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Generic, Iterator, Mapping, TypeVar

from mp_data.application.pagination import Page, PageSpec
from mp_data.application.provider.keys import KeySelector, KeySpec
from mp_data.application.provider.port import DataSource, KeyedDataSource
from mp_data.application.sorting import OrderItem, SortSpec
from mp_data.config import DataSettings
from mp_data.kernel.errors import InvalidPageSizeError
from mp_data.observability.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


@dataclasses.dataclass(frozen=True, eq=False)
class DataProvider(Generic[T]):
    """Sorted, paginated, keyed reads over one data source."""

    source: DataSource[T]
    sort: SortSpec = dataclasses.field(default_factory=SortSpec)
    pagination: PageSpec = dataclasses.field(default_factory=PageSpec)
    key: KeySelector | None = None

    def __post_init__(self) -> None:
        if self.key is not None and not isinstance(self.key, KeySelector):
            object.__setattr__(self, "key", KeySelector.of(self.key))

    @classmethod
    def from_settings(cls, source: DataSource[T], settings: DataSettings) -> "DataProvider[T]":
        return cls(
            source=source,
            sort=SortSpec.from_settings(settings),
            pagination=PageSpec(
                page_size=settings.default_page_size,
                max_page_size=settings.max_page_size,
            ),
        )

    # ------------------------------------------------------------------
    # Copy-on-write configuration
    # ------------------------------------------------------------------

    def with_sort(self, sort: SortSpec) -> "DataProvider[T]":
        return dataclasses.replace(self, sort=sort)

    def with_pagination(self, pagination: PageSpec) -> "DataProvider[T]":
        return dataclasses.replace(self, pagination=pagination)

    def with_key(self, key: KeySelector | KeySpec) -> "DataProvider[T]":
        return dataclasses.replace(self, key=KeySelector.of(key))

    def with_page_size(self, page_size: int) -> "DataProvider[T]":
        return self.with_pagination(self.pagination.with_page_size(page_size))

    def with_current_page(self, current_page: int) -> "DataProvider[T]":
        return self.with_pagination(self.pagination.with_current_page(current_page))

    def with_params(
        self,
        params: Mapping[str, Any],
        settings: DataSettings | None = None,
    ) -> "DataProvider[T]":
        """Feed request params to both the sort and the pagination state."""
        return dataclasses.replace(
            self,
            sort=self.sort.with_params(params),
            pagination=self.pagination.with_params(params, settings),
        )

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_orders(self) -> list[OrderItem]:
        return self.sort.get_orders()

    def read(self) -> list[T]:
        """Rows of the current page, sorted."""
        return self._fetch(self.pagination.limit, self.pagination.offset)

    def read_one(self) -> T | None:
        """First row of the current page window, or ``None`` when it is empty."""
        rows = self._fetch(1, self.pagination.offset)
        return rows[0] if rows else None

    def read_window(self, limit: int, row_offset: int) -> list[T]:
        """Rows by raw zero-based row offset instead of by page number."""
        if limit < 1:
            raise InvalidPageSizeError(limit, "Limit should be at least 1.")
        if row_offset < 0:
            raise ValueError(f"Row offset must not be negative, got {row_offset}")
        return self._fetch(limit, row_offset)

    def __iter__(self) -> Iterator[T]:
        return iter(self.read())

    def count(self) -> int:
        """Number of rows on the current page."""
        return len(self.read())

    def total_count(self) -> int:
        """Number of rows in the whole result set."""
        return self.source.count()

    def get_pagination(self) -> PageSpec:
        """Pagination state with the total count filled in from the source."""
        return self.pagination.with_total_count(self.total_count())

    def total_pages(self) -> int:
        return self.get_pagination().total_pages

    def key_selector(self) -> KeySelector:
        if self.key is not None:
            return self.key
        if isinstance(self.source, KeyedDataSource):
            return self.source.default_key_selector()
        return KeySelector()

    def get_keys(self, rows: list[T] | None = None) -> list[Any]:
        """Keys for *rows* (default: the current page), in row order."""
        if rows is None:
            rows = self.read()
        return self.key_selector().extract_keys(rows)

    def page(self) -> Page[T]:
        """Current page with keys, total count and navigation state."""
        pagination = self.get_pagination()
        rows = self.read()
        return Page.of(rows, pagination, self.get_keys(rows))

    def _fetch(self, limit: int, offset: int) -> list[T]:
        orders = self.sort.get_orders()
        rows = list(self.source.fetch_page(limit, offset, orders))
        logger.debug(
            "data_provider.read",
            source=type(self.source).__name__,
            limit=limit,
            offset=offset,
            orders=len(orders),
            rows=len(rows),
        )
        return rows


__all__ = ["DataProvider"]
