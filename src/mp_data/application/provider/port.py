"""Data-source port – the capability every backing store must offer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence, TypeVar, runtime_checkable

from mp_data.application.sorting import OrderItem

if TYPE_CHECKING:
    from mp_data.application.provider.keys import KeySelector

TRow = TypeVar("TRow", covariant=True)


@runtime_checkable
class DataSource(Protocol[TRow]):
    """Port: a countable, window-readable result set.

    Concrete implementations live in ``adapters/memory`` and
    ``adapters/sqlalchemy``.  Failures raised by the backing store propagate
    unchanged.
    """

    def count(self) -> int:
        """Total rows, ignoring the page window."""
        ...

    def fetch_page(self, limit: int, offset: int, order_by: Sequence[OrderItem]) -> list[TRow]:
        """Read at most *limit* rows starting at zero-based row *offset*."""
        ...


@runtime_checkable
class KeyedDataSource(DataSource[TRow], Protocol[TRow]):
    """A data source that knows how to identify its own rows (e.g. by primary key)."""

    def default_key_selector(self) -> "KeySelector": ...


__all__ = ["DataSource", "KeyedDataSource"]
