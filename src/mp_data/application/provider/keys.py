"""Application provider – KeySelector."""
from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping, Union

from mp_data.kernel.errors import InvalidKeySelectorError

KeySpec = Union[str, Callable[[Any], Any], None]


class KeySelector:
    """Derive a key for each row of a page.

    * ``str`` – a field name, read by item lookup on mappings and by
      attribute lookup otherwise;
    * callable – ``selector(row)``;
    * ``None`` – the row's positional index within the page.
    """

    __slots__ = ("_selector",)

    def __init__(self, selector: KeySpec = None) -> None:
        if selector is not None and not isinstance(selector, str) and not callable(selector):
            raise InvalidKeySelectorError(selector)
        if isinstance(selector, str) and not selector:
            raise InvalidKeySelectorError(selector)
        self._selector = selector

    @classmethod
    def of(cls, selector: "KeySelector | KeySpec") -> "KeySelector":
        if isinstance(selector, KeySelector):
            return selector
        return cls(selector)

    @property
    def selector(self) -> KeySpec:
        return self._selector

    @property
    def is_positional(self) -> bool:
        return self._selector is None

    def extract_key(self, row: Any, index: int) -> Any:
        if self._selector is None:
            return index
        if isinstance(self._selector, str):
            if isinstance(row, Mapping):
                return row[self._selector]
            return getattr(row, self._selector)
        return self._selector(row)

    def extract_keys(self, rows: Iterable[Any]) -> list[Any]:
        return [self.extract_key(row, index) for index, row in enumerate(rows)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeySelector):
            return NotImplemented
        return self._selector == other._selector

    def __hash__(self) -> int:
        return hash(self._selector)

    def __repr__(self) -> str:
        return f"KeySelector({self._selector!r})"


__all__ = ["KeySelector", "KeySpec"]
