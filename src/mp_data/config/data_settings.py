"""Config – DataSettings, defaults for sorting and pagination."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from mp_data.config.settings.base import Settings
from mp_data.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class DataSettings(Settings):
    """Request-parameter names and defaults shared by every data provider.

    Loaded from ``MP_DATA_*`` environment variables, e.g.
    ``MP_DATA_DEFAULT_PAGE_SIZE=25`` or ``MP_DATA_MULTI_SORT=true``.
    ``max_page_size`` of ``0`` means unbounded.
    """

    _prefix: ClassVar[str] = "MP_DATA"

    default_page_size: int = 10
    max_page_size: int = 0
    page_param: str = "page"
    page_size_param: str = "per-page"
    sort_param: str = "sort"
    sort_separator: str = ","
    multi_sort: bool = False
    strict_sort: bool = False

    def _validate(self) -> None:
        if self.default_page_size < 1:
            raise InvalidSettingValueError(
                "default_page_size", self.default_page_size, "must be at least 1"
            )
        if self.max_page_size < 0:
            raise InvalidSettingValueError(
                "max_page_size", self.max_page_size, "must be 0 (unbounded) or positive"
            )
        if self.max_page_size and self.default_page_size > self.max_page_size:
            raise InvalidSettingValueError(
                "default_page_size", self.default_page_size, "exceeds max_page_size"
            )
        if len(self.sort_separator) != 1 or self.sort_separator == "-":
            raise InvalidSettingValueError(
                "sort_separator", self.sort_separator, "must be a single character other than '-'"
            )
        for name in ("page_param", "page_size_param", "sort_param"):
            if not getattr(self, name):
                raise InvalidSettingValueError(name, getattr(self, name), "must not be empty")


__all__ = ["DataSettings"]
