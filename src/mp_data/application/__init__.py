"""Application – sorting, pagination and data-provider building blocks."""

from mp_data.application.pagination import Page, PageSpec
from mp_data.application.provider import DataProvider, DataSource, KeyedDataSource, KeySelector
from mp_data.application.sorting import OrderTerm, SortColumn, SortDirection, SortSpec

__all__ = [
    "DataProvider",
    "DataSource",
    "KeySelector",
    "KeyedDataSource",
    "OrderTerm",
    "Page",
    "PageSpec",
    "SortColumn",
    "SortDirection",
    "SortSpec",
]
