"""Application sorting – column declarations, directive decoding, ORDER BY flattening."""
from mp_data.application.sorting.column import ColumnOrdering, SortColumn, humanize, normalize_columns
from mp_data.application.sorting.direction import OrderItem, OrderTerm, SortDirection
from mp_data.application.sorting.sort_spec import DEFAULT_SEPARATOR, DEFAULT_SORT_PARAM, SortSpec

__all__ = [
    "ColumnOrdering",
    "DEFAULT_SEPARATOR",
    "DEFAULT_SORT_PARAM",
    "OrderItem",
    "OrderTerm",
    "SortColumn",
    "SortDirection",
    "SortSpec",
    "humanize",
    "normalize_columns",
]
