"""
mp_data – Sorting, pagination and data-provider primitives.

Import path convention::

    from mp_data.application.sorting import SortSpec
    from mp_data.application.pagination import PageSpec
    from mp_data.application.provider import DataProvider
    from mp_data.adapters.sqlalchemy import QueryDataSource
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
