"""SQLAlchemy adapter – SqlDataSource (raw SQL)."""
from __future__ import annotations

import string
from typing import Any, Mapping, Sequence

from sqlalchemy import column, func, literal_column, select, text
from sqlalchemy.orm import Session

from mp_data.adapters.sqlalchemy.ordering import order_clauses
from mp_data.application.sorting import OrderItem

_SUBQUERY_ALIAS = "mp_data_rows"


class SqlDataSource:
    """Data source over a raw SQL ``SELECT``.

    The statement is wrapped as a derived table, so ordering and the page
    window are applied outside of it::

        SELECT * FROM (<sql>) AS mp_data_rows ORDER BY ... LIMIT ... OFFSET ...

    Named parameters (``:min_age``) are bound from *params*.  Rows come back
    as plain ``dict`` records.
    """

    def __init__(self, session: Session, sql: str, params: Mapping[str, Any] | None = None) -> None:
        self._session = session
        self._sql = sql.strip().rstrip(";" + string.whitespace)
        self._params = dict(params or {})

    @property
    def sql(self) -> str:
        return self._sql

    def _derived_table(self) -> Any:
        # newline keeps a trailing "--" comment off the closing paren
        return text(f"({self._sql}\n) AS {_SUBQUERY_ALIAS}")

    def count(self) -> int:
        stmt = select(func.count()).select_from(self._derived_table())
        return int(self._session.execute(stmt, self._params).scalar_one())

    def fetch_page(self, limit: int, offset: int, order_by: Sequence[OrderItem]) -> list[dict[str, Any]]:
        stmt = (
            select(literal_column("*"))
            .select_from(self._derived_table())
            .order_by(*order_clauses(order_by, column))
            .limit(limit)
            .offset(offset)
        )
        result = self._session.execute(stmt, self._params)
        return [dict(row._mapping) for row in result]


__all__ = ["SqlDataSource"]
