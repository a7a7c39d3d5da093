"""SQLAlchemy adapter – QueryDataSource (Core query builder)."""
from __future__ import annotations

from typing import Any, Sequence

from sqlalchemy import Select
from sqlalchemy.orm import Session

from mp_data.adapters.sqlalchemy.ordering import (
    count_statement,
    order_clauses,
    selected_column_resolver,
)
from mp_data.application.sorting import OrderItem


class QueryDataSource:
    """Data source over a SQLAlchemy Core :class:`~sqlalchemy.Select`.

    Sort fields resolve against the statement's selected columns first and
    fall back to a literal column name.  A non-empty ``order_by`` replaces
    any ordering already on the statement.  Rows come back as ``dict``
    records.
    """

    def __init__(self, session: Session, statement: Select[Any]) -> None:
        self._session = session
        self._statement = statement

    @property
    def statement(self) -> Select[Any]:
        return self._statement

    def count(self) -> int:
        return int(self._session.execute(count_statement(self._statement)).scalar_one())

    def fetch_page(self, limit: int, offset: int, order_by: Sequence[OrderItem]) -> list[dict[str, Any]]:
        stmt = self._statement
        if order_by:
            stmt = stmt.order_by(None).order_by(*order_clauses(order_by, selected_column_resolver(stmt)))
        result = self._session.execute(stmt.limit(limit).offset(offset))
        return [dict(row._mapping) for row in result]


__all__ = ["QueryDataSource"]
