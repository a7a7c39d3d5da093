"""SQLAlchemy adapter – ORDER BY / COUNT statement helpers."""
from __future__ import annotations

from typing import Any, Callable, Sequence

from sqlalchemy import Select, func, literal_column, select, text

from mp_data.application.sorting import OrderItem, SortDirection

ColumnResolver = Callable[[str], Any]


def order_clauses(order_by: Sequence[OrderItem], resolve: ColumnResolver) -> list[Any]:
    """Translate flattened order items into SQLAlchemy ORDER BY clauses.

    Field terms go through *resolve*; raw expression strings are passed to
    the database verbatim via :func:`sqlalchemy.text`.
    """
    clauses: list[Any] = []
    for item in order_by:
        if isinstance(item, str):
            clauses.append(text(item))
            continue
        column = resolve(item.field)
        clauses.append(column.desc() if item.direction is SortDirection.DESC else column.asc())
    return clauses


def selected_column_resolver(statement: Select[Any]) -> ColumnResolver:
    """Resolve a field against the statement's selected columns, else by name."""

    def resolve(field: str) -> Any:
        try:
            return statement.selected_columns[field]
        except KeyError:
            return literal_column(field)

    return resolve


def count_statement(statement: Select[Any]) -> Select[Any]:
    """``SELECT count(*)`` over *statement* with its ordering and window removed."""
    inner = statement.order_by(None).limit(None).offset(None).subquery()
    return select(func.count()).select_from(inner)


__all__ = ["ColumnResolver", "count_statement", "order_clauses", "selected_column_resolver"]
