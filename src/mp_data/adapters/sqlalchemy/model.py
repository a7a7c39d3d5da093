"""SQLAlchemy adapter – ModelDataSource (ORM / ActiveRecord style)."""
from __future__ import annotations

from typing import Any, Generic, Mapping, Sequence, TypeVar

from sqlalchemy import Select, inspect, literal_column, select
from sqlalchemy.orm import Session

from mp_data.adapters.sqlalchemy.ordering import count_statement, order_clauses
from mp_data.application.provider import KeySelector
from mp_data.application.sorting import OrderItem, SortSpec
from mp_data.config import DataSettings

TModel = TypeVar("TModel")


class ModelDataSource(Generic[TModel]):
    """Data source over an ORM mapped class; rows are model instances.

    *statement* narrows the query (``select(User).where(User.active)``) and
    defaults to ``select(model)``.  Sort fields resolve to mapped attributes
    of *model*.  Without an explicit key, rows are keyed by primary key: the
    bare value for a single-column key, a ``{attribute: value}`` dict for a
    composite one.
    """

    def __init__(
        self,
        session: Session,
        model: type[TModel],
        statement: Select[Any] | None = None,
    ) -> None:
        self._session = session
        self._model = model
        self._statement = statement if statement is not None else select(model)

    @property
    def model(self) -> type[TModel]:
        return self._model

    def count(self) -> int:
        return int(self._session.execute(count_statement(self._statement)).scalar_one())

    def fetch_page(self, limit: int, offset: int, order_by: Sequence[OrderItem]) -> list[TModel]:
        stmt = self._statement
        if order_by:
            stmt = stmt.order_by(None).order_by(*order_clauses(order_by, self._resolve))
        return list(self._session.scalars(stmt.limit(limit).offset(offset)).all())

    def column_attributes(self) -> list[str]:
        return [attr.key for attr in inspect(self._model).column_attrs]

    def sort_spec(self, params: Mapping[str, Any] | None = None, settings: DataSettings | None = None) -> SortSpec:
        """:class:`SortSpec` with every mapped column attribute of the model sortable."""
        spec = SortSpec.from_settings(settings) if settings is not None else SortSpec()
        spec = spec.with_columns(self.column_attributes())
        return spec.with_params(params) if params is not None else spec

    def primary_key_attributes(self) -> list[str]:
        mapper = inspect(self._model)
        return [mapper.get_property_by_column(col).key for col in mapper.primary_key]

    def default_key_selector(self) -> KeySelector:
        names = self.primary_key_attributes()
        if len(names) == 1:
            return KeySelector(names[0])
        return KeySelector(lambda row: {name: getattr(row, name) for name in names})

    def _resolve(self, field: str) -> Any:
        attribute = getattr(self._model, field, None)
        if attribute is not None and hasattr(attribute, "asc"):
            return attribute
        return literal_column(field)


__all__ = ["ModelDataSource"]
