"""SQLAlchemy adapter – SqlAlchemySessionFactory."""
from __future__ import annotations

from typing import Any

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker


class SqlAlchemySessionFactory:
    """Creates synchronous SQLAlchemy sessions from an engine URL.

    The factory owns the engine; callers own each session::

        factory = SqlAlchemySessionFactory("sqlite:///app.db")
        with factory() as session:
            provider = DataProvider(QueryDataSource(session, select(users)))
    """

    def __init__(self, database_url: str, **engine_kwargs: Any) -> None:
        self._engine = create_engine(database_url, **engine_kwargs)
        self._session_factory = sessionmaker(self._engine, class_=Session, expire_on_commit=False)

    @property
    def engine(self) -> Engine:
        return self._engine

    def __call__(self) -> Session:
        return self._session_factory()

    def dispose(self) -> None:
        self._engine.dispose()


__all__ = ["SqlAlchemySessionFactory"]
