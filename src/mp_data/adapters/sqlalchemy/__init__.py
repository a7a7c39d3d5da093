"""SQLAlchemy adapter – raw SQL, Core query and ORM model data sources."""
from mp_data.adapters.sqlalchemy.model import ModelDataSource
from mp_data.adapters.sqlalchemy.ordering import count_statement, order_clauses
from mp_data.adapters.sqlalchemy.query import QueryDataSource
from mp_data.adapters.sqlalchemy.session import SqlAlchemySessionFactory
from mp_data.adapters.sqlalchemy.sql import SqlDataSource

__all__ = [
    "ModelDataSource",
    "QueryDataSource",
    "SqlAlchemySessionFactory",
    "SqlDataSource",
    "count_statement",
    "order_clauses",
]
