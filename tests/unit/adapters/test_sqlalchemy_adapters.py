"""Unit tests for the SQLAlchemy data sources (raw SQL, Core query, ORM model).

Uses an in-memory SQLite database through the stdlib ``sqlite3`` driver; no
running server needed.
"""
from __future__ import annotations

from collections.abc import Iterator

import pytest
from sqlalchemy import Integer, String, select
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column

from mp_data.adapters.sqlalchemy import (
    ModelDataSource,
    QueryDataSource,
    SqlAlchemySessionFactory,
    SqlDataSource,
)
from mp_data.application.provider import DataProvider, KeyedDataSource
from mp_data.application.sorting import OrderTerm, SortDirection, SortSpec
from mp_data.config import DataSettings

ASC = SortDirection.ASC
DESC = SortDirection.DESC

# ---------------------------------------------------------------------------
# Shared ORM base and test models
# ---------------------------------------------------------------------------


class Base(DeclarativeBase):
    pass


class UserModel(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    username: Mapped[str] = mapped_column(String(64))
    first_name: Mapped[str] = mapped_column(String(64))
    last_name: Mapped[str] = mapped_column(String(64))
    age: Mapped[int] = mapped_column(Integer)


class MembershipModel(Base):
    """Composite primary key."""

    __tablename__ = "memberships"

    group_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    role: Mapped[str] = mapped_column(String(32))


USERS = [
    UserModel(id=1, username="admin", first_name="Ada", last_name="Lovelace", age=40),
    UserModel(id=2, username="user", first_name="Alan", last_name="Turing", age=25),
    UserModel(id=3, username="guest", first_name="Alan", last_name="Kay", age=31),
]

NAME_SORT = SortSpec().with_columns([
    "age",
    "username",
    {"name": {
        "asc": {"first_name": "ASC", "last_name": "ASC"},
        "desc": {"first_name": "DESC", "last_name": "DESC"},
    }},
])


# ---------------------------------------------------------------------------
# Engine + session fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def session_factory() -> Iterator[SqlAlchemySessionFactory]:
    factory = SqlAlchemySessionFactory("sqlite://")
    Base.metadata.create_all(factory.engine)
    with factory() as session:
        session.add_all(
            [
                UserModel(id=u.id, username=u.username, first_name=u.first_name, last_name=u.last_name, age=u.age)
                for u in USERS
            ]
        )
        session.add_all(
            [
                MembershipModel(group_id=1, user_id=1, role="owner"),
                MembershipModel(group_id=1, user_id=2, role="member"),
                MembershipModel(group_id=2, user_id=3, role="member"),
            ]
        )
        session.commit()
    yield factory
    factory.dispose()


@pytest.fixture()
def session(session_factory: SqlAlchemySessionFactory) -> Iterator[Session]:
    with session_factory() as s:
        yield s


# ---------------------------------------------------------------------------
# SqlAlchemySessionFactory
# ---------------------------------------------------------------------------


class TestSessionFactory:
    def test_returns_session(self, session_factory: SqlAlchemySessionFactory) -> None:
        with session_factory() as s:
            assert isinstance(s, Session)
            assert s.get(UserModel, 1).username == "admin"


# ---------------------------------------------------------------------------
# SqlDataSource
# ---------------------------------------------------------------------------


class TestSqlDataSource:
    def test_count(self, session: Session) -> None:
        assert SqlDataSource(session, "SELECT * FROM users").count() == 3

    def test_fetch_page_returns_dicts(self, session: Session) -> None:
        rows = SqlDataSource(session, "SELECT id, username FROM users").fetch_page(
            2, 0, [OrderTerm("id", ASC)]
        )
        assert rows == [{"id": 1, "username": "admin"}, {"id": 2, "username": "user"}]

    def test_ordering_and_offset(self, session: Session) -> None:
        rows = SqlDataSource(session, "SELECT * FROM users").fetch_page(
            2, 1, [OrderTerm("username", DESC)]
        )
        assert [r["username"] for r in rows] == ["guest", "admin"]

    def test_bound_params(self, session: Session) -> None:
        source = SqlDataSource(session, "SELECT * FROM users WHERE age >= :min_age;", {"min_age": 30})
        assert source.count() == 2
        rows = source.fetch_page(10, 0, [OrderTerm("age", ASC)])
        assert [r["username"] for r in rows] == ["guest", "admin"]

    def test_raw_expression(self, session: Session) -> None:
        rows = SqlDataSource(session, "SELECT * FROM users").fetch_page(10, 0, ["age DESC"])
        assert [r["age"] for r in rows] == [40, 31, 25]

    @pytest.mark.parametrize("sql", ["SELECT * FROM users ;", "SELECT * FROM users;\n ; ", " SELECT * FROM users\n"])
    def test_trailing_semicolons_and_whitespace_are_stripped(self, session: Session, sql: str) -> None:
        assert SqlDataSource(session, sql).sql == "SELECT * FROM users"

    def test_trailing_line_comment(self, session: Session) -> None:
        source = SqlDataSource(session, "SELECT * FROM users WHERE age > 30 -- adults only")
        assert source.count() == 2
        rows = source.fetch_page(10, 0, [OrderTerm("age", DESC)])
        assert [r["username"] for r in rows] == ["admin", "guest"]

    def test_database_errors_propagate(self, session: Session) -> None:
        source = SqlDataSource(session, "SELECT * FROM missing_table")
        with pytest.raises(OperationalError):
            source.count()
        with pytest.raises(OperationalError):
            DataProvider(source).read()

    def test_end_to_end_pages(self, session: Session) -> None:
        provider = DataProvider(SqlDataSource(session, "SELECT * FROM users ORDER BY id"), key="id")
        provider = provider.with_page_size(2)
        assert [r["username"] for r in provider.with_current_page(1).read()] == ["admin", "user"]
        assert [r["username"] for r in provider.with_current_page(2).read()] == ["guest"]
        assert provider.with_current_page(2).get_keys() == [3]
        assert provider.total_pages() == 2


# ---------------------------------------------------------------------------
# QueryDataSource
# ---------------------------------------------------------------------------


class TestQueryDataSource:
    def test_count_ignores_window_and_ordering(self, session: Session) -> None:
        stmt = select(UserModel.__table__).order_by(UserModel.age).limit(1)
        assert QueryDataSource(session, stmt).count() == 3

    def test_rows_are_dicts(self, session: Session) -> None:
        users = UserModel.__table__
        source = QueryDataSource(session, select(users.c.id, users.c.username))
        rows = source.fetch_page(1, 0, [OrderTerm("username", ASC)])
        assert rows == [{"id": 1, "username": "admin"}]

    def test_orders_by_non_selected_column(self, session: Session) -> None:
        users = UserModel.__table__
        source = QueryDataSource(session, select(users.c.username))
        rows = source.fetch_page(10, 0, [OrderTerm("age", DESC)])
        assert [r["username"] for r in rows] == ["admin", "guest", "user"]

    def test_requested_order_replaces_statement_order(self, session: Session) -> None:
        users = UserModel.__table__
        source = QueryDataSource(session, select(users).order_by(users.c.age))
        rows = source.fetch_page(10, 0, [OrderTerm("id", DESC)])
        assert [r["id"] for r in rows] == [3, 2, 1]

    def test_statement_order_kept_without_request(self, session: Session) -> None:
        users = UserModel.__table__
        source = QueryDataSource(session, select(users).order_by(users.c.age))
        assert [r["age"] for r in source.fetch_page(10, 0, [])] == [25, 31, 40]

    def test_provider_with_multi_column_sort(self, session: Session) -> None:
        sort = NAME_SORT.with_multi_sort().with_params({"sort": "-name,age"})
        provider = DataProvider(QueryDataSource(session, select(UserModel.__table__)), sort=sort)
        assert [r["last_name"] for r in provider.read()] == ["Turing", "Kay", "Lovelace"]


# ---------------------------------------------------------------------------
# ModelDataSource
# ---------------------------------------------------------------------------


class TestModelDataSource:
    def test_rows_are_model_instances(self, session: Session) -> None:
        rows = ModelDataSource(session, UserModel).fetch_page(10, 0, [OrderTerm("id", ASC)])
        assert all(isinstance(r, UserModel) for r in rows)
        assert [r.username for r in rows] == ["admin", "user", "guest"]

    def test_statement_narrows_rows(self, session: Session) -> None:
        source = ModelDataSource(session, UserModel, select(UserModel).where(UserModel.age > 30))
        assert source.count() == 2

    def test_unknown_attribute_falls_back_to_column_name(self, session: Session) -> None:
        source = ModelDataSource(session, UserModel)
        rows = source.fetch_page(10, 0, [OrderTerm("users.age", ASC)])
        assert [r.age for r in rows] == [25, 31, 40]

    def test_is_keyed_source(self, session: Session) -> None:
        assert isinstance(ModelDataSource(session, UserModel), KeyedDataSource)

    def test_primary_key_is_default_key(self, session: Session) -> None:
        sort = NAME_SORT.with_params({"sort": "-age"})
        provider = DataProvider(ModelDataSource(session, UserModel), sort=sort)
        assert provider.get_keys() == [1, 3, 2]

    def test_composite_primary_key(self, session: Session) -> None:
        sort = SortSpec().with_columns(["user_id"]).with_params({"sort": "user_id"})
        provider = DataProvider(ModelDataSource(session, MembershipModel), sort=sort)
        assert provider.get_keys() == [
            {"group_id": 1, "user_id": 1},
            {"group_id": 1, "user_id": 2},
            {"group_id": 2, "user_id": 3},
        ]

    def test_sort_spec_declares_every_mapped_column(self, session: Session) -> None:
        source = ModelDataSource(session, UserModel)
        spec = source.sort_spec()
        assert [c.name for c in spec.columns] == ["id", "username", "first_name", "last_name", "age"]

    def test_sort_spec_sorts_by_mapped_attribute(self, session: Session) -> None:
        source = ModelDataSource(session, UserModel)
        provider = DataProvider(source, sort=source.sort_spec({"sort": "last_name,ghost"}))
        assert [u.last_name for u in provider.read()] == ["Kay", "Lovelace", "Turing"]

    def test_sort_spec_applies_settings(self, session: Session) -> None:
        source = ModelDataSource(session, UserModel)
        spec = source.sort_spec({"order": "-age"}, DataSettings(sort_param="order", multi_sort=True))
        assert spec.multi_sort is True
        assert DataProvider(source, sort=spec).get_keys() == [1, 3, 2]

    def test_explicit_key_overrides_primary_key(self, session: Session) -> None:
        provider = DataProvider(ModelDataSource(session, UserModel), key="username")
        assert sorted(provider.get_keys()) == ["admin", "guest", "user"]

    def test_page(self, session: Session) -> None:
        sort = NAME_SORT.with_params({"sort": "name"})
        provider = (
            DataProvider(ModelDataSource(session, UserModel), sort=sort)
            .with_page_size(2)
            .with_current_page(1)
        )
        page = provider.page()
        assert [u.last_name for u in page.items] == ["Lovelace", "Kay"]
        assert page.keys == [1, 3]
        assert page.total == 3
        assert page.has_next
