"""
Shared fixtures for the booking API test suite.
"""
from typing import Any, List, Optional

import asyncpg
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql.asyncpg import AsyncAdapt_asyncpg_dbapi
from sqlalchemy.exc import DBAPIError

from parking_api.core.database import get_async_session
from parking_api.main import create_app
from parking_api.models.users import Role, User

STANDARD_TOKEN = "tbfZsAKIAeuaVNkL"
OTHER_STANDARD_TOKEN = "buOHk799vU5Ocmbf"
ADMIN_TOKEN = "bb8iJPVaj9pWPNgY"


class FakeResult:
    """Just enough of SQLAlchemy's Result for the service layer."""

    def __init__(self, rows: Optional[List[Any]] = None):
        self.rows = list(rows or [])

    def mappings(self):
        return self

    def all(self):
        return list(self.rows)

    def first(self):
        return self.rows[0] if self.rows else None

    def scalar_one_or_none(self):
        return self.rows[0] if self.rows else None


class FakeSession:
    """Records executed statements and replays queued results or errors."""

    def __init__(self):
        self.queued: List[Any] = []
        self.statements: List[Any] = []
        self.commits = 0
        self.rollbacks = 0

    def queue(self, *results):
        self.queued.extend(results)

    async def exec(self, statement):
        self.statements.append(statement)
        outcome = self.queued.pop(0) if self.queued else FakeResult()
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    async def commit(self):
        self.commits += 1

    async def rollback(self):
        self.rollbacks += 1


def compile_sql(statement, literal_binds: bool = True) -> str:
    """Render a statement as PostgreSQL text on a single line."""
    compiled = statement.compile(
        dialect=postgresql.dialect(),
        compile_kwargs={"literal_binds": literal_binds}
    )
    return " ".join(str(compiled).split())


def asyncpg_error(native: asyncpg.exceptions.PostgresError, statement: str = "INSERT INTO bookings") -> DBAPIError:
    """Wrap a server error the way the asyncpg dialect does during execute."""
    dbapi = AsyncAdapt_asyncpg_dbapi(asyncpg)
    translate = dbapi._asyncpg_error_translate
    adapted_cls = next(translate[cls] for cls in type(native).__mro__ if cls in translate)
    try:
        raise adapted_cls(native.args[0]) from native
    except dbapi.Error as adapted:
        return DBAPIError.instance(statement, {}, adapted, dbapi.Error)


def make_user(user_id: int, role: Role, token: str, first_name: str = "Ada", last_name: str = "Lovelace") -> User:
    return User(
        id=user_id,
        first_name=first_name,
        last_name=last_name,
        email=f"user{user_id}@example.com",
        role=role,
        api_token=token,
    )


@pytest.fixture
def standard_user() -> User:
    return make_user(1, Role.standard, STANDARD_TOKEN)


@pytest.fixture
def admin_user() -> User:
    return make_user(3, Role.admin, ADMIN_TOKEN, first_name="Grace", last_name="Hopper")


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(fake_session):
    test_app = create_app()

    async def override_get_async_session():
        yield fake_session

    test_app.dependency_overrides[get_async_session] = override_get_async_session
    return TestClient(test_app, raise_server_exceptions=False)


def compiled_params(statement) -> dict:
    return statement.compile(dialect=postgresql.dialect()).params
