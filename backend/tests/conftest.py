import pytest
from fastapi.testclient import TestClient
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

from users_api.database import get_pool
from users_api.main import app
from users_api.models.user import User


@pytest.fixture(name="pool")
def pool_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture(name="client")
def client_fixture(pool: Engine):
    app.dependency_overrides[get_pool] = lambda: pool
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture(name="broken_client")
def broken_client_fixture(tmp_path):
    """Client whose pool points at a database file that cannot be opened."""
    engine = create_engine(f"sqlite:///{tmp_path / 'missing' / 'users.db'}")
    app.dependency_overrides[get_pool] = lambda: engine
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()
    engine.dispose()


@pytest.fixture
def alice(pool: Engine) -> User:
    with Session(pool) as session:
        user = User(
            username="alice",
            email="alice@example.com",
            password="secret",
            role="admin",
        )
        session.add(user)
        session.commit()
        session.refresh(user)
        return user


@pytest.fixture(name="legacy_pool")
def legacy_pool_fixture():
    """A ``users`` table created outside the service: nullable, one extra column."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    with engine.begin() as conn:
        conn.execute(
            text(
                "CREATE TABLE users ("
                "id INTEGER PRIMARY KEY AUTOINCREMENT, "
                "username TEXT, email TEXT, password TEXT, role TEXT, "
                "created_at TEXT DEFAULT '2024-01-01 00:00:00')"
            )
        )
        conn.execute(
            text(
                "INSERT INTO users (username, email, password, role) "
                "VALUES ('erin', 'erin@example.com', NULL, 'user')"
            )
        )
    yield engine
    engine.dispose()


@pytest.fixture(name="legacy_client")
def legacy_client_fixture(legacy_pool: Engine):
    app.dependency_overrides[get_pool] = lambda: legacy_pool
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()
