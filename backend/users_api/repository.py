"""SQL access for the ``users`` table.

Each function runs exactly one bound-parameter statement on a connection
checked out from the pool and returned as soon as the statement completes.
"""

import enum

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from users_api.models.user import UserCreate

SELECT_ALL = text("SELECT * FROM users")
SELECT_BY_ID = text("SELECT * FROM users WHERE id = :id")
INSERT = text(
    "INSERT INTO users (username, email, password, role) "
    "VALUES (:username, :email, :password, :role)"
)
UPDATE = text(
    "UPDATE users SET username = :username, email = :email, "
    "password = :password, role = :role WHERE id = :id"
)
DELETE = text("DELETE FROM users WHERE id = :id")


class ErrorKind(enum.Enum):
    NOT_FOUND = "not_found"
    STORE_FAILURE = "store_failure"


class StoreError(Exception):
    def __init__(self, kind: ErrorKind):
        super().__init__(kind.value)
        self.kind = kind


def list_users(pool: Engine) -> list[dict]:
    try:
        with pool.connect() as conn:
            rows = conn.execute(SELECT_ALL).mappings().all()
    except SQLAlchemyError as exc:
        raise StoreError(ErrorKind.STORE_FAILURE) from exc
    return [dict(row) for row in rows]


def get_user(pool: Engine, user_id: int) -> dict:
    try:
        with pool.connect() as conn:
            row = conn.execute(SELECT_BY_ID, {"id": user_id}).mappings().first()
    except SQLAlchemyError as exc:
        raise StoreError(ErrorKind.STORE_FAILURE) from exc
    if row is None:
        raise StoreError(ErrorKind.NOT_FOUND)
    return dict(row)


def _write(pool: Engine, statement, params: dict) -> int:
    try:
        with pool.connect() as conn:
            rowcount = conn.execute(statement, params).rowcount
            conn.commit()
    except SQLAlchemyError as exc:
        raise StoreError(ErrorKind.STORE_FAILURE) from exc
    return rowcount


def create_user(pool: Engine, data: UserCreate) -> None:
    _write(pool, INSERT, data.model_dump())


def update_user(pool: Engine, user_id: int, data: UserCreate) -> int:
    """Overwrite all four fields; returns the affected row count."""
    return _write(pool, UPDATE, {**data.model_dump(), "id": user_id})


def delete_user(pool: Engine, user_id: int) -> int:
    return _write(pool, DELETE, {"id": user_id})
