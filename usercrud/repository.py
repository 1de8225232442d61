"""Storage of users in a SQL database."""

from __future__ import annotations

import dataclasses

from sqlalchemy import (
    Column,
    Integer,
    MetaData,
    String,
    Table,
    create_engine,
    delete,
    insert,
    select,
    update,
)
from sqlalchemy.engine import Engine

from usercrud.config import Config
from usercrud.entity import User

_metadata = MetaData()

users = Table(
    "users",
    _metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("username", String(255), nullable=False, default=""),
    Column("first_name", String(255), nullable=False, default=""),
    Column("last_name", String(255), nullable=False, default=""),
    Column("email", String(255), nullable=False, default=""),
    Column("phone", String(255), nullable=False, default=""),
)


class UserNotFoundError(LookupError):
    """No user has the requested id."""


class Repository:
    """User records kept in the database behind ``engine``."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def migrate(self) -> None:
        """Create the tables that do not exist yet."""
        _metadata.create_all(self.engine)

    def get_user_by_id(self, user_id: int) -> User:
        query = select(
            users.c.id,
            users.c.username,
            users.c.first_name,
            users.c.last_name,
            users.c.email,
            users.c.phone,
        ).where(users.c.id == user_id)
        with self.engine.connect() as conn:
            row = conn.execute(query).one_or_none()
        if row is None:
            raise UserNotFoundError(user_id)
        return User(
            id=row.id,
            username=row.username,
            first_name=row.first_name,
            last_name=row.last_name,
            email=row.email,
            phone=row.phone,
        )

    def create_user(self, user: User) -> User:
        """Insert ``user`` and return it with its new id."""
        statement = insert(users).values(
            username=user.username,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            phone=user.phone,
        )
        with self.engine.begin() as conn:
            new_id = conn.execute(statement).inserted_primary_key[0]
        return dataclasses.replace(user, id=new_id)

    def update_user(self, user_id: int, user: User) -> User:
        """Update everything but the username; return the stored user."""
        statement = (
            update(users)
            .where(users.c.id == user_id)
            .values(
                first_name=user.first_name,
                last_name=user.last_name,
                email=user.email,
                phone=user.phone,
            )
        )
        with self.engine.begin() as conn:
            if conn.execute(statement).rowcount == 0:
                raise UserNotFoundError(user_id)
            username = conn.execute(
                select(users.c.username).where(users.c.id == user_id)
            ).scalar_one()
        return dataclasses.replace(user, id=user_id, username=username)

    def delete_user_by_id(self, user_id: int) -> None:
        with self.engine.begin() as conn:
            conn.execute(delete(users).where(users.c.id == user_id))

    def close(self) -> None:
        self.engine.dispose()


def _engine_url(url: str) -> str:
    if url.startswith("postgres://"):
        return "postgresql://" + url[len("postgres://"):]
    return url


def from_config(config: Config) -> Repository:
    """Open the configured database, check it answers and bring its schema up to date."""
    engine = create_engine(_engine_url(config.pg.url))
    with engine.connect():
        pass
    repository = Repository(engine)
    repository.migrate()
    return repository