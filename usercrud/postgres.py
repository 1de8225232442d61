"""A pooled database connection opened with retries."""

from __future__ import annotations

import logging
import time

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import ArgumentError, SQLAlchemyError
from sqlalchemy.pool import QueuePool

_log = logging.getLogger(__name__)

_DEFAULT_MAX_POOL_SIZE = 1
_DEFAULT_CONN_ATTEMPTS = 10
_DEFAULT_CONN_TIMEOUT = 1.0


class PostgresError(Exception):
    """The database could not be reached."""


def _engine_url(url: str) -> str:
    if url.startswith("postgres://"):
        return "postgresql://" + url[len("postgres://"):]
    return url


class Postgres:
    """A connection pool of at most ``max_pool_size`` connections.

    Connecting is tried ``conn_attempts`` times, ``conn_timeout`` seconds apart.
    """

    def __init__(
        self,
        url: str,
        max_pool_size: int = _DEFAULT_MAX_POOL_SIZE,
        conn_attempts: int = _DEFAULT_CONN_ATTEMPTS,
        conn_timeout: float = _DEFAULT_CONN_TIMEOUT,
    ) -> None:
        self.max_pool_size = max_pool_size
        self.conn_attempts = conn_attempts
        self.conn_timeout = conn_timeout
        self.pool: Engine | None = None

        try:
            engine = create_engine(
                _engine_url(url),
                poolclass=QueuePool,
                pool_size=max_pool_size,
                max_overflow=0,
            )
        except (ArgumentError, ValueError) as exc:
            raise PostgresError(f"postgres - NewPostgres - parse config: {exc}") from exc

        last_error: Exception | None = None
        while self.conn_attempts > 0:
            try:
                with engine.connect():
                    pass
            except SQLAlchemyError as exc:
                last_error = exc
            else:
                self.pool = engine
                return
            _log.warning("Postgres is trying to connect, attempts left: %d", self.conn_attempts)
            time.sleep(self.conn_timeout)
            self.conn_attempts -= 1

        engine.dispose()
        if last_error is not None:
            raise PostgresError(
                f"postgres - NewPostgres - connAttempts == 0: {last_error}"
            ) from last_error

    def close(self) -> None:
        """Close every pooled connection."""
        if self.pool is not None:
            self.pool.dispose()

    def __enter__(self) -> Postgres:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()