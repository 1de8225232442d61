import logging

import pytest
from sqlalchemy import text

from usercrud.postgres import Postgres, PostgresError


def test_connects_with_default_pool_size(tmp_path):
    with Postgres(f"sqlite:///{tmp_path / 'db.sqlite'}") as pg:
        assert pg.pool.pool.size() == 1
        with pg.pool.connect() as conn:
            assert conn.execute(text("SELECT 1")).scalar_one() == 1


def test_pool_size_option(tmp_path):
    pg = Postgres(f"sqlite:///{tmp_path / 'db.sqlite'}", max_pool_size=3)
    try:
        assert pg.pool.pool.size() == 3
        assert pg.max_pool_size == 3
    finally:
        pg.close()


def test_bad_url_raises():
    with pytest.raises(PostgresError) as info:
        Postgres("not a url", conn_timeout=0)
    assert "NewPostgres" in str(info.value)


def test_retries_then_fails(tmp_path, caplog):
    url = f"sqlite:///{tmp_path / 'missing' / 'db.sqlite'}"
    with caplog.at_level(logging.WARNING, logger="usercrud.postgres"):
        with pytest.raises(PostgresError) as info:
            Postgres(url, conn_attempts=2, conn_timeout=0)
    assert "connAttempts == 0" in str(info.value)
    messages = [record.getMessage() for record in caplog.records]
    assert messages == [
        "Postgres is trying to connect, attempts left: 2",
        "Postgres is trying to connect, attempts left: 1",
    ]


def test_no_attempts_leaves_pool_empty(tmp_path):
    pg = Postgres(f"sqlite:///{tmp_path / 'db.sqlite'}", conn_attempts=0)
    assert pg.pool is None
    pg.close()
    assert pg.pool is None