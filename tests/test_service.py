import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from usercrud.config import Config, LogConfig, PGConfig
from usercrud.container import Container
from usercrud.entity import User
from usercrud.repository import Repository
from usercrud.service import UserService


def _service(migrated=True):
    engine = create_engine(
        "sqlite://", poolclass=StaticPool, connect_args={"check_same_thread": False}
    )
    repository = Repository(engine)
    if migrated:
        repository.migrate()
    cfg = Config(LogConfig("info"), PGConfig(1, "sqlite://"))
    return UserService(Container(cfg, repository))


@pytest.fixture
def service():
    return _service()


def test_create_and_get(service):
    created = service.create_user(User(username="ann", email="ann@example.com"))
    assert service.get_user(created.id) == created


def test_get_missing_is_none(service):
    assert service.get_user(42) is None


def test_update_missing_gives_empty_user(service):
    assert service.update_user(42, User(first_name="X")) == User()


def test_update_existing(service):
    created = service.create_user(User(username="ann"))
    updated = service.update_user(created.id, User(last_name="Lee"))
    assert updated == User(id=created.id, username="ann", last_name="Lee")


def test_delete(service):
    keep = service.create_user(User(username="keep"))
    gone = service.create_user(User(username="gone"))
    service.delete_user(gone.id)
    service.delete_user(9999)
    assert service.get_user(gone.id) is None
    assert service.get_user(keep.id) == keep


def test_storage_errors_are_absorbed():
    broken = _service(migrated=False)
    assert broken.create_user(User(username="ann")) == User()
    assert broken.get_user(1) is None
    assert broken.update_user(1, User()) == User()