"""User operations on top of the repository."""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from usercrud.container import Container
from usercrud.entity import User
from usercrud.repository import UserNotFoundError


class UserService:
    """Storage errors are absorbed: a failed lookup gives None, a failed write an empty user."""

    def __init__(self, di: Container) -> None:
        self.di = di

    def get_user(self, user_id: int) -> User | None:
        try:
            return self.di.repository.get_user_by_id(user_id)
        except (UserNotFoundError, SQLAlchemyError):
            return None

    def create_user(self, user: User) -> User:
        try:
            return self.di.repository.create_user(user)
        except SQLAlchemyError:
            return User()

    def update_user(self, user_id: int, user: User) -> User:
        try:
            return self.di.repository.update_user(user_id, user)
        except (UserNotFoundError, SQLAlchemyError):
            return User()

    def delete_user(self, user_id: int) -> None:
        try:
            self.di.repository.delete_user_by_id(user_id)
        except SQLAlchemyError:
            pass