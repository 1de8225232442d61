"""The user record exchanged with clients and kept in the database."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# JSON key -> attribute name
_KEYS = {
    "id": "id",
    "username": "username",
    "firstName": "first_name",
    "lastName": "last_name",
    "email": "email",
    "phone": "phone",
}
_BY_LOWER_KEY = {key.lower(): (key, attr) for key, attr in _KEYS.items()}


@dataclass
class User:
    """A user account."""

    id: int = 0
    username: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form, keyed as clients see it."""
        return {key: getattr(self, attr) for key, attr in _KEYS.items()}

    @classmethod
    def from_dict(cls, data: Any) -> User:
        """Build a user from a decoded JSON object.

        Keys match case-insensitively, unknown keys and nulls are ignored.
        A value of the wrong type raises ValueError.
        """
        user = cls()
        if data is None:
            return user
        if not isinstance(data, dict):
            raise ValueError(f"cannot decode {type(data).__name__} into User")
        for key, value in data.items():
            spec = _BY_LOWER_KEY.get(str(key).lower())
            if spec is None or value is None:
                continue
            json_key, attr = spec
            kind = int if attr == "id" else str
            if isinstance(value, bool) or not isinstance(value, kind):
                raise ValueError(f"field {json_key!r} must be of type {kind.__name__}")
            setattr(user, attr, value)
        return user