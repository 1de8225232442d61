"""The application's shared dependencies."""

from __future__ import annotations

from dataclasses import dataclass

from usercrud.config import Config
from usercrud.repository import Repository


@dataclass(frozen=True)
class Container:
    """Settings and storage handed to the request handlers."""

    config: Config
    repository: Repository