"""Application settings read from the environment and a .env file."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


class ConfigError(Exception):
    """The configuration could not be loaded."""


@dataclass(frozen=True)
class LogConfig:
    level: str


@dataclass(frozen=True)
class PGConfig:
    pool_max: int
    url: str


def _parse_int(raw: str) -> int:
    # A leading zero means octal, as with base-prefix integer parsing.
    digits = raw.lstrip("+-")
    if len(digits) > 1 and digits[0] == "0" and digits[1].isdigit():
        raw = raw[: len(raw) - len(digits)] + "0o" + digits[1:]
    return int(raw, 0)


@dataclass(frozen=True)
class Config:
    log: LogConfig
    pg: PGConfig

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Config:
        """Read the settings from ``environ`` (the process environment by default)."""
        environ = os.environ if environ is None else environ
        missing = [
            f'env: required environment variable "{name}" is not set'
            for name in ("LOG_LEVEL", "PG_POOL_MAX", "PG_URL")
            if name not in environ
        ]
        problems = list(missing)
        pool_max = 0
        if "PG_POOL_MAX" in environ:
            raw = environ["PG_POOL_MAX"]
            try:
                pool_max = _parse_int(raw)
            except ValueError:
                problems.append(
                    f'env: parse error on field "PoolMax" of type "int": invalid value {raw!r}'
                )
        if problems:
            raise ConfigError("config error: " + "; ".join(problems))
        return cls(
            LogConfig(level=environ["LOG_LEVEL"]),
            PGConfig(pool_max=pool_max, url=environ["PG_URL"]),
        )


def load_config(env_file: str | os.PathLike[str] = ".env") -> Config:
    """Load ``env_file`` into the environment, then read the settings.

    Variables already set in the environment win over the file.
    """
    path = Path(env_file)
    if not path.is_file():
        raise ConfigError(
            f"Ошибка загрузки .env файла: open {env_file}: no such file or directory"
        )
    load_dotenv(path, override=False)
    return Config.from_env()