"""The HTTP API and the command that serves it."""

from __future__ import annotations

import argparse
import json
import re
from typing import Any

from flask import Flask, Response, request

from usercrud import response
from usercrud.config import ConfigError, load_config
from usercrud.container import Container
from usercrud.entity import User
from usercrud.logger import Logger
from usercrud.repository import from_config
from usercrud.service import UserService

_DECODE_ERROR = "Не удалось декодировать тело запроса"
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_JSON_ESCAPES = (
    ("<", "\\u003c"),
    (">", "\\u003e"),
    ("&", "\\u0026"),
    ("\u2028", "\\u2028"),
    ("\u2029", "\\u2029"),
)


def _json(payload: Any, status: int = 200) -> Response:
    body = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    for char, escaped in _JSON_ESCAPES:
        body = body.replace(char, escaped)
    return Response(body + "\n", status=status, mimetype="application/json")


def _not_found() -> Response:
    return _json(response.error("User not found").to_dict(), 404)


def _bad_request() -> Response:
    return Response(
        _DECODE_ERROR + "\n",
        status=400,
        content_type="text/plain; charset=utf-8",
        headers={"X-Content-Type-Options": "nosniff"},
    )


def _user_id(raw: str) -> int:
    """Parse a decimal id; anything unparsable means 0."""
    if not re.fullmatch(r"[+-]?[0-9]+", raw):
        return 0
    value = int(raw)
    return value if _INT64_MIN <= value <= _INT64_MAX else 0


def _request_user() -> User:
    """Decode the first JSON value of the request body into a user."""
    text = request.get_data().decode("utf-8", errors="replace").lstrip(" \t\r\n")
    value, _ = json.JSONDecoder().raw_decode(text)
    return User.from_dict(value)


def create_app(di: Container) -> Flask:
    """Build the application with the user and health routes."""
    app = Flask(__name__)

    @app.get("/user/<user_id>")
    def get_user(user_id: str) -> Response:
        user = UserService(di).get_user(_user_id(user_id))
        if user is None:
            return _not_found()
        return _json(user.to_dict())

    @app.post("/user")
    def create_user() -> Response:
        try:
            user = _request_user()
        except ValueError:
            return _bad_request()
        created = UserService(di).create_user(user)
        return _json(created.to_dict(), 201)

    @app.put("/user/<user_id>")
    def update_user(user_id: str) -> Response:
        ident = _user_id(user_id)
        service = UserService(di)
        if service.get_user(ident) is None:
            return _not_found()
        try:
            user = _request_user()
        except ValueError:
            return _bad_request()
        return _json(service.update_user(ident, user).to_dict())

    @app.delete("/user/<user_id>")
    def delete_user(user_id: str) -> Response:
        ident = _user_id(user_id)
        service = UserService(di)
        if service.get_user(ident) is None:
            return _not_found()
        service.delete_user(ident)
        return _json(response.ok().to_dict())

    @app.get("/health")
    def health() -> Response:
        return _json(response.ok().to_dict())

    return app


def run(di: Container, logger: Logger, host: str = "0.0.0.0", port: int = 8080) -> None:
    """Serve the application until interrupted. ``logger`` is kept for the handlers' use."""
    app = create_app(di)
    print(f"Сервер запущен на порту {port}")
    try:
        app.run(host=host, port=port)
    except OSError as exc:
        print("Ошибка при запуске сервера:", exc)


def main(argv: list[str] | None = None) -> None:
    """Load the settings from .env, open the database and serve the API."""
    argparse.ArgumentParser(prog="usercrud", description="User CRUD HTTP service.").parse_args(argv)
    try:
        cfg = load_config()
    except ConfigError as exc:
        raise SystemExit(f"Config error: {exc}") from exc
    repository = from_config(cfg)
    logger = Logger(cfg.log.level)
    run(Container(cfg, repository), logger)