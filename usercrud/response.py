"""Status documents returned by the HTTP API."""

from __future__ import annotations

from dataclasses import dataclass

STATUS_OK = "ok"
STATUS_ERROR = "error"


@dataclass(frozen=True)
class Response:
    status: str
    message: str = ""

    def to_dict(self) -> dict[str, str]:
        """Return the JSON object form; an empty message is left out."""
        if self.message:
            return {"message": self.message, "status": self.status}
        return {"status": self.status}


def error(message: str) -> Response:
    return Response(status=STATUS_ERROR, message=message)


def ok() -> Response:
    return Response(status=STATUS_OK)