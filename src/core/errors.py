"""Errores tipados del Core.

Why a flat taxonomy:
- Three kinds are enough for every failure the use cases can surface.
- Each kind carries the status/code the transport boundary needs, so the
  CLI (or any future API) never has to guess.
"""

from __future__ import annotations

from typing import Any


class AppError(Exception):
    """Base error for every failure raised by repositories and use cases."""

    code: str = "INTERNAL_ERROR"
    status_code: int = 500
    prefix: str = "Error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.prefix}: {self.message}"

    def to_payload(self) -> dict[str, Any]:
        """Error body as exposed to callers."""

        return {"error": {"code": self.code, "message": str(self)}}


class NotFoundError(AppError):
    """The requested species does not exist upstream."""

    code = "NOT_FOUND"
    status_code = 404
    prefix = "Resource not found"


class BadRequestError(AppError):
    """The input was rejected as malformed (e.g. by the translation API)."""

    code = "BAD_REQUEST"
    status_code = 400
    prefix = "Bad request"


class GenericError(AppError):
    """Transport, decode, rate limiting or any unclassified upstream error."""

    code = "INTERNAL_ERROR"
    status_code = 500
    prefix = "Generic error"
