"""
service_clients.errors

Error types raised by the conversion and access-rights layers.

Responsibilities:
- Carry a stable error code and a human-readable message.
- Know their HTTP status so the API layer can render them uniformly.
"""

from __future__ import annotations

from typing import Any


class ServiceClientError(Exception):
    http_status: int = 500
    default_code: str = "internal_error"

    def __init__(self, message: str, *, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code

    def to_response(self) -> dict[str, Any]:
        return {"error": {"code": self.code, "message": self.message}}


class BadRequestError(ServiceClientError):
    """Client-supplied data is structurally invalid."""

    http_status = 400
    default_code = "invalid_request"


class NotFoundError(ServiceClientError):
    http_status = 404
    default_code = "not_found"


class ConflictError(ServiceClientError):
    http_status = 409
    default_code = "conflict"


# --- Module Notes -----------------------------------------------------------
# Converters only ever raise BadRequestError; the other kinds belong to the
# access-rights service.
