"""
service_clients.api.error_handlers

Exception handlers that render service errors as JSON.

Responsibilities:
- `ServiceClientError` -> `{"error": {"code", "message"}}` with its HTTP status.
- Unhandled exceptions -> generic 500 without internal details.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from service_clients.errors import ServiceClientError
from service_clients.observability.logging import get_logger

log = get_logger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ServiceClientError)
    async def service_client_error_handler(
        request: Request, exc: ServiceClientError
    ) -> JSONResponse:
        log.warning(
            "request_rejected",
            error_code=exc.code,
            error_message=exc.message,
            status_code=exc.http_status,
        )
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        log.error("unhandled_exception", exc_info=exc)
        return JSONResponse(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {"code": "internal_error", "message": "An unexpected error occurred"}
            },
        )
