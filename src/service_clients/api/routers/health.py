"""
service_clients.api.routers.health

Health and readiness endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(request: Request) -> dict[str, str]:
    # Ready once the app factory has wired the services onto app.state.
    if getattr(request.app.state, "access_rights", None) is None:
        return {"status": "starting"}
    return {"status": "ready"}
