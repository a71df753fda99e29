"""
service_clients.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for the shared services.
- Encapsulate app.state access patterns.
"""

from __future__ import annotations

from fastapi import Request

from service_clients.services.access_rights import AccessRightsService
from service_clients.services.local_groups import LocalGroupRegistry


def access_rights_dep(request: Request) -> AccessRightsService:
    # Created once in `service_clients.api.app.create_app`.
    return request.app.state.access_rights  # type: ignore[attr-defined]


def local_groups_dep(request: Request) -> LocalGroupRegistry:
    return request.app.state.local_groups  # type: ignore[attr-defined]
