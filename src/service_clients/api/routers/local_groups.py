"""
service_clients.api.routers.local_groups

Local group endpoints.

Responsibilities:
- Register local groups of the serving entity (code + description).
- List them with the ids exposed as service client `id`s.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from starlette.status import HTTP_201_CREATED

from service_clients.api.deps import local_groups_dep
from service_clients.services.local_groups import LocalGroup, LocalGroupRegistry

router = APIRouter(prefix="/v1/local-groups", tags=["local-groups"])


class LocalGroupRequest(BaseModel):
    code: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1, max_length=255)


class LocalGroupResponse(BaseModel):
    id: str
    code: str
    description: str


def _to_response(group: LocalGroup) -> LocalGroupResponse:
    return LocalGroupResponse(id=str(group.id), code=group.code, description=group.description)


@router.get("", response_model=list[LocalGroupResponse])
async def list_local_groups(
    registry: LocalGroupRegistry = Depends(local_groups_dep),
) -> list[LocalGroupResponse]:
    return [_to_response(g) for g in registry.list_groups()]


@router.post("", response_model=LocalGroupResponse, status_code=HTTP_201_CREATED)
async def add_local_group(
    body: LocalGroupRequest,
    registry: LocalGroupRegistry = Depends(local_groups_dep),
) -> LocalGroupResponse:
    return _to_response(registry.add(code=body.code, description=body.description))
