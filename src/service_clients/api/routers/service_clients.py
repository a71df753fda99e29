"""
service_clients.api.routers.service_clients

Access-rights endpoints of a service, expressed as service clients.

Responsibilities:
- List the service clients that may invoke a service.
- Grant and revoke access for a batch of service clients (all-or-nothing).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel, Field
from starlette.status import HTTP_204_NO_CONTENT

from service_clients.api.deps import access_rights_dep
from service_clients.converters.models import ServiceClient
from service_clients.services.access_rights import AccessRightsService

router = APIRouter(prefix="/v1/services", tags=["service-clients"])


class ServiceClients(BaseModel):
    items: list[ServiceClient] = Field(default_factory=list)


@router.get("/{service_code}/service-clients", response_model=list[ServiceClient])
async def get_service_clients(
    service_code: str,
    service: AccessRightsService = Depends(access_rights_dep),
) -> list[ServiceClient]:
    return service.list_service_clients(service_code)


@router.post("/{service_code}/service-clients", response_model=list[ServiceClient])
async def add_service_clients(
    service_code: str,
    body: ServiceClients,
    service: AccessRightsService = Depends(access_rights_dep),
) -> list[ServiceClient]:
    return service.add_service_clients(service_code, body.items)


@router.post("/{service_code}/service-clients/delete", status_code=HTTP_204_NO_CONTENT)
async def delete_service_clients(
    service_code: str,
    body: ServiceClients,
    service: AccessRightsService = Depends(access_rights_dep),
) -> Response:
    service.remove_service_clients(service_code, body.items)
    return Response(status_code=HTTP_204_NO_CONTENT)


# --- Module Notes -----------------------------------------------------------
# Routers stay thin: conversion and grant rules live in AccessRightsService.
