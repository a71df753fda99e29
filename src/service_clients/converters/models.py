"""
service_clients.converters.models

External (wire-facing) service client model and the access-right holder input.

Responsibilities:
- `ServiceClient`: the representation exchanged with API callers.
- `AccessRightHolder`: an internal subject paired with its grant metadata.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, ConfigDict

from service_clients.identifiers.models import SubjectId


class ServiceClientType(enum.StrEnum):
    SUBSYSTEM = "SUBSYSTEM"
    GLOBALGROUP = "GLOBALGROUP"
    LOCALGROUP = "LOCALGROUP"


class ServiceClient(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # Encoded identifier; for LOCALGROUP this is the registry id, not a code.
    id: str | None = None
    name: str | None = None
    # Kept as a raw string so unmapped kinds reach the converter and fail there
    # as an invalid request; formatted clients carry ServiceClientType members.
    service_client_type: str | None = None
    local_group_code: str | None = None
    local_group_description: str | None = None
    rights_given_at: datetime | None = None


@dataclass(frozen=True, slots=True)
class AccessRightHolder:
    subject_id: SubjectId
    rights_given_at: datetime | None = None
    # Populated only for local group subjects.
    local_group_id: str | None = None
    local_group_code: str | None = None
    local_group_description: str | None = None


# --- Module Notes -----------------------------------------------------------
# `name` and `local_group_description` are derived on output and ignored on input.
