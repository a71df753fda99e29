"""
service_clients.identifiers.models

Identifier value types for subjects known to the federation.

Responsibilities:
- Define one frozen dataclass per subject type; the `object_type` tag decides
  which fields exist and how the identifier is encoded.
- Reject empty fields at construction time.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, fields


class SubjectType(enum.StrEnum):
    MEMBER = "MEMBER"
    SUBSYSTEM = "SUBSYSTEM"
    GLOBALGROUP = "GLOBALGROUP"
    LOCALGROUP = "LOCALGROUP"
    SERVICE = "SERVICE"


def _require_fields(obj: object) -> None:
    for f in fields(obj):  # type: ignore[arg-type]
        value = getattr(obj, f.name)
        if not isinstance(value, str) or not value:
            raise ValueError(f"{type(obj).__name__}.{f.name} must be a non-empty string")


@dataclass(frozen=True, slots=True)
class MemberId:
    xroad_instance: str
    member_class: str
    member_code: str

    def __post_init__(self) -> None:
        _require_fields(self)

    @property
    def object_type(self) -> SubjectType:
        return SubjectType.MEMBER


@dataclass(frozen=True, slots=True)
class SubsystemId:
    xroad_instance: str
    member_class: str
    member_code: str
    subsystem_code: str

    def __post_init__(self) -> None:
        _require_fields(self)

    @property
    def object_type(self) -> SubjectType:
        return SubjectType.SUBSYSTEM

    @property
    def member_id(self) -> MemberId:
        return MemberId(self.xroad_instance, self.member_class, self.member_code)


@dataclass(frozen=True, slots=True)
class GlobalGroupId:
    xroad_instance: str
    group_code: str

    def __post_init__(self) -> None:
        _require_fields(self)

    @property
    def object_type(self) -> SubjectType:
        return SubjectType.GLOBALGROUP


@dataclass(frozen=True, slots=True)
class LocalGroupId:
    # Scoped to the serving entity; deliberately carries no instance.
    group_code: str

    def __post_init__(self) -> None:
        _require_fields(self)

    @property
    def object_type(self) -> SubjectType:
        return SubjectType.LOCALGROUP


@dataclass(frozen=True, slots=True)
class ServiceId:
    xroad_instance: str
    member_class: str
    member_code: str
    subsystem_code: str
    service_code: str

    def __post_init__(self) -> None:
        _require_fields(self)

    @property
    def object_type(self) -> SubjectType:
        return SubjectType.SERVICE


ClientId = MemberId | SubsystemId
SubjectId = MemberId | SubsystemId | GlobalGroupId | LocalGroupId | ServiceId


# --- Module Notes -----------------------------------------------------------
# MEMBER and SERVICE have no service-client counterpart; they exist so the
# formatter's unknown-kind fallback has real inputs to deal with.
