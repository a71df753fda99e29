"""
service_clients.identifiers

Internal federated identifier model.

Responsibilities:
- Immutable identifier values tagged by subject type.
- Encoded-identifier syntax helpers shared by the converters.
"""

from service_clients.identifiers.models import (
    ClientId,
    GlobalGroupId,
    LocalGroupId,
    MemberId,
    ServiceId,
    SubjectId,
    SubjectType,
    SubsystemId,
)

__all__ = [
    "ClientId",
    "GlobalGroupId",
    "LocalGroupId",
    "MemberId",
    "ServiceId",
    "SubjectId",
    "SubjectType",
    "SubsystemId",
]
