"""
service_clients.converters.type_mapping

Fixed mapping between external service client types and internal subject types.
"""

from __future__ import annotations

from types import MappingProxyType

from service_clients.converters.models import ServiceClientType
from service_clients.identifiers.models import SubjectType

_TO_SUBJECT_TYPE = MappingProxyType(
    {
        ServiceClientType.SUBSYSTEM: SubjectType.SUBSYSTEM,
        ServiceClientType.GLOBALGROUP: SubjectType.GLOBALGROUP,
        ServiceClientType.LOCALGROUP: SubjectType.LOCALGROUP,
    }
)
_TO_SERVICE_CLIENT_TYPE = MappingProxyType({v: k for k, v in _TO_SUBJECT_TYPE.items()})


def to_subject_type(value: ServiceClientType | str | None) -> SubjectType | None:
    """
    Map an external type to the internal subject type.

    Accepts raw strings so callers holding unvalidated input get None for
    unknown values instead of an exception.
    """
    if value is None:
        return None
    try:
        return _TO_SUBJECT_TYPE.get(ServiceClientType(value))
    except ValueError:
        return None


def to_service_client_type(value: SubjectType | None) -> ServiceClientType | None:
    if value is None:
        return None
    return _TO_SERVICE_CLIENT_TYPE.get(value)
