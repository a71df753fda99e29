"""
service_clients.services.access_rights

Access-rights bookkeeping per service code.

Responsibilities:
- Keep the grants (subject + timestamp) of each service in memory.
- Translate between grants and `ServiceClient`s via `ServiceClientConverter`.
- Enforce grant rules: local groups must exist, no duplicates, removals must match.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime

from service_clients.converters.models import AccessRightHolder, ServiceClient
from service_clients.converters.service_client_converter import ServiceClientConverter
from service_clients.errors import BadRequestError, ConflictError, NotFoundError
from service_clients.identifiers.models import LocalGroupId, SubjectId
from service_clients.observability.logging import get_logger
from service_clients.services.local_groups import LocalGroupRegistry

log = get_logger(__name__)


class AccessRightsService:
    def __init__(
        self,
        *,
        converter: ServiceClientConverter,
        local_groups: LocalGroupRegistry,
    ) -> None:
        self._converter = converter
        self._local_groups = local_groups
        # service code -> subject -> rights given at; dicts keep grant order.
        self._grants: dict[str, dict[SubjectId, datetime]] = {}

    def list_service_clients(self, service_code: str) -> list[ServiceClient]:
        grants = self._grants.get(service_code, {})
        holders = [self._holder(subject_id, given) for subject_id, given in grants.items()]
        return self._converter.convert_access_right_holders(holders)

    def add_service_clients(
        self, service_code: str, service_clients: Iterable[ServiceClient]
    ) -> list[ServiceClient]:
        subject_ids = self._converter.convert_ids(service_clients)
        existing = self._grants.get(service_code, {})

        for subject_id in subject_ids:
            if isinstance(subject_id, LocalGroupId) and self._local_groups.get(
                subject_id.group_code
            ) is None:
                raise NotFoundError(
                    f"Local group {subject_id.group_code} not found", code="local_group_not_found"
                )
        duplicates = [s for s in subject_ids if s in existing]
        if duplicates or len(set(subject_ids)) != len(subject_ids):
            raise ConflictError(
                f"Duplicate access right for service {service_code}", code="duplicate_access_right"
            )

        now = datetime.now(tz=UTC)
        grants = self._grants.setdefault(service_code, {})
        for subject_id in subject_ids:
            grants[subject_id] = now
        log.info("access_rights_added", service_code=service_code, count=len(subject_ids))
        return self.list_service_clients(service_code)

    def remove_service_clients(
        self, service_code: str, service_clients: Iterable[ServiceClient]
    ) -> None:
        subject_ids = self._converter.convert_ids(service_clients)
        grants = self._grants.get(service_code, {})

        missing = [s for s in subject_ids if s not in grants]
        if missing:
            raise BadRequestError(
                f"Access right not found for service {service_code}", code="access_right_not_found"
            )
        for subject_id in subject_ids:
            grants.pop(subject_id, None)
        log.info("access_rights_removed", service_code=service_code, count=len(subject_ids))

    def _holder(self, subject_id: SubjectId, rights_given_at: datetime) -> AccessRightHolder:
        if isinstance(subject_id, LocalGroupId):
            group = self._local_groups.get(subject_id.group_code)
            if group is not None:
                return AccessRightHolder(
                    subject_id=subject_id,
                    rights_given_at=rights_given_at,
                    local_group_id=str(group.id),
                    local_group_code=group.code,
                    local_group_description=group.description,
                )
        return AccessRightHolder(subject_id=subject_id, rights_given_at=rights_given_at)


# --- Module Notes -----------------------------------------------------------
# Validation happens before any mutation, so a rejected batch leaves grants untouched.
