"""
service_clients.converters.service_client_converter

Bidirectional conversion between `ServiceClient` and internal subject identifiers.

Responsibilities:
- Format access-right holders as service clients, resolving display names
  through the global configuration directory.
- Parse service clients back into identifiers, rejecting malformed input.
- Batch variants of both directions (1:1, order-preserving).
"""

from __future__ import annotations

from collections.abc import Iterable

from service_clients.converters.client_codec import SUBSYSTEM_CODE_INDEX, ClientIdCodec
from service_clients.converters.global_group_codec import GlobalGroupIdCodec
from service_clients.converters.models import AccessRightHolder, ServiceClient
from service_clients.converters.type_mapping import to_service_client_type, to_subject_type
from service_clients.errors import BadRequestError
from service_clients.globalconf.facade import GlobalConfFacade
from service_clients.identifiers.encoding import ENCODED_ID_SEPARATOR, count_occurrences
from service_clients.identifiers.models import LocalGroupId, SubjectId, SubjectType
from service_clients.observability.logging import get_logger

log = get_logger(__name__)


class ServiceClientConverter:
    """
    Stateless converter; safe to share across requests.
    """

    def __init__(
        self,
        *,
        globalconf: GlobalConfFacade,
        client_codec: ClientIdCodec | None = None,
        global_group_codec: GlobalGroupIdCodec | None = None,
    ) -> None:
        self._globalconf = globalconf
        self._client_codec = client_codec or ClientIdCodec()
        self._global_group_codec = global_group_codec or GlobalGroupIdCodec()

    def convert_access_right_holder(self, holder: AccessRightHolder) -> ServiceClient:
        service_client = ServiceClient(rights_given_at=holder.rights_given_at)
        subject_id = holder.subject_id

        object_type = subject_id.object_type
        if object_type is SubjectType.SUBSYSTEM:
            service_client.name = self._globalconf.get_member_name(subject_id)
            service_client.id = self._client_codec.encode(subject_id)
            service_client.service_client_type = to_service_client_type(object_type)
        elif object_type is SubjectType.GLOBALGROUP:
            service_client.name = self._globalconf.get_global_group_description(subject_id)
            service_client.id = self._global_group_codec.encode(subject_id)
            service_client.service_client_type = to_service_client_type(object_type)
        elif object_type is SubjectType.LOCALGROUP:
            # Everything needed is already on the holder; no directory lookups.
            service_client.id = holder.local_group_id
            service_client.local_group_code = holder.local_group_code
            service_client.local_group_description = holder.local_group_description
            service_client.name = holder.local_group_description
            service_client.service_client_type = to_service_client_type(object_type)
        else:
            # Kinds without an external counterpart format to an empty client, not an error.
            log.debug("unformattable_subject_type", object_type=str(object_type))

        return service_client

    def convert_access_right_holders(
        self, holders: Iterable[AccessRightHolder]
    ) -> list[ServiceClient]:
        return [self.convert_access_right_holder(h) for h in holders]

    def convert_id(self, service_client: ServiceClient) -> SubjectId:
        subject_type = to_subject_type(service_client.service_client_type)
        encoded_id = service_client.id

        if subject_type is SubjectType.SUBSYSTEM:
            separators = count_occurrences(encoded_id, ENCODED_ID_SEPARATOR)
            if separators != SUBSYSTEM_CODE_INDEX:
                log.warning("invalid_subsystem_id", encoded_id=encoded_id)
                raise BadRequestError(
                    f"Invalid subsystem id {encoded_id}", code="invalid_subsystem_id"
                )
            return self._client_codec.decode(encoded_id)
        if subject_type is SubjectType.GLOBALGROUP:
            return self._global_group_codec.decode(encoded_id)
        if subject_type is SubjectType.LOCALGROUP:
            # `id` is intentionally not read for local groups.
            if not service_client.local_group_code:
                raise BadRequestError("Invalid local group code", code="invalid_local_group_code")
            return LocalGroupId(group_code=service_client.local_group_code)

        log.warning(
            "invalid_service_client_type",
            service_client_type=service_client.service_client_type,
        )
        raise BadRequestError("invalid service client type", code="invalid_service_client_type")

    def convert_ids(self, service_clients: Iterable[ServiceClient]) -> list[SubjectId]:
        # The first failure propagates; no partial result is returned.
        return [self.convert_id(sc) for sc in service_clients]


# --- Module Notes -----------------------------------------------------------
# Formatting an unknown kind yields a default client while parsing an unknown
# kind raises. Callers rely on both behaviors; tests pin them down.
