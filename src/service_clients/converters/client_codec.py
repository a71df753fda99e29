"""
service_clients.converters.client_codec

Encoding of member and subsystem identifiers.

Responsibilities:
- `ClientIdCodec.encode`: `INSTANCE:CLASS:CODE` or `INSTANCE:CLASS:CODE:SUBSYSTEM`.
- `ClientIdCodec.decode`: parse and validate the same format.
"""

from __future__ import annotations

from service_clients.errors import BadRequestError
from service_clients.identifiers.encoding import (
    ENCODED_ID_SEPARATOR,
    count_occurrences,
    join_encoded_id,
    split_encoded_id,
)
from service_clients.identifiers.models import ClientId, MemberId, SubsystemId
from service_clients.observability.logging import get_logger

log = get_logger(__name__)

INSTANCE_INDEX = 0
MEMBER_CLASS_INDEX = 1
MEMBER_CODE_INDEX = 2
SUBSYSTEM_CODE_INDEX = 3


class ClientIdCodec:
    def encode(self, client_id: ClientId) -> str:
        if isinstance(client_id, SubsystemId):
            return join_encoded_id(
                client_id.xroad_instance,
                client_id.member_class,
                client_id.member_code,
                client_id.subsystem_code,
            )
        return join_encoded_id(
            client_id.xroad_instance, client_id.member_class, client_id.member_code
        )

    def decode(self, encoded_id: str | None) -> ClientId:
        separators = count_occurrences(encoded_id, ENCODED_ID_SEPARATOR)
        if separators not in (MEMBER_CODE_INDEX, SUBSYSTEM_CODE_INDEX):
            raise self._invalid(encoded_id)

        parts = split_encoded_id(encoded_id or "")
        if any(not p for p in parts):
            raise self._invalid(encoded_id)

        if separators == SUBSYSTEM_CODE_INDEX:
            return SubsystemId(
                xroad_instance=parts[INSTANCE_INDEX],
                member_class=parts[MEMBER_CLASS_INDEX],
                member_code=parts[MEMBER_CODE_INDEX],
                subsystem_code=parts[SUBSYSTEM_CODE_INDEX],
            )
        return MemberId(
            xroad_instance=parts[INSTANCE_INDEX],
            member_class=parts[MEMBER_CLASS_INDEX],
            member_code=parts[MEMBER_CODE_INDEX],
        )

    @staticmethod
    def _invalid(encoded_id: str | None) -> BadRequestError:
        log.warning("invalid_client_id", encoded_id=encoded_id)
        return BadRequestError(f"Invalid client id {encoded_id}", code="invalid_client_id")
