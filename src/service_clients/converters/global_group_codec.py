"""
service_clients.converters.global_group_codec

Encoding of global group identifiers as `INSTANCE:GROUPCODE`.
"""

from __future__ import annotations

from service_clients.errors import BadRequestError
from service_clients.identifiers.encoding import (
    ENCODED_ID_SEPARATOR,
    count_occurrences,
    join_encoded_id,
    split_encoded_id,
)
from service_clients.identifiers.models import GlobalGroupId
from service_clients.observability.logging import get_logger

log = get_logger(__name__)

INSTANCE_INDEX = 0
GROUP_CODE_INDEX = 1


class GlobalGroupIdCodec:
    def encode(self, group_id: GlobalGroupId) -> str:
        return join_encoded_id(group_id.xroad_instance, group_id.group_code)

    def decode(self, encoded_id: str | None) -> GlobalGroupId:
        if count_occurrences(encoded_id, ENCODED_ID_SEPARATOR) != GROUP_CODE_INDEX:
            raise self._invalid(encoded_id)
        parts = split_encoded_id(encoded_id or "")
        if any(not p for p in parts):
            raise self._invalid(encoded_id)
        return GlobalGroupId(
            xroad_instance=parts[INSTANCE_INDEX],
            group_code=parts[GROUP_CODE_INDEX],
        )

    @staticmethod
    def _invalid(encoded_id: str | None) -> BadRequestError:
        log.warning("invalid_global_group_id", encoded_id=encoded_id)
        return BadRequestError(
            f"Invalid global group id {encoded_id}", code="invalid_global_group_id"
        )
