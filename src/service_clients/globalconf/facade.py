"""
service_clients.globalconf.facade

Directory lookups used when formatting service clients.

Responsibilities:
- `GlobalConfFacade`: the query contract consumed by converters.
- `StaticGlobalConf`: an in-memory implementation built from a snapshot.
- Snapshot loading from JSON (pydantic-validated).
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from pydantic import BaseModel, Field

from service_clients.identifiers.models import ClientId, GlobalGroupId, MemberId, SubsystemId
from service_clients.observability.logging import get_logger

log = get_logger(__name__)


class GlobalConfFacade(Protocol):
    # Unknown identifiers yield None; lookups never raise for a missing entry.
    def get_member_name(self, client_id: ClientId) -> str | None: ...

    def get_global_group_description(self, group_id: GlobalGroupId) -> str | None: ...


class MemberEntry(BaseModel):
    xroad_instance: str = Field(min_length=1)
    member_class: str = Field(min_length=1)
    member_code: str = Field(min_length=1)
    name: str


class GlobalGroupEntry(BaseModel):
    xroad_instance: str = Field(min_length=1)
    group_code: str = Field(min_length=1)
    description: str


class GlobalConfSnapshot(BaseModel):
    members: list[MemberEntry] = Field(default_factory=list)
    global_groups: list[GlobalGroupEntry] = Field(default_factory=list)


def load_snapshot(path: Path) -> GlobalConfSnapshot:
    snapshot = GlobalConfSnapshot.model_validate_json(path.read_text(encoding="utf-8"))
    log.info(
        "globalconf_loaded",
        path=str(path),
        members=len(snapshot.members),
        global_groups=len(snapshot.global_groups),
    )
    return snapshot


class StaticGlobalConf:
    def __init__(self, snapshot: GlobalConfSnapshot | None = None) -> None:
        snapshot = snapshot or GlobalConfSnapshot()
        self._member_names: dict[MemberId, str] = {
            MemberId(m.xroad_instance, m.member_class, m.member_code): m.name
            for m in snapshot.members
        }
        self._group_descriptions: dict[GlobalGroupId, str] = {
            GlobalGroupId(g.xroad_instance, g.group_code): g.description
            for g in snapshot.global_groups
        }

    def get_member_name(self, client_id: ClientId) -> str | None:
        # Subsystems are named after their owning member.
        member_id = client_id.member_id if isinstance(client_id, SubsystemId) else client_id
        return self._member_names.get(member_id)

    def get_global_group_description(self, group_id: GlobalGroupId) -> str | None:
        return self._group_descriptions.get(group_id)


# --- Module Notes -----------------------------------------------------------
# The distribution of global configuration is out of scope; a real deployment
# would back GlobalConfFacade with the downloaded configuration directory.
