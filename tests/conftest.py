"""
tests.conftest

Shared fixtures: a recording directory and a converter wired to it.
"""

from __future__ import annotations

import pytest

from service_clients.converters.service_client_converter import ServiceClientConverter
from service_clients.globalconf.facade import (
    GlobalConfSnapshot,
    GlobalGroupEntry,
    MemberEntry,
    StaticGlobalConf,
)
from service_clients.identifiers.models import ClientId, GlobalGroupId


class RecordingGlobalConf(StaticGlobalConf):
    """StaticGlobalConf that remembers every lookup it served."""

    def __init__(self, snapshot: GlobalConfSnapshot | None = None) -> None:
        super().__init__(snapshot)
        self.calls: list[tuple[str, object]] = []

    def get_member_name(self, client_id: ClientId) -> str | None:
        self.calls.append(("member_name", client_id))
        return super().get_member_name(client_id)

    def get_global_group_description(self, group_id: GlobalGroupId) -> str | None:
        self.calls.append(("global_group_description", group_id))
        return super().get_global_group_description(group_id)


@pytest.fixture
def snapshot() -> GlobalConfSnapshot:
    return GlobalConfSnapshot(
        members=[
            MemberEntry(
                xroad_instance="FI", member_class="GOV", member_code="M1", name="Ministry One"
            ),
        ],
        global_groups=[
            GlobalGroupEntry(
                xroad_instance="FI",
                group_code="security-server-owners",
                description="Security server owners",
            ),
        ],
    )


@pytest.fixture
def globalconf(snapshot: GlobalConfSnapshot) -> RecordingGlobalConf:
    return RecordingGlobalConf(snapshot)


@pytest.fixture
def converter(globalconf: RecordingGlobalConf) -> ServiceClientConverter:
    return ServiceClientConverter(globalconf=globalconf)
