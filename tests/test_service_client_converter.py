"""
tests.test_service_client_converter

Formatting and parsing of service clients, single and batch.
"""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from service_clients.converters.models import AccessRightHolder, ServiceClient, ServiceClientType
from service_clients.errors import BadRequestError
from service_clients.identifiers.models import (
    GlobalGroupId,
    LocalGroupId,
    MemberId,
    ServiceId,
    SubsystemId,
)

GRANTED_AT = datetime(2020, 1, 2, 3, 4, 5, tzinfo=UTC)
SUBSYSTEM = SubsystemId("FI", "GOV", "M1", "SS1")
GLOBAL_GROUP = GlobalGroupId("FI", "security-server-owners")


def _local_group_holder() -> AccessRightHolder:
    return AccessRightHolder(
        subject_id=LocalGroupId("group1"),
        rights_given_at=GRANTED_AT,
        local_group_id="42",
        local_group_code="group1",
        local_group_description="First group",
    )


def test_format_subsystem(converter, globalconf) -> None:
    sc = converter.convert_access_right_holder(
        AccessRightHolder(subject_id=SUBSYSTEM, rights_given_at=GRANTED_AT)
    )
    assert sc.id == "FI:GOV:M1:SS1"
    assert sc.name == "Ministry One"
    assert sc.service_client_type is ServiceClientType.SUBSYSTEM
    assert sc.rights_given_at == GRANTED_AT
    assert sc.local_group_code is None
    assert globalconf.calls == [("member_name", SUBSYSTEM)]


def test_format_global_group(converter, globalconf) -> None:
    sc = converter.convert_access_right_holder(AccessRightHolder(subject_id=GLOBAL_GROUP))
    assert sc.id == "FI:security-server-owners"
    assert sc.name == "Security server owners"
    assert sc.service_client_type is ServiceClientType.GLOBALGROUP
    assert globalconf.calls == [("global_group_description", GLOBAL_GROUP)]


def test_format_unknown_directory_entry_is_placeholder(converter) -> None:
    sc = converter.convert_access_right_holder(
        AccessRightHolder(subject_id=SubsystemId("EE", "COM", "X", "Y"))
    )
    assert sc.id == "EE:COM:X:Y"
    assert sc.name is None


def test_format_local_group_copies_holder_without_lookups(converter, globalconf) -> None:
    sc = converter.convert_access_right_holder(_local_group_holder())
    assert sc.id == "42"
    assert sc.local_group_code == "group1"
    assert sc.local_group_description == "First group"
    assert sc.name == "First group"
    assert sc.service_client_type is ServiceClientType.LOCALGROUP
    assert globalconf.calls == []


@pytest.mark.parametrize(
    "subject_id",
    [MemberId("FI", "GOV", "M1"), ServiceId("FI", "GOV", "M1", "SS1", "getRandom")],
)
def test_format_kind_without_external_counterpart_yields_default(
    converter, globalconf, subject_id
) -> None:
    # Formatting never raises for an unmodeled kind, unlike parsing.
    sc = converter.convert_access_right_holder(
        AccessRightHolder(subject_id=subject_id, rights_given_at=GRANTED_AT)
    )
    assert sc.id is None
    assert sc.name is None
    assert sc.service_client_type is None
    assert sc.rights_given_at == GRANTED_AT
    assert globalconf.calls == []


def test_batch_format_preserves_order(converter) -> None:
    holders = [
        _local_group_holder(),
        AccessRightHolder(subject_id=SUBSYSTEM),
        AccessRightHolder(subject_id=GLOBAL_GROUP),
        AccessRightHolder(subject_id=MemberId("FI", "GOV", "M1")),
    ]
    result = converter.convert_access_right_holders(iter(holders))
    assert result == [converter.convert_access_right_holder(h) for h in holders]
    assert [sc.service_client_type for sc in result] == [
        ServiceClientType.LOCALGROUP,
        ServiceClientType.SUBSYSTEM,
        ServiceClientType.GLOBALGROUP,
        None,
    ]


def test_batch_format_empty(converter) -> None:
    assert converter.convert_access_right_holders([]) == []


def test_parse_subsystem(converter) -> None:
    sc = ServiceClient(id="INSTANCE:CLASS:MEMBER:SUB", service_client_type="SUBSYSTEM")
    assert converter.convert_id(sc) == SubsystemId("INSTANCE", "CLASS", "MEMBER", "SUB")


@pytest.mark.parametrize(
    "encoded", ["INSTANCE:CLASS", "INSTANCE:CLASS:MEMBER", "INSTANCE:CLASS:MEMBER:SUB:EXTRA", "", None]
)
def test_parse_subsystem_rejects_wrong_separator_count(converter, encoded) -> None:
    sc = ServiceClient(id=encoded, service_client_type=ServiceClientType.SUBSYSTEM)
    with pytest.raises(BadRequestError) as exc:
        converter.convert_id(sc)
    assert exc.value.code == "invalid_subsystem_id"
    assert exc.value.message == f"Invalid subsystem id {encoded}"


def test_parse_subsystem_with_empty_segment_fails_in_codec(converter) -> None:
    sc = ServiceClient(id="INSTANCE::MEMBER:SUB", service_client_type=ServiceClientType.SUBSYSTEM)
    with pytest.raises(BadRequestError, match="Invalid client id"):
        converter.convert_id(sc)


def test_parse_global_group(converter) -> None:
    sc = ServiceClient(id="FI:owners", service_client_type=ServiceClientType.GLOBALGROUP)
    assert converter.convert_id(sc) == GlobalGroupId("FI", "owners")


def test_parse_global_group_delegates_validation(converter) -> None:
    sc = ServiceClient(id="FI:GOV:M1:SS1", service_client_type=ServiceClientType.GLOBALGROUP)
    with pytest.raises(BadRequestError, match="Invalid global group id"):
        converter.convert_id(sc)


@pytest.mark.parametrize("encoded", ["42", "not:even:an:id:at:all", None])
def test_parse_local_group_ignores_id(converter, encoded) -> None:
    sc = ServiceClient(
        id=encoded, local_group_code="group1", service_client_type=ServiceClientType.LOCALGROUP
    )
    assert converter.convert_id(sc) == LocalGroupId("group1")


def test_parse_local_group_requires_code(converter) -> None:
    sc = ServiceClient(id="42", service_client_type=ServiceClientType.LOCALGROUP)
    with pytest.raises(BadRequestError, match="Invalid local group code"):
        converter.convert_id(sc)


@pytest.mark.parametrize("service_client_type", [None, "MEMBER", "subsystem", "SERVICE"])
def test_parse_unsupported_type(converter, service_client_type) -> None:
    # The wire model accepts any string; the kind is decided by the converter.
    sc = ServiceClient(id="FI:GOV:M1:SS1", service_client_type=service_client_type)
    with pytest.raises(BadRequestError) as exc:
        converter.convert_id(sc)
    assert "invalid service client type" in exc.value.message
    assert exc.value.http_status == 400


def test_round_trip_subsystem_and_global_group(converter) -> None:
    for sc in (
        ServiceClient(id="FI:GOV:M1:SS1", service_client_type=ServiceClientType.SUBSYSTEM),
        ServiceClient(id="FI:owners", service_client_type=ServiceClientType.GLOBALGROUP),
    ):
        subject_id = converter.convert_id(sc)
        formatted = converter.convert_access_right_holder(AccessRightHolder(subject_id=subject_id))
        assert formatted.id == sc.id
        assert converter.convert_id(formatted) == subject_id


def test_round_trip_local_group_via_code(converter) -> None:
    formatted = converter.convert_access_right_holder(_local_group_holder())
    # Formatting put the registry id in `id`; parsing goes through the code only.
    assert formatted.id == "42"
    assert converter.convert_id(formatted) == LocalGroupId("group1")


def test_batch_parse_preserves_order(converter) -> None:
    clients = [
        ServiceClient(id="FI:owners", service_client_type=ServiceClientType.GLOBALGROUP),
        ServiceClient(local_group_code="g", service_client_type=ServiceClientType.LOCALGROUP),
        ServiceClient(id="FI:GOV:M1:SS1", service_client_type=ServiceClientType.SUBSYSTEM),
    ]
    assert converter.convert_ids(clients) == [
        GlobalGroupId("FI", "owners"),
        LocalGroupId("g"),
        SubsystemId("FI", "GOV", "M1", "SS1"),
    ]


def test_batch_parse_fails_fast(converter) -> None:
    clients = [
        ServiceClient(id="FI:GOV:M1:SS1", service_client_type=ServiceClientType.SUBSYSTEM),
        ServiceClient(id="FI:GOV", service_client_type=ServiceClientType.SUBSYSTEM),
        ServiceClient(id="FI:GOV:M1:SS2", service_client_type=ServiceClientType.SUBSYSTEM),
    ]
    with pytest.raises(BadRequestError, match="Invalid subsystem id FI:GOV"):
        converter.convert_ids(clients)
