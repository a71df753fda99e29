"""
service_clients.services.local_groups

In-process registry of local groups defined by the serving entity.

Responsibilities:
- Assign a numeric id to each local group (exposed as the service client `id`).
- Resolve local groups by code.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass

from service_clients.errors import ConflictError
from service_clients.observability.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class LocalGroup:
    id: int
    code: str
    description: str


class LocalGroupRegistry:
    def __init__(self) -> None:
        self._by_code: dict[str, LocalGroup] = {}
        self._ids = itertools.count(1)

    def add(self, *, code: str, description: str) -> LocalGroup:
        if code in self._by_code:
            raise ConflictError(f"Local group {code} already exists", code="local_group_exists")
        group = LocalGroup(id=next(self._ids), code=code, description=description)
        self._by_code[code] = group
        log.info("local_group_added", local_group_code=code, local_group_id=group.id)
        return group

    def get(self, code: str) -> LocalGroup | None:
        return self._by_code.get(code)

    def list_groups(self) -> list[LocalGroup]:
        return list(self._by_code.values())
