"""
service_clients.identifiers.encoding

Syntax helpers for encoded identifiers (`INSTANCE:CLASS:CODE[:SUBSYSTEM]`).
"""

from __future__ import annotations

ENCODED_ID_SEPARATOR = ":"


def count_occurrences(value: str | None, char: str) -> int:
    if not value:
        return 0
    return value.count(char)


def split_encoded_id(encoded_id: str) -> list[str]:
    return encoded_id.split(ENCODED_ID_SEPARATOR)


def join_encoded_id(*parts: str) -> str:
    return ENCODED_ID_SEPARATOR.join(parts)
