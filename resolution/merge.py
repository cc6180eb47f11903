"""Fold raw contributor records into one merged record per identity key."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

from core.models import ContributorRecord
from resolution.keys import build_key
from resolution.username import resolve_username


def _coerce_record(item: ContributorRecord | Mapping[str, Any]) -> ContributorRecord:
    """Accept typed records or plain mappings."""
    if isinstance(item, ContributorRecord):
        return item
    return ContributorRecord.from_mapping(item)


def _merge_pair(
    existing: ContributorRecord,
    incoming: ContributorRecord,
    username: Optional[str],
) -> ContributorRecord:
    """
    Merge an incoming record into the one already stored for its key.

    Rules:
    - first-seen values win; incoming values only fill absent or empty fields
    - commits are summed when either side has a count
    - a resolved username always becomes the display name

    Keeping first-seen identity fields means the merged record resolves to
    the same key when merged again.
    """
    data = incoming.model_dump()
    for field, value in existing.model_dump().items():
        if value is None or value == "":
            continue
        data[field] = value

    data["commits"] = None
    if existing.commits is not None or incoming.commits is not None:
        data["commits"] = (existing.commits or 0) + (incoming.commits or 0)

    if username:
        data["name"] = username

    return ContributorRecord.model_validate(data)


def merge_contributors(
    records: Iterable[ContributorRecord | Mapping[str, Any]],
) -> list[ContributorRecord]:
    """
    Deduplicate contributor records by identity key.

    Output order follows the first appearance of each key. Input records are
    never modified; every output record is a new instance.
    """
    merged: dict[str, ContributorRecord] = {}
    usernames: dict[str, str] = {}

    for index, item in enumerate(records):
        record = _coerce_record(item)
        username = resolve_username(record)
        key = build_key(username, record.email, record.name, index)

        if username:
            usernames.setdefault(key, username)
            normalized = record.model_copy(update={"name": username})
        else:
            normalized = record.model_copy()

        existing = merged.get(key)
        if existing is None:
            merged[key] = normalized
            continue

        merged[key] = _merge_pair(existing, normalized, usernames.get(key))

    return list(merged.values())
