"""Grouping and formatting of outdated dependencies."""

import json

from .models import RELEASE_TYPES, OutdatedEntry

OTHER = "other"

# Printed in this order; remaining canonical types and "other" follow
PRIMARY_TYPES = ("major", "minor", "patch")

UP_TO_DATE_MESSAGE = "All dependencies are up to date."


def group_outdated(entries: list[OutdatedEntry]) -> dict[str, list[OutdatedEntry]]:
    """Partition entries into buckets keyed by release type.

    Unknown release types land in the "other" bucket. Entries keep their
    input order within each bucket.
    """
    grouped: dict[str, list[OutdatedEntry]] = {name: [] for name in RELEASE_TYPES}
    grouped[OTHER] = []

    for entry in entries:
        bucket = entry.release_type if entry.release_type in RELEASE_TYPES else OTHER
        grouped[bucket].append(entry)

    return grouped


def bucket_order() -> list[str]:
    """Bucket names in display order."""
    rest = [name for name in RELEASE_TYPES if name not in PRIMARY_TYPES]
    return [*PRIMARY_TYPES, *rest, OTHER]


def bucket_title(bucket: str) -> str:
    return f"{bucket.capitalize()} Updates:"


def format_entry(entry: OutdatedEntry) -> str:
    return f"{entry.name}: {entry.current} -> {entry.latest}"


def format_report(entries: list[OutdatedEntry]) -> list[str]:
    """Format the grouped report as text lines.

    Args:
        entries: Outdated entries in catalog order

    Returns:
        Lines to print, without trailing newlines
    """
    if not entries:
        return [UP_TO_DATE_MESSAGE]

    grouped = group_outdated(entries)
    lines = ["Outdated dependencies found:"]
    for bucket in bucket_order():
        if not grouped[bucket]:
            continue
        lines.append("")
        lines.append(f"  {bucket_title(bucket)}")
        lines.extend(f"    {format_entry(entry)}" for entry in grouped[bucket])

    return lines


def format_json(entries: list[OutdatedEntry]) -> str:
    """Format JSON output."""
    outdated = []
    for entry in entries:
        outdated.append({
            "name": entry.name,
            "current": entry.current,
            "latest": entry.latest,
            "type": entry.release_type,
        })

    return json.dumps({"outdated": outdated}, indent=2)
