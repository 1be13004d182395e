"""
Tag index lookups.

The tag index is owned elsewhere and read-only here: a mapping from lookup
key to the tag ids attached to that entry. Characters are keyed by their
avatar file; every other kind by its stringified id.
"""

from collections.abc import Mapping
from typing import Any

from catalogfilter.models.entry import Entry, EntryKind

TagIndex = Mapping[str, Any]


def lookup_key(entry: Entry) -> str | None:
    """Derive the tag index key for an entry, or None if it has none."""
    if entry.kind == EntryKind.CHARACTER:
        return entry.item.avatar
    if entry.id is None:
        return None
    return str(entry.id)


def is_tagged(tag_index: TagIndex, entry: Entry, tag_id: str) -> bool:
    """
    Check whether an entry carries a tag.

    A missing or non-list index entry means "no tags", never an error.
    """
    key = lookup_key(entry)
    if key is None:
        return False

    tags = tag_index.get(key)
    return isinstance(tags, (list, tuple)) and tag_id in tags
