"""
Filter criteria shapes and structural comparison.

Each filter kind holds exactly one criteria value:
- SEARCH / WORLD_INFO_SEARCH: str ("" = no-op)
- FAV / GROUP: bool (False = no-op)
- TAG: TagCriteria (both tuples empty = no-op)

Change detection compares values structurally (criteria_equal), so a
freshly-built TagCriteria with the same tags as the stored one is not a change.
"""

from collections.abc import Collection, Mapping, Set
from dataclasses import dataclass
from enum import Enum
from typing import Any


class FilterType(str, Enum):
    """Registered filter kinds."""

    SEARCH = "search"
    TAG = "tag"
    FAV = "fav"
    GROUP = "group"
    WORLD_INFO_SEARCH = "world_info_search"


def _tag_ids(value: Any) -> tuple[str, ...] | None:
    """
    Read a collection of tag ids.

    None is no tags and a bare string is a single tag. Sets are sorted so the
    result does not depend on iteration order. Returns None for anything that
    is not a collection of tag ids.
    """
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,) if value else ()
    if isinstance(value, (bytes, Mapping)) or not isinstance(value, Collection):
        return None
    if isinstance(value, Set):
        return tuple(sorted(value, key=str))
    return tuple(value)


@dataclass(frozen=True)
class TagCriteria:
    """Selected tags (all must match) and excluded tags (any disqualifies)."""

    selected: tuple[str, ...] = ()
    excluded: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for name in ("selected", "excluded"):
            tag_ids = _tag_ids(getattr(self, name))
            if tag_ids is None:
                raise TypeError(f"TagCriteria.{name} must be a collection of tag ids")
            object.__setattr__(self, name, tag_ids)

    def is_empty(self) -> bool:
        return not self.selected and not self.excluded

    def as_dict(self) -> dict[str, list[str]]:
        return {"selected": list(self.selected), "excluded": list(self.excluded)}


def default_criteria() -> dict[FilterType, Any]:
    """Build the no-op criteria for every filter kind."""
    return {
        FilterType.SEARCH: "",
        FilterType.GROUP: False,
        FilterType.FAV: False,
        FilterType.TAG: TagCriteria(),
        FilterType.WORLD_INFO_SEARCH: "",
    }


def coerce_tag_criteria(value: Any) -> TagCriteria | None:
    """
    Read a TAG criteria value.

    Accepts a TagCriteria or a mapping whose ``selected`` / ``excluded``
    values are collections of tag ids (lists, tuples, sets) or a single tag id.
    Returns None for anything else.
    """
    if isinstance(value, TagCriteria):
        return value
    if not isinstance(value, Mapping):
        return None

    selected = _tag_ids(value.get("selected"))
    excluded = _tag_ids(value.get("excluded"))
    if selected is None or excluded is None:
        return None

    return TagCriteria(selected=selected, excluded=excluded)


def criteria_equal(old: Any, new: Any) -> bool:
    """
    Structural equality over criteria values.

    - bools only equal bools (False != 0, True != 1)
    - strings only equal strings
    - TagCriteria compares as its dict form, so it equals an equivalent mapping
    - mappings compare key sets and values recursively (key order is ignored)
    - lists and tuples compare element-wise, order-sensitive
    """
    if isinstance(old, TagCriteria):
        old = old.as_dict()
    if isinstance(new, TagCriteria):
        new = new.as_dict()

    if isinstance(old, bool) or isinstance(new, bool):
        return isinstance(old, bool) and isinstance(new, bool) and old == new

    if isinstance(old, str) or isinstance(new, str):
        return isinstance(old, str) and isinstance(new, str) and old == new

    if isinstance(old, Mapping) and isinstance(new, Mapping):
        if old.keys() != new.keys():
            return False
        return all(criteria_equal(old[key], new[key]) for key in old)

    if isinstance(old, (list, tuple)) and isinstance(new, (list, tuple)):
        if len(old) != len(new):
            return False
        return all(criteria_equal(a, b) for a, b in zip(old, new, strict=True))

    return bool(old == new)
