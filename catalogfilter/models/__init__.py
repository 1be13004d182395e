from catalogfilter.models.criteria import (
    FilterType,
    TagCriteria,
    coerce_tag_criteria,
    criteria_equal,
    default_criteria,
)
from catalogfilter.models.entry import Entry, EntryKind, EntryPayload, normalize_flag
from catalogfilter.models.failure import UnknownFilterKindError

__all__ = [
    "Entry",
    "EntryKind",
    "EntryPayload",
    "FilterType",
    "TagCriteria",
    "UnknownFilterKindError",
    "coerce_tag_criteria",
    "criteria_equal",
    "default_criteria",
    "normalize_flag",
]
