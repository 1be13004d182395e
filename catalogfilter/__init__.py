"""Multi-criteria filtering for catalog entries."""

from catalogfilter.filtering import FilterHelper
from catalogfilter.models import (
    Entry,
    EntryKind,
    FilterType,
    TagCriteria,
    UnknownFilterKindError,
)

__all__ = [
    "Entry",
    "EntryKind",
    "FilterHelper",
    "FilterType",
    "TagCriteria",
    "UnknownFilterKindError",
]
