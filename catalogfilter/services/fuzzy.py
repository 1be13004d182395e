"""
Fuzzy search collaborator interface.

The ranking algorithm lives outside this engine. The search stages only
need sets of matching identifiers, computed over the full candidate universe
(not just the entries currently being filtered), so the stages intersect
rather than assume alignment.
"""

from collections.abc import Collection, Sequence
from typing import Protocol

from catalogfilter.models.entry import Entry


class FuzzySearcher(Protocol):
    """Opaque fuzzy matcher for characters, groups and world-info records."""

    def match_characters(self, term: str) -> Collection[int]:
        """Return the ids of all characters matching ``term``."""
        ...

    def match_groups(self, term: str) -> Collection[str]:
        """Return the ids of all groups matching ``term``."""
        ...

    def match_world_info(self, entries: Sequence[Entry], term: str) -> Collection[str | int]:
        """Return the uids of the world-info ``entries`` matching ``term``."""
        ...
