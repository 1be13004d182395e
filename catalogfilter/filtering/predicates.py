"""
Predicate stages — one per filter kind, plus deck de-duplication.

Every stage has the same signature:

    stage(entries, criteria, context) -> entries

INVARIANTS:
- Stages only remove entries, never add or mutate them
- A no-op criteria value returns the input unchanged (short-circuit)
- Malformed criteria or entries never raise; they degrade to "no match"
  (or to "no-op" for an unreadable criteria value)
"""

import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from catalogfilter.models.criteria import coerce_tag_criteria
from catalogfilter.models.entry import Entry, EntryKind
from catalogfilter.services.fuzzy import FuzzySearcher
from catalogfilter.services.tag_index import is_tagged

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterContext:
    """External collaborators the stages consult."""

    tag_index: Mapping[str, Any] = field(default_factory=dict)
    searcher: FuzzySearcher | None = None
    fuzzy_search_enabled: bool = False


_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def _parse_int(value: Any) -> int | None:
    """Read an id as an int, using its leading integer for strings ("12abc" → 12, "1.5" → 1)."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else None
    return None


def search_filter(
    entries: Sequence[Entry],
    term: Any,
    context: FilterContext,
) -> Sequence[Entry]:
    """
    Filter by search text.

    Fuzzy mode keeps characters and groups whose ids the fuzzy searcher
    matched; every other kind is dropped. Exact mode keeps entries whose
    name contains the term, case-insensitively.
    """
    if not term or not isinstance(term, str):
        return entries

    search_value = term.strip().casefold()

    if not context.fuzzy_search_enabled:
        return [
            entry
            for entry in entries
            if entry.item.name is not None and search_value in entry.item.name.casefold()
        ]

    if context.searcher is None:
        logger.warning("fuzzy_search_unavailable", extra={"stage": "search"})
        return []

    character_ids = set(context.searcher.match_characters(search_value))
    group_ids = set(context.searcher.match_groups(search_value))

    def matches(entry: Entry) -> bool:
        if entry.kind == EntryKind.CHARACTER:
            character_id = _parse_int(entry.id)
            return character_id is not None and character_id in character_ids
        if entry.kind == EntryKind.GROUP:
            return entry.id is not None and str(entry.id) in group_ids
        return False

    return [entry for entry in entries if matches(entry)]


def tag_filter(
    entries: Sequence[Entry],
    criteria: Any,
    context: FilterContext,
) -> Sequence[Entry]:
    """
    Filter by selected and excluded tags.

    An entry carrying any excluded tag is dropped. Otherwise it must carry
    every selected tag (AND). With no selected tags, non-excluded entries pass.
    """
    tags = coerce_tag_criteria(criteria)
    if tags is None or tags.is_empty():
        return entries

    tag_index = context.tag_index

    def passes(entry: Entry) -> bool:
        if any(is_tagged(tag_index, entry, tag_id) for tag_id in tags.excluded):
            return False
        return all(is_tagged(tag_index, entry, tag_id) for tag_id in tags.selected)

    return [entry for entry in entries if passes(entry)]


def fav_filter(
    entries: Sequence[Entry],
    enabled: Any,
    context: FilterContext,  # noqa: ARG001
) -> Sequence[Entry]:
    """Keep favorites only."""
    if not enabled:
        return entries

    return [entry for entry in entries if entry.item.fav]


def group_filter(
    entries: Sequence[Entry],
    enabled: Any,
    context: FilterContext,  # noqa: ARG001
) -> Sequence[Entry]:
    """Keep groups only."""
    if not enabled:
        return entries

    return [entry for entry in entries if entry.kind == EntryKind.GROUP]


def world_info_search_filter(
    entries: Sequence[Entry],
    term: Any,
    context: FilterContext,
) -> Sequence[Entry]:
    """
    Filter world-info records by fuzzy search.

    Always delegates to the fuzzy searcher, regardless of the fuzzy toggle.
    Entries are matched by uid.
    """
    if not term or not isinstance(term, str):
        return entries

    if context.searcher is None:
        logger.warning("fuzzy_search_unavailable", extra={"stage": "world_info_search"})
        return []

    matched_uids = set(context.searcher.match_world_info(entries, term))
    return [entry for entry in entries if entry.uid is not None and entry.uid in matched_uids]


def hide_characters_in_deck(
    entries: Sequence[Entry],
    criteria: Any,  # noqa: ARG001
    context: FilterContext,  # noqa: ARG001
) -> Sequence[Entry]:
    """
    Hide entries already listed as a member of a deck in the same list.

    Two passes over the list: collect every deck's member ids, then drop
    entries whose stringified id is among them. Runs on the output of the
    earlier stages, so only decks that survived them count.
    """
    deck_members = {
        member
        for entry in entries
        if entry.kind == EntryKind.DECK
        for member in entry.item.characters
    }
    if not deck_members:
        return entries

    return [entry for entry in entries if entry.id is None or str(entry.id) not in deck_members]
