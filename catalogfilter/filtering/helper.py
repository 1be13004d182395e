"""
FilterHelper — criteria store and change notification for one UI surface.

Usage:

    helper = FilterHelper(lambda: refresh_list(), tag_index=tag_map)
    helper.set_filter_data(FilterType.SEARCH, "alice")  # fires refresh_list()
    visible = helper.apply_filters(entries)

The helper holds exactly one criteria value per registered filter kind.
Setting a value that is structurally equal to the stored one does not fire
the change callback.

The callback runs synchronously, before set_filter_data returns. Calling
set_filter_data from inside the callback is the caller's responsibility.
"""

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from catalogfilter.config import settings
from catalogfilter.filtering.pipeline import run_pipeline
from catalogfilter.filtering.predicates import FilterContext
from catalogfilter.models.criteria import FilterType, criteria_equal, default_criteria
from catalogfilter.models.entry import Entry
from catalogfilter.models.failure import UnknownFilterKindError
from catalogfilter.services.fuzzy import FuzzySearcher

logger = logging.getLogger(__name__)


def _resolve_filter_type(filter_type: Any) -> FilterType:
    try:
        return FilterType(filter_type)
    except ValueError:
        logger.error("unknown_filter_kind", extra={"filter_kind": repr(filter_type)})
        raise UnknownFilterKindError(
            filter_type, tuple(member.value for member in FilterType)
        ) from None


class FilterHelper:
    """
    Criteria store for one filtered list.

    Args:
        on_data_changed: Called with no arguments when criteria actually change
        tag_index: Tag index consulted by the tag stage (kept by reference)
        searcher: Fuzzy searcher for the search and world-info stages
        fuzzy_search_enabled: Pins the fuzzy toggle; None follows settings
    """

    def __init__(
        self,
        on_data_changed: Callable[[], None],
        *,
        tag_index: Mapping[str, Any] | None = None,
        searcher: FuzzySearcher | None = None,
        fuzzy_search_enabled: bool | None = None,
    ) -> None:
        self.on_data_changed = on_data_changed
        self.tag_index: Mapping[str, Any] = tag_index if tag_index is not None else {}
        self.searcher = searcher
        self._fuzzy_search_enabled = fuzzy_search_enabled
        self.filter_data: dict[FilterType, Any] = default_criteria()

    @property
    def fuzzy_search_enabled(self) -> bool:
        if self._fuzzy_search_enabled is None:
            return settings.fuzzy_search
        return self._fuzzy_search_enabled

    def set_filter_data(
        self,
        filter_type: FilterType | str,
        data: Any,
        suppress_data_changed: bool = False,
    ) -> None:
        """
        Replace the criteria for a filter kind.

        The value is stored as given. The change callback fires only if the
        new value differs structurally from the old one and
        ``suppress_data_changed`` is False.

        Raises:
            UnknownFilterKindError: If the filter kind is not registered
        """
        key = _resolve_filter_type(filter_type)
        old_data = self.filter_data[key]
        self.filter_data[key] = data

        if criteria_equal(old_data, data):
            logger.debug("filter_data_unchanged", extra={"filter_kind": key.value})
            return

        if suppress_data_changed:
            return

        logger.debug("filter_data_changed", extra={"filter_kind": key.value})
        self.on_data_changed()

    def get_filter_data(self, filter_type: FilterType | str) -> Any:
        """
        Get the criteria for a filter kind.

        Raises:
            UnknownFilterKindError: If the filter kind is not registered
        """
        return self.filter_data[_resolve_filter_type(filter_type)]

    def apply_filters(self, entries: Sequence[Entry]) -> list[Entry]:
        """Apply every stage to the entries and return the survivors as a new list."""
        context = FilterContext(
            tag_index=self.tag_index,
            searcher=self.searcher,
            fuzzy_search_enabled=self.fuzzy_search_enabled,
        )
        return run_pipeline(entries, self.filter_data, context)
