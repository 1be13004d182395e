"""
Filter Pipeline — ordered fold of predicate stages over an entry list.

Stages are registered once, in a fixed order:
1. Search
2. Group
3. Favorite
4. Tag
5. World-info search
6. Deck de-duplication

INVARIANTS:
- Stage order is stable across calls (registration order)
- Each stage receives the previous stage's output
- The input list is never mutated; a new list is always returned
- Every criteria kind at its default → output equals input
"""

import logging
from collections import deque
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from catalogfilter.config import MAX_METRICS_HISTORY, settings
from catalogfilter.filtering.predicates import (
    FilterContext,
    fav_filter,
    group_filter,
    hide_characters_in_deck,
    search_filter,
    tag_filter,
    world_info_search_filter,
)
from catalogfilter.models.criteria import FilterType
from catalogfilter.models.entry import Entry

logger = logging.getLogger(__name__)

StageFunction = Callable[[Sequence[Entry], Any, FilterContext], Sequence[Entry]]


@dataclass(frozen=True)
class FilterStage:
    """
    A registered predicate stage.

    Attributes:
        name: Stage name, used as the metrics key
        function: The predicate stage
        filter_type: Criteria kind the stage reads, or None if it reads none
    """

    name: str
    function: StageFunction
    filter_type: FilterType | None = None


FILTER_STAGES: tuple[FilterStage, ...] = (
    FilterStage("search", search_filter, FilterType.SEARCH),
    FilterStage("group", group_filter, FilterType.GROUP),
    FilterStage("fav", fav_filter, FilterType.FAV),
    FilterStage("tag", tag_filter, FilterType.TAG),
    FilterStage("world_info_search", world_info_search_filter, FilterType.WORLD_INFO_SEARCH),
    FilterStage("hide_characters_in_deck", hide_characters_in_deck),
)


@dataclass
class PipelineRunMetrics:
    """Metrics recorded per pipeline run."""

    input_size: int = 0
    stage_sizes: dict[str, int] = field(default_factory=dict)
    output_size: int = 0


# Module-level metrics accumulator, bounded to the most recent runs
_metrics_history: deque[PipelineRunMetrics] = deque(maxlen=MAX_METRICS_HISTORY)


def get_filter_metrics() -> list[PipelineRunMetrics]:
    """Get all recorded metrics."""
    return list(_metrics_history)


def reset_filter_metrics() -> None:
    """Reset metrics history (for testing)."""
    _metrics_history.clear()


def run_pipeline(
    entries: Sequence[Entry],
    criteria: Mapping[FilterType, Any],
    context: FilterContext,
    stages: Sequence[FilterStage] = FILTER_STAGES,
) -> list[Entry]:
    """
    Fold every stage over the entries.

    Args:
        entries: The entries to filter (not mutated)
        criteria: Current criteria value per filter kind
        context: External collaborators for the stages
        stages: Stages to apply, in order

    Returns:
        A new list holding the entries that passed every stage
    """
    metrics = PipelineRunMetrics(input_size=len(entries))

    result: Sequence[Entry] = entries
    for stage in stages:
        stage_criteria = criteria.get(stage.filter_type) if stage.filter_type is not None else None
        result = stage.function(result, stage_criteria, context)
        metrics.stage_sizes[stage.name] = len(result)

    filtered = list(result)
    metrics.output_size = len(filtered)

    if settings.record_metrics:
        _metrics_history.append(metrics)

    logger.debug(
        "filters_applied",
        extra={
            "input": metrics.input_size,
            "stages": metrics.stage_sizes,
            "output": metrics.output_size,
        },
    )

    return filtered
