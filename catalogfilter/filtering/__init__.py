"""
Composable entry filtering.

A FilterHelper holds the current criteria for one list and folds the
registered predicate stages over entries on demand.
"""

from catalogfilter.filtering.helper import FilterHelper
from catalogfilter.filtering.pipeline import (
    FILTER_STAGES,
    FilterStage,
    PipelineRunMetrics,
    get_filter_metrics,
    reset_filter_metrics,
    run_pipeline,
)
from catalogfilter.filtering.predicates import (
    FilterContext,
    fav_filter,
    group_filter,
    hide_characters_in_deck,
    search_filter,
    tag_filter,
    world_info_search_filter,
)

__all__ = [
    # Criteria store
    "FilterHelper",
    # Pipeline
    "FILTER_STAGES",
    "FilterStage",
    "PipelineRunMetrics",
    "get_filter_metrics",
    "reset_filter_metrics",
    "run_pipeline",
    # Stages
    "FilterContext",
    "fav_filter",
    "group_filter",
    "hide_characters_in_deck",
    "search_filter",
    "tag_filter",
    "world_info_search_filter",
]
