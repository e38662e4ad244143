"""Activity feed merging and filtering."""

import logging
from typing import Iterable, List, Set, Union

from src.core.models import Activity, ActivityKind, FilterMode, USER_KINDS

logger = logging.getLogger(__name__)


def merge_activities(*sources: Iterable[Activity]) -> List[Activity]:
    """
    Merge activity lists into one reverse-chronological feed.

    Sources are concatenated in argument order and sorted by timestamp,
    newest first. The sort is stable, so activities sharing a timestamp keep
    their concatenation order (transactions before optimizer events when
    passed in that order). Ids are unique in the output: an activity whose
    id was already seen earlier in the concatenation is dropped.

    Args:
        *sources: Activity lists, normalized transactions first

    Returns:
        New list ordered by timestamp descending
    """
    combined: List[Activity] = []
    seen: Set[str] = set()
    for source in sources:
        for activity in source:
            if activity.id in seen:
                logger.warning(f"Dropping activity with duplicate id {activity.id}")
                continue
            seen.add(activity.id)
            combined.append(activity)
    return sorted(combined, key=lambda a: a.timestamp, reverse=True)


def filter_activities(
    activities: Iterable[Activity],
    mode: Union[FilterMode, str] = FilterMode.ALL,
) -> List[Activity]:
    """
    Project the feed by category, preserving order.

    Args:
        activities: Merged activity feed
        mode: "all", "user" (deposits/withdrawals) or "optimizer"

    Returns:
        New list with the selected activities

    Raises:
        ValueError: If the mode is unknown
    """
    mode = FilterMode.parse(mode)

    if mode == FilterMode.ALL:
        return list(activities)
    if mode == FilterMode.USER:
        return [a for a in activities if a.kind in USER_KINDS]
    return [a for a in activities if a.kind == ActivityKind.OPTIMIZATION]


def count_by_mode(activities: Iterable[Activity]) -> dict:
    """Count activities per filter mode (for filter tab badges)."""
    activities = list(activities)
    user = sum(1 for a in activities if a.kind in USER_KINDS)
    return {
        FilterMode.ALL.value: len(activities),
        FilterMode.USER.value: user,
        FilterMode.OPTIMIZER.value: len(activities) - user,
    }
