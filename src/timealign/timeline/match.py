from __future__ import annotations

import calendar
import logging
from datetime import date
from typing import Sequence

from timealign.domain.window import Window
from timealign.timeline.partition import partition
from timealign.timeline.validate import check_alignment, validate

logger = logging.getLogger(__name__)


def estimate_start(ref_start: date, year: int) -> date:
    """Place the month/day of ``ref_start`` in ``year``.

    29 February falls back to the 28th in non-leap years.
    """
    day = ref_start.day
    if ref_start.month == 2 and day == 29 and not calendar.isleap(year):
        day = 28
    return date(year, ref_start.month, day)


def nearest_index(timeline: Sequence[date], target: date) -> int:
    """Position of the entry closest to ``target``; the first one wins on ties."""
    best_idx = 0
    best_dist = abs((timeline[0] - target).days)
    for idx in range(1, len(timeline)):
        dist = abs((timeline[idx] - target).days)
        if dist < best_dist:
            best_idx, best_dist = idx, dist
    return best_idx


def match_windows(
    timeline: Sequence[date],
    ref_start: date,
    ref_end: date,
    num_samples: int,
) -> list[Window]:
    """Align the reference window on the timeline and partition it.

    The calendar is anchored once, on the first year of the timeline; every
    later window follows by index arithmetic. ``ref_end`` is not used for the
    alignment.
    """
    validate(timeline)
    estimated = estimate_start(ref_start, timeline[0].year)
    start_idx = nearest_index(timeline, estimated)
    start_date = timeline[start_idx]
    logger.debug(
        "Reference %s..%s: estimated start %s matched %s (index %d)",
        ref_start,
        ref_end,
        estimated,
        start_date,
        start_idx,
    )
    check_alignment(start_date, timeline, role="start date")
    return partition(timeline, start_idx, num_samples)
