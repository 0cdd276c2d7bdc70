from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from timealign.errors import AlignmentError, InvalidTimelineError, OutOfRangeError

logger = logging.getLogger(__name__)


def validate(timeline: Sequence[date]) -> None:
    """Fail with InvalidTimelineError unless ``timeline`` is non-empty and strictly ascending."""
    if timeline is None or len(timeline) == 0:
        raise InvalidTimelineError("timeline is empty")
    for pos in range(1, len(timeline)):
        if timeline[pos] <= timeline[pos - 1]:
            raise InvalidTimelineError(
                f"timeline is not strictly ascending at position {pos}: "
                f"{timeline[pos - 1].isoformat()} -> {timeline[pos].isoformat()}"
            )


def bounds_text(timeline: Sequence[date]) -> str:
    return f"[{timeline[0].isoformat()}, {timeline[-1].isoformat()}]"


def is_date_within_tolerance(when: date, timeline: Sequence[date]) -> bool:
    """Is ``when`` inside the timeline, or within one edge cadence of it?

    The cadence is taken from the two entries at the nearest edge only, so an
    irregular interior does not widen or narrow the tolerance.
    """
    first, last = timeline[0], timeline[-1]
    if first <= when <= last:
        return True
    # a single acquisition has no cadence to tolerate against
    if len(timeline) < 2:
        return False
    if when < first:
        lead_gap = (timeline[1] - timeline[0]).days
        return (first - when).days <= lead_gap
    trail_gap = (timeline[-1] - timeline[-2]).days
    return (when - last).days <= trail_gap


def check_alignment(when: date, timeline: Sequence[date], *, role: str) -> date:
    if not is_date_within_tolerance(when, timeline):
        raise AlignmentError(
            f"{role} {when.isoformat()} is not inside timeline {bounds_text(timeline)}"
        )
    return when


def check_against_request(
    timeline: Sequence[date],
    requested_start: Optional[date] = None,
    requested_end: Optional[date] = None,
) -> tuple[date, date]:
    """Resolve a requested sub-period against the timeline bounds.

    Missing bounds default to the first/last timeline entry.
    """
    validate(timeline)
    if requested_start is None:
        start = timeline[0]
    elif requested_start < timeline[0]:
        raise OutOfRangeError(
            f"start_date {requested_start.isoformat()} is not inside the timeline "
            f"{bounds_text(timeline)}"
        )
    else:
        start = requested_start
    if requested_end is None:
        end = timeline[-1]
    elif requested_end > timeline[-1]:
        raise OutOfRangeError(
            f"end_date {requested_end.isoformat()} is not inside the timeline "
            f"{bounds_text(timeline)}"
        )
    else:
        end = requested_end
    logger.debug("Resolved request period %s..%s", start, end)
    return start, end
