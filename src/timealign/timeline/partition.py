from __future__ import annotations

import logging
from datetime import date
from typing import Iterator, Sequence

from timealign.domain.window import Window
from timealign.errors import AlignmentError, InvalidReferenceError
from timealign.timeline.validate import bounds_text, check_alignment

logger = logging.getLogger(__name__)


def iter_windows(
    timeline: Sequence[date], start_idx: int, num_samples: int
) -> Iterator[Window]:
    """Yield consecutive windows of ``num_samples`` entries from ``start_idx``.

    An incomplete trailing window is never yielded. At most
    ``(len(timeline) - start_idx) // num_samples`` windows are produced.
    """
    if num_samples <= 0:
        raise InvalidReferenceError(
            f"num_samples must be a positive integer, got {num_samples!r}"
        )
    if start_idx < 0:
        raise AlignmentError(f"start index {start_idx} is negative")
    end_idx = start_idx + num_samples - 1
    while end_idx < len(timeline):
        yield Window(timeline[start_idx], timeline[end_idx])
        start_idx = end_idx + 1
        end_idx = start_idx + num_samples - 1


def partition(
    timeline: Sequence[date], start_idx: int, num_samples: int
) -> list[Window]:
    """Cut the timeline into non-overlapping windows starting at ``start_idx``."""
    windows = list(iter_windows(timeline, start_idx, num_samples))
    if not windows:
        remaining = max(len(timeline) - start_idx, 0)
        raise AlignmentError(
            f"{num_samples} samples from index {start_idx} do not fit timeline "
            f"{bounds_text(timeline)} ({remaining} entries left); "
            "compare your timeline with your samples"
        )
    check_alignment(windows[-1].end_date, timeline, role="end date")
    logger.debug(
        "Partitioned %d entries from index %d into %d windows of %d",
        len(timeline),
        start_idx,
        len(windows),
        num_samples,
    )
    return windows
