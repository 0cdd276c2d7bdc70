from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

import numpy as np

from timealign.domain.window import FlatIndexRange, IndexPair, Window
from timealign.errors import IndexOutOfBoundsError, InternalConsistencyError
from timealign.timeline.match import nearest_index
from timealign.timeline.validate import validate
from timealign.utils.time import parse_date


def to_index_pairs(
    timeline: Sequence[date], windows: Sequence[Window]
) -> list[IndexPair]:
    """Resolve each window's dates to their positions in ``timeline``."""
    positions = {d: idx for idx, d in enumerate(timeline)}
    pairs: list[IndexPair] = []
    for window in windows:
        try:
            start_idx = positions[window.start_date]
            end_idx = positions[window.end_date]
        except KeyError as exc:
            raise InternalConsistencyError(
                f"window date {exc.args[0]} is not part of its source timeline"
            ) from exc
        pairs.append(IndexPair(start_idx, end_idx))
    return pairs


def to_flat_ranges(
    index_pairs: Sequence[IndexPair], band_count: int, timeline_length: int
) -> list[list[FlatIndexRange]]:
    """Expand each pair over ``band_count`` bands of a band-major layout.

    Band ``b`` of a window occupies ``(start + b*T, end + b*T)`` where
    ``T = timeline_length``.
    """
    return [
        [
            FlatIndexRange(
                pair.start_idx + band * timeline_length,
                pair.end_idx + band * timeline_length,
            )
            for band in range(band_count)
        ]
        for pair in index_pairs
    ]


def to_selection_mask(
    flat_ranges: Sequence[FlatIndexRange],
    total_columns: int,
    metadata_columns: int = 2,
) -> np.ndarray:
    """Boolean column selector for one window over a wide feature table.

    The leading ``metadata_columns`` are always selected; the value block
    starts right after them, so range ``(a, b)`` selects columns
    ``a + metadata_columns`` to ``b + metadata_columns``.
    """
    if metadata_columns < 0 or metadata_columns > total_columns:
        raise IndexOutOfBoundsError(
            f"metadata_columns={metadata_columns} does not fit {total_columns} columns"
        )
    mask = np.zeros(total_columns, dtype=bool)
    mask[:metadata_columns] = True
    for rng in flat_ranges:
        first = rng.start + metadata_columns
        last = rng.end + metadata_columns
        if rng.start < 0 or rng.end < rng.start or last >= total_columns:
            raise IndexOutOfBoundsError(
                f"range ({rng.start}, {rng.end}) with {metadata_columns} metadata "
                f"columns exceeds table width {total_columns}"
            )
        mask[first : last + 1] = True
    mask.flags.writeable = False
    return mask


def table_width(band_count: int, timeline_length: int, metadata_columns: int = 2) -> int:
    return band_count * timeline_length + metadata_columns


def timeline_indexes(
    timeline: Sequence[date],
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> IndexPair:
    """Nearest timeline positions for an optional start and end date."""
    validate(timeline)
    start_idx = 0
    end_idx = len(timeline) - 1
    if start_date is not None:
        start_idx = nearest_index(timeline, parse_date(start_date))
    if end_date is not None:
        end_idx = nearest_index(timeline, parse_date(end_date))
    return IndexPair(start_idx, end_idx)
