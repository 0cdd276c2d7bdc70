from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable

import numpy as np

from timealign.domain.source import AnySource, SampleSet, timeline_of
from timealign.domain.timeline import Timeline
from timealign.domain.window import (
    FlatIndexRange,
    IndexPair,
    ReferenceWindow,
    Window,
    band_set,
)
from timealign.timeline.indexes import (
    table_width,
    to_flat_ranges,
    to_index_pairs,
    to_selection_mask,
)
from timealign.timeline.match import match_windows

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassificationInfo:
    """Everything a classifier needs to slice a timeline into windows.

    Attributes:
        bands: Band names in flattening order.
        labels: Class labels of the training samples.
        timeline: Full timeline of the data being classified.
        num_samples: Number of timeline entries per window.
        windows: Date pairs, one per classification interval.
        index_pairs: Timeline positions of ``windows``, same order.
    """

    bands: tuple[str, ...]
    labels: tuple[str, ...]
    timeline: Timeline
    num_samples: int
    windows: tuple[Window, ...]
    index_pairs: tuple[IndexPair, ...]

    @property
    def num_windows(self) -> int:
        return len(self.windows)

    def flat_ranges(self) -> list[list[FlatIndexRange]]:
        return to_flat_ranges(self.index_pairs, len(self.bands), len(self.timeline))


def assemble(
    timeline: Iterable[Any],
    bands: Iterable[Any],
    labels: Iterable[Any],
    ref_start: date,
    ref_end: date,
    num_samples: int,
) -> ClassificationInfo:
    """Match, partition and index the timeline for one classification request."""
    if not isinstance(timeline, Timeline):
        timeline = Timeline(timeline)
    reference = ReferenceWindow(start=ref_start, end=ref_end, num_samples=num_samples)
    names = band_set(bands)
    windows = match_windows(timeline, reference.start, reference.end, reference.num_samples)
    pairs = to_index_pairs(timeline, windows)
    logger.debug("Assembled %d windows for bands %s", len(windows), ", ".join(names))
    return ClassificationInfo(
        bands=names,
        labels=tuple(str(label) for label in labels),
        timeline=timeline,
        num_samples=pairs[0].length,
        windows=tuple(windows),
        index_pairs=tuple(pairs),
    )


def class_info(data: AnySource, samples: SampleSet) -> ClassificationInfo:
    """Classification info for ``data`` using the calendar of ``samples``.

    The reference window comes from the first sample; bands and labels come
    from the sample set.
    """
    timeline = timeline_of(data)
    reference = ReferenceWindow.from_sample(samples.first())
    return assemble(
        timeline,
        samples.bands(),
        samples.labels(),
        reference.start,
        reference.end,
        reference.num_samples,
    )


def index_blocks(info: ClassificationInfo) -> list[list[FlatIndexRange]]:
    """Flat value-block ranges for every window and band."""
    return info.flat_ranges()


def selection_masks(
    info: ClassificationInfo, metadata_columns: int = 2
) -> list[np.ndarray]:
    """One read-only column mask per window over the wide feature table."""
    width = table_width(len(info.bands), len(info.timeline), metadata_columns)
    return [
        to_selection_mask(ranges, width, metadata_columns)
        for ranges in index_blocks(info)
    ]


def raster_masks(
    cube: AnySource, samples: SampleSet, metadata_columns: int = 2
) -> list[np.ndarray]:
    """Column masks for classifying raster blocks of ``cube``.

    Band order follows the samples, which the raster table producer must honour.
    """
    info = class_info(cube, samples)
    return selection_masks(info, metadata_columns)


def selected_columns(mask: np.ndarray) -> list[int]:
    return [int(i) for i in np.flatnonzero(mask)]


def window_table(info: ClassificationInfo) -> list[dict[str, Any]]:
    """Plain-data view of the windows, used for printing and serialization."""
    rows: list[dict[str, Any]] = []
    for window, pair, ranges in zip(info.windows, info.index_pairs, info.flat_ranges()):
        rows.append(
            {
                "start_date": window.start_date.isoformat(),
                "end_date": window.end_date.isoformat(),
                "start_idx": pair.start_idx,
                "end_idx": pair.end_idx,
                "bands": {
                    band: [rng.start, rng.end] for band, rng in zip(info.bands, ranges)
                },
            }
        )
    return rows
