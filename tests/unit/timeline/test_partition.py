from __future__ import annotations

from datetime import date

import pytest

from tests.helpers import make_timeline
from timealign.domain.window import Window
from timealign.errors import AlignmentError, InvalidReferenceError
from timealign.timeline.indexes import to_index_pairs
from timealign.timeline.partition import iter_windows, partition


def test_exact_length_yields_single_window(landsat_timeline):
    windows = partition(landsat_timeline, 0, 23)
    assert windows == [Window(landsat_timeline.first, landsat_timeline.last)]


@pytest.mark.parametrize("num_samples", [1, 2, 3, 5, 7])
@pytest.mark.parametrize("length", [7, 10, 23, 35])
def test_windows_are_contiguous_and_equal_length(length, num_samples):
    timeline = make_timeline(date(2001, 1, 1), length, step_days=8)
    windows = partition(timeline, 0, num_samples)
    pairs = to_index_pairs(timeline, windows)

    assert len(windows) == length // num_samples
    assert all(p.end_idx - p.start_idx + 1 == num_samples for p in pairs)
    assert pairs[0].start_idx == 0
    for prev, cur in zip(pairs, pairs[1:]):
        assert cur.start_idx == prev.end_idx + 1


def test_no_remainder_covers_whole_timeline():
    timeline = make_timeline(date(2005, 3, 1), 3 * 6)
    pairs = to_index_pairs(timeline, partition(timeline, 0, 6))
    covered = [i for p in pairs for i in range(p.start_idx, p.end_idx + 1)]
    assert covered == list(range(len(timeline)))


def test_trailing_remainder_is_dropped():
    timeline = make_timeline(date(2005, 3, 1), 3 * 6 + 4)
    windows = partition(timeline, 0, 6)
    assert len(windows) == 3
    assert windows[-1].end_date == timeline[17]


def test_partition_from_offset():
    timeline = make_timeline(date(2005, 3, 1), 10)
    windows = partition(timeline, 2, 4)
    assert windows == [Window(timeline[2], timeline[5]), Window(timeline[6], timeline[9])]


def test_partition_without_a_complete_window_fails():
    timeline = make_timeline(date(2005, 3, 1), 10)
    with pytest.raises(AlignmentError, match="do not fit"):
        partition(timeline, 0, 11)
    with pytest.raises(AlignmentError):
        partition(timeline, 8, 3)


def test_iter_windows_is_lazy_and_restartable():
    timeline = make_timeline(date(2005, 3, 1), 9)
    gen = iter_windows(timeline, 0, 3)
    assert next(gen) == Window(timeline[0], timeline[2])
    assert list(iter_windows(timeline, 0, 3)) == partition(timeline, 0, 3)


def test_non_positive_num_samples_rejected():
    timeline = make_timeline(date(2005, 3, 1), 9)
    with pytest.raises(InvalidReferenceError):
        partition(timeline, 0, 0)
