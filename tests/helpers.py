from __future__ import annotations

from datetime import date, timedelta
from typing import Sequence

from timealign.domain.source import SampleSeries, SampleSet
from timealign.domain.timeline import Timeline


def make_timeline(start: date, count: int, step_days: int = 16) -> Timeline:
    return Timeline([start + timedelta(days=step_days * i) for i in range(count)])


def make_modis_timeline(first_year: int, last_year: int) -> Timeline:
    """23 composites per year on days 1, 17, ..., 353, restarting every January."""
    dates = []
    for year in range(first_year, last_year + 1):
        for k in range(23):
            dates.append(date(year, 1, 1) + timedelta(days=16 * k))
    return Timeline(dates)


def make_series(
    label: str,
    dates: Sequence[date],
    bands: Sequence[str] = ("ndvi",),
    *,
    start_date: date | None = None,
    end_date: date | None = None,
) -> SampleSeries:
    return SampleSeries(
        label=label,
        start_date=start_date or dates[0],
        end_date=end_date or dates[-1],
        dates=tuple(dates),
        values={band: [0.1 * i for i in range(len(dates))] for band in bands},
    )


def make_samples(labels: Sequence[str], dates: Sequence[date], bands: Sequence[str] = ("ndvi",)) -> SampleSet:
    return SampleSet(tuple(make_series(label, dates, bands) for label in labels))
