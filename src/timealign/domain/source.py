from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Mapping, Protocol, Sequence, Union, runtime_checkable

from timealign.domain.timeline import Timeline
from timealign.errors import InvalidReferenceError, InvalidTimelineError
from timealign.utils.time import parse_date, parse_dates


class SourceKind(Enum):
    SAMPLES = "samples"
    CUBE = "cube"


@runtime_checkable
class TimelineSource(Protocol):
    kind: SourceKind

    def timeline(self) -> Timeline:
        ...

    def bands(self) -> tuple[str, ...]:
        ...


@dataclass(frozen=True)
class SampleSeries:
    """One labelled time series: its dates and one value column per band."""

    label: str
    start_date: date
    end_date: date
    dates: tuple[date, ...]
    values: Mapping[str, Sequence[float]] = field(default_factory=dict)
    longitude: float | None = None
    latitude: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "start_date", parse_date(self.start_date))
        object.__setattr__(self, "end_date", parse_date(self.end_date))
        object.__setattr__(self, "dates", tuple(parse_dates(self.dates)))
        for band, column in self.values.items():
            if len(column) != len(self.dates):
                raise InvalidReferenceError(
                    f"sample {self.label!r}: band {band!r} has {len(column)} values "
                    f"for {len(self.dates)} dates"
                )

    @property
    def bands(self) -> tuple[str, ...]:
        return tuple(self.values.keys())

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SampleSeries":
        """Build a series from a JSON-like mapping.

        Expected keys: ``label``, ``start_date``, ``end_date`` and
        ``time_series`` (a list of rows with ``date`` plus one key per band).
        """
        label = data.get("label")
        if label is None or not str(label).strip():
            raise InvalidReferenceError(
                f"sample starting {data.get('start_date')} has no label"
            )
        rows = data.get("time_series") or []
        dates = [row.get("date") for row in rows]
        bands: dict[str, list[float]] = {}
        for row in rows:
            for key, value in row.items():
                if key == "date":
                    continue
                bands.setdefault(key, []).append(value)
        return cls(
            label=str(label),
            start_date=data.get("start_date"),
            end_date=data.get("end_date"),
            dates=tuple(dates),
            values=bands,
            longitude=data.get("longitude"),
            latitude=data.get("latitude"),
        )


@dataclass(frozen=True)
class SampleSet:
    """Training samples; the first series defines timeline and bands."""

    series: tuple[SampleSeries, ...]
    kind: SourceKind = field(default=SourceKind.SAMPLES, init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "series", tuple(self.series))

    def __len__(self) -> int:
        return len(self.series)

    def __getitem__(self, idx: int) -> SampleSeries:
        return self.series[idx]

    def first(self) -> SampleSeries:
        if not self.series:
            raise InvalidReferenceError("sample set is empty")
        return self.series[0]

    def timeline(self) -> Timeline:
        if not self.series:
            raise InvalidTimelineError("sample set is empty, no timeline available")
        return Timeline(self.series[0].dates)

    def bands(self) -> tuple[str, ...]:
        return self.first().bands

    def labels(self) -> tuple[str, ...]:
        return tuple(sorted({s.label for s in self.series}))


@dataclass(frozen=True)
class CubeMetadata:
    """Description of a data cube as produced by the cube/catalog layer."""

    name: str
    cube_bands: tuple[str, ...]
    cube_timeline: Timeline
    kind: SourceKind = field(default=SourceKind.CUBE, init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "cube_bands", tuple(self.cube_bands))
        if not isinstance(self.cube_timeline, Timeline):
            object.__setattr__(self, "cube_timeline", Timeline(self.cube_timeline))

    def timeline(self) -> Timeline:
        return self.cube_timeline

    def bands(self) -> tuple[str, ...]:
        return self.cube_bands


AnySource = Union[SampleSet, CubeMetadata]


def timeline_of(source: AnySource) -> Timeline:
    """Return the timeline of a sample set or a data cube."""
    kind = getattr(source, "kind", None)
    if kind is SourceKind.SAMPLES or kind is SourceKind.CUBE:
        return source.timeline()
    raise InvalidTimelineError(
        f"input does not contain a valid timeline: {type(source).__name__}"
    )
