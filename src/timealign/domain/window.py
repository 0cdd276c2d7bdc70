from __future__ import annotations

import numbers
from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, Any, Iterable, NamedTuple

from timealign.errors import InvalidReferenceError
from timealign.utils.time import parse_date

if TYPE_CHECKING:
    from timealign.domain.source import SampleSeries


class Window(NamedTuple):
    """Date pair spanning ``num_samples`` consecutive timeline entries."""

    start_date: date
    end_date: date


class IndexPair(NamedTuple):
    """0-based, inclusive timeline positions of a window."""

    start_idx: int
    end_idx: int

    @property
    def length(self) -> int:
        return self.end_idx - self.start_idx + 1


class FlatIndexRange(NamedTuple):
    """Inclusive column range of one band inside the band-major value block."""

    start: int
    end: int


@dataclass(frozen=True)
class ReferenceWindow:
    """Label-validity period of the training samples.

    Only the month and day of ``start`` anchor the match; its year is ignored.
    """

    start: date
    end: date
    num_samples: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", parse_date(self.start))
        object.__setattr__(self, "end", parse_date(self.end))
        count = self.num_samples
        if isinstance(count, bool) or not isinstance(count, numbers.Integral) or count <= 0:
            raise InvalidReferenceError(
                f"num_samples must be a positive integer, got {self.num_samples!r}"
            )
        object.__setattr__(self, "num_samples", int(count))

    @classmethod
    def from_sample(cls, series: "SampleSeries") -> "ReferenceWindow":
        return cls(
            start=series.start_date,
            end=series.end_date,
            num_samples=len(series.dates),
        )


def band_set(bands: Iterable[Any]) -> tuple[str, ...]:
    """Return ``bands`` as an ordered tuple; order defines the flat layout."""
    names = tuple(str(b) for b in bands)
    if not names:
        raise InvalidReferenceError("band set is empty")
    seen: set[str] = set()
    for name in names:
        if name in seen:
            raise InvalidReferenceError(f"duplicate band {name!r} in band set")
        seen.add(name)
    return names
