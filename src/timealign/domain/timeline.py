from __future__ import annotations

from collections.abc import Sequence
from datetime import date
from typing import Any, Iterable, Iterator

from timealign.timeline.validate import validate
from timealign.utils.time import parse_dates


class Timeline(Sequence):
    """Immutable, strictly ascending sequence of acquisition dates."""

    __slots__ = ("_dates",)

    def __init__(self, dates: Iterable[Any]) -> None:
        parsed = tuple(parse_dates(dates))
        validate(parsed)
        self._dates: tuple[date, ...] = parsed

    def __getitem__(self, idx):
        return self._dates[idx]

    def __len__(self) -> int:
        return len(self._dates)

    def __iter__(self) -> Iterator[date]:
        return iter(self._dates)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Timeline):
            return self._dates == other._dates
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._dates)

    def __repr__(self) -> str:
        return f"Timeline({self.first.isoformat()}..{self.last.isoformat()}, n={len(self)})"

    @property
    def first(self) -> date:
        return self._dates[0]

    @property
    def last(self) -> date:
        return self._dates[-1]

    @property
    def dates(self) -> tuple[date, ...]:
        return self._dates
