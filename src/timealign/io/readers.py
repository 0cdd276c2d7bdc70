from pathlib import Path
from typing import Iterator, Optional
import csv
import json

from timealign.domain.source import SampleSeries, SampleSet
from timealign.domain.timeline import Timeline


def iter_jsonl(path: Path) -> Iterator[dict]:
    """Yield JSON objects per line, skipping blank lines."""
    with path.open("r", encoding="utf-8") as f:
        for line in f:
            if line.strip():
                yield json.loads(line)


def iter_csv(path: Path) -> Iterator[dict]:
    """Yield dict rows from CSV. Assumes first row is header."""
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        for row in reader:
            yield row


def read_timeline(path: Path, *, column: Optional[str] = "date") -> Timeline:
    """Read acquisition dates from a text file (one per line) or a CSV column.

    Lines starting with ``#`` are ignored in text files.
    """
    if path.suffix.lower() == ".csv":
        values = []
        for row in iter_csv(path):
            if column not in row:
                raise ValueError(f"CSV {path} has no {column!r} column")
            values.append(row[column])
        return Timeline(values)
    with path.open("r", encoding="utf-8") as f:
        values = [
            line.strip()
            for line in f
            if line.strip() and not line.lstrip().startswith("#")
        ]
    return Timeline(values)


def read_samples(path: Path) -> SampleSet:
    """Read labelled time series from a JSON lines file."""
    return SampleSet(tuple(SampleSeries.from_mapping(rec) for rec in iter_jsonl(path)))
