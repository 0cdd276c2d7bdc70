from __future__ import annotations

import json
from datetime import date

import pytest

from timealign.errors import InvalidTimelineError
from timealign.io.readers import read_samples, read_timeline


def test_read_timeline_from_csv(tmp_path):
    path = tmp_path / "timeline.csv"
    path.write_text("date,file\n2013-09-14,a.tif\n2013-09-30,b.tif\n", encoding="utf-8")
    timeline = read_timeline(path)
    assert list(timeline) == [date(2013, 9, 14), date(2013, 9, 30)]


def test_read_timeline_csv_without_date_column(tmp_path):
    path = tmp_path / "timeline.csv"
    path.write_text("when\n2013-09-14\n", encoding="utf-8")
    with pytest.raises(ValueError, match="'date'"):
        read_timeline(path)


def test_read_timeline_rejects_unsorted_text(tmp_path):
    path = tmp_path / "timeline.txt"
    path.write_text("2013-09-30\n2013-09-14\n", encoding="utf-8")
    with pytest.raises(InvalidTimelineError):
        read_timeline(path)


def test_read_samples(tmp_path):
    path = tmp_path / "samples.jsonl"
    record = {
        "label": "soy",
        "start_date": "2013-09-14",
        "end_date": "2014-08-29",
        "time_series": [{"date": "2013-09-14", "ndvi": 0.3}],
    }
    path.write_text(json.dumps(record) + "\n\n", encoding="utf-8")
    samples = read_samples(path)
    assert len(samples) == 1
    assert samples.labels() == ("soy",)
    assert samples.bands() == ("ndvi",)
