from __future__ import annotations

import json

import pytest

from timealign.cli.app import main

REQUEST = """
timeline: [2013-09-14, 2013-09-30, 2013-10-16, 2013-11-01, 2013-11-17]
bands: [red, nir]
reference:
  start: 2000-09-14
  end: 2000-09-30
  num_samples: 2
"""


def test_windows_json(write_request, capsys):
    path = write_request(REQUEST)
    main(["windows", str(path), "--format", "json"])
    rows = json.loads(capsys.readouterr().out)
    assert [(r["start_idx"], r["end_idx"]) for r in rows] == [(0, 1), (2, 3)]
    assert rows[1]["bands"] == {"red": [2, 3], "nir": [7, 8]}


def test_masks_json_lines(write_request, capsys):
    path = write_request(REQUEST)
    main(["masks", str(path), "--format", "json-lines"])
    lines = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
    assert lines[0]["width"] == 12
    assert lines[0]["columns"] == [0, 1, 2, 3, 7, 8]
    assert lines[1]["selected"] == 6


def test_check_prints_resolved_period(write_request, capsys):
    path = write_request(REQUEST)
    main(["check", str(path), "--start", "2013-10-01"])
    out = capsys.readouterr().out
    assert "start_date=2013-10-01" in out
    assert "end_date=2013-11-17" in out
    assert "start_idx=1" in out
    assert "end_idx=4" in out


def test_check_out_of_range_exits(write_request):
    path = write_request(REQUEST)
    with pytest.raises(SystemExit) as excinfo:
        main(["check", str(path), "--end", "2013-11-18"])
    assert excinfo.value.code == 2


def test_misaligned_reference_exits(write_request):
    path = write_request(REQUEST.replace("num_samples: 2", "num_samples: 6"))
    with pytest.raises(SystemExit) as excinfo:
        main(["windows", str(path)])
    assert excinfo.value.code == 2


def test_invalid_request_exits(write_request):
    path = write_request("bands: [red]\n")
    with pytest.raises(SystemExit) as excinfo:
        main(["windows", str(path)])
    assert excinfo.value.code == 2
