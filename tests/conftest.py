from __future__ import annotations

import textwrap
from datetime import date
from pathlib import Path

import pytest

from tests.helpers import make_timeline


@pytest.fixture
def landsat_timeline():
    """23 acquisitions 16 days apart, starting 2013-09-14."""
    return make_timeline(date(2013, 9, 14), 23)


@pytest.fixture
def write_request(tmp_path: Path):
    """Return a helper that writes a request.yaml into a temp directory."""

    def _write(content: str, name: str = "request.yaml") -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path

    return _write
