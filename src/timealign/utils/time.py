from __future__ import annotations

from datetime import date, datetime
from typing import Any, Iterable, Mapping, Sequence

from timealign.errors import InvalidDateFormatError


def parse_date(value: Any) -> date:
    """Coerce ``value`` into a calendar date.

    Accepts ``date`` and ``datetime`` objects (the latter truncated to its date)
    and ISO-8601 strings such as ``"2013-09-14"`` or ``"2013-09-14T00:00:00"``.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        # timestamps need an explicit "T" or " " between date and time
        if len(text) > 10 and text[10] in "T ":
            if text.endswith("Z"):
                text = text[:-1] + "+00:00"
            try:
                return datetime.fromisoformat(text).date()
            except ValueError:
                pass
    raise InvalidDateFormatError(f"Invalid date format: {value!r}")


def parse_dates(values: Iterable[Any]) -> list[date]:
    return [parse_date(v) for v in values]


def parse_date_bands(rows: Sequence[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """Validate ``{date, band}`` rows (e.g. parsed from image file names)."""
    if not rows:
        raise InvalidDateFormatError("invalid date and band information: no rows")
    out: list[dict[str, Any]] = []
    for row in rows:
        unexpected = set(row.keys()) - {"date", "band"}
        if unexpected:
            raise InvalidDateFormatError(
                "error in obtaining date and band information: unexpected "
                + ", ".join(sorted(unexpected))
            )
        out.append({"date": parse_date(row.get("date")), "band": row.get("band")})
    return out
