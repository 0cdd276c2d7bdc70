import sys
from typing import Optional, TextIO

from timealign.config.context import RequestContext
from timealign.io.formatters import Format, write_rows
from timealign.timeline.indexes import timeline_indexes
from timealign.timeline.validate import check_against_request
from timealign.utils.time import parse_date


def handle(
    ctx: RequestContext,
    *,
    start: Optional[str] = None,
    end: Optional[str] = None,
    fmt: Format = "print",
    stream: TextIO | None = None,
) -> None:
    requested_start = parse_date(start) if start is not None else None
    requested_end = parse_date(end) if end is not None else None
    start_date, end_date = check_against_request(ctx.timeline, requested_start, requested_end)
    pair = timeline_indexes(ctx.timeline, start_date, end_date)
    row = {
        "start_date": start_date.isoformat(),
        "end_date": end_date.isoformat(),
        "start_idx": pair.start_idx,
        "end_idx": pair.end_idx,
    }
    write_rows([row], fmt, stream or sys.stdout)
