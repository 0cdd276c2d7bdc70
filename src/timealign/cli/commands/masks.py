import logging
import sys
from typing import TextIO

from timealign.classification.info import selected_columns, selection_masks
from timealign.config.context import RequestContext, build_info
from timealign.io.formatters import Format, write_rows

logger = logging.getLogger(__name__)


def handle(ctx: RequestContext, *, fmt: Format = "print", stream: TextIO | None = None) -> None:
    info = build_info(ctx)
    metadata_columns = ctx.config.metadata_columns
    masks = selection_masks(info, metadata_columns)
    width = len(masks[0])
    logger.info("%d masks over %d columns", len(masks), width)
    rows = [
        {
            "window": idx,
            "start_date": window.start_date.isoformat(),
            "end_date": window.end_date.isoformat(),
            "width": width,
            "selected": int(mask.sum()),
            "columns": selected_columns(mask),
        }
        for idx, (window, mask) in enumerate(zip(info.windows, masks))
    ]
    write_rows(rows, fmt, stream or sys.stdout)
