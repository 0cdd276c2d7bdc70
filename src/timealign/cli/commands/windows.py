import logging
import sys
from typing import TextIO

from timealign.classification.info import window_table
from timealign.config.context import RequestContext, build_info
from timealign.io.formatters import Format, write_rows

logger = logging.getLogger(__name__)


def handle(ctx: RequestContext, *, fmt: Format = "print", stream: TextIO | None = None) -> None:
    info = build_info(ctx)
    logger.info(
        "%d windows of %d samples over %d dates (%s)",
        info.num_windows,
        info.num_samples,
        len(info.timeline),
        ", ".join(info.bands),
    )
    write_rows(window_table(info), fmt, stream or sys.stdout)
