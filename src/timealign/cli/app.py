import argparse
import logging
from typing import Optional, Sequence

from timealign.cli.commands.check import handle as handle_check
from timealign.cli.commands.masks import handle as handle_masks
from timealign.cli.commands.utils import error_exit
from timealign.cli.commands.windows import handle as handle_windows
from timealign.config.context import load_request_context
from timealign.config.resolution import resolve_log_level
from timealign.errors import TimealignError
from timealign.io.formatters import FORMATS


def _build_parser() -> argparse.ArgumentParser:
    # Common options shared by top-level and subcommands
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="set logging level (default: request log_level or WARNING)",
    )

    parser = argparse.ArgumentParser(
        prog="timealign",
        description="Align reference windows on image time series timelines.",
        parents=[common],
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_windows = sub.add_parser(
        "windows",
        help="list classification windows with their index ranges",
        parents=[common],
    )
    p_windows.add_argument("request", help="path to request.yaml")
    p_windows.add_argument(
        "--format", "-f", choices=FORMATS, default="print",
        help="output format (print/json/json-lines)",
    )

    p_masks = sub.add_parser(
        "masks",
        help="list the feature table columns selected for each window",
        parents=[common],
    )
    p_masks.add_argument("request", help="path to request.yaml")
    p_masks.add_argument(
        "--format", "-f", choices=FORMATS, default="print",
        help="output format (print/json/json-lines)",
    )

    p_check = sub.add_parser(
        "check",
        help="resolve a sub-period against the request timeline",
        parents=[common],
    )
    p_check.add_argument("request", help="path to request.yaml")
    p_check.add_argument("--start", help="requested start date (YYYY-MM-DD)")
    p_check.add_argument("--end", help="requested end date (YYYY-MM-DD)")
    p_check.add_argument(
        "--format", "-f", choices=FORMATS, default="print",
        help="output format (print/json/json-lines)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        ctx = load_request_context(args.request)
    except (FileNotFoundError, TypeError, ValueError) as exc:
        logging.basicConfig(format="%(message)s")
        error_exit(f"Cannot load request {args.request}: {exc}")

    level = resolve_log_level(getattr(args, "log_level", None), ctx.config.log_level)
    logging.basicConfig(level=level.value, format="%(message)s")

    try:
        if args.cmd == "windows":
            handle_windows(ctx, fmt=args.format)
            return
        if args.cmd == "masks":
            handle_masks(ctx, fmt=args.format)
            return
        if args.cmd == "check":
            handle_check(ctx, start=args.start, end=args.end, fmt=args.format)
            return
    except TimealignError as exc:
        error_exit(f"{type(exc).__name__}: {exc}")


if __name__ == "__main__":
    main()
