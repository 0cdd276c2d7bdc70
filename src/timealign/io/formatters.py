import json
from typing import Any, Iterable, Literal, TextIO

Format = Literal["print", "json", "json-lines"]
FORMATS = ("print", "json", "json-lines")


class JsonLineFormatter:
    def __call__(self, item: Any) -> str:
        return json.dumps(item, ensure_ascii=False, default=str) + "\n"


class PrintLineFormatter:
    def __call__(self, item: Any) -> str:
        if isinstance(item, dict):
            return "  ".join(f"{k}={v}" for k, v in item.items()) + "\n"
        return f"{item}\n"


def write_rows(rows: Iterable[dict], fmt: Format, stream: TextIO) -> None:
    """Write ``rows`` to ``stream`` in the requested CLI output format."""
    if fmt == "json":
        stream.write(json.dumps(list(rows), ensure_ascii=False, indent=2, default=str))
        stream.write("\n")
        return
    if fmt == "json-lines":
        formatter = JsonLineFormatter()
    elif fmt == "print":
        formatter = PrintLineFormatter()
    else:
        raise ValueError(f"Unsupported output format: {fmt!r}")
    for row in rows:
        stream.write(formatter(row))
