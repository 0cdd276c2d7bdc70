import logging

_LOGGER = logging.getLogger("timealign.cli")


def error_exit(message: str, code: int = 2) -> None:
    _LOGGER.error(message)
    raise SystemExit(code)
