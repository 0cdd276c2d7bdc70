from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional


def _normalize_upper(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, int):
        return logging.getLevelName(value).upper()
    text = str(value).strip()
    return text.upper() if text else None


@dataclass(frozen=True)
class LogLevelDecision:
    name: str
    value: int


def resolve_log_level(
    *levels: Any,
    fallback: str = "WARNING",
) -> LogLevelDecision:
    """Pick the first level that is set, in priority order (CLI, request, ...)."""
    name = None
    for level in levels:
        normalized = _normalize_upper(level)
        if normalized:
            name = normalized
            break
    if not name:
        name = _normalize_upper(fallback) or "WARNING"
    value = logging._nameToLevel.get(name, logging.WARNING)
    return LogLevelDecision(name=name, value=value)
