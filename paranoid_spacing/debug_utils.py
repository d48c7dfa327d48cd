"""Opt-in rule tracing for the spacing pipeline.

Tracing is off unless the CLI passes ``--debug`` or ``PARANOID_SPACING_DEBUG``
is set; the environment variable always wins so it can silence a noisy run.
"""
from __future__ import annotations

from contextlib import contextmanager
import logging
import os
from typing import Iterator

DEBUG_ENV_VAR = "PARANOID_SPACING_DEBUG"
_FALSE_VALUES = frozenset({"", "0", "false", "no", "off"})

_debug_switch = False
logger = logging.getLogger("paranoid_spacing.debug")


def set_debug_logging(enabled: bool) -> None:
    global _debug_switch
    _debug_switch = bool(enabled)


def is_debug_logging_enabled() -> bool:
    raw = os.environ.get(DEBUG_ENV_VAR)
    if raw is not None:
        return raw.strip().lower() not in _FALSE_VALUES
    return _debug_switch


@contextmanager
def debug_logging(enabled: bool = True) -> Iterator[None]:
    """Temporarily flip the switch, restoring the previous value on exit."""

    previous = _debug_switch
    set_debug_logging(enabled)
    try:
        yield
    finally:
        set_debug_logging(previous)


class LineBudget:
    """Caps how many per-line trace messages one file may emit."""

    def __init__(self, max_lines: int | None) -> None:
        self.max_lines = max_lines
        self.used = 0

    def take(self) -> bool:
        if self.max_lines is not None and self.used >= self.max_lines:
            return False
        self.used += 1
        return True


def log_debug(message: str, *args: object, budget: LineBudget | None = None) -> None:
    """Log *message* on the debug channel when tracing is enabled."""

    if not is_debug_logging_enabled():
        return
    if budget is not None and not budget.take():
        return
    logger.info(message, *args)
