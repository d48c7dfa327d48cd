"""Line-oriented file adapters around :func:`~paranoid_spacing.spacing.space_text`."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

from .debug_utils import LineBudget, log_debug
from .spacing import needs_spacing, space_text

__all__ = ["space_file", "space_path", "read_spaced", "file_needs_spacing"]

logger = logging.getLogger(__name__)

_TRACE_LINES_PER_FILE = 200


def space_file(
    path: str | Path,
    output: TextIO,
    *,
    spacing: bool = True,
    encoding: str = "utf-8",
) -> None:
    """Stream *path* line by line into *output*.

    Each line is spaced with :func:`space_text` unless ``spacing=False``, in
    which case lines are copied verbatim. Line endings are preserved. Errors
    raised while opening, decoding or writing propagate unchanged and abort
    the copy; *output* is flushed only after the last line was written.
    """

    budget = LineBudget(_TRACE_LINES_PER_FILE)
    with open(path, "r", encoding=encoding, newline="") as handle:
        for lineno, line in enumerate(handle, start=1):
            if spacing:
                spaced = space_text(line)
                if spaced != line:
                    log_debug("[file] %s:%d spaced", path, lineno, budget=budget)
                line = spaced
            output.write(line)
    output.flush()


def read_spaced(path: str | Path, *, encoding: str = "utf-8") -> tuple[str, str]:
    """Return ``(original, spaced)`` content of *path*."""

    with open(path, "r", encoding=encoding, newline="") as handle:
        lines = handle.readlines()
    return "".join(lines), "".join(space_text(line) for line in lines)


def space_path(
    path: str | Path,
    *,
    backup_suffix: str | None = ".bak",
    encoding: str = "utf-8",
) -> bool:
    """Rewrite *path* in place; return True when its content changed.

    Unchanged files are left untouched. When *backup_suffix* is set the
    original content is written next to the file first.
    """

    target = Path(path)
    original, spaced = read_spaced(target, encoding=encoding)
    if spaced == original:
        logger.debug("unchanged: %s", target)
        return False
    if backup_suffix:
        backup = target.with_name(target.name + backup_suffix)
        with open(backup, "w", encoding=encoding, newline="") as handle:
            handle.write(original)
        logger.info("backup written: %s", backup)
    with open(target, "w", encoding=encoding, newline="") as handle:
        handle.write(spaced)
    logger.info("spaced: %s", target)
    return True


def file_needs_spacing(path: str | Path, *, encoding: str = "utf-8") -> bool:
    """Return True as soon as one line of *path* would be changed."""

    with open(path, "r", encoding=encoding, newline="") as handle:
        return any(needs_spacing(line) for line in handle)
