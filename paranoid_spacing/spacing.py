"""Paranoid text spacing between CJK and half-width characters."""
from __future__ import annotations

from typing import Callable, List, Sequence, Tuple

from . import rules as R
from .debug_utils import is_debug_logging_enabled, log_debug
from .rules import Rule

__all__ = [
    "QUOTE_RULES",
    "ONE_SIDED_BRACKET_RULES",
    "TRAILING_RULES",
    "space_text",
    "trace_spacing",
    "needs_spacing",
]

QUOTE_RULES: Tuple[Rule, ...] = (R.CJK_QUOTE, R.QUOTE_CJK, R.FIX_QUOTE, R.FIX_SINGLE_QUOTE)
ONE_SIDED_BRACKET_RULES: Tuple[Rule, ...] = (R.CJK_BRACKET, R.BRACKET_CJK)
TRAILING_RULES: Tuple[Rule, ...] = (
    R.FIX_BRACKET,
    R.CJK_HASH,
    R.HASH_CJK,
    R.FIX_OPERATOR,
    R.FIX_SYMBOL,
    R.CJK_ANS,
    R.ANS_CJK,
)

Observer = Callable[[Rule, str, str], None]


def _apply_all(text: str, sequence: Sequence[Rule], observer: Observer | None) -> str:
    for rule in sequence:
        updated = rule.apply(text)
        if observer is not None and updated != text:
            observer(rule, text, updated)
        text = updated
    return text


def _run(text: str, observer: Observer | None) -> str:
    if len(text) < 2:
        return text

    text = _apply_all(text, QUOTE_RULES, observer)

    bracketed = _apply_all(text, (R.CJK_BRACKET_CJK,), observer)
    if bracketed == text:
        # no CJK-flanked group, fall back to spacing each bracket on its own
        bracketed = _apply_all(text, ONE_SIDED_BRACKET_RULES, observer)
    text = bracketed

    return _apply_all(text, TRAILING_RULES, observer)


def _log_rule(rule: Rule, before: str, after: str) -> None:
    log_debug("[spacing] rule=%s before=%r after=%r", rule.name, before[:80], after[:80])


def space_text(text: str) -> str:
    """Return *text* with spaces inserted between CJK and half-width runs.

    The function never fails and never mutates its input; strings shorter than
    two characters are returned unchanged.
    """

    observer = _log_rule if is_debug_logging_enabled() else None
    return _run(text, observer)


def trace_spacing(text: str) -> Tuple[str, List[str]]:
    """Space *text* and report the names of the rules that changed it, in order."""

    fired: List[str] = []

    def _record(rule: Rule, before: str, after: str) -> None:
        fired.append(rule.name)
        if is_debug_logging_enabled():
            _log_rule(rule, before, after)

    return _run(text, _record), fired


def needs_spacing(text: str) -> bool:
    """Return True when :func:`space_text` would change *text*."""

    return space_text(text) != text
