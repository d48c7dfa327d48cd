"""Compiled substitution rules used by the spacing pipeline.

Every pattern is rendered from the :data:`~paranoid_spacing.charsets.CJK` and
:data:`~paranoid_spacing.charsets.ANS` classes once, at import time. ``re.ASCII``
keeps ``\\s``/``\\S`` limited to ASCII whitespace so full-width spaces count as
content, not padding.
"""
from __future__ import annotations

from dataclasses import dataclass
import re

from .charsets import ANS, CJK

__all__ = [
    "Rule",
    "CJK_QUOTE",
    "QUOTE_CJK",
    "FIX_QUOTE",
    "FIX_SINGLE_QUOTE",
    "CJK_BRACKET_CJK",
    "CJK_BRACKET",
    "BRACKET_CJK",
    "FIX_BRACKET",
    "CJK_HASH",
    "HASH_CJK",
    "FIX_OPERATOR",
    "FIX_SYMBOL",
    "CJK_ANS",
    "ANS_CJK",
]

_CJK = CJK.pattern()
_ANS = ANS.pattern()
_PUNCT = r"!;:,\.\?"
_OPERATORS = r"\+\-\*/=&\|<>"


@dataclass(frozen=True, slots=True)
class Rule:
    """A named regex substitution applied to the whole text."""

    name: str
    pattern: re.Pattern[str]
    replacement: str

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


def _rule(name: str, pattern: str, replacement: str) -> Rule:
    return Rule(name, re.compile(pattern, re.ASCII), replacement)


# quotes
CJK_QUOTE = _rule("cjk_quote", rf"([{_CJK}])([\"'])", r"\1 \2")
QUOTE_CJK = _rule("quote_cjk", rf"([\"'])([{_CJK}])", r"\1 \2")
FIX_QUOTE = _rule("fix_quote", r"([\"'])(\s*)(.+?)(\s*)([\"'])", r"\1\3\5")
FIX_SINGLE_QUOTE = _rule("fix_single_quote", rf"([{_CJK}])( )(')([A-Za-z0-9])", r"\1\3\4")

# brackets; the trailing CJK is a lookahead so chained groups all get spaced
CJK_BRACKET_CJK = _rule(
    "cjk_bracket_cjk",
    rf"([{_CJK}])([\(\[{{]+(.*?)[\)\]}}]+)(?=[{_CJK}])",
    r"\1 \2 ",
)
CJK_BRACKET = _rule("cjk_bracket", rf"([{_CJK}])([\(\)\[\]{{}}])", r"\1 \2")
BRACKET_CJK = _rule("bracket_cjk", rf"([\(\)\[\]{{}}])([{_CJK}])", r"\1 \2")

# openers separated by whitespace ("{ {") count as one run so nested groups
# collapse in a single pass
FIX_BRACKET = _rule(
    "fix_bracket",
    r"([\(\[{]+(?:\s*[\(\[{]+)*)(\s*)(.+?)(\s*)([\)\]}]+)",
    r"\1\3\5",
)

# hash tags; neighbours stay in lookaheads so "#a#和#b#" chains are spaced in one pass
CJK_HASH = _rule("cjk_hash", rf"([{_CJK}])(?=#\S)", r"\1 ")
HASH_CJK = _rule("hash_cjk", rf"(\S+#)(?=[{_CJK}])", r"\1 ")

# operators, right operand left unconsumed so "1+2+3" is spaced in one pass
FIX_OPERATOR = _rule(
    "fix_operator",
    rf"([A-Za-z0-9{_CJK}])([{_OPERATORS}])(?=[A-Za-z0-9{_CJK}])",
    r"\1 \2 ",
)

FIX_SYMBOL = _rule("fix_symbol", rf"([{_CJK}])([{_PUNCT}])([A-Za-z0-9])", r"\1\2 \3")

CJK_ANS = _rule("cjk_ans", rf"([{_CJK}])([{_ANS}@])", r"\1 \2")
ANS_CJK = _rule("ans_cjk", rf"([{_ANS}{_PUNCT}])([{_CJK}])", r"\1 \2")
