"""Character classes the spacing rules are built from."""
from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
import re
from typing import Iterable, Tuple

__all__ = ["CharacterClass", "CJK", "ANS", "CJK_BLOCKS"]

CJK_BLOCKS: tuple[tuple[str, str, str], ...] = (
    ("\u2e80", "\u2eff", "CJK Radicals Supplement"),
    ("\u2f00", "\u2fdf", "Kangxi Radicals"),
    ("\u3040", "\u309f", "Hiragana"),
    ("\u30a0", "\u30ff", "Katakana"),
    ("\u3100", "\u312f", "Bopomofo"),
    ("\u3200", "\u32ff", "Enclosed CJK Letters and Months"),
    ("\u3400", "\u4dbf", "CJK Unified Ideographs Extension A"),
    ("\u4e00", "\u9fff", "CJK Unified Ideographs"),
    ("\uf900", "\ufaff", "CJK Compatibility Ideographs"),
)
"""(first, last, block name) for every block counted as CJK."""

_ANS_SYMBOLS = "`~$%^&*-=+\\|<>/"


@dataclass(frozen=True, slots=True)
class CharacterClass:
    """Named, immutable set of inclusive code-point ranges."""

    name: str
    ranges: Tuple[Tuple[str, str], ...]
    _starts: Tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        ordered = tuple(sorted(self.ranges, key=lambda pair: ord(pair[0])))
        previous_end = -1
        for first, last in ordered:
            if len(first) != 1 or len(last) != 1:
                raise ValueError(f"{self.name}: range bounds must be single characters: {first!r}-{last!r}")
            if ord(first) > ord(last):
                raise ValueError(f"{self.name}: empty range {first!r}-{last!r}")
            if ord(first) <= previous_end:
                raise ValueError(f"{self.name}: range {first!r}-{last!r} overlaps its neighbour")
            previous_end = ord(last)
        object.__setattr__(self, "ranges", ordered)
        object.__setattr__(self, "_starts", tuple(ord(first) for first, _ in ordered))

    @classmethod
    def from_spans(cls, name: str, spans: Iterable[str]) -> "CharacterClass":
        """Build a class from ``"a-z"`` style spans and single characters."""

        ranges = []
        for span in spans:
            if len(span) == 3 and span[1] == "-":
                ranges.append((span[0], span[2]))
            else:
                ranges.extend((ch, ch) for ch in span)
        return cls(name, tuple(ranges))

    def __contains__(self, ch: object) -> bool:
        if not isinstance(ch, str) or len(ch) != 1:
            return False
        code = ord(ch)
        index = bisect_right(self._starts, code) - 1
        if index < 0:
            return False
        return code <= ord(self.ranges[index][1])

    def pattern(self) -> str:
        """Return the body of a regex character class, e.g. ``A-Za-z``."""

        parts = []
        for first, last in self.ranges:
            if first == last:
                parts.append(re.escape(first))
            else:
                parts.append(f"{re.escape(first)}-{re.escape(last)}")
        return "".join(parts)


CJK = CharacterClass("CJK", tuple((first, last) for first, last, _ in CJK_BLOCKS))
# Alphabets, numbers and the subset of ASCII symbols spaced against CJK.
ANS = CharacterClass.from_spans("ANS", ("A-Z", "a-z", "0-9", _ANS_SYMBOLS))
