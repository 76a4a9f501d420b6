from __future__ import annotations
from typing import Optional, Sequence

from .models import MatchResult

# a=1, b=2, ... z=26 (case-insensitive). Other characters are not filtered:
# they contribute ord(c) - ord('a') + 1 as-is, which may be <= 0 or > 26.
_BASE = ord("a") - 1


def _char_code(ch: str) -> int:
    # "İ" lower-cases to "i" plus a combining dot; only the base letter counts
    return ord(ch.lower()[0]) - _BASE

def char_value(s: str) -> int:
    return sum(_char_code(ch) for ch in s)

def value_distance(query: str, candidate: str) -> int:
    return abs(char_value(candidate) - char_value(query))

def closest_by_value(query: str, words: Sequence[str]) -> Optional[str]:
    """Word whose character sum is nearest the query's; first one wins ties."""
    if not words:
        return None
    target = char_value(query)
    return min(words, key=lambda w: abs(char_value(w) - target))


def compare_to(a: str, b: str) -> int:
    """
    Three-way ordinal comparison.
    Returns the code point difference at the first differing position,
    or the length difference when one string is a prefix of the other.
    """
    for ca, cb in zip(a, b):
        if ca != cb:
            return ord(ca) - ord(cb)
    return len(a) - len(b)

def closest_lexical(query: str, words: Sequence[str]) -> str:
    """
    Smallest word that sorts at or after the query, by compare_to distance.
    Returns "" when no word qualifies (including an empty list).
    The input sequence is never reordered.
    """
    best = ""
    best_diff: Optional[int] = None
    for w in sorted(words):
        diff = compare_to(w, query)
        if diff >= 0 and (best_diff is None or diff < best_diff):
            best, best_diff = w, diff
    return best


# /* ~~~ the two matches disagree on "nothing found": None vs "" ~~~ */
def analyze(query: str, words: Sequence[str]) -> MatchResult:
    return MatchResult(
        value=closest_by_value(query, words),
        lexical=closest_lexical(query, words),
    )
