"""Word analyzer: closest-match lookups over a self-growing word list."""
from __future__ import annotations

from .engine import Engine
from .errors import StorageError, StorageReadError, StorageWriteError
from .match import analyze, char_value, closest_by_value, closest_lexical, compare_to
from .models import MatchResult
from .word_store import WordStore

__all__ = [
    "Engine", "WordStore", "MatchResult",
    "StorageError", "StorageReadError", "StorageWriteError",
    "analyze", "char_value", "closest_by_value", "closest_lexical", "compare_to",
]
