from __future__ import annotations
from pathlib import Path

# backing word file (one whitespace-delimited token per word)
WORDS_FILE: Path = Path("words.txt")
ENCODING: str = "utf-8"

# HTTP listener
HOST: str = "127.0.0.1"
PORT: int = 8080         # fixed, no CLI override

# /* ~~~ appends go through a single writer so they land in arrival order ~~~ */
APPEND_WORKERS: int = 1
