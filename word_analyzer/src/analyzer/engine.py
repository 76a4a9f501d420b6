# analyzer/engine.py
from __future__ import annotations

import os
import logging
from typing import Optional

from . import config as CFG
from .match import analyze as match_words
from .models import MatchResult
from .word_store import WordStore

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - the word list and its backing file (WordStore),
      - the two matchers (match.analyze).

    Public API (used by CLI/Flask):
      * start():         load the word file (raises StorageReadError)
      * analyze(text):   match against a snapshot, then remember the text
      * shutdown():      drain pending appends, persist (raises StorageWriteError)
    """

    # ------------- lifecycle -------------

    def __init__(self, words_path: str | os.PathLike = CFG.WORDS_FILE, *, verbose: bool = False) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
        self.store: Optional[WordStore] = None
        self._words_path = words_path

    # /* ~~~ Load the word list; the service must not come up without it ~~~ */
    def start(self) -> None:
        store = WordStore(self._words_path)
        try:
            store.load()
        except Exception:
            store.close()
            raise
        self.store = store
        log.info("Engine start() complete: words=%d", len(store))

    # ------------- query -------------

    # /* ~~~ The snapshot is taken before this query's own append is scheduled ~~~ */
    def analyze(self, text: str) -> MatchResult:
        if self.store is None:
            raise RuntimeError("Engine not initialized. Call start() first.")
        words = self.store.snapshot()
        self.store.append(text)
        return match_words(text, words)

    # ------------- teardown -------------

    def shutdown(self) -> None:
        store, self.store = self.store, None
        if store is None:
            return
        try:
            store.drain()
            store.persist()
        finally:
            store.close()
            log.info("Engine shutdown complete")
