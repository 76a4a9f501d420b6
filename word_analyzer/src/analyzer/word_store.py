# analyzer/word_store.py
from __future__ import annotations

import os
import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait
from pathlib import Path
from typing import List, Set

from . import config as CFG
from .errors import StorageReadError, StorageWriteError

log = logging.getLogger(__name__)


class WordStore:
    """
    Owns the word list and its backing text file.

      * load():     read the file, split on whitespace (fatal on failure)
      * append(w):  fire-and-forget; write "w\\n" to the file, then remember w
      * snapshot(): copy of the current words
      * persist():  overwrite the file with the space-joined words

    Appends run on a background writer so request handling never waits on
    file I/O. A failed append is logged and forgotten.
    """

    def __init__(self, path: str | os.PathLike, *, workers: int = CFG.APPEND_WORKERS) -> None:
        self.path = Path(path)
        self._words: List[str] = []
        self._lock = threading.Lock()
        self._pending: Set[Future] = set()
        self._pending_lock = threading.Lock()
        self._writer = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="word-append")
        self._closed = False

    def __len__(self) -> int:
        with self._lock:
            return len(self._words)

    # ------------- load / persist -------------

    def load(self) -> List[str]:
        try:
            with open(self.path, "r", encoding=CFG.ENCODING) as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageReadError(self.path, "Failed to read word file") from exc

        words = content.split() if content else []
        with self._lock:
            self._words = list(words)
        log.info("Loaded %d words from %s", len(words), self.path)
        return words

    def persist(self) -> None:
        content = " ".join(self.snapshot())
        try:
            with open(self.path, "w", encoding=CFG.ENCODING) as f:
                f.write(content)
        except (OSError, ValueError) as exc:
            raise StorageWriteError(self.path, "Failed to save words to file") from exc
        log.info("Saved %d words to %s", len(self), self.path)

    # ------------- read -------------

    def snapshot(self) -> List[str]:
        with self._lock:
            return list(self._words)

    # ------------- append -------------

    # /* ~~~ Schedule an append; the future resolves to True if the word was remembered ~~~ */
    def append(self, word: str) -> Future:
        if self._closed:
            return self._rejected()
        try:
            fut = self._writer.submit(self._append_now, word)
        except RuntimeError:
            # close() shut the writer down after the check above
            return self._rejected()
        with self._pending_lock:
            self._pending.add(fut)
        fut.add_done_callback(self._forget)
        return fut

    def _rejected(self) -> Future:
        log.error("Failed to append word to file %s: store is closed", self.path)
        fut: Future = Future()
        fut.set_result(False)
        return fut

    def _append_now(self, word: str) -> bool:
        try:
            with open(self.path, "a", encoding=CFG.ENCODING) as f:
                f.write(word + "\n")
        except (OSError, ValueError) as exc:
            log.error("Failed to append word to file %s: %s", self.path, exc)
            return False

        with self._lock:
            self._words.append(word)
        log.debug("Word appended to file: %s", self.path)
        return True

    def _forget(self, fut: Future) -> None:
        with self._pending_lock:
            self._pending.discard(fut)

    # ------------- teardown -------------

    def drain(self) -> None:
        """Block until every append scheduled so far has finished."""
        with self._pending_lock:
            pending = list(self._pending)
        if pending:
            wait(pending)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._writer.shutdown(wait=True)
