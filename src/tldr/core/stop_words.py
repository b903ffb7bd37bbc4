"""Stop-word list used to exclude common words from scoring."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import FrozenSet, Optional, Union

from .errors import ResourceLoadError
from .paths import get_system_path

logger = logging.getLogger(__name__)

DEFAULT_STOP_WORDS_PATH = get_system_path("stop_words.txt")
LINE_SEPARATOR = "\r\n"


class StopWordSet:
    """Set of lowercase words excluded from frequency scoring.

    A new instance is empty until :meth:`load` is called, so an unloaded set
    filters nothing. Loading replaces the contents wholesale; the set is not
    otherwise mutated.

    Args:
        path: Line-delimited word list; defaults to the bundled English list.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path).expanduser() if path else DEFAULT_STOP_WORDS_PATH
        self._words: FrozenSet[str] = frozenset()
        self.loaded = False

    def load(self) -> None:
        """Read the word list from disk, replacing any previous contents.

        The file is split on ``\\r\\n`` exactly as shipped.

        Raises:
            ResourceLoadError: If the file is missing, unreadable or not UTF-8.
        """
        try:
            blob = self.path.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ResourceLoadError(f"Could not load stop words from {self.path}: {exc}") from exc

        self._words = frozenset(blob.split(LINE_SEPARATOR))
        self.loaded = True
        logger.debug("Loaded %d stop words from %s", len(self._words), self.path)

    def contains(self, word: str) -> bool:
        return word in self._words

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    @property
    def words(self) -> FrozenSet[str]:
        return self._words


__all__ = ["StopWordSet", "DEFAULT_STOP_WORDS_PATH"]
