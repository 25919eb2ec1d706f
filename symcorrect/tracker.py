"""
Word Tracking Session
=====================
Feeds completed words through the dictionary one at a time.

Keeps the last two committed words as context for the next lookup and a
single-entry undo buffer for the most recent correction.
"""

import time
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Optional, Tuple

from config_logging import get_logger
from .config import TrackerConfig, get_config
from .spelling.dictionary import Dictionary

logger = get_logger('symcorrect.tracker')

# Previous tokens handed to the context model
CONTEXT_WINDOW = 2


@dataclass
class Correction:
    """A replacement made (or reverted) by the tracker."""
    original: str
    corrected: str
    timestamp: float


def apply_case(original: str, corrected: str) -> str:
    """Give the correction the capitalization style of the typed word."""
    if len(original) > 1 and original.isupper():
        return corrected.upper()
    if original[:1].isupper():
        return corrected[:1].upper() + corrected[1:]
    return corrected


class WordTracker:
    """
    Correct words as they are completed, with context and undo.

    The tracker does not touch the keyboard; callers apply the returned
    Correction to whatever text surface they own.
    """

    def __init__(
        self,
        dictionary: Dictionary,
        config: Optional[TrackerConfig] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.dictionary = dictionary
        self.config = config or get_config().tracker
        self._clock = clock
        self._enabled = self.config.enabled_by_default
        self._context: Deque[str] = deque(maxlen=CONTEXT_WINDOW)
        self._undo: Optional[Correction] = None

    @property
    def enabled(self) -> bool:
        return self._enabled

    def toggle_enabled(self) -> bool:
        """Flip the enabled state and return the new value."""
        self._enabled = not self._enabled
        logger.info(f"Autocorrect {'enabled' if self._enabled else 'disabled'}")
        return self._enabled

    @property
    def context(self) -> Optional[Tuple[str, str]]:
        """The last two committed words, oldest first, once both exist."""
        if len(self._context) < 2:
            return None
        return self._context[-2], self._context[-1]

    def feed(self, word: str) -> Optional[Correction]:
        """
        Complete a word and correct it if needed.

        Args:
            word: The word as typed (any case)

        Returns:
            The correction applied, or None if the word was left alone
        """
        if not word:
            return None

        # Undo only applies to the most recently committed word
        self._undo = None
        correction = None
        if self._enabled:
            term = self.dictionary.get_correction(word.lower(), self.context)
            if term is not None:
                correction = Correction(
                    original=word,
                    corrected=apply_case(word, term),
                    timestamp=self._clock(),
                )
                self._undo = correction
                logger.debug(f"Corrected: '{word}' -> '{correction.corrected}'")

        committed = correction.corrected if correction else word
        self._context.append(committed.lower())
        return correction

    def undo(self) -> Optional[Correction]:
        """
        Revert the most recent correction if it is still within the timeout.

        Returns:
            A Correction going from the corrected word back to the original,
            or None when there is nothing to undo
        """
        pending = self._undo
        self._undo = None
        if pending is None:
            return None

        if self._clock() - pending.timestamp >= self.config.undo_timeout_seconds:
            return None

        if not self._context or self._context[-1] != pending.corrected.lower():
            return None
        self._context[-1] = pending.original.lower()

        logger.debug(f"Undo: '{pending.corrected}' -> '{pending.original}'")
        return Correction(
            original=pending.corrected,
            corrected=pending.original,
            timestamp=self._clock(),
        )

    def reset(self):
        """Forget context and any pending undo."""
        self._context.clear()
        self._undo = None
