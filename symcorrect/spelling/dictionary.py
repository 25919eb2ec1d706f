"""
Dictionary Loading for SymCorrect
=================================
Builds the SymSpell index from word lists and keeps the personal dictionary.

Sources, in order of preference:
- A `word [frequency]` text file (configured path)
- The English frequency dictionary bundled with symspellpy (opt-in)
- A small embedded list of common English words

Personal words are loaded on top with a high frequency so they win ties.

Reloads build a complete new index before publishing it, so lookups running
in other threads always see either the old or the new dictionary.
"""

import threading
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, TYPE_CHECKING

from config_logging import get_logger, DictionaryError
from ..config import SpellingConfig, get_config
from .symspell import SymSpell, Suggestion

if TYPE_CHECKING:
    from ..context.trigram import TrigramModel

logger = get_logger('symcorrect.dictionary')

# Frequency list shipped inside the symspellpy distribution
BUNDLED_DICTIONARY = "frequency_dictionary_en_82_765.txt"

PERSONAL_DICTIONARY_HEADER = (
    "# Personal Dictionary\n"
    "# Add one word per line\n"
    "# Lines starting with # are ignored\n"
    "\n"
)

# Common English words with frequencies
FALLBACK_WORDS: Tuple[Tuple[str, int], ...] = (
    ("the", 1000000), ("be", 500000), ("to", 450000), ("of", 400000),
    ("and", 380000), ("a", 350000), ("in", 320000), ("that", 300000),
    ("have", 280000), ("i", 270000), ("it", 260000), ("for", 250000),
    ("not", 240000), ("on", 230000), ("with", 220000), ("he", 210000),
    ("as", 200000), ("you", 195000), ("do", 190000), ("at", 185000),
    ("this", 180000), ("but", 175000), ("his", 170000), ("by", 165000),
    ("from", 160000), ("they", 155000), ("we", 150000), ("say", 145000),
    ("her", 140000), ("she", 135000), ("or", 130000), ("an", 125000),
    ("will", 120000), ("my", 115000), ("one", 110000), ("all", 105000),
    ("would", 100000), ("there", 98000), ("their", 96000), ("what", 94000),
    ("so", 92000), ("up", 90000), ("out", 88000), ("if", 86000),
    ("about", 84000), ("who", 82000), ("get", 80000), ("which", 78000),
    ("go", 76000), ("me", 74000), ("when", 72000), ("make", 70000),
    ("can", 68000), ("like", 66000), ("time", 64000), ("no", 62000),
    ("just", 60000), ("him", 58000), ("know", 56000), ("take", 54000),
    ("people", 52000), ("into", 50000), ("year", 48000), ("your", 46000),
    ("good", 44000), ("some", 42000), ("could", 40000), ("them", 38000),
    ("see", 36000), ("other", 34000), ("than", 32000), ("then", 30000),
    ("now", 28000), ("look", 26000), ("only", 24000), ("come", 22000),
    ("its", 20000), ("over", 19000), ("think", 18000), ("also", 17000),
    ("back", 16000), ("after", 15000), ("use", 14000), ("two", 13000),
    ("how", 12000), ("our", 11000), ("work", 10000), ("first", 9500),
    ("well", 9000), ("way", 8500), ("even", 8000), ("new", 7500),
    ("want", 7000), ("because", 6500), ("any", 6000), ("these", 5500),
    ("give", 5000), ("day", 4800), ("most", 4600), ("us", 4400),
    ("is", 500000), ("was", 450000), ("are", 400000), ("were", 350000),
    ("been", 300000), ("being", 250000), ("am", 200000),
    ("hello", 15000), ("world", 14000), ("computer", 12000),
    ("program", 11000), ("software", 10000), ("hardware", 9000),
    ("internet", 8500), ("email", 8000), ("please", 7500),
    ("thank", 7000), ("thanks", 6500), ("yes", 6000), ("okay", 5500),
)


def parse_dictionary_line(line: str) -> Optional[Tuple[str, int]]:
    """
    Parse one `word [frequency]` line.

    Returns:
        (word, frequency), or None for blank and comment lines
    """
    line = line.strip()
    if not line or line.startswith('#'):
        return None

    parts = line.split()
    word = parts[0].lower()
    frequency = 1
    if len(parts) > 1:
        try:
            frequency = int(parts[1])
        except ValueError:
            frequency = 1
        if frequency < 0:
            frequency = 1

    return word, frequency


def read_word_list(path: Path) -> Iterable[Tuple[str, int]]:
    """Yield (word, frequency) entries from a dictionary file."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            for line in f:
                entry = parse_dictionary_line(line)
                if entry:
                    yield entry
    except OSError as e:
        raise DictionaryError(f"Could not read dictionary: {e}", filename=str(path)) from e


def read_personal_words(path: Path) -> List[str]:
    """Read a personal word list (one word per line)."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            words = [line.strip().lower() for line in f]
    except OSError as e:
        raise DictionaryError(
            f"Could not read personal dictionary: {e}", filename=str(path)
        ) from e
    return [w for w in words if w and not w.startswith('#')]


class Dictionary:
    """
    Owns the correction index and its optional context model.

    Lookups read the current index snapshot without locking; loads and
    personal-word additions are serialized.
    """

    def __init__(self, config: Optional[SpellingConfig] = None):
        """
        Args:
            config: Spelling settings (defaults to the global configuration)
        """
        self.config = config or get_config().spelling
        self._index = SymSpell(self.config.max_edit_distance)
        self._context_model: Optional['TrigramModel'] = None
        self._write_lock = threading.Lock()
        self._loaded = False
        self._source: Optional[str] = None
        self._personal_count = 0

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self, path: Optional[Path] = None) -> int:
        """
        Build a fresh index from the configured sources and swap it in.

        Args:
            path: Dictionary file overriding the configured one

        Returns:
            Number of words in the new index
        """
        with self._write_lock:
            with logger.log_operation('dictionary_load'):
                index = SymSpell(self.config.max_edit_distance)
                index.attach_context_model(self._context_model)

                self._source = self._load_builtin(index, path)
                self._personal_count = 0
                if self.config.personal_dictionary:
                    self._personal_count = self._load_personal(
                        index, Path(self.config.personal_dictionary)
                    )

                self._index = index
                self._loaded = True

        logger.info(
            f"Dictionary loaded: {index.word_count} words",
            words=index.word_count, source=self._source,
            personal_words=self._personal_count
        )
        return index.word_count

    def load_words(self, entries: Iterable[Tuple[str, int]]) -> int:
        """Replace the index with one built from (word, frequency) pairs."""
        with self._write_lock:
            index = SymSpell(self.config.max_edit_distance)
            index.attach_context_model(self._context_model)
            for word, frequency in entries:
                index.insert(word, frequency)
            self._index = index
            self._loaded = True
            self._source = 'memory'
        return index.word_count

    def _load_builtin(self, index: SymSpell, path: Optional[Path]) -> str:
        """Fill the index from the best available source and name it."""
        dict_path = path or self.config.dictionary_path
        if dict_path and Path(dict_path).exists():
            for word, frequency in read_word_list(Path(dict_path)):
                index.insert(word, frequency)
            return str(dict_path)

        if dict_path:
            logger.warning(f"Dictionary file not found: {dict_path}")

        if self.config.use_bundled_dictionary:
            bundled = resources.files("symspellpy") / BUNDLED_DICTIONARY
            with resources.as_file(bundled) as bundled_path:
                for word, frequency in read_word_list(bundled_path):
                    index.insert(word, frequency)
            return f"symspellpy:{BUNDLED_DICTIONARY}"

        for word, frequency in FALLBACK_WORDS:
            index.insert(word, frequency)
        logger.info(f"Loaded fallback dictionary with {len(FALLBACK_WORDS)} common words")
        return 'fallback'

    def _load_personal(self, index: SymSpell, path: Path) -> int:
        """Insert personal words, creating an empty personal file if needed."""
        if not path.exists():
            self._create_personal_dictionary(path)
            return 0

        words = read_personal_words(path)
        for word in words:
            index.insert(word, self.config.personal_word_frequency)

        logger.info(f"Loaded {len(words)} personal words", path=str(path))
        return len(words)

    @staticmethod
    def _create_personal_dictionary(path: Path):
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(PERSONAL_DICTIONARY_HEADER, encoding='utf-8')
        except OSError as e:
            raise DictionaryError(
                f"Could not create personal dictionary: {e}", filename=str(path)
            ) from e

    def add_personal_word(self, word: str):
        """
        Add a word to the index and append it to the personal dictionary.

        Unlike load(), this inserts into the live index rather than swapping
        in a new one. Writers are serialized by the write lock; readers take
        no lock. Each dict store is atomic under the GIL, so a concurrent
        lookup sees the word either fully present in the word table or
        absent. A lookup that runs between the word-table store and the last
        variant store may miss the new word as a fuzzy match for that call.

        Args:
            word: Word to add (trimmed and lowercased)
        """
        word = word.strip().lower()
        if not word:
            return

        with self._write_lock:
            self._index.insert(word, self.config.personal_word_frequency)
            self._personal_count += 1

            if self.config.personal_dictionary:
                path = Path(self.config.personal_dictionary)
                try:
                    path.parent.mkdir(parents=True, exist_ok=True)
                    with open(path, 'a', encoding='utf-8') as f:
                        f.write(f"{word}\n")
                except OSError as e:
                    raise DictionaryError(
                        f"Could not update personal dictionary: {e}", filename=str(path)
                    ) from e

        logger.debug(f"Added personal word: {word}")

    # ------------------------------------------------------------------
    # Context
    # ------------------------------------------------------------------

    def attach_context_model(self, model: Optional['TrigramModel']):
        """Attach a trained context model to the current and future indexes."""
        with self._write_lock:
            self._context_model = model
            self._index.attach_context_model(model)

    @property
    def context_model(self) -> Optional['TrigramModel']:
        return self._context_model

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def index(self) -> SymSpell:
        """The current index snapshot."""
        return self._index

    def lookup(self, word: str, context: Optional[Tuple[str, str]] = None) -> List[Suggestion]:
        """Look up corrections for a word."""
        return self._index.lookup(word, self.config.max_edit_distance, context)

    def get_correction(self, word: str, context: Optional[Tuple[str, str]] = None) -> Optional[str]:
        """
        Get the best correction for a word, if any.

        Returns None when the word is already the top suggestion, nothing is
        within range, or correction is disabled.
        """
        if not self.config.enabled or not word:
            return None

        suggestions = self.lookup(word.lower(), context)
        if not suggestions:
            return None

        best = suggestions[0]
        if best.term.lower() != word.lower() and best.distance <= self.config.max_edit_distance:
            return best.term
        return None

    def is_word_known(self, word: str) -> bool:
        return word.lower() in self._index

    @property
    def word_count(self) -> int:
        return self._index.word_count

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def get_status(self) -> Dict[str, Any]:
        """Get detailed status of the dictionary."""
        status = {
            'loaded': self._loaded,
            'source': self._source,
            'personal_words': self._personal_count,
            **self._index.get_status(),
        }
        if self._context_model is not None:
            status['context'] = self._context_model.get_status()
        return status
