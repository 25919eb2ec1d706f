"""
SymSpell Correction Index for SymCorrect
========================================
Symmetric-delete spelling correction over a word frequency table.

Features:
- Precomputed delete-variant index for fast candidate retrieval
- Bounded Damerau-Levenshtein verification of every candidate
- Frequency ranking within each edit distance
- Optional trigram context reranking (previous two tokens)

Words are stored as given: callers lowercase before insert and lookup.
"""

from typing import List, Dict, Optional, Any, Set, Tuple, TYPE_CHECKING
from dataclasses import dataclass

from config_logging import get_logger, ValidationError
from .deletes import generate_deletes
from .edit_distance import damerau_levenshtein_distance, DISTANCE_EXCEEDED

if TYPE_CHECKING:
    from ..context.trigram import TrigramModel

logger = get_logger('symcorrect.symspell')


@dataclass
class Suggestion:
    """A correction candidate with its distance from the query."""
    term: str
    distance: int
    frequency: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format."""
        return {
            'term': self.term,
            'distance': self.distance,
            'frequency': self.frequency,
        }


class SymSpell:
    """
    Word table plus delete-variant index.

    Both maps only grow; reloading a dictionary means building a new index.
    """

    def __init__(self, max_edit_distance: int = 2):
        """
        Args:
            max_edit_distance: Deletion depth used when indexing words
        """
        if max_edit_distance < 0:
            raise ValidationError(
                "max_edit_distance must be non-negative", field='max_edit_distance'
            )
        self.max_edit_distance = max_edit_distance
        self.words: Dict[str, int] = {}
        self.deletes: Dict[str, List[str]] = {}
        self._context_model: Optional['TrigramModel'] = None

    def insert(self, word: str, frequency: int):
        """
        Add a word, or overwrite the frequency of a known one.

        Args:
            word: Lowercased dictionary word
            frequency: Corpus count (higher = preferred)
        """
        is_new = word not in self.words
        self.words[word] = frequency
        if not is_new:
            return

        for delete in generate_deletes(word, self.max_edit_distance):
            self.deletes.setdefault(delete, []).append(word)

    def lookup(
        self,
        input: str,
        max_edit_distance: Optional[int] = None,
        context: Optional[Tuple[str, str]] = None,
        model: Optional['TrigramModel'] = None,
    ) -> List[Suggestion]:
        """
        Find dictionary words within max_edit_distance of input.

        Args:
            input: Lowercased token to correct
            max_edit_distance: Bound for this query (defaults to, and is
                capped at, the indexing distance)
            context: Optional (prev_prev, prev) tokens preceding input
            model: Context model to use instead of the attached one

        Returns:
            Suggestions sorted by distance, then by frequency descending
        """
        max_distance = self._resolve_distance(max_edit_distance)
        suggestions: List[Suggestion] = []

        frequency = self.words.get(input)
        if frequency is not None:
            suggestions.append(Suggestion(input, 0, frequency))
            if max_distance == 0:
                return suggestions

        # The empty string only matches itself
        if max_distance == 0 or not input:
            return suggestions

        considered: Set[str] = {input}
        probes = generate_deletes(input, max_distance)
        probes.add(input)

        for probe in probes:
            originals = self.deletes.get(probe, [])
            # A variant of the input may itself be a dictionary word
            if probe in self.words:
                originals = [probe] + originals

            for original in originals:
                if original in considered:
                    continue
                considered.add(original)

                distance = damerau_levenshtein_distance(input, original, max_distance)
                if distance == DISTANCE_EXCEEDED:
                    continue

                frequency = self.words.get(original)
                if frequency is not None:
                    suggestions.append(Suggestion(original, distance, frequency))

        if model is None:
            model = self._context_model
        if context is not None and model is not None:
            if len(context) != 2:
                raise ValidationError(
                    "context must be a (prev_prev, prev) pair", field='context'
                )
            self._rescale(suggestions, context, model)

        suggestions.sort(key=lambda s: (s.distance, -s.frequency))
        return suggestions

    def _resolve_distance(self, max_edit_distance: Optional[int]) -> int:
        if max_edit_distance is None:
            return self.max_edit_distance
        if max_edit_distance < 0:
            raise ValidationError(
                "max_edit_distance must be non-negative", field='max_edit_distance'
            )
        if max_edit_distance > self.max_edit_distance:
            # Deeper queries would miss words indexed at a shallower depth
            logger.debug(
                f"Clamping lookup distance {max_edit_distance} to index depth "
                f"{self.max_edit_distance}"
            )
            return self.max_edit_distance
        return max_edit_distance

    @staticmethod
    def _rescale(
        suggestions: List[Suggestion],
        context: Tuple[str, str],
        model: 'TrigramModel'
    ):
        """Weight each frequency by how well the term fits the context."""
        prev_prev, prev = (token.lower() for token in context)
        for suggestion in suggestions:
            probability = model.probability(suggestion.term, prev, prev_prev)
            # Floor at 1 so unlikely words keep a comparable, non-zero score
            suggestion.frequency = max(1, int(suggestion.frequency * probability))

    def attach_context_model(self, model: Optional['TrigramModel']):
        """Attach (or detach with None) the context model used by lookup."""
        self._context_model = model

    @property
    def context_model(self) -> Optional['TrigramModel']:
        return self._context_model

    def frequency(self, word: str) -> Optional[int]:
        return self.words.get(word)

    @property
    def word_count(self) -> int:
        return len(self.words)

    @property
    def delete_count(self) -> int:
        return len(self.deletes)

    def __len__(self) -> int:
        return len(self.words)

    def __contains__(self, word: str) -> bool:
        return word in self.words

    def get_status(self) -> Dict[str, Any]:
        """Get index sizes and settings."""
        return {
            'max_edit_distance': self.max_edit_distance,
            'dictionary_size': len(self.words),
            'delete_variants': len(self.deletes),
            'context_model': self._context_model is not None,
        }
