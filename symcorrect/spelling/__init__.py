"""
Spelling Correction for SymCorrect
==================================
Symmetric-delete correction over a frequency dictionary.

Features:
- Bounded Damerau-Levenshtein distance with early exit
- Delete-variant index for candidate retrieval
- Dictionary files, fallback word list and personal words
"""

__version__ = "1.0.0"

from .edit_distance import damerau_levenshtein_distance, is_within, DISTANCE_EXCEEDED
from .deletes import generate_deletes
from .symspell import SymSpell, Suggestion
from .dictionary import Dictionary

__all__ = [
    'damerau_levenshtein_distance',
    'is_within',
    'DISTANCE_EXCEEDED',
    'generate_deletes',
    'SymSpell',
    'Suggestion',
    'Dictionary',
]
