"""
Context Reranking for SymCorrect
================================
Trigram language model with backoff, used to reorder correction candidates
by how well they follow the previous two words.
"""

__version__ = "1.0.0"

from .trigram import TrigramModel, SMOOTHING_PROBABILITY

__all__ = ['TrigramModel', 'SMOOTHING_PROBABILITY']
