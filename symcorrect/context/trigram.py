"""
Trigram Context Model
=====================
Word probabilities conditioned on the two preceding tokens.

Estimates P(word | prev_prev, prev) with a three-level backoff:
trigram -> bigram -> unigram -> fixed smoothing constant.
No discounting is applied, so every returned value is a plain ratio of
observed counts (or the smoothing constant) and lies in (0, 1].
"""

from collections import Counter
from typing import Any, Dict, Iterable, Tuple

from config_logging import get_logger

# Probability given to words never seen during training
SMOOTHING_PROBABILITY = 1e-9

logger = get_logger('symcorrect.context')


class TrigramModel:
    """
    Unigram/bigram/trigram counts with backoff probability estimates.

    Training is additive: calling train() again accumulates counts. To
    retrain from scratch, build a new model.
    """

    def __init__(self):
        self.unigram_counts: Counter = Counter()
        self.bigram_counts: Counter = Counter()
        self.trigram_counts: Counter = Counter()
        self.total_words = 0

    def train(self, sentences: Iterable[str]) -> int:
        """
        Count n-grams over a corpus of sentences.

        Args:
            sentences: Iterable of raw sentences (whitespace tokenized)

        Returns:
            Number of tokens counted in this call
        """
        counted = 0
        sentence_count = 0

        for sentence in sentences:
            words = [w.lower() for w in sentence.split()]
            sentence_count += 1

            for i, word in enumerate(words):
                self.unigram_counts[word] += 1
                counted += 1

                if i > 0:
                    self.bigram_counts[(words[i - 1], word)] += 1
                if i > 1:
                    self.trigram_counts[(words[i - 2], words[i - 1], word)] += 1

        self.total_words += counted
        logger.info(
            f"Trained context model on {sentence_count} sentences ({counted} tokens)",
            sentences=sentence_count, tokens=counted,
            vocabulary=len(self.unigram_counts)
        )
        return counted

    def probability(self, word: str, prev: str, prev_prev: str) -> float:
        """
        Return P(word | prev_prev, prev) using backoff.

        Args:
            word: Candidate word
            prev: Token immediately before the word
            prev_prev: Token two positions before the word
        """
        trigram_count = self.trigram_counts.get((prev_prev, prev, word))
        if trigram_count:
            bigram_count = self.bigram_counts.get((prev_prev, prev))
            if bigram_count:
                return trigram_count / bigram_count

        bigram_count = self.bigram_counts.get((prev, word))
        if bigram_count:
            unigram_count = self.unigram_counts.get(prev)
            if unigram_count:
                return bigram_count / unigram_count

        unigram_count = self.unigram_counts.get(word)
        if unigram_count:
            return unigram_count / self.total_words

        return SMOOTHING_PROBABILITY

    # Name used by the original desktop corrector
    trigram_probability = probability

    def context_probability(self, word: str, context: Tuple[str, str]) -> float:
        """P(word | context) where context is (prev_prev, prev) in text order."""
        prev_prev, prev = context
        return self.probability(word, prev, prev_prev)

    @property
    def is_trained(self) -> bool:
        return self.total_words > 0

    @property
    def vocabulary_size(self) -> int:
        return len(self.unigram_counts)

    def get_status(self) -> Dict[str, Any]:
        """Get summary counts for the model."""
        return {
            'trained': self.is_trained,
            'total_words': self.total_words,
            'unigrams': len(self.unigram_counts),
            'bigrams': len(self.bigram_counts),
            'trigrams': len(self.trigram_counts),
        }
