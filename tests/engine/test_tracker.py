"""
Tests for the Word Tracker
==========================
Word-by-word correction, context window, case and undo.
"""

import pytest

from symcorrect.config import SpellingConfig, TrackerConfig
from symcorrect.context.trigram import TrigramModel
from symcorrect.spelling.dictionary import Dictionary
from symcorrect.tracker import WordTracker, Correction, apply_case


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self):
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def dictionary() -> Dictionary:
    d = Dictionary(SpellingConfig())
    d.load_words([("the", 1000000), ("quick", 500), ("fox", 10), ("for", 1000)])
    return d


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def tracker(dictionary, clock) -> WordTracker:
    return WordTracker(dictionary, TrackerConfig(undo_timeout_seconds=5), clock=clock)


class TestApplyCase:
    """Tests for apply_case()."""

    def test_lowercase(self):
        assert apply_case("teh", "the") == "the"

    def test_title_case(self):
        assert apply_case("Teh", "the") == "The"

    def test_upper_case(self):
        assert apply_case("TEH", "the") == "THE"

    def test_single_capital_letter(self):
        assert apply_case("I", "a") == "A"


class TestFeed:
    """Tests for WordTracker.feed()."""

    def test_corrects_typo(self, tracker, clock):
        result = tracker.feed("teh")
        assert result == Correction("teh", "the", clock.now)

    def test_keeps_case(self, tracker):
        assert tracker.feed("Teh").corrected == "The"

    def test_known_word_untouched(self, tracker):
        assert tracker.feed("quick") is None

    def test_empty_word(self, tracker):
        assert tracker.feed("") is None
        assert tracker.context is None

    def test_context_window(self, tracker):
        tracker.feed("teh")
        assert tracker.context is None
        tracker.feed("Quick")
        assert tracker.context == ("the", "quick")
        tracker.feed("fox")
        assert tracker.context == ("quick", "fox")

    def test_context_used_for_correction(self, dictionary, clock):
        model = TrigramModel()
        model.train(["the quick fox jumps", "the quick fox runs"])
        dictionary.attach_context_model(model)

        plain = WordTracker(dictionary, TrackerConfig(), clock=clock)
        assert plain.feed("fo").corrected == "for"

        contextual = WordTracker(dictionary, TrackerConfig(), clock=clock)
        contextual.feed("the")
        contextual.feed("quick")
        assert contextual.feed("fo").corrected == "fox"

    def test_disabled_tracker(self, tracker):
        assert tracker.toggle_enabled() is False
        assert tracker.feed("teh") is None
        tracker.feed("quick")
        assert tracker.context == ("teh", "quick")

    def test_enabled_by_default_setting(self, dictionary):
        t = WordTracker(dictionary, TrackerConfig(enabled_by_default=False))
        assert not t.enabled


class TestUndo:
    """Tests for WordTracker.undo()."""

    def test_undo_within_timeout(self, tracker, clock):
        tracker.feed("teh")
        clock.now += 2

        result = tracker.undo()

        assert result.original == "the"
        assert result.corrected == "teh"
        assert tracker.undo() is None

    def test_undo_restores_context(self, tracker):
        tracker.feed("quick")
        tracker.feed("teh")
        tracker.undo()
        assert tracker.context == ("quick", "teh")

    def test_undo_expires_after_next_word(self, tracker):
        tracker.feed("quick")
        tracker.feed("teh")
        tracker.feed("brown")

        assert tracker.undo() is None
        assert tracker.context == ("the", "brown")

    def test_undo_follows_latest_correction(self, tracker):
        tracker.feed("teh")
        tracker.feed("quikc")

        result = tracker.undo()

        assert result.original == "quick"
        assert result.corrected == "quikc"
        assert tracker.context == ("the", "quikc")

    def test_undo_after_timeout(self, tracker, clock):
        tracker.feed("teh")
        clock.now += 5
        assert tracker.undo() is None

    def test_nothing_to_undo(self, tracker):
        assert tracker.undo() is None

    def test_reset(self, tracker):
        tracker.feed("teh")
        tracker.feed("quick")
        tracker.reset()
        assert tracker.context is None
        assert tracker.undo() is None
