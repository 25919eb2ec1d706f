"""
Tests for Dictionary Loading
============================
Word files, fallback list, personal words, corrections and reloads.
"""

import threading
from pathlib import Path

import pytest

from config_logging import DictionaryError
from symcorrect.config import SpellingConfig
from symcorrect.context.trigram import TrigramModel
from symcorrect.spelling.dictionary import (
    Dictionary,
    FALLBACK_WORDS,
    PERSONAL_DICTIONARY_HEADER,
    parse_dictionary_line,
)
from symcorrect.spelling.symspell import Suggestion


@pytest.fixture
def words_file(tmp_path) -> Path:
    """A dictionary file with comments, blanks and odd frequencies."""
    path = tmp_path / "words.txt"
    path.write_text(
        "# sample dictionary\n"
        "the 1000000\n"
        "quick 500\n"
        "\n"
        "fox\n"
        "FOR 1000\n"
        "bad notanumber\n"
        "neg -5\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def fallback_dictionary() -> Dictionary:
    d = Dictionary(SpellingConfig())
    d.load()
    return d


class TestParseLine:
    """Tests for parse_dictionary_line()."""

    def test_word_and_frequency(self):
        assert parse_dictionary_line("the 23135851162") == ("the", 23135851162)

    def test_word_only(self):
        assert parse_dictionary_line("fox") == ("fox", 1)

    def test_comment_and_blank(self):
        assert parse_dictionary_line("# comment") is None
        assert parse_dictionary_line("   ") is None

    def test_lowercases(self):
        assert parse_dictionary_line("  Hello\t42 ") == ("hello", 42)

    def test_bad_frequency(self):
        assert parse_dictionary_line("bad x") == ("bad", 1)
        assert parse_dictionary_line("neg -3") == ("neg", 1)


class TestLoad:
    """Tests for Dictionary.load()."""

    def test_load_file(self, words_file):
        d = Dictionary(SpellingConfig(dictionary_path=str(words_file)))
        count = d.load()

        assert count == 6
        assert d.is_loaded
        assert d.index.frequency("for") == 1000
        assert d.index.frequency("fox") == 1
        assert d.index.frequency("bad") == 1
        assert d.index.frequency("neg") == 1
        assert d.get_status()['source'] == str(words_file)

    def test_explicit_path_overrides_config(self, words_file, tmp_path):
        d = Dictionary(SpellingConfig(dictionary_path=str(tmp_path / "missing.txt")))
        d.load(words_file)
        assert d.word_count == 6

    def test_fallback_dictionary(self, fallback_dictionary):
        expected = len({word for word, _ in FALLBACK_WORDS})
        assert fallback_dictionary.word_count == expected
        assert fallback_dictionary.get_status()['source'] == 'fallback'

    def test_missing_file_uses_fallback(self, tmp_path):
        d = Dictionary(SpellingConfig(dictionary_path=str(tmp_path / "missing.txt")))
        d.load()
        assert d.get_status()['source'] == 'fallback'
        assert d.is_word_known("the")

    def test_unreadable_file_raises(self, tmp_path):
        d = Dictionary(SpellingConfig(dictionary_path=str(tmp_path)))
        with pytest.raises(DictionaryError):
            d.load()
        assert not d.is_loaded

    def test_bundled_dictionary(self):
        pytest.importorskip("symspellpy")
        # Depth 0 skips delete generation so the full list loads quickly
        d = Dictionary(SpellingConfig(use_bundled_dictionary=True, max_edit_distance=0))
        d.load()

        assert d.word_count > 80000
        assert d.is_word_known("the")
        assert d.get_status()['source'].startswith("symspellpy:")

    def test_load_words(self):
        d = Dictionary(SpellingConfig())
        assert d.load_words([("hello", 5), ("world", 3)]) == 2
        assert d.lookup("helo") == [Suggestion("hello", 1, 5)]

    def test_reload_swaps_index(self, words_file):
        d = Dictionary(SpellingConfig(dictionary_path=str(words_file)))
        d.load()
        old_index = d.index

        words_file.write_text("zebra 10\n", encoding="utf-8")
        d.load()

        assert d.index is not old_index
        assert d.word_count == 1
        assert old_index.word_count == 6

    def test_context_model_survives_reload(self, words_file):
        d = Dictionary(SpellingConfig(dictionary_path=str(words_file)))
        model = TrigramModel()
        model.train(["the quick fox"])
        d.attach_context_model(model)
        d.load()

        assert d.context_model is model
        assert d.index.context_model is model
        assert d.get_status()['context']['trained'] is True


class TestPersonalDictionary:
    """Personal word loading and persistence."""

    def test_missing_personal_file_is_created(self, tmp_path):
        personal = tmp_path / "sub" / "personal.txt"
        d = Dictionary(SpellingConfig(personal_dictionary=str(personal)))
        d.load()

        assert personal.read_text(encoding="utf-8") == PERSONAL_DICTIONARY_HEADER
        assert d.get_status()['personal_words'] == 0

    def test_personal_words_loaded(self, tmp_path):
        personal = tmp_path / "personal.txt"
        personal.write_text("# mine\nKubectl\n\nsymspell\n", encoding="utf-8")
        d = Dictionary(SpellingConfig(personal_dictionary=str(personal)))
        d.load()

        assert d.index.frequency("kubectl") == 1_000_000
        assert d.index.frequency("symspell") == 1_000_000
        assert d.get_status()['personal_words'] == 2

    def test_add_personal_word_persists(self, tmp_path):
        personal = tmp_path / "personal.txt"
        d = Dictionary(SpellingConfig(personal_dictionary=str(personal)))
        d.load()
        d.add_personal_word("  Zyxx ")

        assert d.lookup("zyxx")[0] == Suggestion("zyxx", 0, 1_000_000)
        assert personal.read_text(encoding="utf-8").splitlines()[-1] == "zyxx"

        reloaded = Dictionary(SpellingConfig(personal_dictionary=str(personal)))
        reloaded.load()
        assert reloaded.is_word_known("zyxx")

    def test_add_personal_word_without_file(self, fallback_dictionary):
        fallback_dictionary.add_personal_word("grok")
        assert fallback_dictionary.is_word_known("grok")

    def test_blank_personal_word_ignored(self, fallback_dictionary):
        before = fallback_dictionary.word_count
        fallback_dictionary.add_personal_word("   ")
        assert fallback_dictionary.word_count == before


class TestCorrection:
    """Tests for Dictionary.get_correction()."""

    def test_corrects_typo(self, fallback_dictionary):
        assert fallback_dictionary.get_correction("teh") == "the"

    def test_correction_ignores_case(self, fallback_dictionary):
        assert fallback_dictionary.get_correction("TEH") == "the"

    def test_known_word_not_corrected(self, fallback_dictionary):
        assert fallback_dictionary.get_correction("hello") is None
        assert fallback_dictionary.get_correction("Hello") is None

    def test_nothing_in_range(self, fallback_dictionary):
        assert fallback_dictionary.get_correction("xqzvwk") is None

    def test_empty_word(self, fallback_dictionary):
        assert fallback_dictionary.get_correction("") is None

    def test_disabled(self):
        d = Dictionary(SpellingConfig(enabled=False))
        d.load()
        assert d.get_correction("teh") is None

    def test_context_changes_correction(self):
        d = Dictionary(SpellingConfig())
        d.load_words([("the", 1000000), ("quick", 500), ("fox", 10), ("for", 1000)])
        model = TrigramModel()
        model.train(["the quick fox jumps", "the quick fox runs"])
        d.attach_context_model(model)

        assert d.get_correction("fo") == "for"
        assert d.get_correction("fo", ("the", "quick")) == "fox"


class TestConcurrentReads:
    """Lookups keep working while the dictionary reloads."""

    def test_lookups_during_reload(self, words_file):
        d = Dictionary(SpellingConfig(dictionary_path=str(words_file)))
        d.load()
        errors = []
        results = []

        def reader():
            try:
                for _ in range(200):
                    results.append(d.get_correction("teh"))
            except Exception as e:  # surfaced through the assertion below
                errors.append(e)

        threads = [threading.Thread(target=reader) for _ in range(4)]
        for t in threads:
            t.start()
        for _ in range(5):
            d.load()
        for t in threads:
            t.join()

        assert errors == []
        assert set(results) == {"the"}

    def test_lookups_during_personal_adds(self, fallback_dictionary):
        added = [f"zq{i:03d}" for i in range(100)]
        errors = []
        results = []

        def reader():
            try:
                for _ in range(200):
                    results.append(fallback_dictionary.get_correction("teh"))
            except Exception as e:  # surfaced through the assertion below
                errors.append(e)

        threads = [threading.Thread(target=reader) for _ in range(4)]
        for t in threads:
            t.start()
        for word in added:
            fallback_dictionary.add_personal_word(word)
        for t in threads:
            t.join()

        assert errors == []
        assert set(results) == {"the"}
        assert all(fallback_dictionary.is_word_known(word) for word in added)
