"""tests/test_keyword_engine.py

Unit tests for the token-based secondary engine (chatbot/keyword_engine.py).
"""

from __future__ import annotations

import random

import pytest

from chatbot.keyword_engine import RESPONSES, KeywordEngine, contains_any, tokenize


class TestTokenize:
    def test_words_and_punctuation(self) -> None:
        assert tokenize("what's your name?") == ["what", "'", "s", "your", "name", "?"]

    def test_digits_split_from_letters(self) -> None:
        assert tokenize("abc123 x") == ["abc", "123", "x"]

    def test_multi_word_keyword_needs_consecutive_tokens(self) -> None:
        assert contains_any(["see", "you", "soon"], "see you")
        assert not contains_any(["see", "me", "you"], "see you")


class TestKeywordEngine:
    @pytest.fixture
    def engine(self) -> KeywordEngine:
        return KeywordEngine(rng=random.Random(7))

    @pytest.mark.parametrize(
        ("text", "category"),
        [
            ("Hello there", "greeting"),
            ("howdy partner", "greeting"),
            ("what is your name", "identity"),
            ("who are you", "identity"),
            ("thanks a lot", "gratitude"),
            ("I appreciate it", "gratitude"),
            ("ok bye", "farewell"),
            ("see you tomorrow", "farewell"),
            ("can you assist me", "help"),
            ("will it rain", "weather"),
            ("what day is it", "time"),
            ("how   are   you", "how_are_you"),
            ("so, how are things and are you ok", "default"),
            ("quantum flux", "default"),
            ("", "empty"),
            ("   ", "empty"),
        ],
    )
    def test_classify(self, engine: KeywordEngine, text: str, category: str) -> None:
        assert engine.classify(text) == category

    def test_how_are_you_regex(self, engine: KeywordEngine) -> None:
        # No category token fires, so the regex on the cleaned text decides.
        assert engine.classify("hmm, how are    you doing") == "how_are_you"

    def test_tokens_not_substrings(self, engine: KeywordEngine) -> None:
        # "this" contains "hi" but is not the token "hi".
        assert engine.classify("this is odd") == "default"

    def test_greeting_has_priority(self, engine: KeywordEngine) -> None:
        assert engine.classify("hi, thanks, bye") == "greeting"

    def test_reply_comes_from_category(self, engine: KeywordEngine) -> None:
        for _ in range(10):
            assert engine.reply("thank you") in RESPONSES["gratitude"]

    def test_reply_is_never_empty(self, engine: KeywordEngine) -> None:
        for text in ["", "???", "lorem ipsum"]:
            assert engine.reply(text)
