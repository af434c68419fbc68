"""tests/test_fallback.py

Unit tests for the heuristic fallback (chatbot/fallback.py).
"""

from __future__ import annotations

import pytest

from chatbot.fallback import (
    FRAMEWORK_REPLY,
    GENERIC_REPLY,
    GREETING_REPLY,
    LANGUAGE_REPLY,
    QUESTION_REPLY,
    SELF_REPLY,
    heuristic_fallback,
)


class TestHeuristicFallback:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("tell me about python", LANGUAGE_REPLY),
            ("i like programming", LANGUAGE_REPLY),
            ("is fastapi any good", FRAMEWORK_REPLY),
            ("are you a chatbot", SELF_REPLY),
            ("how do you work", SELF_REPLY),
            ("hello there", GREETING_REPLY),
            ("hey!", GREETING_REPLY),
            ("greetings", GREETING_REPLY),
            ("where is the station", QUESTION_REPLY),
            ("why", QUESTION_REPLY),
            ("xyzzy", GENERIC_REPLY),
        ],
    )
    def test_branches(self, text: str, expected: str) -> None:
        assert heuristic_fallback(text) == expected

    def test_topic_beats_greeting(self) -> None:
        assert heuristic_fallback("hello, what is python?") == LANGUAGE_REPLY

    def test_hey_only_counts_at_start(self) -> None:
        assert heuristic_fallback("they left") == GENERIC_REPLY

    @pytest.mark.parametrize("text", ["", "   ", "\n\t", "!!!", "\x00", "🤖" * 50])
    def test_always_non_empty(self, text: str) -> None:
        assert heuristic_fallback(text).strip()
