"""tests/test_response_parser.py

Unit tests for the response shape parser (chatbot/response_parser.py).
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import pytest

from chatbot.response_parser import (
    INVALID_BODY_TEXT,
    UNRECOGNIZED_SHAPE_TEXT,
    ParseOutcome,
    parse,
    parse_response,
)


class TestKnownShapes:
    def test_candidates_shape(self, candidates_body: Callable[[str], dict[str, Any]]) -> None:
        body = json.dumps(candidates_body("Hello from the model"))

        parsed = parse_response(body)

        assert parsed.outcome is ParseOutcome.EXTRACTED
        assert parsed.text == "Hello from the model"

    def test_top_level_text_shape(self) -> None:
        assert parse(json.dumps({"text": "direct"})) == "direct"

    def test_response_text_shape(self) -> None:
        assert parse(json.dumps({"response": {"text": "nested"}})) == "nested"

    def test_candidates_takes_priority(self) -> None:
        body = {
            "candidates": [{"content": {"parts": [{"text": "first"}]}}],
            "text": "second",
        }
        assert parse(json.dumps(body)) == "first"

    def test_broken_candidates_falls_through_to_text(self) -> None:
        body = {"candidates": [], "text": "fallback text"}
        assert parse(json.dumps(body)) == "fallback text"

    def test_numeric_leaf_is_rendered(self) -> None:
        assert parse(json.dumps({"text": 42})) == "42"

    def test_empty_text_is_still_extracted(self) -> None:
        parsed = parse_response(json.dumps({"text": ""}))
        assert parsed.outcome is ParseOutcome.EXTRACTED
        assert parsed.text == ""


class TestUnreadableBodies:
    @pytest.mark.parametrize(
        "payload",
        [
            {"foo": "bar"},
            {"candidates": [{"content": {"parts": [{"inline": "x"}]}}]},
            {"text": None},
            {"text": {"nested": "object"}},
            {"response": "not-an-object"},
        ],
    )
    def test_valid_json_unknown_shape(self, payload: Any) -> None:
        parsed = parse_response(json.dumps(payload))

        assert parsed.outcome is ParseOutcome.UNRECOGNIZED_SHAPE
        assert parsed.text == UNRECOGNIZED_SHAPE_TEXT

    @pytest.mark.parametrize("body", ["<html>502 Bad Gateway</html>", "", "{not json"])
    def test_invalid_body(self, body: str) -> None:
        parsed = parse_response(body)

        assert parsed.outcome is ParseOutcome.INVALID_BODY
        assert parsed.text == INVALID_BODY_TEXT

    @pytest.mark.parametrize("body", ["[]", '["text"]', '"just a json string"', "null", "42"])
    def test_non_object_json_is_invalid_body(self, body: str) -> None:
        parsed = parse_response(body)

        assert parsed.outcome is ParseOutcome.INVALID_BODY
        assert parsed.text == INVALID_BODY_TEXT
