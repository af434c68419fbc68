"""chatbot/response_parser.py

Extracts generated text from a ``generateContent`` response body.

The endpoint has returned a few different body layouts over time, so the
parser tries an ordered list of shape extractors and takes the first one
that finds a text field.  Bodies it cannot read are reported through
:class:`ParseOutcome` rather than through the placeholder text alone.
"""

from __future__ import annotations

# Standard Library
import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Final

logger = logging.getLogger(__name__)

UNRECOGNIZED_SHAPE_TEXT: Final[str] = (
    "Received a JSON response, but couldn't extract text in expected formats."
)
INVALID_BODY_TEXT: Final[str] = "Received a non-JSON or invalid response from the API."


class ParseOutcome(StrEnum):
    EXTRACTED = "extracted"
    UNRECOGNIZED_SHAPE = "unrecognized_shape"
    INVALID_BODY = "invalid_body"


@dataclass(frozen=True)
class ParsedBody:
    outcome: ParseOutcome
    text: str


def _as_text(value: Any) -> str | None:
    """Render a JSON leaf as text; containers and null are not text."""
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, int, float)):
        return json.dumps(value)
    return None


def _candidates_shape(data: Any) -> str | None:
    # candidates[0].content.parts[0].text
    try:
        return _as_text(data["candidates"][0]["content"]["parts"][0]["text"])
    except (KeyError, IndexError, TypeError):
        return None


def _top_level_text_shape(data: Any) -> str | None:
    if isinstance(data, dict) and "text" in data:
        return _as_text(data["text"])
    return None


def _response_text_shape(data: Any) -> str | None:
    response = data.get("response") if isinstance(data, dict) else None
    if isinstance(response, dict) and "text" in response:
        return _as_text(response["text"])
    return None


SHAPE_EXTRACTORS: Final[tuple[tuple[str, Callable[[Any], str | None]], ...]] = (
    ("candidates", _candidates_shape),
    ("text", _top_level_text_shape),
    ("response.text", _response_text_shape),
)


def parse_response(body: str) -> ParsedBody:
    """Extract generated text from a raw response body.

    Args:
        body: Raw HTTP response body.

    Returns:
        A :class:`ParsedBody`.  On ``EXTRACTED`` the text is the model
        output; otherwise it is the matching fixed placeholder.
    """
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, TypeError) as exc:
        logger.warning("[parser] response body is not JSON: %s", exc)
        return ParsedBody(ParseOutcome.INVALID_BODY, INVALID_BODY_TEXT)
    if not isinstance(data, dict):
        logger.warning("[parser] response body is not a JSON object: %r", body[:200])
        return ParsedBody(ParseOutcome.INVALID_BODY, INVALID_BODY_TEXT)

    for name, extract in SHAPE_EXTRACTORS:
        text = extract(data)
        if text is not None:
            logger.debug("[parser] extracted text using %r shape", name)
            return ParsedBody(ParseOutcome.EXTRACTED, text)

    logger.warning("[parser] JSON body matched no known shape: %r", body[:200])
    return ParsedBody(ParseOutcome.UNRECOGNIZED_SHAPE, UNRECOGNIZED_SHAPE_TEXT)


def parse(body: str) -> str:
    """Plain-string form of :func:`parse_response`."""
    return parse_response(body).text
