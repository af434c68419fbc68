"""chatbot/fallback.py

Last-resort replies used when neither the local knowledge base nor any
remote model produced an answer.  Always returns non-empty text.
"""

from __future__ import annotations

from typing import Final

LANGUAGE_REPLY: Final[str] = (
    "I have some basic knowledge about programming. Python is a high-level "
    "programming language used for web services, automation and data work. "
    "It's known for its readable syntax and its large ecosystem of libraries."
)
FRAMEWORK_REPLY: Final[str] = (
    "FastAPI is a Python framework used for building web APIs and microservices. "
    "It uses standard type hints for request validation and generates interactive "
    "API documentation automatically."
)
SELF_REPLY: Final[str] = (
    "I'm a simple chatbot built with FastAPI and Python. I use pattern matching for "
    "simple queries and can handle date/time questions, basic math, and some "
    "informational questions. However, I don't currently have access to my full "
    "knowledge base, so my capabilities are limited."
)
GREETING_REPLY: Final[str] = (
    "Hello! I'm having trouble connecting to my knowledge source, but I can still "
    "help with basic questions about time, date, simple math, or some programming topics."
)
QUESTION_REPLY: Final[str] = (
    "I'd like to help with your question, but I'm currently having trouble accessing "
    "my full knowledge base. I can still help with basic information like time, date, "
    "simple math, or some programming topics. Could you try a more specific question "
    "in one of those areas?"
)
GENERIC_REPLY: Final[str] = (
    "I apologize, but I'm having difficulty connecting to my knowledge source right now. "
    "I can still help with basic information like current time, date, simple "
    "calculations, or some programming topics."
)

_QUESTION_WORDS: Final[tuple[str, ...]] = ("who", "what", "when", "where", "why", "how")


def _contains_any(text: str, *markers: str) -> bool:
    return any(marker in text for marker in markers)


def heuristic_fallback(text: str) -> str:
    """Pick an apologetic, partially helpful reply for ``text``.

    Args:
        text: The user message, already lowercased.

    Returns:
        A canned reply.  Never empty.
    """
    if _contains_any(text, "python", "programming"):
        return LANGUAGE_REPLY
    if _contains_any(text, "fastapi"):
        return FRAMEWORK_REPLY
    if _contains_any(text, "chatbot", "how do you work"):
        return SELF_REPLY
    if _contains_any(text, "hello", "hi", "greetings") or text.startswith("hey"):
        return GREETING_REPLY
    if _contains_any(text, *_QUESTION_WORDS):
        return QUESTION_REPLY
    return GENERIC_REPLY
