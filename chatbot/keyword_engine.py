"""chatbot/keyword_engine.py

Token-based keyword classifier used as a second opinion when the main
pipeline cannot produce a usable reply.

Unlike the local resolver this engine matches whole tokens, not substrings,
so "this" does not count as a greeting.
"""

from __future__ import annotations

# Standard Library
import logging
import random
import re
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Final

logger = logging.getLogger(__name__)

# Runs of letters, runs of digits, or any other single non-space character.
_TOKEN_PATTERN: Final[re.Pattern[str]] = re.compile(r"[^\W\d_]+|\d+|\S")
_HOW_ARE_YOU_PATTERN: Final[re.Pattern[str]] = re.compile(r"how\s+are\s+you")

RESPONSES: Final[Mapping[str, tuple[str, ...]]] = MappingProxyType(
    {
        "greeting": (
            "Hello! How can I help you today?",
            "Hi there! What can I do for you?",
            "Greetings! How may I assist you?",
            "Hey! What's on your mind today?",
        ),
        "identity": (
            "I'm a simple chatbot built with FastAPI and Python.",
            "I'm your friendly neighborhood chatbot!",
            "I'm a virtual assistant designed to help answer your questions.",
            "You can call me ChatBot. I'm here to assist you.",
        ),
        "gratitude": (
            "You're welcome!",
            "Happy to help!",
            "Anytime!",
            "No problem at all!",
        ),
        "farewell": (
            "Goodbye! Have a great day!",
            "See you later!",
            "Bye for now! Come back soon!",
            "Take care!",
        ),
        "help": (
            "I can answer simple questions, provide information, or just chat. What do you need help with?",
            "I'm here to assist you. What would you like to know?",
            "How can I help you today? Feel free to ask me anything.",
            "I'm at your service. What kind of assistance do you need?",
        ),
        "weather": (
            "I don't have access to real-time weather data, but I hope it's nice where you are!",
            "I can't check the weather for you, but maybe look outside?",
            "Weather forecasting isn't one of my capabilities yet.",
            "I wish I could tell you about the weather, but I don't have that functionality.",
        ),
        "time": (
            "I don't have access to the current time or date.",
            "Time and date information isn't available to me.",
            "I can't tell you the exact time, but I'm always here when you need me!",
            "I don't have a clock, but it's always a good time to chat!",
        ),
        "how_are_you": (
            "I'm doing well, thank you for asking! How about you?",
            "I'm functioning perfectly! How are you today?",
            "All systems operational! How's your day going?",
            "I'm great! Thanks for your concern. How can I help you?",
        ),
        "empty": (
            "I didn't catch that. Could you please say something?",
            "Hmm, it seems you didn't type anything. How can I help you?",
            "I'm listening, but I didn't hear anything. What's on your mind?",
            "Did you want to ask me something?",
        ),
        "default": (
            "I'm not sure I understand. Could you rephrase that?",
            "That's interesting, but I'm not sure how to respond.",
            "I'm still learning and don't have an answer for that yet.",
            "I don't have enough information to provide a good response to that.",
            "Could you try asking that in a different way?",
        ),
    }
)


def tokenize(text: str) -> list[str]:
    """Split ``text`` into word-level tokens."""
    return _TOKEN_PATTERN.findall(text)


def contains_any(tokens: Sequence[str], *keywords: str) -> bool:
    """Return True if any keyword appears as a token or token sequence.

    Multi-word keywords such as ``"see you"`` match consecutive tokens.
    """
    token_set = set(tokens)
    for keyword in keywords:
        parts = keyword.split()
        if len(parts) == 1:
            if parts[0] in token_set:
                return True
            continue
        width = len(parts)
        for start in range(len(tokens) - width + 1):
            if list(tokens[start : start + width]) == parts:
                return True
    return False


class KeywordEngine:
    """Classify a message into a fixed category and return a canned reply.

    Args:
        rng: Random generator used to pick a reply within a category.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    def classify(self, text: str) -> str:
        """Return the category name for ``text``."""
        cleaned = text.lower().strip()
        if not cleaned:
            return "empty"

        tokens = tokenize(cleaned)
        if contains_any(tokens, "hello", "hi", "hey", "greetings", "howdy"):
            return "greeting"
        if contains_any(tokens, "who", "what") and contains_any(
            tokens, "you", "your", "name"
        ):
            return "identity"
        if contains_any(tokens, "thanks", "thank", "appreciate"):
            return "gratitude"
        if contains_any(tokens, "bye", "goodbye", "farewell", "see you"):
            return "farewell"
        if contains_any(tokens, "help", "assist", "support"):
            return "help"
        if contains_any(tokens, "weather", "temperature", "forecast", "rain", "sunny"):
            return "weather"
        if contains_any(tokens, "time", "date", "day", "today"):
            return "time"
        if _HOW_ARE_YOU_PATTERN.search(cleaned):
            return "how_are_you"
        return "default"

    def reply(self, text: str) -> str:
        """Return a random canned reply for the category of ``text``."""
        category = self.classify(text)
        logger.info("[keyword] category=%s", category)
        replies = RESPONSES.get(category, RESPONSES["default"])
        return self.rng.choice(replies)
