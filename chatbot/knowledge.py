"""chatbot/knowledge.py

Static local knowledge base: keyword replies, question patterns, jokes and a
small country → capital table.

Everything here is built once at import time and never mutated.  The keyword
and pattern collections are *priority lists*: the resolver walks them in the
order they are declared and stops at the first match, so reordering entries
changes behaviour.
"""

from __future__ import annotations

# Standard Library
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final

ReplySet = tuple[str, ...]


@dataclass(frozen=True)
class Joke:
    setup: str
    punchline: str

    def render(self) -> str:
        return f"{self.setup}\n{self.punchline}"


@dataclass(frozen=True)
class PatternRule:
    """A compiled question pattern and the replies it produces.

    Attributes:
        name: Short identifier used in log lines.
        pattern: Regex searched against the lowercased message.
        replies: Candidate replies; one is picked at random.
        handler: Optional callable that builds the reply from the match
            instead of picking from ``replies``.
    """

    name: str
    pattern: re.Pattern[str]
    replies: ReplySet
    handler: Callable[[re.Match[str]], str] | None = None

    def __post_init__(self) -> None:
        if not self.replies:
            raise ValueError(f"Pattern rule {self.name!r} has no replies")


# ---------------------------------------------------------------------------
# Capitals
# ---------------------------------------------------------------------------

CAPITALS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "france": "Paris",
        "germany": "Berlin",
        "japan": "Tokyo",
        "usa": "Washington D.C.",
        "canada": "Ottawa",
    }
)


def capital_reply(country: str) -> str:
    """Answer a capital-city question, echoing the country as written."""
    capital = CAPITALS.get(country.lower())
    if capital:
        return f"The capital of {country} is {capital}."
    return (
        f"I know some capitals, but I don't have the capital of {country} "
        "in my current knowledge base."
    )


def _capital_from_match(match: re.Match[str]) -> str:
    # Either alternative of the pattern may have matched.
    country = next(group for group in match.groups() if group)
    return capital_reply(country)


# ---------------------------------------------------------------------------
# Question patterns (priority order)
# ---------------------------------------------------------------------------

PATTERN_RULES: Final[tuple[PatternRule, ...]] = (
    PatternRule(
        name="language",
        pattern=re.compile(r"what is python|tell me about python|explain python"),
        replies=(
            "Python is a high-level, dynamically typed programming language known for its readable syntax.",
            "Python is a popular general-purpose language used for web services, automation, data science and more.",
        ),
    ),
    PatternRule(
        name="framework",
        pattern=re.compile(r"what is fastapi|tell me about fastapi|explain fastapi"),
        replies=(
            "FastAPI is a modern Python web framework for building APIs with standard type hints.",
            "FastAPI makes it easy to build fast, well-documented HTTP APIs in Python with very little boilerplate.",
        ),
    ),
    PatternRule(
        name="chatbots",
        pattern=re.compile(r"what is a chatbot|how do chatbots work|explain chatbots"),
        replies=(
            "A chatbot simulates human conversation using rules or AI to understand and respond to users.",
            "Chatbots are programs designed to interact with humans via text or voice, often for customer service or information retrieval.",
        ),
    ),
    PatternRule(
        name="definition",
        pattern=re.compile(r"what is (?:the )?meaning of (\w+)|define (\w+)"),
        replies=(
            "I can provide definitions for some common words, but my dictionary is limited right now.",
        ),
    ),
    PatternRule(
        name="capital",
        pattern=re.compile(r"what is the capital of (\w+)|capital of (\w+)"),
        replies=("Let me check my records for that capital.",),
        handler=_capital_from_match,
    ),
    PatternRule(
        name="conversion",
        pattern=re.compile(r"how many (\w+) are in a (\w+)"),
        replies=(
            "I can handle some basic conversions, but complex ones might be tricky.",
        ),
    ),
)

# ---------------------------------------------------------------------------
# Keyword replies (priority order, substring match)
# ---------------------------------------------------------------------------

KEYWORD_REPLIES: Final[tuple[tuple[str, ReplySet], ...]] = (
    # Greetings
    ("hello", ("Hello there!", "Hi!", "Greetings!")),
    ("hi", ("Hello!", "Hey!", "Hi there!")),
    ("hey", ("Hey!", "Hello!", "What's up?")),
    ("good morning", ("Good morning! I hope you have a great day.",)),
    ("good afternoon", ("Good afternoon!",)),
    ("good evening", ("Good evening!",)),
    # Basic info / capabilities
    (
        "name",
        (
            "I am a simple chatbot built with FastAPI.",
            "You can call me ChatBot. I'm here to assist you.",
            "My name is ChatBot.",
        ),
    ),
    (
        "what can you do",
        (
            "I can answer basic questions, tell the time and date, do simple math, and tell jokes. My connection to more advanced knowledge is currently limited.",
            "Currently, I can handle simple tasks like telling time, date, basic math, and sharing a joke or two.",
            "I have some built-in capabilities for common questions, time, date, and calculations.",
        ),
    ),
    (
        "who made you",
        (
            "I was developed as a project using FastAPI and Python.",
            "I'm the result of a coding project.",
        ),
    ),
    # Weather
    (
        "weather",
        (
            "I'm sorry, I don't have access to real-time weather data.",
            "I can't check the weather for you, but I hope it's nice where you are!",
            "My apologies, checking the weather is beyond my current capabilities.",
        ),
    ),
    # Politeness
    (
        "how are you",
        (
            "I'm functioning as expected, thank you for asking!",
            "I'm doing great! Ready to help. How can I assist you?",
            "All systems nominal! Thanks for asking.",
        ),
    ),
    ("thank", ("You're welcome!", "Happy to help!", "Anytime!", "No problem!")),
    ("sorry", ("No worries.", "It's okay.", "That's alright.")),
    # Farewells
    ("bye", ("Goodbye! Have a great day!", "See you later!", "Take care!", "Farewell!")),
    ("see you", ("See you later!", "Goodbye!")),
)

# ---------------------------------------------------------------------------
# Jokes
# ---------------------------------------------------------------------------

JOKES: Final[tuple[Joke, ...]] = (
    Joke("Why don't scientists trust atoms?", "Because they make up everything!"),
    Joke("Why did the scarecrow win an award?", "Because he was outstanding in his field!"),
    Joke("What do you call fake spaghetti?", "An impasta!"),
    Joke("Why did the bicycle fall over?", "Because it was two tired!"),
    Joke("What did the left eye say to the right eye?", "Between you and me, something smells!"),
)

NO_JOKES_REPLY: Final[str] = "I'm out of jokes at the moment!"
