"""chatbot/local_resolver.py

Answers messages from the static knowledge base without touching the network.

Checks run in a fixed priority order (time, date, joke, question patterns,
keywords, arithmetic) and the first one that decides to answer wins.
"""

from __future__ import annotations

# Standard Library
import logging
import random
import re
from collections.abc import Callable, Sequence
from datetime import datetime
from typing import Final

# Local Modules
from chatbot.knowledge import (
    JOKES,
    KEYWORD_REPLIES,
    NO_JOKES_REPLY,
    PATTERN_RULES,
    Joke,
    PatternRule,
    ReplySet,
)

logger = logging.getLogger(__name__)

_WHAT_TIME_PATTERN: Final[re.Pattern[str]] = re.compile(r".*what.*time.*", re.DOTALL)
_ARITHMETIC_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(\d+)\s*([+\-*/])\s*(\d+)", re.ASCII
)

# Operands are treated as 32-bit signed integers; anything larger is not a
# calculation this resolver answers.
_INT_MAX: Final[int] = 2**31 - 1

DIVIDE_BY_ZERO_REPLY: Final[str] = "I cannot divide by zero."


class LocalResolver:
    """Resolve a lowercased message against the local knowledge base.

    Args:
        rng: Random generator used to pick among candidate replies.
        now: Clock used for time and date answers.
        patterns: Ordered question patterns.  Defaults to ``PATTERN_RULES``.
        keywords: Ordered ``(trigger, replies)`` pairs.  Defaults to
            ``KEYWORD_REPLIES``.
        jokes: Joke list.  Defaults to ``JOKES``.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        now: Callable[[], datetime] = datetime.now,
        patterns: Sequence[PatternRule] = PATTERN_RULES,
        keywords: Sequence[tuple[str, ReplySet]] = KEYWORD_REPLIES,
        jokes: Sequence[Joke] = JOKES,
    ) -> None:
        self.rng = rng or random.Random()
        self.now = now
        self.patterns = tuple(patterns)
        self.keywords = tuple(keywords)
        self.jokes = tuple(jokes)

    def resolve(self, text: str) -> str | None:
        """Return a local reply for ``text``, or ``None`` if nothing matches.

        Args:
            text: The user message, already lowercased.

        Returns:
            The reply string, or ``None`` to signal that remote resolution
            should be attempted.
        """
        for name, check in (
            ("time", self._time_reply),
            ("date", self._date_reply),
            ("joke", self._joke_reply),
            ("pattern", self._pattern_reply),
            ("keyword", self._keyword_reply),
            ("arithmetic", self._arithmetic_reply),
        ):
            reply = check(text)
            if reply is not None:
                logger.info("[local] matched %s rule", name)
                return reply
        logger.debug("[local] no local rule matched")
        return None

    # ------------------------------------------------------------------
    # Individual rules
    # ------------------------------------------------------------------

    def _time_reply(self, text: str) -> str | None:
        if "time" not in text:
            return None
        if not (
            "current" in text
            or "now" in text
            or "what" in text
            or _WHAT_TIME_PATTERN.fullmatch(text)
        ):
            return None
        current = self.now()
        hour = current.hour % 12 or 12
        meridiem = "AM" if current.hour < 12 else "PM"
        return f"The current time is {hour}:{current.minute:02d} {meridiem}."

    def _date_reply(self, text: str) -> str | None:
        if not ("today" in text or "current" in text):
            return None
        if not ("date" in text or "day" in text):
            return None
        today = self.now()
        return f"Today's date is {today:%B} {today.day}, {today.year}."

    def _joke_reply(self, text: str) -> str | None:
        if "tell me a joke" not in text and "joke" not in text:
            return None
        if not self.jokes:
            return NO_JOKES_REPLY
        return self.rng.choice(self.jokes).render()

    def _pattern_reply(self, text: str) -> str | None:
        for rule in self.patterns:
            match = rule.pattern.search(text)
            if match is None:
                continue
            logger.debug("[local] pattern rule %r matched", rule.name)
            if rule.handler is not None:
                return rule.handler(match)
            return self.rng.choice(rule.replies)
        return None

    def _keyword_reply(self, text: str) -> str | None:
        for trigger, replies in self.keywords:
            if trigger in text:
                logger.debug("[local] keyword %r matched", trigger)
                return self.rng.choice(replies)
        return None

    def _arithmetic_reply(self, text: str) -> str | None:
        match = _ARITHMETIC_PATTERN.search(text)
        if match is None:
            return None
        op = match.group(2)
        try:
            left, right = int(match.group(1)), int(match.group(3))
        except ValueError:
            # Digit strings past the interpreter's conversion limit.
            logger.debug("[local] arithmetic operands not parsable, skipping")
            return None
        if left > _INT_MAX or right > _INT_MAX:
            logger.debug("[local] arithmetic operands out of range, skipping")
            return None

        if op == "+":
            result: float = left + right
        elif op == "-":
            result = left - right
        elif op == "*":
            result = left * right
        else:
            if right == 0:
                return DIVIDE_BY_ZERO_REPLY
            result = left / right

        if op == "/" and result != int(result):
            return f"{left} {op} {right} = {result:.2f}"
        return f"{left} {op} {right} = {int(result)}"
