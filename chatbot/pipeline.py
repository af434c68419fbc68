"""chatbot/pipeline.py

Response-resolution pipeline.

Architecture:
  1. LocalResolver     — time, date, jokes, patterns, keywords, arithmetic.
                         No I/O.  A hit short-circuits everything below.
  2. Model sequencer   — remote generation across the configured models.
  3. Heuristic fallback — canned apology text; always answers.

The result is a :class:`~chatbot.types.Resolution` tagged with the stage
that produced it.
"""

from __future__ import annotations

# Standard Library
import logging
from collections.abc import Callable
from typing import Final

# Local Modules
from chatbot.fallback import heuristic_fallback
from chatbot.local_resolver import LocalResolver
from chatbot.sequencer import ModelFallbackSequencer
from chatbot.types import FailureReason, RemoteReply, ReplySource, Resolution

logger = logging.getLogger(__name__)

# Worded so that no local rule answers it and the remote path is exercised.
CANARY_MESSAGE: Final[str] = (
    "Please reply with the single word 'yes' if you can read my message."
)


class ResponsePipeline:
    """Resolve a message locally, then remotely, then heuristically.

    Args:
        resolver: Local knowledge-base resolver.
        sequencer: Remote model sequencer.
        fallback: Terminal reply function.  Defaults to
            :func:`~chatbot.fallback.heuristic_fallback`.
    """

    def __init__(
        self,
        resolver: LocalResolver,
        sequencer: ModelFallbackSequencer,
        fallback: Callable[[str], str] = heuristic_fallback,
    ) -> None:
        self.resolver = resolver
        self.sequencer = sequencer
        self.fallback = fallback

    def generate_response(self, message: str) -> Resolution:
        """Produce a reply for ``message``.  Never returns empty text."""
        logger.info("[pipeline] processing message (%d chars)", len(message))
        lowered = message.lower()

        local = self.resolver.resolve(lowered)
        if local is not None:
            logger.info("[pipeline] answered locally")
            return Resolution(local, ReplySource.LOCAL)

        remote = self._remote(message)
        if remote.has_text:
            logger.info("[pipeline] answered by model %s", remote.model)
            return Resolution(remote.text, ReplySource.REMOTE)
        if remote.is_parse_failure:
            logger.warning(
                "[pipeline] remote body unreadable (%s) from model %s",
                remote.reason,
                remote.model,
            )
            return Resolution(remote.text, ReplySource.PARSE_FAILURE)

        logger.info("[pipeline] remote generation unavailable, using heuristic fallback")
        return Resolution(self.fallback(lowered), ReplySource.HEURISTIC)

    def test_remote(self) -> Resolution:
        """Send the fixed canary message through the full pipeline."""
        return self.generate_response(CANARY_MESSAGE)

    def _remote(self, message: str) -> RemoteReply:
        try:
            return self.sequencer.generate(message)
        except Exception as exc:
            logger.error("[pipeline] remote stage raised: %s", exc, exc_info=True)
            return RemoteReply.failure(FailureReason.CONNECTION_ERROR)
