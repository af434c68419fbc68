"""chatbot/sequencer.py

Tries the configured models in order until one produces text.
"""

from __future__ import annotations

# Standard Library
import logging
from collections.abc import Sequence
from typing import Protocol

# Local Modules
from chatbot.types import FailureReason, RemoteReply

logger = logging.getLogger(__name__)


class ModelCaller(Protocol):
    def call_model(self, message: str, model: str) -> RemoteReply: ...


class ModelFallbackSequencer:
    """Walk an ordered list of model identifiers, stopping at the first success.

    A failed or empty attempt is never retried against the same model.
    """

    def __init__(self, client: ModelCaller, models: Sequence[str]) -> None:
        self.client = client
        self.models: tuple[str, ...] = tuple(models)

    def generate(self, message: str) -> RemoteReply:
        """Return the first ``TEXT`` reply across all models.

        When no model produced text, the last parse failure is returned if
        there was one, so callers can tell an unreadable answer apart from an
        unreachable endpoint.  Otherwise the last attempt's reply is returned.
        """
        if not self.models:
            logger.warning("[sequencer] no models configured")
            return RemoteReply.failure(FailureReason.NOT_CONFIGURED)

        last: RemoteReply = RemoteReply.empty()
        parse_failure: RemoteReply | None = None
        for model in self.models:
            logger.info("[sequencer] attempting model %s", model)
            reply = self.client.call_model(message, model)
            if reply.has_text:
                logger.info("[sequencer] model %s succeeded", model)
                return reply
            logger.info(
                "[sequencer] model %s gave no text (status=%s, reason=%s)",
                model,
                reply.status,
                reply.reason,
            )
            if reply.is_parse_failure:
                parse_failure = reply
            last = reply

        logger.warning("[sequencer] all %d model attempts failed", len(self.models))
        return parse_failure or last
