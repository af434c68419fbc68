"""chatbot/service.py

Request-level chat handling on top of the resolution pipeline.

``ChatService.process`` is what the HTTP API and the CLI call.  It asks the
pipeline first and answers from the keyword engine when the pipeline's reply
is tagged as unusable or the pipeline raised.
"""

from __future__ import annotations

# Standard Library
import logging
import random

# Third-Party Libraries
import httpx

# Local Modules
from chatbot.gemini_client import GeminiClient
from chatbot.keyword_engine import KeywordEngine
from chatbot.local_resolver import LocalResolver
from chatbot.pipeline import ResponsePipeline
from chatbot.sequencer import ModelFallbackSequencer
from chatbot.settings import ChatbotSettings
from chatbot.types import Resolution

logger = logging.getLogger(__name__)


class ChatService:
    """Answer one message per call; holds no conversation state."""

    def __init__(
        self,
        pipeline: ResponsePipeline,
        keyword_engine: KeywordEngine,
        remote: GeminiClient | None = None,
    ) -> None:
        self.pipeline = pipeline
        self.keyword_engine = keyword_engine
        self.remote = remote

    def process(self, message: str) -> str:
        """Return the reply for ``message``.

        Args:
            message: Raw user message.

        Returns:
            The pipeline's reply, or a keyword-engine reply if the pipeline
            result was unusable.
        """
        logger.info("[service] processing message (%d chars)", len(message))
        try:
            resolution = self.pipeline.generate_response(message)
        except Exception as exc:
            logger.error("[service] pipeline error: %s", exc, exc_info=True)
            return self.keyword_engine.reply(message)

        if resolution.usable:
            return resolution.text

        logger.warning(
            "[service] pipeline reply unusable (source=%s), using keyword engine",
            resolution.source,
        )
        return self.keyword_engine.reply(message)

    def test_remote(self) -> Resolution:
        """Run the pipeline's diagnostic canary."""
        return self.pipeline.test_remote()

    def close(self) -> None:
        """Release the remote client's HTTP connections."""
        if self.remote is not None:
            self.remote.close()


def build_chat_service(
    settings: ChatbotSettings,
    http_client: httpx.Client | None = None,
    rng: random.Random | None = None,
) -> ChatService:
    """Wire the full service from settings.

    Args:
        settings: Runtime configuration.
        http_client: Optional ``httpx.Client`` for the Gemini client.
        rng: Optional shared random generator for reply selection.

    Returns:
        A ready-to-use :class:`ChatService`.
    """
    rng = rng or random.Random()
    client = GeminiClient(settings, http_client=http_client)
    pipeline = ResponsePipeline(
        resolver=LocalResolver(rng=rng),
        sequencer=ModelFallbackSequencer(client, settings.gemini_models),
    )
    logger.info(
        "[service] ChatService initialized: models=%s, remote_configured=%s",
        settings.gemini_models,
        client.configured,
    )
    return ChatService(pipeline, KeywordEngine(rng=rng), remote=client)
