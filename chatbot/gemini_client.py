"""chatbot/gemini_client.py

Synchronous client for the Gemini ``generateContent`` endpoint.

Each call is a single POST with no retries.  Failures are returned as a
:class:`~chatbot.types.RemoteReply` instead of being raised, so the
sequencer can move on to the next model.
"""

from __future__ import annotations

# Standard Library
import logging
from typing import Any

# Third-Party Libraries
import httpx

# Local Modules
from chatbot.response_parser import ParseOutcome, parse_response
from chatbot.settings import ChatbotSettings
from chatbot.types import FailureReason, RemoteReply

logger = logging.getLogger(__name__)

_KEY_MASK: str = "API_KEY_HIDDEN"
_ERROR_BODY_LOG_CHARS: int = 500


def mask_key(text: str, api_key: str) -> str:
    """Replace every occurrence of ``api_key`` in ``text`` for logging."""
    if not api_key:
        return text
    return text.replace(api_key, _KEY_MASK)


def build_payload(persona_prompt: str, message: str) -> dict[str, Any]:
    """Build the ``contents`` payload: persona turn, then the user message.

    The endpoint has no system role here, so the persona goes in as a
    leading ``user`` turn.
    """
    return {
        "contents": [
            {"role": "user", "parts": [{"text": persona_prompt}]},
            {"role": "user", "parts": [{"text": message}]},
        ]
    }


class GeminiClient:
    """Calls ``{base_url}/{version}/models/{model}:generateContent``.

    Args:
        settings: Source of the credential, endpoint and timeouts.
        http_client: Pre-built ``httpx.Client``.  When omitted a client is
            created with the configured connect/read timeouts.
    """

    def __init__(
        self,
        settings: ChatbotSettings,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.api_key = settings.gemini_api_key.strip()
        self.base_url = settings.gemini_base_url.rstrip("/")
        self.api_version = settings.gemini_api_version.strip("/")
        self.persona_prompt = settings.persona_prompt
        self.http = http_client or httpx.Client(
            timeout=httpx.Timeout(
                settings.read_timeout_s, connect=settings.connect_timeout_s
            )
        )

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def endpoint_for(self, model: str) -> str:
        return f"{self.base_url}/{self.api_version}/models/{model}:generateContent"

    def call_model(self, message: str, model: str) -> RemoteReply:
        """Send ``message`` to ``model`` and classify the result.

        Args:
            message: The user message, in its original case.
            model: Model identifier, e.g. ``"gemini-2.0-flash"``.

        Returns:
            ``TEXT`` with the generated text, ``EMPTY`` if the model produced
            only whitespace, or ``FAILURE`` with a :class:`FailureReason`.
        """
        if not self.configured:
            logger.warning("[gemini] API key is not configured; skipping %s", model)
            return RemoteReply.failure(FailureReason.NOT_CONFIGURED, model=model)

        url = self.endpoint_for(model)
        payload = build_payload(self.persona_prompt, message)
        logger.info("[gemini] model=%r url=%s", model, url)
        logger.debug("[gemini] payload=%s", payload)

        try:
            response = self.http.post(url, params={"key": self.api_key}, json=payload)
        except httpx.HTTPError as exc:
            logger.error(
                "[gemini] connection error for %s: %s",
                model,
                mask_key(str(exc), self.api_key),
            )
            return RemoteReply.failure(FailureReason.CONNECTION_ERROR, model=model)

        logger.info("[gemini] model=%r status=%d", model, response.status_code)
        if not response.is_success:
            logger.error(
                "[gemini] call failed with status %d, body=%s",
                response.status_code,
                mask_key(response.text[:_ERROR_BODY_LOG_CHARS], self.api_key),
            )
            return RemoteReply.failure(FailureReason.HTTP_STATUS, model=model)

        parsed = parse_response(response.text)
        if parsed.outcome is ParseOutcome.UNRECOGNIZED_SHAPE:
            return RemoteReply.failure(
                FailureReason.UNRECOGNIZED_SHAPE, model=model, text=parsed.text
            )
        if parsed.outcome is ParseOutcome.INVALID_BODY:
            return RemoteReply.failure(
                FailureReason.INVALID_BODY, model=model, text=parsed.text
            )
        if not parsed.text.strip():
            logger.warning("[gemini] model=%r returned empty text", model)
            return RemoteReply.empty(model=model)

        logger.info("[gemini] model=%r response length=%d chars", model, len(parsed.text))
        return RemoteReply.ok(parsed.text, model=model)

    def close(self) -> None:
        self.http.close()
