"""tests/test_service.py

Unit tests for ChatService (chatbot/service.py).
"""

from __future__ import annotations

import random
from unittest.mock import Mock

import httpx

from chatbot.keyword_engine import RESPONSES, KeywordEngine
from chatbot.knowledge import JOKES
from chatbot.pipeline import ResponsePipeline
from chatbot.response_parser import INVALID_BODY_TEXT
from chatbot.service import ChatService, build_chat_service
from chatbot.settings import ChatbotSettings
from chatbot.types import ReplySource, Resolution


def _service(resolution: Resolution | Exception) -> tuple[ChatService, Mock]:
    pipeline = Mock(spec=ResponsePipeline)
    if isinstance(resolution, Exception):
        pipeline.generate_response.side_effect = resolution
    else:
        pipeline.generate_response.return_value = resolution
    return ChatService(pipeline, KeywordEngine(rng=random.Random(3))), pipeline


class TestChatService:
    def test_usable_reply_is_returned(self) -> None:
        service, pipeline = _service(Resolution("It is sunny.", ReplySource.REMOTE))

        assert service.process("Weather?") == "It is sunny."
        pipeline.generate_response.assert_called_once_with("Weather?")

    def test_heuristic_reply_is_usable(self) -> None:
        service, _ = _service(Resolution("Sorry, offline.", ReplySource.HEURISTIC))
        assert service.process("xyzzy") == "Sorry, offline."

    def test_parse_failure_uses_keyword_engine(self) -> None:
        service, _ = _service(Resolution(INVALID_BODY_TEXT, ReplySource.PARSE_FAILURE))

        reply = service.process("thanks!")

        assert reply in RESPONSES["gratitude"]

    def test_pipeline_exception_uses_keyword_engine(self) -> None:
        service, _ = _service(RuntimeError("unexpected"))

        assert service.process("bye") in RESPONSES["farewell"]


class TestBuildChatService:
    def test_wires_models_from_settings(self, settings: ChatbotSettings) -> None:
        service = build_chat_service(settings, http_client=httpx.Client())

        assert service.pipeline.sequencer.models == ("model-a", "model-b")

    def test_local_path_works_without_credential(
        self, unconfigured_settings: ChatbotSettings
    ) -> None:
        service = build_chat_service(
            unconfigured_settings, http_client=httpx.Client(), rng=random.Random(0)
        )

        assert service.process("tell me a joke") in {joke.render() for joke in JOKES}
        assert service.process("10 + 5") == "10 + 5 = 15"

    def test_close_releases_http_client(self, settings: ChatbotSettings) -> None:
        http = httpx.Client()
        service = build_chat_service(settings, http_client=http)

        service.close()

        assert http.is_closed
