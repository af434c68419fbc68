"""
chatbot/api.py

FastAPI HTTP interface for the chat service.

Endpoints:
  GET  /health     — liveness probe
  POST /api/chat   — answer one message, returns the reply as plain text
  GET  /api/test   — send the diagnostic canary through the full pipeline
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import Any

import uvicorn
from fastapi import Body, Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from chatbot.service import ChatService, build_chat_service
from chatbot.settings import cfg

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=cfg.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
# httpx logs full request URLs at INFO, and the credential is a query param.
logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger("chatbot.api")

NO_MESSAGE_REPLY: str = "No message provided"

# ---------------------------------------------------------------------------
# Thread pool for the blocking pipeline
# ---------------------------------------------------------------------------
_executor = ThreadPoolExecutor(
    max_workers=cfg.api_workers, thread_name_prefix="chatbot"
)

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_chat_service() -> ChatService:
    """Build the process-wide ChatService on first use."""
    return build_chat_service(cfg)


def close_chat_service() -> None:
    """Close the cached ChatService, if one was built, and drop it."""
    if get_chat_service.cache_info().currsize:
        get_chat_service().close()
        get_chat_service.cache_clear()
        logger.info("Chat service closed")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Release the Gemini HTTP client on shutdown."""
    yield
    close_chat_service()


app = FastAPI(
    title="ChatBot API",
    version="0.1.0",
    description=(
        "Stateless chatbot endpoint. Answers locally when it can, otherwise "
        "asks a Gemini model and falls back to canned replies."
    ),
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------


@app.get("/health", tags=["meta"])
async def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok", "server": "chatbot-api"}


@app.post("/api/chat", response_class=PlainTextResponse, tags=["chat"])
async def chat(
    payload: dict[str, Any] | None = Body(None),
    service: ChatService = Depends(get_chat_service),
) -> str:
    """Answer a single message.

    The body is a JSON object with a ``message`` key.  A missing body or key
    returns ``"No message provided"`` without running the pipeline.

    Args:
        payload: Parsed JSON request body.
        service: Injected chat service.

    Returns:
        The reply text.
    """
    message = (payload or {}).get("message")
    if message is None:
        logger.info("Chat request without a message")
        return NO_MESSAGE_REPLY

    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(_executor, service.process, str(message))


@app.get("/api/test", response_class=PlainTextResponse, tags=["chat"])
async def test_remote(service: ChatService = Depends(get_chat_service)) -> str:
    """Run the diagnostic canary and report the reply."""
    loop = asyncio.get_running_loop()
    resolution = await loop.run_in_executor(_executor, service.test_remote)
    logger.info("Canary answered by %s stage", resolution.source)
    return f"Testing Gemini API: {resolution.text}"


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def run_api() -> None:
    """Start the FastAPI server via uvicorn."""
    logger.info("Starting chatbot API on %s:%d", cfg.api_host, cfg.api_port)
    uvicorn.run(
        "chatbot.api:app",
        host=cfg.api_host,
        port=cfg.api_port,
        log_level=cfg.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    run_api()
