"""chatbot/settings.py

Runtime configuration loaded from environment variables / ``.env`` file.

Configure via environment variables:
  GEMINI_API_KEY      — credential sent as the ``key`` query parameter
  GEMINI_MODELS       — JSON list of model identifiers, tried in order
  GEMINI_BASE_URL     — generation host (default: Google's public endpoint)
  GEMINI_API_VERSION  — path version segment (default: v1beta)
  API_HOST / API_PORT — bind address for the HTTP API
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PERSONA_PROMPT: str = (
    "You are an AI chatbot named ChatBot. Your goal is to be helpful, friendly, "
    "and conversational. Respond clearly and concisely."
)


class ChatbotSettings(BaseSettings):
    """Runtime configuration for the chatbot service.

    Attributes:
        gemini_api_key: API credential.  Empty disables the remote path.
        gemini_models: Model identifiers, tried left to right.
        gemini_base_url: Scheme and host of the generation endpoint.
        gemini_api_version: Version segment of the endpoint path.
        connect_timeout_s: Connect timeout per remote attempt.
        read_timeout_s: Read timeout per remote attempt.
        persona_prompt: Instruction sent as the first conversation turn.
        api_host: Host the HTTP API binds to.
        api_port: Port the HTTP API binds to.
        api_workers: Threads available for blocking pipeline calls.
        log_level: Root logging level for the entry points.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    gemini_api_key: str = Field("", description="Gemini API credential.")
    gemini_models: list[str] = Field(
        default_factory=lambda: ["gemini-2.0-flash", "gemini-1.5-flash-latest"],
        description="Primary model first, then fallbacks.",
    )
    gemini_base_url: str = Field(
        "https://generativelanguage.googleapis.com",
        description="Scheme and host of the generateContent endpoint.",
    )
    gemini_api_version: str = Field("v1beta", description="API version path segment.")
    connect_timeout_s: float = Field(10.0, description="Connect timeout in seconds.")
    read_timeout_s: float = Field(15.0, description="Read timeout in seconds.")
    persona_prompt: str = Field(
        DEFAULT_PERSONA_PROMPT,
        description="Persona instruction prepended to every remote request.",
    )
    api_host: str = Field("0.0.0.0", description="HTTP API bind host.")
    api_port: int = Field(8300, description="HTTP API bind port.")
    api_workers: int = Field(
        4, description="Worker threads for blocking pipeline calls."
    )
    log_level: str = Field("INFO", description="Logging level for entry points.")


cfg: ChatbotSettings = ChatbotSettings()
