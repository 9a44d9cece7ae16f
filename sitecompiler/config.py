"""Centralised settings for SiteCompiler.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

_BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/58.0.3029.110 Safari/537.3"
)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Crawler
    # ------------------------------------------------------------------
    user_agent: str = field(
        default_factory=lambda: os.environ.get("USER_AGENT", _BROWSER_USER_AGENT)
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )

    # ------------------------------------------------------------------
    # Hosted extraction (Jina Reader)
    # ------------------------------------------------------------------
    jina_reader_url: str = field(
        default_factory=lambda: os.environ.get("JINA_READER_URL", "https://r.jina.ai")
    )
    jina_api_key: str = field(
        default_factory=lambda: os.environ.get("JINA_API_KEY", "")
    )

    # ------------------------------------------------------------------
    # Generative rewrite model
    # ------------------------------------------------------------------
    llm_provider: str = field(
        default_factory=lambda: os.environ.get("LLM_PROVIDER", "google")
    )
    google_chat_model: str = field(
        default_factory=lambda: os.environ.get(
            "GOOGLE_CHAT_MODEL", "gemini-2.0-flash-lite-preview-02-05"
        )
    )
    openai_chat_model: str = field(
        default_factory=lambda: os.environ.get("OPENAI_CHAT_MODEL", "gpt-4o-mini")
    )
    ollama_chat_model: str = field(
        default_factory=lambda: os.environ.get("OLLAMA_CHAT_MODEL", "ministral-3:8b")
    )
    ollama_base_url: str = field(
        default_factory=lambda: os.environ.get("OLLAMA_BASE_URL", "http://localhost:11434")
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO").upper()
    )


# Module-level singleton, import this everywhere:
#   from sitecompiler.config import settings
settings = Settings()
