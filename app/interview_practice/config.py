"""
Purpose: Environment-driven settings (.env supported) and logging setup.
The core never reads the API key; only build_llm_client hands it to the client.
"""

from __future__ import annotations
import logging
import os
import sys
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .models import LLMSettings
from .services.llm_openai import OpenAILLMClient

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class AppConfig:
    openai_api_key: str = ""
    model: str = "gpt-4o-mini"
    max_tokens: int = 700
    question_count: int = 8
    log_level: str = "INFO"

    def llm_settings(self) -> LLMSettings:
        return LLMSettings(model=self.model, max_tokens=self.max_tokens)


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def load_config(dotenv_path: Optional[str] = None) -> AppConfig:
    """Read settings from the process environment, after loading .env."""
    load_dotenv(dotenv_path)
    return AppConfig(
        openai_api_key=os.getenv("OPENAI_API_KEY", ""),
        model=os.getenv("OPENAI_MODEL", "").strip() or "gpt-4o-mini",
        max_tokens=_int_env("OPENAI_MAX_TOKENS", 700),
        question_count=_int_env("INTERVIEW_QUESTION_COUNT", 8),
        log_level=os.getenv("LOG_LEVEL", "").strip().upper() or "INFO",
    )


def build_llm_client(config: AppConfig, api_key: Optional[str] = None) -> OpenAILLMClient:
    """api_key overrides the configured one (e.g. typed into the sidebar)."""
    return OpenAILLMClient(api_key=api_key or config.openai_api_key)


def configure_logging(level: str = "INFO") -> None:
    """Attach one stream handler to the package logger; safe to call on every rerun."""
    pkg_logger = logging.getLogger("interview_practice")
    pkg_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if pkg_logger.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    pkg_logger.addHandler(handler)
