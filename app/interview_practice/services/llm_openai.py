"""
Purpose: Thin client wrapper around OpenAI chat completions.
One place for auth, model options, response/usage normalization and
mapping SDK failures to UpstreamError.

Extensibility:
- Add other providers behind the same LLMClient.complete interface
  without touching the controller.

Testing: Mock SDK calls; assert it maps usage and errors correctly.
"""

from __future__ import annotations
import logging

from openai import OpenAI, OpenAIError

from ..exceptions import UpstreamError
from ..models import LLMSettings

logger = logging.getLogger(__name__)


class OpenAILLMClient:
    def __init__(self, api_key: str, *, timeout: float = 30.0, max_retries: int = 0):
        self.api_key = (api_key or "").strip()
        if not self.api_key:
            raise UpstreamError("OPENAI_API_KEY not set")
        try:
            self.client = OpenAI(
                api_key=self.api_key, timeout=timeout, max_retries=max_retries
            )
        except OpenAIError as e:
            raise UpstreamError(f"Failed to initialize OpenAI client: {e}") from e

    def complete(self, prompt: str, settings: LLMSettings) -> tuple[str, dict]:
        """Send one user message; return (text, meta) or raise UpstreamError."""
        try:
            cc = self.client.chat.completions.create(
                model=settings.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=settings.temperature,
                top_p=settings.top_p,
                max_tokens=settings.max_tokens,
            )
        except OpenAIError as e:
            logger.error("OpenAI API error: %s", e)
            raise UpstreamError(f"OpenAI request failed: {e}") from e

        choices = getattr(cc, "choices", None) or []
        if not choices:
            logger.error("OpenAI response had no choices")
            raise UpstreamError("OpenAI error: response contained no choices")
        text = getattr(choices[0].message, "content", None)
        if text is None:
            logger.error("OpenAI response had no message content")
            raise UpstreamError("OpenAI error: response contained no content")

        usage = getattr(cc, "usage", None)
        tokens_in = getattr(usage, "prompt_tokens", 0) if usage else 0
        tokens_out = getattr(usage, "completion_tokens", 0) if usage else 0
        return text, {
            "model": getattr(cc, "model", settings.model),
            "tokens_in": tokens_in or 0,
            "tokens_out": tokens_out or 0,
        }
