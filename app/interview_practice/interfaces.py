"""
Abstractions for pluggable services. Inversion of control: core depends
on interfaces, not concrete services. Enables fakes/mocks and future swaps.

Common protocols:
- LLMClient.complete(prompt, settings) -> (reply, meta)
- PromptFactory.question_instruction(...) / grading_instruction(...) -> str
- SecurityGuard.validate_parameters(params) / validate_answer(text)

Testing: Use simple fake implementations to test the controller without network calls.
"""

from __future__ import annotations
from typing import Protocol
from .models import LLMSettings, SessionParameters


class LLMClient(Protocol):
    def complete(self, prompt: str, settings: LLMSettings) -> tuple[str, dict]: ...


class PromptFactory(Protocol):
    def question_instruction(
        self, *, params: SessionParameters, count: int = 8
    ) -> str: ...

    def grading_instruction(
        self, *, params: SessionParameters, question: str, answer: str
    ) -> str: ...


class SecurityGuard(Protocol):
    def validate_parameters(self, params: SessionParameters) -> None: ...

    def validate_answer(self, text: str) -> None: ...

    def sanitize_for_prompt(self, text: str) -> str: ...
