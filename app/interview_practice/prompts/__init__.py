"""Facade exposing the prompt builders as a PromptFactory."""

from __future__ import annotations

from ..models import SessionParameters
from . import interview as _interview
from . import feedback as _feedback
from .interview import build_question_prompt, DEFAULT_QUESTION_COUNT
from .feedback import build_grading_prompt

__all__ = [
    "DefaultPromptFactory",
    "build_question_prompt",
    "build_grading_prompt",
    "DEFAULT_QUESTION_COUNT",
]


class DefaultPromptFactory:
    # QUESTIONS
    def question_instruction(
        self, *, params: SessionParameters, count: int = DEFAULT_QUESTION_COUNT
    ) -> str:
        return _interview.build_question_prompt(params, count=count)

    # GRADING
    def grading_instruction(
        self, *, params: SessionParameters, question: str, answer: str
    ) -> str:
        return _feedback.build_grading_prompt(params, question, answer)
