"""
Purpose: Score/critique a candidate answer.
Powers the "Submit & Grade" step and the session history.

grade_answer_llm(...) -> (GradeResult, meta)

Testing: Fake LLMClient; bounds (empty answer, missing score line).
"""

from __future__ import annotations
import logging

from ..interfaces import LLMClient, PromptFactory
from ..models import GradeResult, LLMSettings, SessionParameters
from ..utils.llm_text import parse_grade

logger = logging.getLogger(__name__)


def grade_answer_llm(
    *,
    llm: LLMClient,
    prompts: PromptFactory,
    settings: LLMSettings,
    params: SessionParameters,
    question: str,
    answer: str,
) -> tuple[GradeResult, dict]:
    """Return (GradeResult, meta) for one question/answer pair."""
    prompt = prompts.grading_instruction(
        params=params, question=question, answer=answer
    )
    grade_settings = LLMSettings(
        model=settings.model,
        temperature=min(settings.temperature, 0.3),
        top_p=settings.top_p,
        max_tokens=settings.max_tokens,
    )
    text, meta = llm.complete(prompt, grade_settings)

    result = parse_grade(text)
    if not 1 <= result.score <= 10:
        logger.warning("Grade outside 1-10 passed through: %d", result.score)
    return result, meta
