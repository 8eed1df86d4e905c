"""
Purpose: Generate the interview question set for a role/company/program.
Why: Decouple question logic from the controller, which only owns state.

generate_questions_llm(...) -> (questions, meta)

Testing: Fake LLMClient returning canned numbered lists.
"""

from __future__ import annotations
import logging

from ..interfaces import LLMClient, PromptFactory
from ..models import LLMSettings, QuestionSet, SessionParameters
from ..utils.llm_text import parse_questions

logger = logging.getLogger(__name__)


def generate_questions_llm(
    *,
    llm: LLMClient,
    prompts: PromptFactory,
    settings: LLMSettings,
    params: SessionParameters,
    count: int = 8,
) -> tuple[QuestionSet, dict]:
    """Return (questions, meta). Parsing never fails; may return ()."""
    prompt = prompts.question_instruction(params=params, count=count)
    text, meta = llm.complete(prompt, settings)

    questions = parse_questions(text)
    if len(questions) != count:
        logger.info("Requested %d questions, model returned %d", count, len(questions))
    return questions, meta
