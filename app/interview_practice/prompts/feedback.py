"""Grading prompt: score + short critique of one answer."""

from __future__ import annotations

from ..models import SessionParameters
from .common import PROMPT_BASE, context_line


def build_grading_prompt(
    params: SessionParameters, question: str, answer: str
) -> str:
    # The score-alone-on-first-line rule is what utils.llm_text.parse_grade reads.
    return (
        f"{PROMPT_BASE}\n\n"
        f"You are grading an interview answer. {context_line(params)}\n\n"
        f"Question: {question or '(not available)'}\n\n"
        f"Candidate answer: {answer or '(no answer given)'}\n\n"
        "Provide:\n"
        "1) A numeric score from 1-10 (only the number on the first line).\n"
        "2) A short paragraph (1-3 sentences) explaining the score and exactly "
        "3 bullet point suggestions to improve the answer.\n"
        "Keep the response plain text: no headings, no code fences."
    )
