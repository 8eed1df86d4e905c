"""Question-generation prompt."""

from __future__ import annotations

from ..models import SessionParameters
from .common import (
    PROMPT_BASE,
    company_or_placeholder,
    program_or_placeholder,
    tag_example,
)

DEFAULT_QUESTION_COUNT = 8


def build_question_prompt(
    params: SessionParameters, count: int = DEFAULT_QUESTION_COUNT
) -> str:
    # NOTE: role must already be validated as non-empty by the caller.
    return (
        f"{PROMPT_BASE}\n\n"
        f"Generate {count} interview questions tailored to the role: {params.role}. "
        f"Company: {company_or_placeholder(params)}. "
        f"Program: {program_or_placeholder(params)}. "
        "Base them on questions candidates commonly report for this kind of role, "
        "as if you had searched the web for recent interview experiences. "
        "Include a mix of behavioral, technical and role-specific questions. "
        "For each question include a short tag in parentheses like "
        f"{tag_example()}.\n"
        "Put each question on its own line, numbered, with no other text."
    )
