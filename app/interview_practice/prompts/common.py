"""Shared prompt helpers used across prompt modules."""

from __future__ import annotations

from ..models import SessionParameters

PROMPT_BASE = (
    "You are an expert interviewer and interviewer coach. "
    "Be concise and use numbered lists where appropriate."
)

COMPANY_PLACEHOLDER = "generic"
PROGRAM_PLACEHOLDER = "general"

CATEGORY_TAGS = ("behavioral", "technical", "role-specific")


def company_or_placeholder(params: SessionParameters) -> str:
    return (params.company or "").strip() or COMPANY_PLACEHOLDER


def program_or_placeholder(params: SessionParameters) -> str:
    return (params.program or "").strip() or PROGRAM_PLACEHOLDER


def context_line(params: SessionParameters) -> str:
    """One-line session context: role, company, program."""
    return (
        f"Role: {params.role}. "
        f"Company: {company_or_placeholder(params)}. "
        f"Program: {program_or_placeholder(params)}."
    )


def tag_example() -> str:
    """Inline tag format the parser leaves embedded, e.g. '(behavioral)'."""
    return " or ".join(f"({t})" for t in CATEGORY_TAGS[:2])
