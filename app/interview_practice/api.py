"""
Purpose: Stateless boundary operations for callers that do not hold a
controller (e.g. an HTTP handler). Each call validates, prompts, calls the
model once and returns plain JSON-ready dicts.

- generate_questions(llm, role, company?, program?) -> {"questions": [...]}
- grade_answer(llm, role, company?, program?, question=, answer=) -> {"score", "feedback"}
- dispatch(llm, payload): route on payload["action"]
"""

from __future__ import annotations
from typing import Any, Mapping, Optional

from .exceptions import ValidationError
from .interfaces import LLMClient
from .models import LLMSettings, SessionParameters
from .prompts import DefaultPromptFactory, DEFAULT_QUESTION_COUNT
from .services.answer_critic import grade_answer_llm
from .services.question_generator import generate_questions_llm
from .services.security import DefaultSecurity

_prompts = DefaultPromptFactory()
_security = DefaultSecurity()


def _params(role: str, company: Optional[str], program: Optional[str]) -> SessionParameters:
    params = SessionParameters(
        role=_security.sanitize_for_prompt(role),
        company=_security.sanitize_for_prompt(company),
        program=_security.sanitize_for_prompt(program),
    )
    _security.validate_parameters(params)
    return params


def generate_questions(
    llm: LLMClient,
    role: str,
    company: Optional[str] = None,
    program: Optional[str] = None,
    *,
    settings: Optional[LLMSettings] = None,
    count: int = DEFAULT_QUESTION_COUNT,
) -> dict:
    questions, _meta = generate_questions_llm(
        llm=llm,
        prompts=_prompts,
        settings=settings or LLMSettings(),
        params=_params(role, company, program),
        count=count,
    )
    return {"questions": list(questions)}


def grade_answer(
    llm: LLMClient,
    role: str,
    company: Optional[str] = None,
    program: Optional[str] = None,
    *,
    question: str,
    answer: str,
    settings: Optional[LLMSettings] = None,
) -> dict:
    params = _params(role, company, program)
    _security.validate_answer(answer)
    result, _meta = grade_answer_llm(
        llm=llm,
        prompts=_prompts,
        settings=settings or LLMSettings(),
        params=params,
        question=question or "",
        answer=_security.sanitize_for_prompt(answer),
    )
    return result.as_dict()


def dispatch(
    llm: LLMClient,
    payload: Mapping[str, Any],
    *,
    settings: Optional[LLMSettings] = None,
) -> dict:
    """Route a request body {"action": ..., role, company, program, ...}."""
    action = payload.get("action")
    common = {
        "role": payload.get("role") or "",
        "company": payload.get("company"),
        "program": payload.get("program"),
        "settings": settings,
    }
    if action == "generate_questions":
        return generate_questions(llm, **common)
    if action == "grade_answer":
        return grade_answer(
            llm,
            question=payload.get("question") or "",
            answer=payload.get("answer") or "",
            **common,
        )
    raise ValidationError("invalid action")
