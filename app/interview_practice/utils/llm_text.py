"""Utilities for turning free-form LLM text into structured results.

Both parsers degrade to a default instead of raising: the model is asked for
a format but is not guaranteed to follow it.
"""

from __future__ import annotations
import re
from typing import Optional

from ..models import GradeResult, QuestionSet

_NEWLINES = re.compile(r"\n+")
_ORDINAL = re.compile(r"^\d+\.\s*")
_DIGITS = re.compile(r"\d+")


def _strip_ordinal(segment: str) -> str:
    """'3. Why this role?' -> 'Why this role?'"""
    return _ORDINAL.sub("", segment.strip(), count=1).strip()


def parse_questions(text: Optional[str]) -> QuestionSet:
    """
    Split a numbered list into questions.
    - One question per line; blank lines are ignored.
    - Leading '1.'-style ordinals are removed, inline tags like '(technical)' kept.
    - No count is enforced; returns () for empty text.
    """
    if not text:
        return ()
    out = []
    for segment in _NEWLINES.split(text):
        q = _strip_ordinal(segment)
        if q:
            out.append(q)
    return tuple(out)


def _non_empty_lines(text: str) -> list[str]:
    return [line.strip() for line in text.split("\n") if line.strip()]


def parse_grade(text: Optional[str]) -> GradeResult:
    """
    Read '<score>\\n<feedback...>' into a GradeResult.
    - score: first run of digits on the first non-empty line, else 0.
      Out-of-range values are passed through as-is.
    - feedback: remaining lines joined with a single space.
    """
    lines = _non_empty_lines(text or "")
    if not lines:
        return GradeResult(score=0, feedback="")

    m = _DIGITS.search(lines[0])
    try:
        score = int(m.group(0)) if m else 0
    except ValueError:
        # digit run longer than int() accepts
        score = 0
    return GradeResult(score=score, feedback=" ".join(lines[1:]))
