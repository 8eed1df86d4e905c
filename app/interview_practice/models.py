"""
Canonical data shapes, shared truth for typing/validation between layers.

Typical contents:
- SessionParameters (role, company, program), fixed for one session.
- GradeResult / HistoryEntry, what a graded answer leaves behind.
- SessionState, owned by the controller only.
- LLMSettings (model, temperature, top_p, max_tokens).

Testing: Trivial; mostly types.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

Question = str
QuestionSet = tuple[Question, ...]


@dataclass(frozen=True)
class SessionParameters:
    role: str
    company: str = ""
    program: str = ""


@dataclass(frozen=True)
class GradeResult:
    score: int
    feedback: str

    def as_dict(self) -> dict:
        return {"score": self.score, "feedback": self.feedback}


@dataclass(frozen=True)
class HistoryEntry:
    question: Question
    answer: str
    score: int
    feedback: str


@dataclass
class SessionState:
    parameters: Optional[SessionParameters] = None
    questions: QuestionSet = ()
    current_index: int = 0

    # most recent first
    history: list[HistoryEntry] = field(default_factory=list)


@dataclass
class LLMSettings:
    model: str = "gpt-4o-mini"
    temperature: float = 0.7
    top_p: float = 1.0
    max_tokens: int = 700
