"""
Purpose: The single orchestration point for a session. Owns state:
parameters, questions, current position and graded-answer history.
Prevents UI from knowing how prompts/LLM/parsing work.

Key responsibilities:
- Validate inputs (services.security) before any outbound call.
- Fetch a question set (services.question_generator) and swap it in.
- Grade the current answer (services.answer_critic), prepend to history,
  advance the cursor.
- Tolerant navigation: go_to/previous/next saturate at the bounds.
- reset() clears questions/history/cursor and token counters, keeps parameters.

State changes only after a successful model call; an UpstreamError leaves
the session exactly as it was so the candidate can retry.

Testing: Pure unit tests with a fake LLMClient.
"""

from __future__ import annotations
import logging
from typing import Optional

from .exceptions import StateError
from .interfaces import LLMClient, PromptFactory, SecurityGuard
from .models import (
    GradeResult,
    HistoryEntry,
    LLMSettings,
    Question,
    QuestionSet,
    SessionParameters,
    SessionState,
)
from .prompts import DefaultPromptFactory, DEFAULT_QUESTION_COUNT
from .services.answer_critic import grade_answer_llm
from .services.question_generator import generate_questions_llm
from .services.security import DefaultSecurity

logger = logging.getLogger(__name__)


class InterviewSessionController:
    def __init__(
        self,
        llm: LLMClient,
        *,
        prompts: Optional[PromptFactory] = None,
        security: Optional[SecurityGuard] = None,
        settings: Optional[LLMSettings] = None,
        question_count: int = DEFAULT_QUESTION_COUNT,
    ):
        self.llm: LLMClient = llm
        self.prompts: PromptFactory = prompts or DefaultPromptFactory()
        self.security: SecurityGuard = security or DefaultSecurity()
        self.settings: LLMSettings = settings or LLMSettings()
        self.question_count = question_count
        self.state = SessionState()

        self.tokens_in: int = 0
        self.tokens_out: int = 0
        self.model_used: Optional[str] = None

    def is_ready(self) -> bool:
        """True if the controller can talk to a model."""
        return self.llm is not None

    # ---- read-only views ----

    @property
    def parameters(self) -> Optional[SessionParameters]:
        return self.state.parameters

    @property
    def questions(self) -> QuestionSet:
        return self.state.questions

    @property
    def current_index(self) -> int:
        return self.state.current_index

    @property
    def history(self) -> tuple[HistoryEntry, ...]:
        """Graded answers, most recent first."""
        return tuple(self.state.history)

    @property
    def has_questions(self) -> bool:
        return bool(self.state.questions)

    def current_question(self) -> Optional[Question]:
        """The selected question, or None when no questions are loaded."""
        qs = self.state.questions
        i = self.state.current_index
        if 0 <= i < len(qs):
            return qs[i]
        return None

    # ---- lifecycle ----

    def start_session(self, params: SessionParameters) -> QuestionSet:
        """
        Validate params, fetch and parse a fresh question set, then replace
        the session state (cursor 0, empty history). Raises ValidationError
        before any call for an empty role; UpstreamError leaves state as-is.
        """
        clean = SessionParameters(
            role=self.security.sanitize_for_prompt(params.role),
            company=self.security.sanitize_for_prompt(params.company),
            program=self.security.sanitize_for_prompt(params.program),
        )
        self.security.validate_parameters(clean)

        questions, meta = generate_questions_llm(
            llm=self.llm,
            prompts=self.prompts,
            settings=self.settings,
            params=clean,
            count=self.question_count,
        )
        self._account(meta)

        self.state = SessionState(parameters=clean, questions=questions)
        logger.info(
            "Session started for role=%r with %d questions", clean.role, len(questions)
        )
        return questions

    def submit_answer(self, answer: str) -> GradeResult:
        """
        Grade the answer to the current question. On success the entry is
        prepended to history and the cursor moves forward, stopping at the
        last question.
        """
        question = self.current_question()
        if question is None or self.state.parameters is None:
            raise StateError("No active question. Fetch questions first.")

        self.security.validate_answer(answer)
        answer = self.security.sanitize_for_prompt(answer)

        result, meta = grade_answer_llm(
            llm=self.llm,
            prompts=self.prompts,
            settings=self.settings,
            params=self.state.parameters,
            question=question,
            answer=answer,
        )
        self._account(meta)

        self.state.history.insert(
            0,
            HistoryEntry(
                question=question,
                answer=answer,
                score=result.score,
                feedback=result.feedback,
            ),
        )
        self.state.current_index = self._clamp(self.state.current_index + 1)
        logger.info(
            "Graded question %d/%d: score=%d",
            len(self.state.history),
            len(self.state.questions),
            result.score,
        )
        return result

    def reset(self) -> None:
        """Clear questions, history, cursor and token counters. Keep parameters."""
        self.state = SessionState(parameters=self.state.parameters)
        self.tokens_in = self.tokens_out = 0
        self.model_used = None
        logger.info("Session reset")

    # ---- navigation (never raises) ----

    def go_to(self, index: int) -> int:
        self.state.current_index = self._clamp(index)
        return self.state.current_index

    def previous(self) -> int:
        return self.go_to(self.state.current_index - 1)

    def next(self) -> int:
        return self.go_to(self.state.current_index + 1)

    # ---- internals ----

    def _clamp(self, index: int) -> int:
        last = max(0, len(self.state.questions) - 1)
        return max(0, min(int(index), last))

    def _account(self, meta: dict) -> None:
        meta = meta or {}
        self.tokens_in += int(meta.get("tokens_in", 0))
        self.tokens_out += int(meta.get("tokens_out", 0))
        self.model_used = meta.get("model") or self.settings.model
