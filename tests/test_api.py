import pytest

from conftest import FakeLLM
from interview_practice import api
from interview_practice.exceptions import UpstreamError, ValidationError


def test_generate_questions_returns_list():
    llm = FakeLLM("1. Tell me about yourself\n2. Why this role?")
    assert api.generate_questions(llm, "Analyst") == {
        "questions": ["Tell me about yourself", "Why this role?"]
    }
    assert "Company: generic" in llm.prompts[0]


def test_grade_answer_returns_score_and_feedback():
    llm = FakeLLM("8\nSolid answer with clear structure.")
    out = api.grade_answer(
        llm, "Analyst", "Acme", None, question="Why?", answer="Because."
    )
    assert out == {"score": 8, "feedback": "Solid answer with clear structure."}
    assert "Program: general" in llm.prompts[0]


def test_empty_role_is_rejected():
    llm = FakeLLM()
    with pytest.raises(ValidationError):
        api.generate_questions(llm, "")
    assert llm.prompts == []


def test_dispatch_routes_actions():
    llm = FakeLLM("1. Q one", "4\nNeeds depth.")
    assert api.dispatch(
        llm, {"action": "generate_questions", "role": "Nurse"}
    ) == {"questions": ["Q one"]}
    assert api.dispatch(
        llm,
        {"action": "grade_answer", "role": "Nurse", "question": "Q one", "answer": "A"},
    ) == {"score": 4, "feedback": "Needs depth."}


def test_dispatch_rejects_unknown_action():
    with pytest.raises(ValidationError, match="invalid action"):
        api.dispatch(FakeLLM(), {"action": "delete_everything", "role": "x"})


def test_upstream_errors_propagate(upstream_down):
    with pytest.raises(UpstreamError):
        api.generate_questions(FakeLLM(upstream_down), "Analyst")
