import pytest

from interview_practice.exceptions import ValidationError
from interview_practice.models import SessionParameters
from interview_practice.services.security import (
    MAX_ANSWER_CHARS,
    MAX_FIELD_CHARS,
    DefaultSecurity,
)

guard = DefaultSecurity()


@pytest.mark.parametrize("role", ["", "   ", "\n"])
def test_blank_role_rejected(role):
    with pytest.raises(ValidationError):
        guard.validate_parameters(SessionParameters(role=role))


def test_optional_fields_may_be_empty():
    guard.validate_parameters(SessionParameters(role="Engineer"))


def test_oversized_field_rejected():
    with pytest.raises(ValidationError, match="Company"):
        guard.validate_parameters(
            SessionParameters(role="Engineer", company="x" * (MAX_FIELD_CHARS + 1))
        )


def test_empty_answer_allowed_but_oversized_rejected():
    guard.validate_answer("")
    with pytest.raises(ValidationError):
        guard.validate_answer("a" * (MAX_ANSWER_CHARS + 1))


def test_sanitize_strips_nul_and_whitespace():
    assert guard.sanitize_for_prompt("  hi\x00 there \n") == "hi there"
    assert guard.sanitize_for_prompt(None) == ""
