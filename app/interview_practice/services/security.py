"""
Purpose: Guardrails for inputs.
Content: early, predictable failures before any outbound call; prevent
empty roles and oversized requests.
"""

from ..exceptions import ValidationError
from ..models import SessionParameters

MAX_FIELD_CHARS = 200
MAX_ANSWER_CHARS = 8000


class DefaultSecurity:
    def validate_parameters(self, params: SessionParameters) -> None:
        if not (params.role or "").strip():
            raise ValidationError("Please enter a role.")
        for label, value in (
            ("Role", params.role),
            ("Company", params.company),
            ("Program", params.program),
        ):
            if len(value or "") > MAX_FIELD_CHARS:
                raise ValidationError(
                    f"{label} is too long (max {MAX_FIELD_CHARS} characters)."
                )

    def validate_answer(self, text: str) -> None:
        if len(text or "") > MAX_ANSWER_CHARS:
            raise ValidationError("Re-type your answer.\nYour answer is too long.")

    def sanitize_for_prompt(self, text: str) -> str:
        return (text or "").replace("\x00", "").strip()
