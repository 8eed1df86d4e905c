"""
Error kinds raised by the interview core.
"""


class InterviewError(Exception):
    """Base exception for interview-practice errors."""

    pass


class ValidationError(InterviewError):
    """Caller-supplied input violates a precondition (e.g. empty role)."""

    pass


class UpstreamError(InterviewError):
    """The language model service failed or returned no usable content."""

    pass


class StateError(InterviewError):
    """Operation invoked in the wrong session phase."""

    pass
