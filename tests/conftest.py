import pytest

from interview_practice.exceptions import UpstreamError


class FakeLLM:
    """Scripted LLMClient: pops one reply per call; Exception replies are raised."""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.prompts = []
        self.settings = []

    def queue(self, *replies):
        self.replies.extend(replies)

    def complete(self, prompt, settings):
        self.prompts.append(prompt)
        self.settings.append(settings)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply, {"model": settings.model, "tokens_in": 10, "tokens_out": 5}


EIGHT_QUESTIONS = "\n".join(
    f"{i}. Question number {i} (behavioral)" for i in range(1, 9)
)


@pytest.fixture
def fake_llm():
    return FakeLLM()


@pytest.fixture
def upstream_down():
    return UpstreamError("OpenAI request failed: connection refused")
