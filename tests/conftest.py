# tests/conftest.py
import os
import pytest

# Ensure test-friendly env before the package reads it
os.environ.setdefault("EDIFY_PROVIDER", "openai")
os.environ.setdefault("REQUEST_TIMEOUT", "5")
os.environ.setdefault("CONNECT_TIMEOUT", "2")

from edify.core.errors import ClassifiedError  # noqa: E402
from edify.schemas.chat import ChatMessage, Role  # noqa: E402
from edify.schemas.provider import AIConfig  # noqa: E402



class FakeAdapter:
    """Stands in for ProviderAdapter: replays queued replies/errors and records calls."""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []
        self.on_call = None

    async def chat(self, messages, grounding=None):
        self.calls.append((list(messages), grounding))
        if self.on_call is not None:
            self.on_call()
        reply = self.replies.pop(0) if self.replies else "ok"
        if isinstance(reply, ClassifiedError):
            raise reply
        return reply


@pytest.fixture
def ai_config():
    return AIConfig(api_key="sk-test", provider="openai")


@pytest.fixture
def history():
    return [
        ChatMessage(role=Role.USER, content="What is photosynthesis?"),
        ChatMessage(role=Role.ASSISTANT, content="A process plants use to make food."),
    ]


@pytest.fixture
def make_adapter():
    return FakeAdapter
