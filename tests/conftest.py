"""
Shared fixtures: an in-memory family and scripted collaborators.
"""

from datetime import datetime

import pytest

from homebrain.llm.base import LLMBackend, LLMChoice, LLMResponse
from homebrain.resilience import RetryPolicy
from homebrain.store.memory import MemoryDataStore
from homebrain.store.models import ListType, MemberRole
from homebrain.stt.base import STTBackend, TranscriptionResult

PARENT_ID = 1
CHILD_ID = 2
OUTSIDER_ID = 99

# Thursday
NOW = datetime(2026, 10, 15, 9, 30)


class ScriptedLLM(LLMBackend):
    """LLM that replays queued contents (or raises queued exceptions)."""

    model = "scripted"

    def __init__(self, *replies):
        self.replies = list(replies) or ["ok"]
        self.calls: list[list[dict]] = []

    async def complete(self, messages):
        self.calls.append([dict(m) for m in messages])
        reply = self.replies.pop(0) if len(self.replies) > 1 else self.replies[0]
        if isinstance(reply, BaseException):
            raise reply
        return LLMResponse(choices=[LLMChoice(content=reply)], model=self.model, tokens_used=7)


class ScriptedSTT(STTBackend):
    """STT backend returning queued transcripts (or raising queued exceptions)."""

    name = "scripted"

    def __init__(self, *results):
        super().__init__()
        self.results = list(results) or ["hello"]
        self.calls: list[dict] = []
        self._loaded = True

    def load(self, **kwargs):
        self._loaded = True

    async def transcribe(self, audio_url, language=None, prompt=None, **kwargs):
        self.calls.append({"audio_url": audio_url, "language": language, "prompt": prompt})
        result = self.results.pop(0) if len(self.results) > 1 else self.results[0]
        if isinstance(result, BaseException):
            raise result
        return TranscriptionResult(text=result, language=language or "en")


@pytest.fixture
def fast_policy():
    return RetryPolicy(timeout=1.0, retries=1, jitter=0.0)


@pytest.fixture
def store():
    store = MemoryDataStore()
    family = store.create_family("Rivera", owner_id=PARENT_ID)
    store.add_family_member(family.id, CHILD_ID, MemberRole.CHILD)
    store.create_list(family.id, PARENT_ID, "Weekend chores", ListType.TODO)
    store.create_list(family.id, PARENT_ID, "Groceries", ListType.GROCERY)
    return store


@pytest.fixture
def family(store):
    return store.families[0]
