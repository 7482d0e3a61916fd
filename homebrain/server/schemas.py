"""
Pydantic schemas for API requests and responses.
"""

from datetime import datetime

from pydantic import BaseModel, Field


# === General ===


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
    version: str
    store_available: bool
    llm_model: str | None = None
    stt_backend: str | None = None


# === Voice ===


class TranscribeRequest(BaseModel):
    """Transcription request for already-uploaded audio."""

    audio_url: str = Field(..., min_length=1)
    language: str | None = None


class TranscribeResponse(BaseModel):
    """Transcription response."""

    success: bool
    text: str


class CommandRequest(BaseModel):
    """Natural-language command (typed or transcribed)."""

    text: str = Field(..., min_length=1, max_length=2000)


class CommandResponse(BaseModel):
    """Outcome of a processed command."""

    success: bool
    action: str
    response: str


class SynthesizeRequest(BaseModel):
    """TTS synthesis request."""

    text: str = Field(..., min_length=1, max_length=10000)


class SynthesizeResponse(BaseModel):
    """TTS synthesis response. ``audio_url`` stays empty until a TTS backend exists."""

    success: bool
    audio_url: str | None = None
    message: str


# === Chat ===


class ChatRequest(BaseModel):
    """Chat request."""

    message: str = Field(..., min_length=1, max_length=10000)


class ChatResponse(BaseModel):
    """Assistant reply."""

    message: str
    timestamp: datetime


class ChatHistoryMessage(BaseModel):
    """A single stored chat message."""

    role: str = Field(..., pattern="^(system|user|assistant)$")
    content: str
    timestamp: datetime


class ChatHistoryResponse(BaseModel):
    """Stored chat messages, oldest first."""

    messages: list[ChatHistoryMessage]


# === Summaries ===


class DailyBriefResponse(BaseModel):
    type: str = "daily"
    date: datetime
    summary: str
    event_count: int
    task_count: int
    meal_count: int


class WeeklyRecapResponse(BaseModel):
    type: str = "weekly"
    week_start: datetime
    week_end: datetime
    summary: str
    event_count: int
    tasks_completed: int


class MoodResponse(BaseModel):
    mood: str
    suggestion: str
    recommendations: list[str] = Field(default_factory=list)
