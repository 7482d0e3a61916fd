"""
Abstract base class for LLM backends.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass
class LLMChoice:
    """One candidate completion. ``content`` may be non-text (e.g. None)."""

    content: Any
    finish_reason: str | None = None


@dataclass
class LLMResponse:
    """Response from LLM."""

    choices: list[LLMChoice]
    model: str
    tokens_used: int = 0
    latency_ms: float = 0.0
    metadata: dict[str, Any] = field(default_factory=dict)

    def first_text(self, fallback: str) -> str:
        """Text of the first choice, or ``fallback`` if it is not a string."""
        if self.choices and isinstance(self.choices[0].content, str):
            return self.choices[0].content
        return fallback


class LLMBackend(ABC):
    """Abstract base class for LLM backends."""

    model: str = ""

    @abstractmethod
    async def complete(self, messages: list[dict[str, str]]) -> LLMResponse:
        """
        Generate completions for an ordered conversation.

        Args:
            messages: ``{"role", "content"}`` dicts, system prompt first

        Returns:
            LLMResponse with one or more choices
        """
        pass

    async def aclose(self) -> None:
        """Release any open connections."""
