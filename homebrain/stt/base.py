"""
Abstract base class for STT backends.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass
class TranscriptionResult:
    """Result from speech transcription."""

    text: str  # Full transcription
    language: str  # Language the audio was transcribed as
    duration: float = 0.0  # Audio duration in seconds, when the service reports it
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "text": self.text,
            "language": self.language,
            "duration": self.duration,
            "metadata": self.metadata,
        }


class STTBackend(ABC):
    """Abstract base class for STT backends."""

    name: str = "base"

    def __init__(self):
        """Initialize the backend."""
        self._loaded = False

    @abstractmethod
    def load(self, **kwargs) -> None:
        """
        Prepare the backend (open clients, check the service).

        Args:
            **kwargs: Backend-specific options
        """
        pass

    @abstractmethod
    async def transcribe(
        self,
        audio_url: str,
        language: str | None = None,
        prompt: str | None = None,
        **kwargs,
    ) -> TranscriptionResult:
        """
        Transcribe the audio at ``audio_url`` to text.

        Args:
            audio_url: Reference to the recorded audio
            language: Language code (auto-detect if None)
            prompt: Vocabulary/context hint passed to the recognizer
            **kwargs: Backend-specific options

        Returns:
            TranscriptionResult with the transcript
        """
        pass

    def get_languages(self) -> list[str]:
        """
        Get supported languages.

        Returns:
            List of language codes
        """
        return ["en"]

    def is_loaded(self) -> bool:
        """Check if the backend is ready."""
        return self._loaded

    async def aclose(self) -> None:
        """Release any open connections."""
        self._loaded = False

    def get_info(self) -> dict[str, Any]:
        """
        Get backend information.

        Returns:
            Dictionary with backend info
        """
        return {
            "name": self.name,
            "loaded": self._loaded,
        }
