"""
Transcription adapter for voice commands.

Biases recognition toward family-coordination vocabulary and never hands
back an empty transcript: callers get text or a ``TranscriptionError``.
"""

import logging

from homebrain.config import Config, get_config
from homebrain.errors import TranscriptionError
from homebrain.resilience import RetryPolicy, call_with_retry
from homebrain.stt.base import STTBackend

logger = logging.getLogger(__name__)

STT_BACKENDS = ("whisper_api",)

DOMAIN_PROMPT = (
    "This is a family coordination assistant. "
    "Transcribe commands for calendar, tasks, meals, and lists."
)


class Transcriber:
    """Speech-to-text for voice commands."""

    def __init__(
        self,
        backend: STTBackend,
        default_language: str = "en",
        policy: RetryPolicy | None = None,
    ):
        self.backend = backend
        self.default_language = default_language
        self.policy = policy or RetryPolicy()

    async def transcribe(self, audio_url: str, language: str | None = None) -> str:
        """
        Transcribe recorded audio to text.

        Args:
            audio_url: Reference to the recorded audio
            language: Language code (default: "en")

        Returns:
            Non-empty transcript

        Raises:
            TranscriptionError: If the service fails or returns no text
        """
        language = language or self.default_language

        try:
            result = await call_with_retry(
                lambda: self.backend.transcribe(audio_url, language=language, prompt=DOMAIN_PROMPT),
                self.policy,
            )
        except Exception as e:
            logger.exception("Transcription error for %s", audio_url)
            raise TranscriptionError("Failed to transcribe audio") from e

        text = (result.text or "").strip()
        if not text:
            logger.error("Transcription returned no text for %s", audio_url)
            raise TranscriptionError("Transcription returned no text")

        logger.debug("Transcribed %s (%s): %s", audio_url, language, text)
        return text


def create_stt_backend(backend: str = "whisper_api") -> STTBackend:
    """
    Create an (unloaded) STT backend by name.

    Raises:
        ValueError: If the backend is unknown
    """
    if backend == "whisper_api":
        from homebrain.stt.whisper_api import WhisperAPIBackend

        return WhisperAPIBackend()

    raise ValueError(f"Unknown STT backend: {backend}. Available: {', '.join(STT_BACKENDS)}")


def create_transcriber(config: Config | None = None) -> Transcriber:
    """Build a transcriber from configuration."""
    config = config or get_config()

    backend = create_stt_backend(config.stt.backend)
    backend.load(
        base_url=config.stt.base_url,
        model=config.stt.model,
        timeout=config.stt.timeout,
    )

    return Transcriber(
        backend,
        default_language=config.stt.default_language,
        policy=RetryPolicy(
            timeout=config.stt.timeout,
            retries=config.stt.retries,
            jitter=config.retry_jitter,
        ),
    )
