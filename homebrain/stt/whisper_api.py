"""
Whisper API STT backend.

Uses the OpenAI-compatible /v1/audio/transcriptions endpoint, so it works
against OpenAI itself or a self-hosted server (vLLM, faster-whisper-server):

    HOMEBRAIN_STT_BASE_URL=http://localhost:8002/v1 homebrain serve
"""

import logging
import os
from pathlib import PurePosixPath
from typing import Any
from urllib.parse import urlparse

import httpx

from homebrain.stt.base import STTBackend, TranscriptionResult

logger = logging.getLogger(__name__)


class WhisperAPIBackend(STTBackend):
    """Whisper STT backend using an OpenAI-compatible audio API."""

    name = "whisper_api"

    def __init__(self):
        super().__init__()
        self._host = "https://api.openai.com/v1"
        self._model_name = "whisper-1"
        self._client: httpx.AsyncClient | None = None

    def load(
        self,
        base_url: str = "https://api.openai.com/v1",
        model: str = "whisper-1",
        api_key: str | None = None,
        timeout: float = 60.0,
        **kwargs,
    ) -> None:
        """
        Create the HTTP client.

        Args:
            base_url: API base URL (e.g. http://localhost:8002/v1)
            model: Model name sent with each request
            api_key: Bearer token (or set OPENAI_API_KEY env)
            timeout: Per-request timeout in seconds
        """
        api_key = api_key or os.environ.get("OPENAI_API_KEY")
        headers = {"Authorization": f"Bearer {api_key}"} if api_key else {}

        self._host = base_url.rstrip("/")
        self._model_name = model
        self._client = httpx.AsyncClient(timeout=timeout, headers=headers)
        self._loaded = True
        logger.info("Whisper API: host=%s model=%s", self._host, self._model_name)

    async def _fetch_audio(self, audio_url: str) -> tuple[str, bytes]:
        # Audio references are URLs to already-uploaded recordings
        resp = await self._client.get(audio_url)
        resp.raise_for_status()
        filename = PurePosixPath(urlparse(audio_url).path).name or "audio.webm"
        return filename, resp.content

    async def transcribe(
        self,
        audio_url: str,
        language: str | None = None,
        prompt: str | None = None,
        **kwargs,
    ) -> TranscriptionResult:
        """
        Transcribe audio via the Whisper API.

        Args:
            audio_url: URL of the recorded audio
            language: Language code (e.g. "en")
            prompt: Vocabulary hint for the recognizer
        """
        if not self._loaded or self._client is None:
            raise RuntimeError("Backend not loaded. Call load() first.")

        filename, audio = await self._fetch_audio(audio_url)

        files = {"file": (filename, audio)}
        data = {"model": self._model_name, "response_format": "verbose_json"}
        if language:
            data["language"] = language
        if prompt:
            data["prompt"] = prompt

        resp = await self._client.post(
            f"{self._host}/audio/transcriptions",
            files=files,
            data=data,
        )
        resp.raise_for_status()
        result = resp.json()

        return TranscriptionResult(
            text=(result.get("text") or "").strip(),
            language=result.get("language") or language or "en",
            duration=float(result.get("duration") or 0.0),
            metadata={"model": self._model_name, "backend": self.name},
        )

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
        await super().aclose()

    def get_languages(self) -> list[str]:
        """Get supported languages (Whisper supports many)."""
        return [
            "en", "zh", "de", "es", "ru", "ko", "fr", "ja", "pt", "tr",
            "pl", "ca", "nl", "ar", "sv", "it", "id", "hi", "fi", "vi",
        ]

    def get_info(self) -> dict[str, Any]:
        """Get backend information."""
        info = super().get_info()
        info.update({
            "host": self._host,
            "model_name": self._model_name,
        })
        return info
