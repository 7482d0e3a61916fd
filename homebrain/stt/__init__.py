"""
STT (Speech-to-Text) backends and the voice transcription adapter.
"""

from homebrain.stt.base import STTBackend, TranscriptionResult
from homebrain.stt.transcriber import (
    DOMAIN_PROMPT,
    STT_BACKENDS,
    Transcriber,
    create_stt_backend,
    create_transcriber,
)

__all__ = [
    "DOMAIN_PROMPT",
    "STT_BACKENDS",
    "STTBackend",
    "Transcriber",
    "TranscriptionResult",
    "create_stt_backend",
    "create_transcriber",
]
