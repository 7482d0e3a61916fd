"""
Voice command REST API routes.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from homebrain.errors import NotFoundError, TranscriptionError
from homebrain.server.app import get_actor_id, get_services
from homebrain.server.schemas import (
    CommandRequest,
    CommandResponse,
    SynthesizeRequest,
    SynthesizeResponse,
    TranscribeRequest,
    TranscribeResponse,
)
from homebrain.services import Services

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/transcribe", response_model=TranscribeResponse)
async def transcribe(
    request: TranscribeRequest,
    actor_id: int = Depends(get_actor_id),
    services: Services = Depends(get_services),
) -> TranscribeResponse:
    """Transcribe recorded audio to text."""
    try:
        text = await services.transcriber.transcribe(request.audio_url, request.language)
    except TranscriptionError:
        raise HTTPException(status_code=500, detail="Failed to transcribe audio")

    return TranscribeResponse(success=True, text=text)


@router.post("/command", response_model=CommandResponse)
async def process_command(
    request: CommandRequest,
    actor_id: int = Depends(get_actor_id),
    services: Services = Depends(get_services),
) -> CommandResponse:
    """Classify a command and execute it for the caller's family."""
    try:
        result = await services.executor.process(request.text, actor_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return CommandResponse(**result.to_dict())


@router.post("/synthesize", response_model=SynthesizeResponse)
async def synthesize(
    request: SynthesizeRequest,
    actor_id: int = Depends(get_actor_id),
) -> SynthesizeResponse:
    """Text-to-speech placeholder: echoes the text without audio."""
    # TODO: plug in a TTS backend and return the generated audio URL
    return SynthesizeResponse(success=True, audio_url=None, message=request.text)
