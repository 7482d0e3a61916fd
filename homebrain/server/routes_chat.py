"""
Chat REST API routes.
"""

from fastapi import APIRouter, Depends, HTTPException

from homebrain.errors import LLMError, NotFoundError, PersistenceError
from homebrain.server.app import get_actor_id, get_services
from homebrain.server.schemas import (
    ChatHistoryMessage,
    ChatHistoryResponse,
    ChatRequest,
    ChatResponse,
)
from homebrain.services import Services

router = APIRouter()


@router.post("", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    actor_id: int = Depends(get_actor_id),
    services: Services = Depends(get_services),
) -> ChatResponse:
    """Send a message to the family assistant."""
    try:
        reply = await services.chat.chat(actor_id, request.message)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except LLMError:
        raise HTTPException(status_code=500, detail="The assistant couldn't answer right now")
    except PersistenceError:
        raise HTTPException(status_code=500, detail="Couldn't save the conversation")

    return ChatResponse(message=reply.message, timestamp=reply.timestamp)


@router.get("/history", response_model=ChatHistoryResponse)
async def history(
    actor_id: int = Depends(get_actor_id),
    services: Services = Depends(get_services),
) -> ChatHistoryResponse:
    """Recent chat messages for the caller's family, oldest first."""
    try:
        messages = await services.chat.history(
            actor_id, limit=services.config.chat.history_display_limit
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return ChatHistoryResponse(
        messages=[
            ChatHistoryMessage(role=m.role.value, content=m.content, timestamp=m.created_at)
            for m in messages
        ]
    )
