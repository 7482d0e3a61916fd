"""
Conversational chat with the family assistant.

Each turn sends the system context, the recent history (oldest first) and
the new message to the LLM. The user and assistant messages are stored
only after the LLM answered, so a failed call leaves no half turn behind.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable

from homebrain.errors import LLMError, NotFoundError
from homebrain.llm.base import LLMBackend
from homebrain.resilience import RetryPolicy, call_with_retry
from homebrain.store.base import DataStore
from homebrain.store.models import ChatMessage, ChatRole, Family, FamilyMember

logger = logging.getLogger(__name__)

FALLBACK_REPLY = "I couldn't process that request."


@dataclass
class ChatReply:
    """Assistant reply for one chat turn."""

    message: str
    timestamp: datetime

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "timestamp": self.timestamp.isoformat()}


def build_system_prompt(family: Family, members: list[FamilyMember], assistant_name: str = "HomeBrain") -> str:
    """System message describing the assistant and the family."""
    member_ids = ", ".join(str(m.user_id) for m in members)
    return (
        f"You are {assistant_name}, an intelligent family assistant for the {family.name} family.\n"
        "You help with calendar management, task coordination, meal planning, and family communication.\n"
        "Be helpful, friendly, and concise. When users ask you to create events or tasks, confirm the details.\n"
        f"Current family members: {member_ids}"
    )


class ChatOrchestrator:
    """
    LLM-backed chat scoped to the caller's family.

    Args:
        store: Data-access collaborator
        llm: LLM backend
        history_limit: Past messages sent with each turn
        policy: Timeout/retry policy for the LLM call
    """

    def __init__(
        self,
        store: DataStore,
        llm: LLMBackend,
        history_limit: int = 10,
        policy: RetryPolicy | None = None,
        assistant_name: str = "HomeBrain",
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.store = store
        self.llm = llm
        self.history_limit = history_limit
        self.policy = policy or RetryPolicy()
        self.assistant_name = assistant_name
        self._clock = clock

    async def _resolve_family(self, actor_id: int) -> Family:
        family = await self.store.get_family_for_actor(actor_id)
        if family is None:
            raise NotFoundError("Family not found")
        return family

    async def build_messages(self, family: Family, message: str) -> list[dict[str, str]]:
        """Assemble ``[system, *history (oldest first), user]``."""
        recent = await self.store.get_chat_history(family.id, self.history_limit)
        members = await self.store.get_family_members(family.id)

        messages = [{"role": "system", "content": build_system_prompt(family, members, self.assistant_name)}]
        messages.extend(m.to_llm_message() for m in reversed(recent))
        messages.append({"role": "user", "content": message})
        return messages

    async def chat(self, actor_id: int, message: str) -> ChatReply:
        """
        Run one chat turn.

        Raises:
            NotFoundError: If the actor has no family
            LLMError: If the LLM fails after retrying
            PersistenceError: If the turn cannot be stored
        """
        family = await self._resolve_family(actor_id)
        messages = await self.build_messages(family, message)

        try:
            response = await call_with_retry(lambda: self.llm.complete(messages), self.policy)
        except Exception as e:
            logger.exception("LLM call failed for family %s", family.id)
            raise LLMError("The assistant is unavailable right now") from e

        reply = response.first_text(FALLBACK_REPLY)

        await self.store.add_chat_message(
            ChatMessage(
                family_id=family.id,
                user_id=actor_id,
                role=ChatRole.USER,
                content=message,
                created_at=self._clock(),
            )
        )
        await self.store.add_chat_message(
            ChatMessage(
                family_id=family.id,
                user_id=actor_id,
                role=ChatRole.ASSISTANT,
                content=reply,
                created_at=self._clock(),
            )
        )

        logger.info("Chat turn stored for family %s (%d tokens)", family.id, response.tokens_used)
        return ChatReply(message=reply, timestamp=self._clock())

    async def history(self, actor_id: int, limit: int = 50) -> list[ChatMessage]:
        """Most recent ``limit`` messages for the actor's family, oldest first."""
        family = await self._resolve_family(actor_id)
        recent = await self.store.get_chat_history(family.id, limit)
        return list(reversed(recent))
