"""
Abstract base class for family data stores.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Optional

from homebrain.store.models import (
    CalendarEvent,
    ChatMessage,
    Family,
    FamilyMember,
    ListItem,
    MealPlan,
    Notification,
    Task,
    TaskList,
    TaskStatus,
)


class DataStore(ABC):
    """
    Data-access collaborator for the command pipeline.

    Reads return empty results when the backing store is unavailable.
    Writes raise ``StoreUnavailableError`` instead of degrading silently.
    """

    @property
    @abstractmethod
    def available(self) -> bool:
        """Whether the backing store can currently be reached."""

    # Family

    @abstractmethod
    async def get_family_for_actor(self, actor_id: int) -> Optional[Family]:
        """Return the single family the actor belongs to, if any."""

    @abstractmethod
    async def get_family_members(self, family_id: int) -> list[FamilyMember]:
        pass

    # Calendar

    @abstractmethod
    async def get_events(
        self, family_id: int, start: datetime, end: datetime
    ) -> list[CalendarEvent]:
        """Events whose start time falls within [start, end]."""

    @abstractmethod
    async def create_event(self, event: CalendarEvent) -> CalendarEvent:
        pass

    # Tasks

    @abstractmethod
    async def get_tasks(
        self, family_id: int, status: Optional[TaskStatus] = None
    ) -> list[Task]:
        pass

    @abstractmethod
    async def create_task(self, task: Task) -> Task:
        pass

    @abstractmethod
    async def update_task(self, task_id: int, **updates: Any) -> Task:
        pass

    # Lists

    @abstractmethod
    async def get_lists(self, family_id: int) -> list[TaskList]:
        pass

    @abstractmethod
    async def get_list_items(self, list_id: int) -> list[ListItem]:
        pass

    @abstractmethod
    async def add_list_item(self, item: ListItem) -> ListItem:
        pass

    # Meals

    @abstractmethod
    async def get_meal_plans(self, family_id: int, day: datetime) -> list[MealPlan]:
        """Meal plans on the calendar day containing ``day``."""

    # Chat

    @abstractmethod
    async def get_chat_history(self, family_id: int, limit: int = 50) -> list[ChatMessage]:
        """Most recent ``limit`` messages, newest first."""

    @abstractmethod
    async def add_chat_message(self, message: ChatMessage) -> ChatMessage:
        pass

    # Notifications

    @abstractmethod
    async def create_notification(self, notification: Notification) -> Notification:
        pass

    @abstractmethod
    async def get_notifications(
        self, user_id: int, unread_only: bool = False
    ) -> list[Notification]:
        pass
