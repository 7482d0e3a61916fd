"""
In-process data store.

Keeps every record in plain lists. Useful for tests, demos and the CLI;
a production deployment injects a database-backed ``DataStore`` instead.
"""

import itertools
import logging
from dataclasses import replace
from datetime import datetime, time
from typing import Any, Optional

from homebrain.errors import PersistenceError, StoreUnavailableError
from homebrain.store.base import DataStore
from homebrain.store.models import (
    CalendarEvent,
    ChatMessage,
    Family,
    FamilyMember,
    ListItem,
    ListType,
    MealPlan,
    MealType,
    MemberRole,
    Notification,
    Task,
    TaskList,
    TaskStatus,
)

logger = logging.getLogger(__name__)


class MemoryDataStore(DataStore):
    """Data store held entirely in memory."""

    def __init__(self, available: bool = True):
        self._available = available
        self._ids = itertools.count(1)

        self.families: list[Family] = []
        self.members: list[FamilyMember] = []
        self.events: list[CalendarEvent] = []
        self.tasks: list[Task] = []
        self.lists: list[TaskList] = []
        self.list_items: list[ListItem] = []
        self.meal_plans: list[MealPlan] = []
        self.chat_messages: list[ChatMessage] = []
        self.notifications: list[Notification] = []

    @property
    def available(self) -> bool:
        return self._available

    def set_available(self, available: bool) -> None:
        """Simulate the backing store going away or coming back."""
        self._available = available

    def _check_writable(self, what: str) -> None:
        if not self._available:
            logger.warning("Cannot %s: data store not available", what)
            raise StoreUnavailableError(f"Cannot {what}: data store not available")

    def _next_id(self) -> int:
        return next(self._ids)

    # Seeding helpers (the CRUD surface lives outside this package)

    def create_family(self, name: str, owner_id: int, role: MemberRole = MemberRole.PARENT) -> Family:
        self._check_writable("create family")
        family = Family(id=self._next_id(), name=name, owner_id=owner_id)
        self.families.append(family)
        self.add_family_member(family.id, owner_id, role)
        return family

    def add_family_member(
        self, family_id: int, user_id: int, role: MemberRole = MemberRole.CHILD
    ) -> FamilyMember:
        self._check_writable("add family member")
        member = FamilyMember(id=self._next_id(), family_id=family_id, user_id=user_id, role=role)
        self.members.append(member)
        return member

    def create_list(
        self, family_id: int, created_by: int, name: str, type: ListType = ListType.CUSTOM
    ) -> TaskList:
        self._check_writable("create list")
        task_list = TaskList(
            id=self._next_id(), family_id=family_id, created_by=created_by, name=name, type=type
        )
        self.lists.append(task_list)
        return task_list

    def create_meal_plan(
        self,
        family_id: int,
        created_by: int,
        day: datetime,
        meal_type: MealType,
        meal: str,
    ) -> MealPlan:
        self._check_writable("create meal plan")
        plan = MealPlan(
            id=self._next_id(),
            family_id=family_id,
            created_by=created_by,
            date=day,
            meal_type=meal_type,
            meal=meal,
        )
        self.meal_plans.append(plan)
        return plan

    # Family

    async def get_family_for_actor(self, actor_id: int) -> Optional[Family]:
        if not self._available:
            return None
        for member in self.members:
            if member.user_id == actor_id:
                for family in self.families:
                    if family.id == member.family_id:
                        return family
        return None

    async def get_family_members(self, family_id: int) -> list[FamilyMember]:
        if not self._available:
            return []
        return [m for m in self.members if m.family_id == family_id]

    # Calendar

    async def get_events(
        self, family_id: int, start: datetime, end: datetime
    ) -> list[CalendarEvent]:
        if not self._available:
            return []
        events = [
            e for e in self.events
            if e.family_id == family_id and start <= e.start_time <= end
        ]
        return sorted(events, key=lambda e: e.start_time)

    async def create_event(self, event: CalendarEvent) -> CalendarEvent:
        self._check_writable("create event")
        stored = replace(event, id=self._next_id())
        self.events.append(stored)
        return stored

    # Tasks

    async def get_tasks(
        self, family_id: int, status: Optional[TaskStatus] = None
    ) -> list[Task]:
        if not self._available:
            return []
        return [
            t for t in self.tasks
            if t.family_id == family_id and (status is None or t.status == status)
        ]

    async def create_task(self, task: Task) -> Task:
        self._check_writable("create task")
        stored = replace(task, id=self._next_id())
        self.tasks.append(stored)
        return stored

    async def update_task(self, task_id: int, **updates: Any) -> Task:
        self._check_writable("update task")
        updates.setdefault("updated_at", datetime.now())
        for index, task in enumerate(self.tasks):
            if task.id == task_id:
                updated = replace(task, **updates)
                self.tasks[index] = updated
                return updated
        raise PersistenceError(f"Task {task_id} does not exist")

    # Lists

    async def get_lists(self, family_id: int) -> list[TaskList]:
        if not self._available:
            return []
        return [lst for lst in self.lists if lst.family_id == family_id]

    async def get_list_items(self, list_id: int) -> list[ListItem]:
        if not self._available:
            return []
        return [item for item in self.list_items if item.list_id == list_id]

    async def add_list_item(self, item: ListItem) -> ListItem:
        self._check_writable("add list item")
        stored = replace(item, id=self._next_id())
        self.list_items.append(stored)
        return stored

    # Meals

    async def get_meal_plans(self, family_id: int, day: datetime) -> list[MealPlan]:
        if not self._available:
            return []
        start = datetime.combine(day.date(), time.min)
        end = datetime.combine(day.date(), time.max)
        return [
            p for p in self.meal_plans
            if p.family_id == family_id and start <= p.date <= end
        ]

    # Chat

    async def get_chat_history(self, family_id: int, limit: int = 50) -> list[ChatMessage]:
        if not self._available:
            return []
        messages = [m for m in self.chat_messages if m.family_id == family_id]
        messages.sort(key=lambda m: (m.created_at, m.id or 0), reverse=True)
        return messages[:limit]

    async def add_chat_message(self, message: ChatMessage) -> ChatMessage:
        self._check_writable("add chat message")
        stored = replace(message, id=self._next_id())
        self.chat_messages.append(stored)
        return stored

    # Notifications

    async def create_notification(self, notification: Notification) -> Notification:
        self._check_writable("create notification")
        stored = replace(notification, id=self._next_id())
        self.notifications.append(stored)
        return stored

    async def get_notifications(
        self, user_id: int, unread_only: bool = False
    ) -> list[Notification]:
        if not self._available:
            return []
        found = [
            n for n in self.notifications
            if n.user_id == user_id and (not unread_only or not n.read)
        ]
        return sorted(found, key=lambda n: (n.created_at, n.id or 0), reverse=True)
