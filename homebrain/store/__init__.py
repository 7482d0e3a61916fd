"""
Family data store interface and implementations.
"""

from homebrain.store.base import DataStore
from homebrain.store.memory import MemoryDataStore
from homebrain.store.models import (
    CalendarEvent,
    ChatMessage,
    ChatRole,
    Family,
    FamilyMember,
    ListItem,
    ListType,
    MealPlan,
    MealType,
    MemberRole,
    Notification,
    NotificationType,
    Task,
    TaskList,
    TaskPriority,
    TaskStatus,
)

__all__ = [
    "DataStore",
    "MemoryDataStore",
    "CalendarEvent",
    "ChatMessage",
    "ChatRole",
    "Family",
    "FamilyMember",
    "ListItem",
    "ListType",
    "MealPlan",
    "MealType",
    "MemberRole",
    "Notification",
    "NotificationType",
    "Task",
    "TaskList",
    "TaskPriority",
    "TaskStatus",
]
