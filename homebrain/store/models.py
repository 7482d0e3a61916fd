"""
Family records the command pipeline reads and writes.

The persistence schema belongs to the data layer; these dataclasses only
describe the shapes exchanged with it.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional


class MemberRole(str, Enum):
    PARENT = "parent"
    CHILD = "child"
    CAREGIVER = "caregiver"


class TaskPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TaskStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class ListType(str, Enum):
    GROCERY = "grocery"
    TODO = "todo"
    SHOPPING = "shopping"
    CUSTOM = "custom"


class MealType(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class ChatRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class NotificationType(str, Enum):
    EVENT = "event"
    TASK = "task"
    REMINDER = "reminder"
    SUMMARY = "summary"
    SUGGESTION = "suggestion"


@dataclass
class Family:
    id: int
    name: str
    owner_id: int
    description: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.now)


@dataclass
class FamilyMember:
    id: int
    family_id: int
    user_id: int
    role: MemberRole = MemberRole.CHILD
    created_at: datetime = field(default_factory=datetime.now)


@dataclass
class CalendarEvent:
    family_id: int
    created_by: int
    title: str
    start_time: datetime
    end_time: datetime
    description: Optional[str] = None
    location: Optional[str] = None
    attendees: list[int] = field(default_factory=list)
    id: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.now)


@dataclass
class Task:
    family_id: int
    created_by: int
    title: str
    description: Optional[str] = None
    assigned_to: Optional[int] = None
    due_date: Optional[datetime] = None
    priority: TaskPriority = TaskPriority.MEDIUM
    status: TaskStatus = TaskStatus.PENDING
    points: int = 10
    completed_at: Optional[datetime] = None
    id: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)


@dataclass
class TaskList:
    family_id: int
    created_by: int
    name: str
    type: ListType = ListType.CUSTOM
    description: Optional[str] = None
    id: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.now)


@dataclass
class ListItem:
    list_id: int
    created_by: int
    text: str
    quantity: Optional[str] = None
    completed: bool = False
    id: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.now)


@dataclass
class MealPlan:
    family_id: int
    created_by: int
    date: datetime
    meal_type: MealType
    meal: str
    recipe: Optional[str] = None
    ingredients: list[str] = field(default_factory=list)
    servings: int = 4
    id: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.now)


@dataclass
class ChatMessage:
    family_id: int
    user_id: int
    role: ChatRole
    content: str
    metadata: dict[str, Any] = field(default_factory=dict)
    id: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.now)

    def to_llm_message(self) -> dict[str, str]:
        """Convert to the ``{role, content}`` shape LLMs accept."""
        return {"role": self.role.value, "content": self.content}


@dataclass
class Notification:
    family_id: int
    user_id: int
    type: NotificationType
    title: str
    content: Optional[str] = None
    related_id: Optional[int] = None
    read: bool = False
    id: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.now)
