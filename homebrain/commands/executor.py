"""
Command executor - turns a classified intent into a store mutation or query.

Each call issues at most one write against the data store.
"""

import difflib
import logging
import re
from dataclasses import dataclass
from datetime import datetime, time, timedelta
from typing import Any, Callable, Optional

from homebrain.commands.intent import Intent, IntentKind, classify
from homebrain.commands.responses import ActionTag, respond
from homebrain.errors import NotFoundError, PersistenceError
from homebrain.store.base import DataStore
from homebrain.store.models import (
    CalendarEvent,
    ListItem,
    ListType,
    Task,
    TaskList,
    TaskPriority,
    TaskStatus,
)

logger = logging.getLogger(__name__)

EVENT_DURATION = timedelta(hours=1)
UPCOMING_WINDOW = timedelta(days=7)
TASK_MATCH_CUTOFF = 0.6
MIN_PARTIAL_MATCH = 3  # Shorter names only match exactly or fuzzily


@dataclass
class CommandResult:
    """Outcome of one processed command."""

    success: bool
    action: ActionTag
    response: str
    data: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary (without ``data``)."""
        return {
            "success": self.success,
            "action": self.action.value,
            "response": self.response,
        }


def _format_time(moment: datetime) -> str:
    return moment.strftime("%I:%M %p").lstrip("0")


def _words(text: str) -> set[str]:
    return set(re.findall(r"\w+", text.lower()))


class CommandExecutor:
    """
    Execute intents against a family's records.

    Args:
        store: Data-access collaborator
        clock: Returns "now"; injectable for tests
    """

    def __init__(self, store: DataStore, clock: Callable[[], datetime] = datetime.now):
        self.store = store
        self._clock = clock

    async def process(self, text: str, actor_id: int) -> CommandResult:
        """
        Resolve the actor's family, classify ``text`` and execute it.

        Raises:
            NotFoundError: If the actor has no family
        """
        family = await self.store.get_family_for_actor(actor_id)
        if family is None:
            raise NotFoundError("Family not found")

        intent = classify(text)
        logger.info("Command for family %s classified as %s", family.id, intent.kind.value)
        return await self.execute(intent, family.id, actor_id)

    async def execute(self, intent: Intent, family_id: int, actor_id: int) -> CommandResult:
        """Execute a classified intent for a family."""
        try:
            match intent.kind:
                case IntentKind.CREATE_EVENT:
                    return await self._create_event(intent, family_id, actor_id)
                case IntentKind.CREATE_TASK:
                    return await self._create_task(intent, family_id, actor_id)
                case IntentKind.COMPLETE_TASK:
                    return await self._complete_task(intent, family_id)
                case IntentKind.ADD_LIST_ITEM:
                    return await self._add_list_item(intent, family_id, actor_id)
                case IntentKind.QUERY_EVENTS:
                    return await self._query_events(family_id)
                case IntentKind.QUERY_TASKS:
                    return await self._query_tasks(family_id)
                case IntentKind.QUERY_MEALS:
                    return await self._query_meals(family_id)
                case _:
                    return CommandResult(
                        success=True,
                        action=ActionTag.GENERAL_QUERY,
                        response=f'I heard: "{intent.text}". How can I help?',
                    )
        except PersistenceError:
            logger.exception("Command processing error (intent=%s)", intent.kind.value)
            return CommandResult(
                success=False,
                action=ActionTag.ERROR,
                response=respond(ActionTag.ERROR, "process that command"),
            )

    # Mutations

    async def _create_event(self, intent: Intent, family_id: int, actor_id: int) -> CommandResult:
        # TODO: extract the date and time from the phrase instead of starting now
        start = self._clock()
        event = await self.store.create_event(
            CalendarEvent(
                family_id=family_id,
                created_by=actor_id,
                title=intent.text,
                description=f"Created via voice: {intent.text}",
                start_time=start,
                end_time=start + EVENT_DURATION,
            )
        )
        return CommandResult(
            success=True,
            action=ActionTag.EVENT_CREATED,
            response=respond(ActionTag.EVENT_CREATED, "your appointment"),
            data=event,
        )

    async def _create_task(self, intent: Intent, family_id: int, actor_id: int) -> CommandResult:
        task = await self.store.create_task(
            Task(
                family_id=family_id,
                created_by=actor_id,
                title=intent.text,
                description=f"Created via voice: {intent.text}",
                priority=TaskPriority.MEDIUM,
                status=TaskStatus.PENDING,
            )
        )
        return CommandResult(
            success=True,
            action=ActionTag.TASK_CREATED,
            response=respond(ActionTag.TASK_CREATED, "new task"),
            data=task,
        )

    async def _complete_task(self, intent: Intent, family_id: int) -> CommandResult:
        name = intent.params.get("task_name") or intent.text
        tasks = await self.store.get_tasks(family_id)
        open_tasks = [t for t in tasks if t.status != TaskStatus.COMPLETED]

        task = self._match_task(name, open_tasks)
        if task is None:
            logger.info("No open task matches %r", name)
            return CommandResult(
                success=False,
                action=ActionTag.ERROR,
                response=respond(ActionTag.ERROR, f'find an open task called "{name}"'),
            )

        updated = await self.store.update_task(
            task.id, status=TaskStatus.COMPLETED, completed_at=self._clock()
        )
        return CommandResult(
            success=True,
            action=ActionTag.TASK_COMPLETED,
            response=respond(ActionTag.TASK_COMPLETED, updated.title),
            data=updated,
        )

    @staticmethod
    def _match_task(name: str, tasks: list[Task]) -> Optional[Task]:
        """Exact title, then whole-word containment, then closest fuzzy match."""
        wanted = name.lower().strip()
        if not wanted or not tasks:
            return None

        for task in tasks:
            if task.title.lower() == wanted:
                return task

        if len(wanted) >= MIN_PARTIAL_MATCH:
            wanted_words = _words(wanted)
            for task in tasks:
                title_words = _words(task.title)
                if wanted_words and title_words and (
                    wanted_words <= title_words or title_words <= wanted_words
                ):
                    return task

        titles = [t.title.lower() for t in tasks]
        close = difflib.get_close_matches(wanted, titles, n=1, cutoff=TASK_MATCH_CUTOFF)
        if close:
            return tasks[titles.index(close[0])]
        return None

    async def _add_list_item(self, intent: Intent, family_id: int, actor_id: int) -> CommandResult:
        lists = await self.store.get_lists(family_id)
        target = self._choose_list(lists, intent.params.get("list"))
        if target is None:
            return CommandResult(
                success=False,
                action=ActionTag.ERROR,
                response=respond(ActionTag.ERROR, "find a list to add that to"),
            )

        text = intent.params.get("item") or intent.text
        item = await self.store.add_list_item(
            ListItem(list_id=target.id, created_by=actor_id, text=text)
        )
        return CommandResult(
            success=True,
            action=ActionTag.LIST_ITEM_ADDED,
            response=respond(ActionTag.LIST_ITEM_ADDED, text),
            data=item,
        )

    @staticmethod
    def _choose_list(lists: list[TaskList], hint: Optional[str]) -> Optional[TaskList]:
        """Named list first, then the first grocery list, then any list."""
        if not lists:
            return None

        if hint:
            for task_list in lists:
                if hint in task_list.name.lower() or hint == task_list.type.value:
                    return task_list

        for task_list in lists:
            if task_list.type == ListType.GROCERY:
                return task_list

        return lists[0]

    # Queries

    async def _query_events(self, family_id: int) -> CommandResult:
        now = self._clock()
        start = datetime.combine(now.date(), time.min)
        events = await self.store.get_events(family_id, start, now + UPCOMING_WINDOW)

        if events:
            detail = ", ".join(
                f"{e.title} on {e.start_time:%A} at {_format_time(e.start_time)}" for e in events
            )
        else:
            detail = "nothing scheduled"

        return CommandResult(
            success=True,
            action=ActionTag.EVENT_RETRIEVED,
            response=respond(ActionTag.EVENT_RETRIEVED, detail),
            data=events,
        )

    async def _query_tasks(self, family_id: int) -> CommandResult:
        tasks = await self.store.get_tasks(family_id, TaskStatus.PENDING)
        detail = ", ".join(t.title for t in tasks) if tasks else "none, you're all caught up"

        return CommandResult(
            success=True,
            action=ActionTag.TASK_RETRIEVED,
            response=respond(ActionTag.TASK_RETRIEVED, detail),
            data=tasks,
        )

    async def _query_meals(self, family_id: int) -> CommandResult:
        meals = await self.store.get_meal_plans(family_id, self._clock())
        if meals:
            detail = ", ".join(f"{m.meal_type.value}: {m.meal}" for m in meals)
        else:
            detail = "nothing planned for today"

        return CommandResult(
            success=True,
            action=ActionTag.MEAL_RETRIEVED,
            response=respond(ActionTag.MEAL_RETRIEVED, detail),
            data=meals,
        )
