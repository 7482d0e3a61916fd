"""
Daily briefs, weekly recaps and mood suggestions for a family.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, time, timedelta
from enum import Enum
from typing import Callable

from homebrain.errors import LLMError, NotFoundError
from homebrain.llm.base import LLMBackend
from homebrain.resilience import RetryPolicy, call_with_retry
from homebrain.store.base import DataStore
from homebrain.store.models import Family, TaskStatus

logger = logging.getLogger(__name__)


class Mood(str, Enum):
    CALM = "calm"
    BUSY = "busy"
    EXCITING = "exciting"
    RELAXED = "relaxed"


MOOD_SUGGESTIONS = {
    Mood.CALM: (
        "Calm Mode: Try soft background music, take deep breaths, and focus on one task at a time. "
        "Consider a relaxing activity like reading or gentle stretching."
    ),
    Mood.BUSY: (
        "Busy Mode: You've got a lot going on! Break tasks into smaller chunks, take short breaks, "
        "and don't forget to hydrate. You're doing great!"
    ),
    Mood.EXCITING: (
        "Exciting Mode: Channel that energy! This is a great time to tackle challenging tasks "
        "or plan something fun for the family."
    ),
    Mood.RELAXED: (
        "Relaxed Mode: Perfect time for planning, creative thinking, or quality family time. "
        "Enjoy the moment!"
    ),
}

RECOMMENDATIONS = [
    "Take a 5-minute break",
    "Drink some water",
    "Step outside for fresh air",
    "Connect with a family member",
]


@dataclass
class DailyBrief:
    date: datetime
    summary: str
    event_count: int
    task_count: int
    meal_count: int
    type: str = "daily"


@dataclass
class WeeklyRecap:
    week_start: datetime
    week_end: datetime
    summary: str
    event_count: int
    tasks_completed: int
    type: str = "weekly"


@dataclass
class MoodSuggestion:
    mood: Mood
    suggestion: str
    recommendations: list[str] = field(default_factory=lambda: list(RECOMMENDATIONS))


def _format_time(moment: datetime) -> str:
    return moment.strftime("%I:%M %p").lstrip("0")


def week_bounds(day: datetime) -> tuple[datetime, datetime]:
    """Sunday 00:00 through Saturday 23:59:59 of the week containing ``day``."""
    start = datetime.combine(day.date(), time.min) - timedelta(days=(day.weekday() + 1) % 7)
    end = datetime.combine((start + timedelta(days=6)).date(), time.max)
    return start, end


def mood_suggestions(mood: Mood | str) -> MoodSuggestion:
    """Static suggestions for a family mood. Raises ValueError for unknown moods."""
    mood = Mood(mood)
    return MoodSuggestion(mood=mood, suggestion=MOOD_SUGGESTIONS[mood])


class SummaryService:
    """LLM-written summaries of a family's calendar, tasks and meals."""

    def __init__(
        self,
        store: DataStore,
        llm: LLMBackend,
        policy: RetryPolicy | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.store = store
        self.llm = llm
        self.policy = policy or RetryPolicy()
        self._clock = clock

    async def _resolve_family(self, actor_id: int) -> Family:
        family = await self.store.get_family_for_actor(actor_id)
        if family is None:
            raise NotFoundError("Family not found")
        return family

    async def _generate(self, system: str, prompt: str, fallback: str) -> str:
        messages = [
            {"role": "system", "content": system},
            {"role": "user", "content": prompt},
        ]
        try:
            response = await call_with_retry(lambda: self.llm.complete(messages), self.policy)
        except Exception as e:
            logger.exception("Summary generation failed")
            raise LLMError("Unable to generate summary") from e
        return response.first_text(fallback)

    async def daily_brief(self, actor_id: int) -> DailyBrief:
        """Summarize today's events, pending tasks and meals."""
        family = await self._resolve_family(actor_id)
        today = self._clock()
        start = datetime.combine(today.date(), time.min)
        end = datetime.combine(today.date(), time.max)

        events = await self.store.get_events(family.id, start, end)
        tasks = await self.store.get_tasks(family.id)
        meals = await self.store.get_meal_plans(family.id, today)

        pending = [t for t in tasks if t.status == TaskStatus.PENDING]
        completed = sum(1 for t in tasks if t.status == TaskStatus.COMPLETED)

        event_lines = "\n".join(f"- {e.title} at {_format_time(e.start_time)}" for e in events) or "None"
        task_lines = "\n".join(f"- {t.title} ({t.priority.value} priority)" for t in pending) or "All caught up!"
        meal_lines = "\n".join(f"- {m.meal_type.value}: {m.meal}" for m in meals) or "No meals planned"

        prompt = f"""Generate a friendly, concise daily brief for the {family.name} family.

Today: {today:%A, %B} {today.day}, {today.year}

Events ({len(events)}):
{event_lines}

Pending Tasks ({len(pending)}):
{task_lines}

Meals Planned ({len(meals)}):
{meal_lines}

Tasks Completed Today: {completed}

Create a warm, encouraging summary that:
1. Greets the family
2. Highlights key events
3. Reminds about pending tasks
4. Mentions meals
5. Ends with an encouraging note

Keep it under 100 words."""

        summary = await self._generate(
            "You are a friendly family assistant creating daily briefings.",
            prompt,
            "Unable to generate summary",
        )

        return DailyBrief(
            date=today,
            summary=summary,
            event_count=len(events),
            task_count=len(pending),
            meal_count=len(meals),
        )

    async def weekly_recap(self, actor_id: int) -> WeeklyRecap:
        """Summarize this week's events and completed tasks."""
        family = await self._resolve_family(actor_id)
        week_start, week_end = week_bounds(self._clock())

        events = await self.store.get_events(family.id, week_start, week_end)
        tasks = await self.store.get_tasks(family.id, TaskStatus.COMPLETED)
        completed = sum(
            1 for t in tasks if t.completed_at is not None and t.completed_at >= week_start
        )

        key_events = "\n".join(f"- {e.title} on {e.start_time:%A}" for e in events[:5])

        prompt = f"""Generate an engaging weekly recap for the {family.name} family.

Week of: {week_start:%b} {week_start.day} - {week_end:%b} {week_end.day}, {week_end.year}

Total Events: {len(events)}
Tasks Completed: {completed}

Key Events:
{key_events}

Create a warm, celebratory weekly recap that:
1. Celebrates accomplishments
2. Highlights key events
3. Acknowledges completed tasks
4. Suggests planning for next week
5. Ends with encouragement

Keep it under 150 words."""

        summary = await self._generate(
            "You are a warm, encouraging family assistant creating weekly recaps.",
            prompt,
            "Unable to generate recap",
        )

        return WeeklyRecap(
            week_start=week_start,
            week_end=week_end,
            summary=summary,
            event_count=len(events),
            tasks_completed=completed,
        )
