"""
Tests for the command executor.
"""

import asyncio
from datetime import datetime, timedelta

import pytest

from conftest import CHILD_ID, NOW, OUTSIDER_ID, PARENT_ID
from homebrain.commands.executor import CommandExecutor, CommandResult
from homebrain.commands.intent import Intent, IntentKind, classify
from homebrain.commands.responses import ActionTag
from homebrain.errors import NotFoundError
from homebrain.store.models import CalendarEvent, MealType, Task, TaskStatus


@pytest.fixture
def executor(store):
    return CommandExecutor(store, clock=lambda: NOW)


def run(coro):
    return asyncio.run(coro)


class TestProcess:
    """End-to-end: text in, result out."""

    def test_dentist_appointment_creates_one_event(self, executor, store):
        """An appointment command creates exactly one event."""
        result = run(executor.process("Add dentist appointment Thursday 3 PM", PARENT_ID))

        assert result.success
        assert result.action == ActionTag.EVENT_CREATED
        assert "added" in result.response
        assert "calendar" in result.response
        assert len(store.events) == 1

    def test_unknown_actor_raises_not_found(self, executor, store):
        """An actor without a family gets NotFoundError and nothing is written."""
        with pytest.raises(NotFoundError):
            run(executor.process("Add dentist appointment", OUTSIDER_ID))
        assert store.events == []

    def test_child_member_uses_family(self, executor, store, family):
        """Any family member acts on the shared family."""
        result = run(executor.process("Add a task to feed the cat", CHILD_ID))
        assert result.success
        assert store.tasks[0].family_id == family.id
        assert store.tasks[0].created_by == CHILD_ID

    def test_to_dict(self, executor):
        """to_dict exposes success, action and response."""
        result = run(executor.process("xyzzy plugh", PARENT_ID))
        assert result.to_dict() == {
            "success": True,
            "action": "general_query",
            "response": 'I heard: "xyzzy plugh". How can I help?',
        }


class TestCreate:
    def test_event_fields(self, executor, store, family):
        """Events use the raw text, start now and last an hour."""
        text = "Add dentist appointment Thursday 3 PM"
        result = run(executor.execute(classify(text), family.id, PARENT_ID))

        event = store.events[0]
        assert event.title == text
        assert event.description == f"Created via voice: {text}"
        assert event.start_time == NOW
        assert event.end_time == NOW + timedelta(hours=1)
        assert event.created_by == PARENT_ID
        assert result.data == event
        assert result.response == "I've added your appointment to your calendar."

    def test_task_fields(self, executor, store, family):
        """Tasks are created pending with medium priority."""
        text = "Add a task to clean the garage"
        result = run(executor.execute(classify(text), family.id, PARENT_ID))

        task = store.tasks[0]
        assert task.title == text
        assert task.description == f"Created via voice: {text}"
        assert task.status == TaskStatus.PENDING
        assert task.priority.value == "medium"
        assert result.action == ActionTag.TASK_CREATED
        assert result.response == "I've created a task: new task."

    def test_write_failure_is_reported(self, executor, store, family):
        """A failed write becomes an error result."""
        store.set_available(False)
        result = run(executor.execute(classify("Add soccer event"), family.id, PARENT_ID))

        assert not result.success
        assert result.action == ActionTag.ERROR
        assert result.response == "Sorry, I couldn't process that command. Please try again."
        assert store.events == []


class TestCompleteTask:
    def _seed(self, store, family, *titles, status=TaskStatus.PENDING):
        for title in titles:
            run(store.create_task(Task(family_id=family.id, created_by=PARENT_ID, title=title, status=status)))

    def test_marks_matching_task(self, executor, store, family):
        """The named task is completed and no other."""
        self._seed(store, family, "Homework", "Dishes")
        result = run(executor.execute(classify("Mark homework as done"), family.id, CHILD_ID))

        assert result.success
        assert result.action == ActionTag.TASK_COMPLETED
        assert result.response == "Great! I've marked Homework as done."
        homework = next(t for t in store.tasks if t.title == "Homework")
        dishes = next(t for t in store.tasks if t.title == "Dishes")
        assert homework.status == TaskStatus.COMPLETED
        assert homework.completed_at == NOW
        assert dishes.status == TaskStatus.PENDING

    def test_substring_match(self, executor, store, family):
        """A name contained in the title matches."""
        self._seed(store, family, "Finish science homework")
        result = run(executor.execute(classify("Mark homework as done"), family.id, PARENT_ID))
        assert result.success
        assert store.tasks[0].status == TaskStatus.COMPLETED

    def test_fuzzy_match(self, executor, store, family):
        """A misspelled name still matches."""
        self._seed(store, family, "laundry")
        result = run(executor.execute(classify("mark laundy as finished"), family.id, PARENT_ID))
        assert result.success
        assert store.tasks[0].status == TaskStatus.COMPLETED

    def test_no_match_changes_nothing(self, executor, store, family):
        """An unknown task name is an error without writes."""
        self._seed(store, family, "Dishes")
        result = run(executor.execute(classify("Mark homework as done"), family.id, PARENT_ID))

        assert not result.success
        assert result.action == ActionTag.ERROR
        assert "homework" in result.response
        assert store.tasks[0].status == TaskStatus.PENDING

    def test_short_name_matches_no_task(self, executor, store, family):
        """A two-letter name must not complete a task that merely contains those letters."""
        self._seed(store, family, "Fix the kitchen sink", "Walk the dog")
        result = run(executor.process("Mark it as done", PARENT_ID))

        assert not result.success
        assert result.action == ActionTag.ERROR
        assert [t.status for t in store.tasks] == [TaskStatus.PENDING, TaskStatus.PENDING]

    def test_word_fragment_matches_no_task(self, executor, store, family):
        """Partial matches compare whole words, not letters inside a word."""
        self._seed(store, family, "Fix the kitchen sink")
        result = run(executor.process("Mark kit as done", PARENT_ID))

        assert not result.success
        assert store.tasks[0].status == TaskStatus.PENDING

    def test_whole_word_match(self, executor, store, family):
        """A whole word from the title is enough to find the task."""
        self._seed(store, family, "Fix the kitchen sink", "Walk the dog")
        result = run(executor.process("Mark the sink as done", PARENT_ID))

        assert result.response == "Great! I've marked Fix the kitchen sink as done."
        assert [t.status for t in store.tasks] == [TaskStatus.COMPLETED, TaskStatus.PENDING]

    def test_completed_tasks_are_not_matched(self, executor, store, family):
        """Finished tasks are not matched again."""
        self._seed(store, family, "Homework", status=TaskStatus.COMPLETED)
        result = run(executor.execute(classify("Mark homework as done"), family.id, PARENT_ID))
        assert not result.success


class TestAddListItem:
    def test_named_list(self, executor, store, family):
        """The list named in the command is used."""
        result = run(executor.execute(classify("Add rake leaves to the weekend chores list"), family.id, PARENT_ID))

        assert result.success
        assert result.action == ActionTag.LIST_ITEM_ADDED
        item = store.list_items[0]
        assert item.text == "rake leaves"
        assert item.list_id == store.lists[0].id

    def test_defaults_to_grocery_list(self, executor, store, family):
        """Without a list name the grocery list is used."""
        result = run(executor.execute(classify("Add milk to the list"), family.id, PARENT_ID))

        assert result.response == "I've added milk to your list."
        groceries = next(lst for lst in store.lists if lst.name == "Groceries")
        assert store.list_items[0].list_id == groceries.id

    def test_list_type_hint(self, executor, store, family):
        """A list type works as a list name."""
        run(executor.execute(classify("Add milk to grocery list"), family.id, PARENT_ID))
        groceries = next(lst for lst in store.lists if lst.name == "Groceries")
        assert store.list_items[0].list_id == groceries.id

    def test_grocery_without_list_word(self, executor, store, family):
        """Only the item text is stored when the command ends in "grocery"."""
        result = run(executor.execute(classify("Add milk to grocery"), family.id, PARENT_ID))

        assert result.response == "I've added milk to your list."
        groceries = next(lst for lst in store.lists if lst.name == "Groceries")
        assert [(i.list_id, i.text) for i in store.list_items] == [(groceries.id, "milk")]

    def test_no_lists(self, store):
        """A family without lists gets an error."""
        family = store.create_family("Empty", owner_id=50)
        executor = CommandExecutor(store, clock=lambda: NOW)
        result = run(executor.execute(classify("Add milk to grocery list"), family.id, 50))

        assert not result.success
        assert result.action == ActionTag.ERROR
        assert store.list_items == []


class TestQueries:
    def test_events(self, executor, store, family):
        """Upcoming events are listed with day and time."""
        run(store.create_event(CalendarEvent(
            family_id=family.id,
            created_by=PARENT_ID,
            title="Dentist",
            start_time=datetime(2026, 10, 16, 15, 0),
            end_time=datetime(2026, 10, 16, 16, 0),
        )))
        result = run(executor.execute(classify("What's on the schedule?"), family.id, PARENT_ID))

        assert result.action == ActionTag.EVENT_RETRIEVED
        assert result.response == "Here are your upcoming events: Dentist on Friday at 3:00 PM."
        assert len(result.data) == 1

    def test_no_events(self, executor, family):
        """An empty calendar says nothing is scheduled."""
        result = run(executor.execute(classify("show my events"), family.id, PARENT_ID))
        assert result.success
        assert result.response == "Here are your upcoming events: nothing scheduled."

    def test_tasks(self, executor, store, family):
        """Only pending tasks are listed."""
        run(store.create_task(Task(family_id=family.id, created_by=PARENT_ID, title="Dishes")))
        run(store.create_task(Task(family_id=family.id, created_by=PARENT_ID, title="Old", status=TaskStatus.COMPLETED)))
        result = run(executor.execute(classify("What tasks are left?"), family.id, PARENT_ID))

        assert result.action == ActionTag.TASK_RETRIEVED
        assert result.response == "You have these pending tasks: Dishes."

    def test_meals(self, executor, store, family):
        """Only today's meals are listed."""
        store.create_meal_plan(family.id, PARENT_ID, NOW.replace(hour=18), MealType.DINNER, "Tacos")
        store.create_meal_plan(family.id, PARENT_ID, NOW + timedelta(days=1), MealType.LUNCH, "Soup")
        result = run(executor.execute(classify("What's our meal plan for today?"), family.id, PARENT_ID))

        assert result.action == ActionTag.MEAL_RETRIEVED
        assert result.response == "Your meal plan includes: dinner: Tacos."

    def test_queries_never_write(self, executor, store, family):
        """Queries leave the store untouched."""
        for text in ["What's on the schedule?", "What tasks are left?", "What is for dinner?"]:
            run(executor.execute(classify(text), family.id, PARENT_ID))
        assert store.events == [] and store.tasks == [] and store.list_items == []

    def test_unavailable_store_reads_empty(self, executor, store, family):
        """Queries still succeed while the store is down."""
        store.set_available(False)
        result = run(executor.execute(classify("What tasks are left?"), family.id, PARENT_ID))
        assert result.success
        assert result.data == []


class TestGeneralQuery:
    def test_echo(self, executor, family):
        """General queries echo the text back."""
        intent = Intent(kind=IntentKind.GENERAL_QUERY, params={"text": "hello"})
        result = run(executor.execute(intent, family.id, PARENT_ID))
        assert isinstance(result, CommandResult)
        assert result.action == ActionTag.GENERAL_QUERY
        assert result.response == 'I heard: "hello". How can I help?'
