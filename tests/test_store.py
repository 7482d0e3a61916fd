"""
Tests for the in-memory data store.
"""

import asyncio
from datetime import datetime

import pytest

from conftest import CHILD_ID, NOW, OUTSIDER_ID, PARENT_ID
from homebrain.errors import PersistenceError, StoreUnavailableError
from homebrain.store.memory import MemoryDataStore
from homebrain.store.models import (
    CalendarEvent,
    ChatMessage,
    ChatRole,
    ListItem,
    Notification,
    NotificationType,
    Task,
    TaskStatus,
)


class TestFamilyLookup:
    def test_member_resolves_family(self, store, family):
        """Members resolve to their family."""
        assert asyncio.run(store.get_family_for_actor(CHILD_ID)) == family
        assert asyncio.run(store.get_family_for_actor(OUTSIDER_ID)) is None

    def test_owner_is_member(self, store, family):
        """The owner is added as a member."""
        members = asyncio.run(store.get_family_members(family.id))
        assert [m.user_id for m in members] == [PARENT_ID, CHILD_ID]


class TestUnavailable:
    """Reads degrade to empty results, writes fail loudly."""

    def test_reads_are_empty(self, store, family):
        """Reads return nothing while unavailable."""
        store.set_available(False)

        assert asyncio.run(store.get_family_for_actor(PARENT_ID)) is None
        assert asyncio.run(store.get_family_members(family.id)) == []
        assert asyncio.run(store.get_tasks(family.id)) == []
        assert asyncio.run(store.get_lists(family.id)) == []
        assert asyncio.run(store.get_chat_history(family.id)) == []
        assert asyncio.run(store.get_events(family.id, datetime.min, datetime.max)) == []

    def test_writes_raise(self, store, family):
        """Writes raise while unavailable."""
        store.set_available(False)
        task = Task(family_id=family.id, created_by=PARENT_ID, title="Laundry")

        with pytest.raises(StoreUnavailableError):
            asyncio.run(store.create_task(task))
        with pytest.raises(PersistenceError):
            asyncio.run(store.add_list_item(ListItem(list_id=1, created_by=PARENT_ID, text="milk")))
        assert store.tasks == []

    def test_recovers(self, store, family):
        """The store works again once available."""
        store.set_available(False)
        store.set_available(True)
        assert store.available
        assert asyncio.run(store.get_family_for_actor(PARENT_ID)) == family

    def test_constructed_unavailable(self):
        """A store can start unavailable."""
        assert MemoryDataStore(available=False).available is False


class TestRecords:
    def test_ids_assigned(self, store, family):
        """Created records get ids."""
        task = asyncio.run(store.create_task(
            Task(family_id=family.id, created_by=PARENT_ID, title="Laundry")
        ))
        assert task.id is not None
        assert store.tasks == [task]

    def test_update_task(self, store, family):
        """Updates replace fields and keep the task queryable."""
        task = asyncio.run(store.create_task(
            Task(family_id=family.id, created_by=PARENT_ID, title="Laundry")
        ))
        updated = asyncio.run(store.update_task(
            task.id, status=TaskStatus.COMPLETED, completed_at=NOW, updated_at=NOW
        ))

        assert updated.status == TaskStatus.COMPLETED
        assert updated.updated_at == NOW
        assert asyncio.run(store.get_tasks(family.id, TaskStatus.COMPLETED)) == [updated]

    def test_update_missing_task(self, store):
        """Updating a missing task raises PersistenceError."""
        with pytest.raises(PersistenceError):
            asyncio.run(store.update_task(12345, status=TaskStatus.COMPLETED))

    def test_events_in_range_sorted(self, store, family):
        """Events are filtered by range and sorted by start."""
        for day in (20, 16, 30):
            start = datetime(2026, 10, day, 9, 0)
            asyncio.run(store.create_event(CalendarEvent(
                family_id=family.id, created_by=PARENT_ID, title=f"Day {day}",
                start_time=start, end_time=start,
            )))

        events = asyncio.run(store.get_events(
            family.id, datetime(2026, 10, 15), datetime(2026, 10, 22)
        ))
        assert [e.title for e in events] == ["Day 16", "Day 20"]

    def test_chat_history_newest_first(self, store, family):
        """Chat history is newest first and limited."""
        for minute in (1, 3, 2):
            asyncio.run(store.add_chat_message(ChatMessage(
                family_id=family.id, user_id=PARENT_ID, role=ChatRole.USER,
                content=str(minute), created_at=datetime(2026, 10, 15, 9, minute),
            )))

        history = asyncio.run(store.get_chat_history(family.id, limit=2))
        assert [m.content for m in history] == ["3", "2"]

    def test_notifications(self, store, family):
        """Notifications can be filtered to unread."""
        for title, read in [("old", True), ("new", False)]:
            asyncio.run(store.create_notification(Notification(
                family_id=family.id, user_id=CHILD_ID, type=NotificationType.TASK,
                title=title, content=title, read=read,
            )))

        assert len(asyncio.run(store.get_notifications(CHILD_ID))) == 2
        unread = asyncio.run(store.get_notifications(CHILD_ID, unread_only=True))
        assert [n.title for n in unread] == ["new"]
