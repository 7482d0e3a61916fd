"""
Keyword-based intent classification for voice and chat commands.

Rules are evaluated in a fixed order over the lower-cased text and the
first match wins, so the more specific phrasings are checked first:

1. "add" + appointment/event/meeting  -> create_event
2. "mark" + done/complete/finished    -> complete_task
3. "add" + task                       -> create_task
4. "add" + list/grocery               -> add_list_item
5. what/show/tell + a topic           -> query_events/query_tasks/query_meals
6. anything else                      -> general_query
"""

import re
from dataclasses import dataclass, field
from enum import Enum


class IntentKind(str, Enum):
    """Closed set of commands the executor understands."""

    CREATE_EVENT = "create_event"
    COMPLETE_TASK = "complete_task"
    CREATE_TASK = "create_task"
    ADD_LIST_ITEM = "add_list_item"
    QUERY_EVENTS = "query_events"
    QUERY_TASKS = "query_tasks"
    QUERY_MEALS = "query_meals"
    GENERAL_QUERY = "general_query"


@dataclass(frozen=True)
class Intent:
    """A classified command. ``params["text"]`` always holds the raw input."""

    kind: IntentKind
    params: dict[str, str] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return self.params.get("text", "")


# Format: (required keyword, any-of keywords, intent)
_ACTION_RULES = [
    ("add", ("appointment", "event", "meeting"), IntentKind.CREATE_EVENT),
    ("mark", ("done", "complete", "finished"), IntentKind.COMPLETE_TASK),
    ("add", ("task",), IntentKind.CREATE_TASK),
    ("add", ("list", "grocery"), IntentKind.ADD_LIST_ITEM),
]

_QUERY_WORDS = ("what", "show", "tell")

_QUERY_TOPICS = [
    (("schedule", "event"), IntentKind.QUERY_EVENTS),
    (("task", "chore"), IntentKind.QUERY_TASKS),
    (("meal", "dinner", "lunch"), IntentKind.QUERY_MEALS),
]

# "Add milk to grocery list", "add eggs to the list", "add bread to grocery"
_LIST_ITEM_RE = re.compile(
    r"\badd\s+(?P<item>.+?)\s+to\s+(?:(?:the|my|our)\s+)?"
    r"(?:(?:(?P<list>[\w\s]+?)\s+)?list\b|(?P<grocery>grocery)\b)",
    re.I,
)

# "Mark homework as done", "mark the dishes complete"
_COMPLETE_TASK_RE = re.compile(
    r"\bmark\s+(?:(?:the|my|our)\s+)?(?P<task>.+?)\s+(?:as\s+)?(?:done|completed?|finished)\b",
    re.I,
)


def _contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword in text for keyword in keywords)


def _match_kind(lowered: str) -> IntentKind:
    for required, any_of, kind in _ACTION_RULES:
        if required in lowered and _contains_any(lowered, any_of):
            return kind

    if _contains_any(lowered, _QUERY_WORDS):
        for topics, kind in _QUERY_TOPICS:
            if _contains_any(lowered, topics):
                return kind

    return IntentKind.GENERAL_QUERY


def _extract_params(kind: IntentKind, text: str) -> dict[str, str]:
    params = {"text": text}

    if kind is IntentKind.ADD_LIST_ITEM:
        match = _LIST_ITEM_RE.search(text)
        if match:
            params["item"] = match.group("item").strip()
            list_name = match.group("list") or match.group("grocery")
            if list_name:
                params["list"] = list_name.strip().lower()

    elif kind is IntentKind.COMPLETE_TASK:
        match = _COMPLETE_TASK_RE.search(text)
        if match:
            params["task_name"] = match.group("task").strip()

    return params


def classify(text: str) -> Intent:
    """
    Classify a natural-language command.

    Never fails: text that matches no rule becomes ``general_query``.

    Args:
        text: Voice transcript or typed command

    Returns:
        Intent with the raw text (and any extracted fields) in ``params``
    """
    kind = _match_kind(text.lower())
    return Intent(kind=kind, params=_extract_params(kind, text))
