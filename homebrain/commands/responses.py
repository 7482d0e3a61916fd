"""Natural-language confirmations for executed commands."""

from enum import Enum


class ActionTag(str, Enum):
    """Outcome of an executed command."""

    EVENT_CREATED = "event_created"
    TASK_CREATED = "task_created"
    TASK_COMPLETED = "task_completed"
    LIST_ITEM_ADDED = "list_item_added"
    EVENT_RETRIEVED = "event_retrieved"
    TASK_RETRIEVED = "task_retrieved"
    MEAL_RETRIEVED = "meal_retrieved"
    GENERAL_QUERY = "general_query"
    ERROR = "error"


def respond(action: ActionTag | str, detail: str) -> str:
    """
    Render a spoken/typed response for an action.

    Unknown actions (and ``general_query``) return ``detail`` unchanged so
    callers can pass through text they already formed.
    """
    try:
        tag = ActionTag(action)
    except ValueError:
        return detail

    match tag:
        case ActionTag.EVENT_CREATED:
            return f"I've added {detail} to your calendar."
        case ActionTag.TASK_CREATED:
            return f"I've created a task: {detail}."
        case ActionTag.TASK_COMPLETED:
            return f"Great! I've marked {detail} as done."
        case ActionTag.LIST_ITEM_ADDED:
            return f"I've added {detail} to your list."
        case ActionTag.EVENT_RETRIEVED:
            return f"Here are your upcoming events: {detail}."
        case ActionTag.TASK_RETRIEVED:
            return f"You have these pending tasks: {detail}."
        case ActionTag.MEAL_RETRIEVED:
            return f"Your meal plan includes: {detail}."
        case ActionTag.ERROR:
            return f"Sorry, I couldn't {detail}. Please try again."
        case _:
            return detail
