"""
Voice/chat command pipeline: classify, execute, respond.
"""

from homebrain.commands.executor import CommandExecutor, CommandResult
from homebrain.commands.intent import Intent, IntentKind, classify
from homebrain.commands.responses import ActionTag, respond

__all__ = [
    "ActionTag",
    "CommandExecutor",
    "CommandResult",
    "Intent",
    "IntentKind",
    "classify",
    "respond",
]
