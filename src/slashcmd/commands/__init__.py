"""Commands: slash command types, loaders, registry and dispatch."""

from .builtin import COMMANDS, BuiltinCommandLoader, init_project
from .custom import CustomCommandLoader, LoadError, find_gemini_dir
from .handler import CommandHandler
from .service import CommandService
from .types import (
    ActionReturn,
    CommandContext,
    CommandKind,
    CommandLoader,
    MessageActionReturn,
    SlashCommand,
    SubmitPromptActionReturn,
)

__all__ = [
    "COMMANDS",
    "ActionReturn",
    "BuiltinCommandLoader",
    "CommandContext",
    "CommandHandler",
    "CommandKind",
    "CommandLoader",
    "CommandService",
    "CustomCommandLoader",
    "LoadError",
    "MessageActionReturn",
    "SlashCommand",
    "SubmitPromptActionReturn",
    "find_gemini_dir",
    "init_project",
]
