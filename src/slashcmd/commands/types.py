"""Command data models: CommandKind, SlashCommand, action returns, CommandLoader."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Literal, Protocol, Union

if TYPE_CHECKING:
    from slashcmd.core.config import Config


class CommandKind(str, Enum):
    BUILT_IN = "built-in"
    CUSTOM = "custom"


@dataclass
class CommandContext:
    """What an action gets to see when it runs."""

    config: Config | None = None
    commands: list[SlashCommand] = field(default_factory=list)


@dataclass
class SubmitPromptActionReturn:
    """Ask the host to send ``content`` to the model as a user prompt."""

    content: str
    type: Literal["submit_prompt"] = "submit_prompt"


@dataclass
class MessageActionReturn:
    """Show a message to the user without contacting the model."""

    content: str
    message_type: Literal["info", "error"] = "info"
    type: Literal["message"] = "message"


ActionReturn = Union[SubmitPromptActionReturn, MessageActionReturn]
CommandAction = Callable[[CommandContext, str], Awaitable[ActionReturn]]
CommandCompletion = Callable[[CommandContext, str], Awaitable[list[str]]]


async def _no_completion(context: CommandContext, partial: str) -> list[str]:
    return []


@dataclass
class SlashCommand:
    name: str
    description: str
    kind: CommandKind
    action: CommandAction
    auto_execute: bool = False
    completion: CommandCompletion = _no_completion


class CommandLoader(Protocol):
    """Anything that can produce a batch of slash commands."""

    async def load_commands(self, signal: asyncio.Event | None = None) -> list[SlashCommand]: ...
