"""Built-in commands (/help, /init, /quit) and project scaffolding."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TYPE_CHECKING

from .custom import COMMANDS_DIR_NAME, GEMINI_DIR_NAME
from .types import CommandContext, CommandKind, MessageActionReturn, SlashCommand

if TYPE_CHECKING:
    from slashcmd.core.config import Config

COMMANDS = {
    "help": "Show available commands",
    "init": "Create .gemini/commands/ with an example command",
    "quit": "Exit",
}

_EXAMPLE_COMMAND = """\
# Invoke with /hello. Only `description` is required.
description = "Say hello"
"""


def init_project(cwd: Path | None = None) -> list[str]:
    """Scaffold .gemini/commands/. Returns list of created paths."""
    cwd = cwd or Path.cwd()
    commands_dir = cwd / GEMINI_DIR_NAME / COMMANDS_DIR_NAME
    created: list[str] = []

    if not commands_dir.exists():
        commands_dir.mkdir(parents=True)
        created.append(str(commands_dir.relative_to(cwd)) + "/")

    example = commands_dir / "hello.toml"
    if not example.exists():
        example.write_text(_EXAMPLE_COMMAND, encoding="utf-8")
        created.append(str(example.relative_to(cwd)))

    return created


async def _help(context: CommandContext, args: str) -> MessageActionReturn:
    lines = []
    for cmd in context.commands:
        lines.append(f"  /{cmd.name:<12} {cmd.description}")
    return MessageActionReturn(content="\n".join(lines))


async def _init(context: CommandContext, args: str) -> MessageActionReturn:
    cwd = context.config.cwd if context.config else None
    created = init_project(cwd)
    if not created:
        return MessageActionReturn(content="already initialized")
    return MessageActionReturn(content="created: " + ", ".join(created))


async def _quit(context: CommandContext, args: str) -> MessageActionReturn:
    return MessageActionReturn(content="quit")


_ACTIONS = {"help": _help, "init": _init, "quit": _quit}


class BuiltinCommandLoader:
    """Supply the commands that ship with the CLI."""

    def __init__(self, config: Config | None = None):
        self.config = config

    async def load_commands(self, signal: asyncio.Event | None = None) -> list[SlashCommand]:
        return [
            SlashCommand(
                name=name,
                description=desc,
                kind=CommandKind.BUILT_IN,
                action=_ACTIONS[name],
            )
            for name, desc in COMMANDS.items()
        ]
