"""Custom command loading from .gemini/commands/*.toml files."""

from __future__ import annotations

import asyncio
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import aiofiles
from rich.console import Console

from .types import CommandContext, CommandKind, SlashCommand, SubmitPromptActionReturn

if TYPE_CHECKING:
    from slashcmd.core.config import Config

err_console = Console(stderr=True)

GEMINI_DIR_NAME = ".gemini"
COMMANDS_DIR_NAME = "commands"
COMMAND_SUFFIX = ".toml"


@dataclass
class LoadError:
    """A command file that could not be read or parsed."""

    path: Path
    message: str


def _is_dir(path: Path) -> bool:
    try:
        return path.is_dir()
    except OSError:
        return False


def find_gemini_dir(start: Path | None = None) -> Path | None:
    """Return the nearest ``.gemini`` dir at or above *start* (default: cwd)."""
    try:
        current = (start or Path.cwd()).absolute()
    except OSError:
        return None

    while True:
        candidate = current / GEMINI_DIR_NAME
        if _is_dir(candidate):
            return candidate
        parent = current.parent
        # the root is its own parent
        if parent == current:
            return None
        current = parent


def _make_prompt_command(name: str, description: str) -> SlashCommand:
    async def action(context: CommandContext, args: str) -> SubmitPromptActionReturn:
        return SubmitPromptActionReturn(content=name)

    async def completion(context: CommandContext, partial: str) -> list[str]:
        return []

    return SlashCommand(
        name=name,
        description=description,
        kind=CommandKind.CUSTOM,
        auto_execute=True,
        action=action,
        completion=completion,
    )


class CustomCommandLoader:
    """Discover executable slash commands in ``.gemini/commands/*.toml``."""

    def __init__(self, config: Config | None = None):
        self.config = config
        self.errors: list[LoadError] = []

    async def load_commands(self, signal: asyncio.Event | None = None) -> list[SlashCommand]:
        """Load every valid command file. *signal* is accepted but not honoured."""
        self.errors = []
        gemini_dir = find_gemini_dir()
        if gemini_dir is None:
            return []

        commands_dir = gemini_dir / COMMANDS_DIR_NAME
        commands: list[SlashCommand] = []

        try:
            with os.scandir(commands_dir) as it:
                entries = list(it)
        except OSError:
            return commands

        for entry in entries:
            try:
                is_file = entry.is_file(follow_symlinks=False)
            except OSError:
                is_file = False
            if not is_file or not entry.name.endswith(COMMAND_SUFFIX):
                continue

            path = Path(entry.path)
            try:
                async with aiofiles.open(path, "r", encoding="utf-8") as handle:
                    content = await handle.read()
                parsed = tomllib.loads(content)
            except Exception as e:
                self._report(path, e)
                continue

            description = parsed.get("description")
            if not isinstance(description, str) or not description:
                continue

            name = entry.name[: -len(COMMAND_SUFFIX)] or entry.name
            commands.append(_make_prompt_command(name, description))

        return commands

    def _report(self, path: Path, error: Exception) -> None:
        self.errors.append(LoadError(path=path, message=str(error)))
        err_console.print(
            f"Failed to load custom command from {path}: {error}",
            markup=False,
            highlight=False,
            soft_wrap=True,
        )
