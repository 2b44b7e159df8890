"""CommandService: merge commands from several loaders into one registry."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

from rich.console import Console

from .types import CommandLoader, SlashCommand

err_console = Console(stderr=True)


class CommandService:
    """Registry of loaded slash commands, keyed by name.

    Loaders are consulted in order and the first command registered under a
    name wins, so put built-ins ahead of user-defined sources.
    """

    def __init__(self, commands: Sequence[SlashCommand] = ()):
        self._commands: dict[str, SlashCommand] = {}
        for cmd in commands:
            self._commands.setdefault(cmd.name, cmd)

    @classmethod
    async def create(
        cls,
        loaders: Sequence[CommandLoader],
        signal: asyncio.Event | None = None,
    ) -> CommandService:
        collected: list[SlashCommand] = []
        for loader in loaders:
            try:
                collected.extend(await loader.load_commands(signal))
            except Exception as e:
                err_console.print(
                    f"Command loader {type(loader).__name__} failed: {e}",
                    markup=False,
                    highlight=False,
                    soft_wrap=True,
                )
        return cls(collected)

    @property
    def commands(self) -> list[SlashCommand]:
        return list(self._commands.values())

    def get(self, name: str) -> SlashCommand | None:
        return self._commands.get(name)
