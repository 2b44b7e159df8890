"""CommandHandler: dispatch slash commands to their actions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .service import CommandService
from .types import ActionReturn, CommandContext, MessageActionReturn

if TYPE_CHECKING:
    from slashcmd.core.config import Config


def _split(text: str) -> tuple[str, str]:
    parts = text.strip()[1:].split(maxsplit=1)
    name = parts[0] if parts else ""
    arg = parts[1] if len(parts) > 1 else ""
    return name, arg


class CommandHandler:
    """Handle slash commands (built-in + custom from .gemini/commands/*.toml)."""

    def __init__(self, config: Config | None, service: CommandService):
        self.config = config
        self.service = service

    def is_command(self, text: str) -> bool:
        return text.strip().startswith("/")

    def _context(self) -> CommandContext:
        return CommandContext(config=self.config, commands=self.service.commands)

    async def handle(self, text: str) -> ActionReturn | None:
        if not self.is_command(text):
            return None

        name, arg = _split(text)
        cmd = self.service.get(name)
        if cmd is None:
            return MessageActionReturn(
                content=f"unknown command: /{name}\ntype /help for available commands",
                message_type="error",
            )
        return await cmd.action(self._context(), arg)

    async def complete(self, text: str) -> list[str]:
        """Suggest command names for ``/par`` and arguments for ``/name par``."""
        if not self.is_command(text):
            return []

        stripped = text.lstrip()
        if " " not in stripped:
            prefix = stripped[1:]
            return [f"/{c.name}" for c in self.service.commands if c.name.startswith(prefix)]

        name, arg = _split(stripped)
        cmd = self.service.get(name)
        if cmd is None:
            return []
        return await cmd.completion(self._context(), arg)
