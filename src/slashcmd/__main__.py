"""CLI entry point: list, run and scaffold slash commands."""

from __future__ import annotations

import asyncio
import sys

import click
from rich.console import Console
from rich.table import Table

from .commands import (
    BuiltinCommandLoader,
    CommandHandler,
    CommandService,
    CustomCommandLoader,
    SubmitPromptActionReturn,
    find_gemini_dir,
)
from .core.config import Config, load_config
from .core.utils import short_path

console = Console()
err_console = Console(stderr=True)


async def _build_handler(config: Config) -> tuple[CommandHandler, CustomCommandLoader]:
    custom = CustomCommandLoader(config)
    service = await CommandService.create([BuiltinCommandLoader(config), custom])
    return CommandHandler(config, service), custom


def _print_load_errors(config: Config, loader: CustomCommandLoader) -> None:
    if not config.verbose or not loader.errors:
        return
    err_console.print(f"{len(loader.errors)} command file(s) skipped:", style="dim")
    for err in loader.errors:
        err_console.print(f"  {err.path}: {err.message}", style="dim", markup=False)


# ── CLI ─────────────────────────────────────────────────────────────


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """slashcmd: project-local slash commands from .gemini/commands/*.toml."""
    ctx.obj = load_config(verbose=verbose)


@cli.command("list")
@click.pass_obj
def list_cmd(config: Config):
    """Show built-in and custom commands."""
    handler, loader = asyncio.run(_build_handler(config))

    gemini_dir = find_gemini_dir()
    source = short_path(gemini_dir) if gemini_dir else "no .gemini directory found"

    table = Table(title=f"commands ({source})", title_style="dim", box=None)
    table.add_column("name", style="bold")
    table.add_column("kind", style="dim")
    table.add_column("description")
    for cmd in handler.service.commands:
        table.add_row(f"/{cmd.name}", cmd.kind.value, cmd.description)
    console.print(table)

    _print_load_errors(config, loader)


@cli.command("run")
@click.argument("name")
@click.argument("args", nargs=-1)
@click.pass_obj
def run_cmd(config: Config, name: str, args: tuple[str, ...]):
    """Run a command and print what it produces."""
    handler, loader = asyncio.run(_build_handler(config))
    _print_load_errors(config, loader)

    text = "/" + name.lstrip("/")
    if args:
        text += " " + " ".join(args)
    result = asyncio.run(handler.handle(text))

    if isinstance(result, SubmitPromptActionReturn):
        console.print(result.content, markup=False, highlight=False)
        return
    if result.message_type == "error":
        err_console.print(result.content, markup=False, highlight=False)
        sys.exit(1)
    console.print(result.content, markup=False, highlight=False)


@cli.command("init")
@click.pass_obj
def init_cmd(config: Config):
    """Create .gemini/commands/ with an example command."""
    handler, _ = asyncio.run(_build_handler(config))
    result = asyncio.run(handler.handle("/init"))
    console.print(result.content, markup=False, highlight=False)


def main():
    cli()


if __name__ == "__main__":
    main()
