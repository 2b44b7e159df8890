"""Configuration: env, paths."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

_TRUTHY = ("1", "true", "yes", "on")


@dataclass
class Config:
    cwd: Path = field(default_factory=Path.cwd)
    verbose: bool = False


def load_config(verbose: bool = False) -> Config:
    """Load config with priority: CLI args > env > .env > defaults."""
    load_dotenv()

    config = Config()

    if env_verbose := os.getenv("SLASHCMD_VERBOSE"):
        config.verbose = env_verbose.strip().lower() in _TRUTHY

    if verbose:
        config.verbose = True

    return config
