"""CLI context shared between the group callback and its commands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

from protoattrs.config import ProtoAttrsConfig

__all__ = ["ExitCode", "CLIContext"]


class ExitCode(IntEnum):
    """Exit codes for the protoattrs CLI."""

    SUCCESS = 0
    FAILURE = 1


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Global options and loaded configuration.

    Attributes:
        config: Loaded protoattrs configuration.
        config_path: Path given with --config, if any.
        verbosity: Count of -v flags.
        quiet: Suppress non-essential output.
    """

    config: ProtoAttrsConfig
    config_path: Path | None = None
    verbosity: int = 0
    quiet: bool = False
