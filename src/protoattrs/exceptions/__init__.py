"""protoattrs exception hierarchy.

All exceptions can be imported from this package:
    from protoattrs.exceptions import CompileError, ConfigError
"""

from __future__ import annotations

# Base exception
from protoattrs.exceptions.base import ProtoAttrsError

# Compile exceptions
from protoattrs.exceptions.compile import (
    AlreadyCompiledError,
    CompileError,
    UnknownEntityError,
)

# Configuration exceptions
from protoattrs.exceptions.config import ConfigError

__all__ = [
    # Base
    "ProtoAttrsError",
    # Compile
    "AlreadyCompiledError",
    "CompileError",
    "UnknownEntityError",
    # Config
    "ConfigError",
]
