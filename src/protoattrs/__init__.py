"""protoattrs - attribute overlay for schema-driven code generators.

Attach serialization, builder, database and string-enum annotations to the
messages, enums and fields emitted by an external code generator without
touching the generator itself.

Usage:
    from protoattrs import AttributeOverlay, InMemoryRegistry

    registry = InMemoryRegistry()
    (
        AttributeOverlay(registry)
        .with_serde(["todo.Todo", "todo.TodoStatus"], True, True)
        .with_sqlx_type(["todo.TodoStatus"])
    )
    registry.attributes_for("todo.TodoStatus")
"""

from __future__ import annotations

from protoattrs.exceptions import (
    AlreadyCompiledError,
    CompileError,
    ConfigError,
    ProtoAttrsError,
    UnknownEntityError,
)
from protoattrs.models import Binding, Level
from protoattrs.overlay import AttributeOverlay
from protoattrs.registry import AttributeRegistry, InMemoryRegistry

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "AlreadyCompiledError",
    "AttributeOverlay",
    "AttributeRegistry",
    "Binding",
    "CompileError",
    "ConfigError",
    "InMemoryRegistry",
    "Level",
    "ProtoAttrsError",
    "UnknownEntityError",
]
