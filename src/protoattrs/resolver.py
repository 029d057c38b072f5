"""Selector resolution: fan a name list out into per-entity bindings.

Names are opaque dot-qualified strings. Resolution never checks them against a
schema, never reorders them and never deduplicates them: ``["A", "A"]`` yields
two independent bindings on ``A``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from protoattrs.models import Binding, Level

if TYPE_CHECKING:
    from protoattrs.registry.protocol import AttributeRegistry

__all__ = ["as_names", "fan_out", "fan_out_lines", "qualify", "apply"]


def as_names(names: str | Iterable[str]) -> list[str]:
    """Treat a bare string as a single name rather than a run of characters."""
    if isinstance(names, str):
        return [names]
    return list(names)


def qualify(message: str, field: str) -> str:
    """Return the field path ``message.field``."""
    return f"{message}.{field}"


def fan_out(level: Level, names: str | Iterable[str], text: str) -> list[Binding]:
    """One binding of ``text`` per name, in input order."""
    return [Binding(level, name, text) for name in as_names(names)]


def fan_out_lines(
    level: Level, names: str | Iterable[str], lines: str | Sequence[str]
) -> list[Binding]:
    """Every line on every name; name-major so each name's lines stay together."""
    return [
        Binding(level, name, line)
        for name in as_names(names)
        for line in as_names(lines)
    ]


def apply(registry: AttributeRegistry, bindings: Iterable[Binding]) -> int:
    """Register ``bindings`` on ``registry`` through the hook for each level.

    Returns:
        Number of registrations performed.
    """
    count = 0
    for binding in bindings:
        if binding.level is Level.MESSAGE:
            registry.register_message_attribute(binding.selector, binding.text)
        elif binding.level is Level.ENUM:
            registry.register_enum_attribute(binding.selector, binding.text)
        else:
            registry.register_field_attribute(binding.selector, binding.text)
        count += 1
    return count
