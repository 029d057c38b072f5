"""Helpers shared by CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from protoattrs.overlay import AttributeOverlay
from protoattrs.registry import InMemoryRegistry
from protoattrs.steps import apply_steps

if TYPE_CHECKING:
    from protoattrs.config import ProtoAttrsConfig
    from protoattrs.emitters import Emitter

__all__ = ["build_registry"]


def build_registry(
    config: ProtoAttrsConfig, emitter: Emitter | None = None
) -> InMemoryRegistry:
    """Create a registry and replay the configured steps onto it."""
    registry = InMemoryRegistry(emitter, known_entities=config.known_entities)
    apply_steps(AttributeOverlay(registry), config.steps)
    return registry
