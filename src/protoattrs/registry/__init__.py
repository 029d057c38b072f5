"""Attribute registries.

The registry is the code generator's configuration object: it collects
bindings and owns the terminal compile step.
"""

from __future__ import annotations

from protoattrs.registry.memory import InMemoryRegistry
from protoattrs.registry.protocol import AttributeRegistry

__all__ = ["AttributeRegistry", "InMemoryRegistry"]
