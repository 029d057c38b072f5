"""Registry fixtures for protoattrs tests."""

from __future__ import annotations

import pytest

from protoattrs.emitters import CollectingEmitter
from protoattrs.overlay import AttributeOverlay
from protoattrs.registry import InMemoryRegistry


@pytest.fixture
def emitter() -> CollectingEmitter:
    return CollectingEmitter()


@pytest.fixture
def registry(emitter: CollectingEmitter) -> InMemoryRegistry:
    return InMemoryRegistry(emitter)


@pytest.fixture
def overlay(registry: InMemoryRegistry) -> AttributeOverlay[InMemoryRegistry]:
    return AttributeOverlay(registry)
