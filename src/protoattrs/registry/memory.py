"""In-memory reference registry."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from protoattrs.emitters import CollectingEmitter
from protoattrs.exceptions import AlreadyCompiledError, UnknownEntityError
from protoattrs.logging import get_logger
from protoattrs.models import Binding, Level

if TYPE_CHECKING:
    from protoattrs.emitters import Emitter
    from protoattrs.registry.protocol import SourcePath

__all__ = ["InMemoryRegistry"]

logger = get_logger(__name__)


class InMemoryRegistry:
    """Registry that keeps every binding in a single ordered log.

    Message, enum and field registrations share one log so that the relative
    order of bindings on an entity is exactly the order of the calls that
    produced them. Nothing is ever merged or deduplicated.

    Attributes:
        emitter: Receives the binding snapshot when :meth:`compile` runs.
        known_entities: Optional set of valid selectors checked at compile time.

    Example:
        ```python
        registry = InMemoryRegistry(known_entities={"todo.Todo"})
        registry.register_message_attribute("todo.Todo", "#[derive(Debug)]")
        registry.attributes_for("todo.Todo")  # ["#[derive(Debug)]"]
        ```
    """

    def __init__(
        self,
        emitter: Emitter | None = None,
        *,
        known_entities: Iterable[str] | None = None,
    ) -> None:
        self.emitter: Emitter = emitter if emitter is not None else CollectingEmitter()
        self.known_entities: frozenset[str] | None = (
            frozenset(known_entities) if known_entities is not None else None
        )
        self._bindings: list[Binding] = []
        self._compiled = False

    def register_message_attribute(self, name: str, text: str) -> None:
        self._bindings.append(Binding(Level.MESSAGE, name, text))

    def register_enum_attribute(self, name: str, text: str) -> None:
        self._bindings.append(Binding(Level.ENUM, name, text))

    def register_field_attribute(self, qualified_name: str, text: str) -> None:
        self._bindings.append(Binding(Level.FIELD, qualified_name, text))

    @property
    def bindings(self) -> tuple[Binding, ...]:
        """All bindings in registration order."""
        return tuple(self._bindings)

    @property
    def compiled(self) -> bool:
        return self._compiled

    def selectors(self) -> list[str]:
        """Distinct selectors in first-registration order."""
        return list(dict.fromkeys(b.selector for b in self._bindings))

    def attributes_for(self, selector: str, level: Level | None = None) -> list[str]:
        """Attribute texts registered on ``selector``, oldest first.

        Args:
            selector: Entity name or field path.
            level: Restrict to bindings registered at this level.
        """
        return [
            b.text
            for b in self._bindings
            if b.selector == selector and (level is None or b.level is level)
        ]

    def compile(
        self,
        sources: Sequence[SourcePath],
        include_paths: Sequence[SourcePath],
    ) -> None:
        """Hand the accumulated bindings to the emitter.

        Raises:
            AlreadyCompiledError: If the bindings were already consumed.
            UnknownEntityError: If ``known_entities`` is set and a binding
                targets a selector outside it.
            CompileError: Propagated from the emitter.
        """
        if self._compiled:
            raise AlreadyCompiledError()

        if self.known_entities is not None:
            for binding in self._bindings:
                if binding.selector not in self.known_entities:
                    raise UnknownEntityError(binding.selector)

        snapshot = tuple(self._bindings)
        logger.info(
            "compile_started",
            bindings=len(snapshot),
            selectors=len(self.selectors()),
            sources=len(sources),
        )
        self.emitter.emit(
            snapshot,
            [os.fspath(s) for s in sources],
            [os.fspath(p) for p in include_paths],
        )
        self._compiled = True
        logger.info("compile_finished", bindings=len(snapshot))
