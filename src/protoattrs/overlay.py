"""Fluent facade over a generator's attribute registry.

Example:
    ```python
    registry = InMemoryRegistry()
    (
        AttributeOverlay(registry)
        .with_serde(["todo.Todo", "todo.TodoStatus"], True, True,
                    ['#[serde(rename_all = "camelCase")]'])
        .with_derive_builder(["todo.Todo"])
        .with_derive_builder_into("todo.Todo", ["id", "title"])
        .with_derive_builder_option("todo.Todo", ["created_at"])
        .with_sqlx_type(["todo.TodoStatus"])
        .with_strum(["todo.TodoStatus"])
        .compile(["protos/todo.proto"], ["protos"])
    )
    ```
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Generic, TypeVar

from protoattrs import capabilities
from protoattrs.logging import get_logger
from protoattrs.models import Binding, FieldOverride, Level
from protoattrs.resolver import apply

if TYPE_CHECKING:
    from typing import Self

    from protoattrs.registry.protocol import AttributeRegistry, SourcePath

__all__ = ["AttributeOverlay"]

logger = get_logger(__name__)

R = TypeVar("R", bound="AttributeRegistry")


class AttributeOverlay(Generic[R]):
    """Chainable capability calls that accumulate bindings on one registry.

    The overlay is the sole owner of the registry while the chain runs. Every
    ``with_*`` method registers its bindings and returns the overlay, so the
    chain ends with :meth:`compile` or by reading :attr:`registry` back.

    None of the methods raise: names are not checked against any schema and
    attribute text is passed through untouched. A bare string wherever a list
    of names, fields or lines is expected counts as a single item. Unknown or
    malformed entries surface when the registry compiles.

    Attributes:
        registry: The wrapped generator registry.
    """

    def __init__(self, registry: R) -> None:
        self.registry = registry

    def _register(self, capability: str, bindings: list[Binding]) -> Self:
        count = apply(self.registry, bindings)
        logger.debug("capability_applied", capability=capability, bindings=count)
        return self

    def with_serde(
        self,
        names: Sequence[str],
        serialize: bool,
        deserialize: bool,
        extra: Sequence[str] | None = None,
    ) -> Self:
        """Derive serde Serialize and/or Deserialize on each name.

        Registers nothing, extras included, when both flags are False.
        """
        return self._register(
            "serde", capabilities.compose_serde(names, serialize, deserialize, extra)
        )

    def with_serde_as(
        self, message: str, fields: Sequence[tuple[Sequence[str], str]]
    ) -> Self:
        """Enable ``serde_with`` on ``message`` and attach per-field adapters."""
        return self._register("serde_as", capabilities.compose_serde_as(message, fields))

    def with_derive_builder(
        self, names: Sequence[str], extra: Sequence[str] | None = None
    ) -> Self:
        """Derive a builder with into/strip_option/default setters on each name."""
        return self._register(
            "derive_builder", capabilities.compose_derive_builder(names, extra)
        )

    def with_derive_builder_into(self, message: str, fields: Sequence[str]) -> Self:
        """Override named fields of ``message`` to plain ``setter(into)``."""
        return self._register(
            "derive_builder_into",
            capabilities.compose_builder_override(message, fields, FieldOverride.INTO),
        )

    def with_derive_builder_option(self, message: str, fields: Sequence[str]) -> Self:
        """Override named fields of ``message`` to ``setter(into, strip_option)``.

        For fields whose value type is itself optional.
        """
        return self._register(
            "derive_builder_option",
            capabilities.compose_builder_override(
                message, fields, FieldOverride.OPTION
            ),
        )

    def with_sqlx_type(
        self, names: Sequence[str], extra: Sequence[str] | None = None
    ) -> Self:
        return self._register("sqlx_type", capabilities.compose_sqlx_type(names, extra))

    def with_sqlx_from_row(
        self, names: Sequence[str], extra: Sequence[str] | None = None
    ) -> Self:
        return self._register(
            "sqlx_from_row", capabilities.compose_sqlx_from_row(names, extra)
        )

    def with_strum(
        self, names: Sequence[str], extra: Sequence[str] | None = None
    ) -> Self:
        """Case-insensitive string parsing and Display for each enum."""
        return self._register("strum", capabilities.compose_strum(names, extra))

    def with_type_attributes(
        self, names: Sequence[str], attrs: Sequence[str]
    ) -> Self:
        return self._register(
            "type_attributes", capabilities.compose_raw(Level.MESSAGE, names, attrs)
        )

    def with_field_attributes(
        self, paths: Sequence[str], attrs: Sequence[str]
    ) -> Self:
        """Attach each line of ``attrs`` verbatim to each field path."""
        return self._register(
            "field_attributes", capabilities.compose_raw(Level.FIELD, paths, attrs)
        )

    def with_optional_type_attributes(
        self, names: Sequence[str], attrs: Sequence[str] | None
    ) -> Self:
        if attrs is None:
            return self
        return self.with_type_attributes(names, attrs)

    def with_optional_field_attributes(
        self, paths: Sequence[str], attrs: Sequence[str] | None
    ) -> Self:
        if attrs is None:
            return self
        return self.with_field_attributes(paths, attrs)

    def compile(
        self,
        sources: Sequence[SourcePath],
        include_paths: Sequence[SourcePath],
    ) -> R:
        """Run the registry's terminal compile and hand the registry back."""
        self.registry.compile(sources, include_paths)
        return self.registry
