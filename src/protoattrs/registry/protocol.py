"""Registry protocol consumed by the overlay.

Any generator configuration object exposing these hooks can sit underneath
:class:`protoattrs.overlay.AttributeOverlay`.
"""

from __future__ import annotations

from collections.abc import Sequence
from os import PathLike
from typing import Protocol, TypeAlias, runtime_checkable

SourcePath: TypeAlias = "str | PathLike[str]"


@runtime_checkable
class AttributeRegistry(Protocol):
    """Level-scoped registration hooks plus the terminal compile step.

    Registrations accumulate in call order. ``compile`` consumes them and
    raises :class:`protoattrs.exceptions.CompileError` on failure.
    """

    def register_message_attribute(self, name: str, text: str) -> None: ...

    def register_enum_attribute(self, name: str, text: str) -> None: ...

    def register_field_attribute(self, qualified_name: str, text: str) -> None: ...

    def compile(
        self,
        sources: Sequence[SourcePath],
        include_paths: Sequence[SourcePath],
    ) -> None: ...
