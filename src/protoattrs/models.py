"""Core value types shared by the resolver, composers and registries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = ["Level", "Binding", "FieldOverride"]


class Level(str, Enum):
    """Granularity at which an attribute attaches to generated code.

    Values:
        MESSAGE: A generated message type (struct).
        ENUM: A generated enumeration.
        FIELD: A single field, addressed as ``package.Message.field``.
    """

    MESSAGE = "message"
    ENUM = "enum"
    FIELD = "field"


@dataclass(frozen=True, slots=True)
class Binding:
    """One recorded attribute registration.

    Attributes:
        level: Level the attribute was registered at.
        selector: Dot-qualified entity name, treated as opaque text.
        text: Attribute text in the target language, passed through verbatim.
    """

    level: Level
    selector: str
    text: str


class FieldOverride(str, Enum):
    """Field-level builder setter policies layered over the message default."""

    INTO = "into"
    OPTION = "option"
