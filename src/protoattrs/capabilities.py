"""Capability composers.

Each composer is a pure function from (names, flags, extra) to the ordered list
of bindings the capability contributes. For every name the default template
comes first, followed by that name's extra lines in the order given. Composers
never touch a registry; :mod:`protoattrs.overlay` applies what they return.
"""

from __future__ import annotations

from collections.abc import Sequence

from protoattrs import constants
from protoattrs.models import Binding, FieldOverride, Level
from protoattrs.resolver import as_names, fan_out, fan_out_lines, qualify

__all__ = [
    "serde_template",
    "compose_template",
    "compose_serde",
    "compose_serde_as",
    "compose_derive_builder",
    "compose_builder_override",
    "compose_sqlx_type",
    "compose_sqlx_from_row",
    "compose_strum",
    "compose_raw",
]

_OVERRIDE_TEMPLATES: dict[FieldOverride, str] = {
    FieldOverride.INTO: constants.DERIVE_BUILDER_INTO,
    FieldOverride.OPTION: constants.DERIVE_BUILDER_OPTION,
}


def serde_template(serialize: bool, deserialize: bool) -> str | None:
    """Serde derive for the requested directions, or None for neither."""
    if serialize and deserialize:
        return constants.SERDE_SERIALIZE_DESERIALIZE
    if serialize:
        return constants.SERDE_SERIALIZE
    if deserialize:
        return constants.SERDE_DESERIALIZE
    return None


def compose_template(
    level: Level,
    names: Sequence[str],
    template: str,
    extra: Sequence[str] | None = None,
) -> list[Binding]:
    """Template then extras, per name."""
    bindings: list[Binding] = []
    for name in as_names(names):
        bindings.extend(fan_out(level, [name], template))
        if extra:
            bindings.extend(fan_out_lines(level, [name], extra))
    return bindings


def compose_serde(
    names: Sequence[str],
    serialize: bool,
    deserialize: bool,
    extra: Sequence[str] | None = None,
) -> list[Binding]:
    template = serde_template(serialize, deserialize)
    if template is None:
        # extras ride along with the derive; nothing to attach them to
        return []
    return compose_template(Level.MESSAGE, names, template, extra)


def compose_serde_as(
    message: str, fields: Sequence[tuple[Sequence[str], str]]
) -> list[Binding]:
    """``serde_with`` type attributes on ``message``, then per-field adapters.

    Args:
        message: Message receiving the ``serde_as`` attribute.
        fields: Groups of ``(field_names, attribute)``; each attribute is
            registered on every named field of ``message``.
    """
    bindings = fan_out(Level.MESSAGE, [message], constants.SERDE_AS)
    for field_names, attr in fields:
        bindings.extend(
            fan_out(
                Level.FIELD, [qualify(message, f) for f in as_names(field_names)], attr
            )
        )
    return bindings


def compose_derive_builder(
    names: Sequence[str], extra: Sequence[str] | None = None
) -> list[Binding]:
    return compose_template(Level.MESSAGE, names, constants.DERIVE_BUILDER, extra)


def compose_builder_override(
    message: str, fields: Sequence[str], kind: FieldOverride
) -> list[Binding]:
    """Field-level setter policy for ``fields`` of ``message``.

    The message-level builder binding is registered by an earlier call, so
    these land after it and refine the default for the named fields only.
    """
    paths = [qualify(message, f) for f in as_names(fields)]
    return fan_out(Level.FIELD, paths, _OVERRIDE_TEMPLATES[kind])


def compose_sqlx_type(
    names: Sequence[str], extra: Sequence[str] | None = None
) -> list[Binding]:
    return compose_template(Level.MESSAGE, names, constants.SQLX_TYPE, extra)


def compose_sqlx_from_row(
    names: Sequence[str], extra: Sequence[str] | None = None
) -> list[Binding]:
    return compose_template(Level.MESSAGE, names, constants.SQLX_FROM_ROW, extra)


def compose_strum(
    names: Sequence[str], extra: Sequence[str] | None = None
) -> list[Binding]:
    return compose_template(Level.ENUM, names, constants.STRUM, extra)


def compose_raw(
    level: Level, names: Sequence[str], attrs: Sequence[str]
) -> list[Binding]:
    """Caller text only, each line verbatim on each name."""
    return fan_out_lines(level, names, attrs)
