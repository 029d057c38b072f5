"""Replay configured overlay steps through the fluent facade."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from protoattrs.config import (
    BuilderOverrideStep,
    OverlayStep,
    RawAttributesStep,
    SerdeAsStep,
    SerdeStep,
    TemplateStep,
)
from protoattrs.logging import get_logger
from protoattrs.overlay import AttributeOverlay

if TYPE_CHECKING:
    from protoattrs.registry.protocol import AttributeRegistry

__all__ = ["apply_step", "apply_steps"]

logger = get_logger(__name__)

Overlay = AttributeOverlay["AttributeRegistry"]


def apply_step(overlay: Overlay, step: OverlayStep) -> Overlay:
    """Apply one configured step; returns the overlay for chaining."""
    if isinstance(step, SerdeStep):
        return overlay.with_serde(
            step.names, step.serialize, step.deserialize, step.extra
        )
    if isinstance(step, SerdeAsStep):
        groups = [(group.fields, group.attribute) for group in step.fields]
        return overlay.with_serde_as(step.message, groups)
    if isinstance(step, TemplateStep):
        template_methods = {
            "derive_builder": overlay.with_derive_builder,
            "sqlx_type": overlay.with_sqlx_type,
            "sqlx_from_row": overlay.with_sqlx_from_row,
            "strum": overlay.with_strum,
        }
        return template_methods[step.capability](step.names, step.extra)
    if isinstance(step, BuilderOverrideStep):
        if step.capability == "derive_builder_into":
            return overlay.with_derive_builder_into(step.message, step.fields)
        return overlay.with_derive_builder_option(step.message, step.fields)
    if isinstance(step, RawAttributesStep):
        if step.capability == "type_attributes":
            return overlay.with_type_attributes(step.names, step.attributes)
        return overlay.with_field_attributes(step.names, step.attributes)
    raise TypeError(f"Unsupported overlay step: {type(step).__name__}")


def apply_steps(overlay: Overlay, steps: Iterable[OverlayStep]) -> Overlay:
    """Apply ``steps`` in order."""
    applied = 0
    for step in steps:
        overlay = apply_step(overlay, step)
        applied += 1
    logger.debug("steps_applied", count=applied)
    return overlay
