"""Emitters receive the binding snapshot at compile time.

Generating target-language source is the external generator's job; the
emitters here either keep the snapshot in memory or write it out as a YAML
manifest that a generator plugin can read.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any, Protocol

import yaml

from protoattrs.constants import DEFAULT_MANIFEST_NAME
from protoattrs.exceptions import CompileError
from protoattrs.logging import get_logger
from protoattrs.models import Binding

__all__ = [
    "Emitter",
    "CollectingEmitter",
    "ManifestEmitter",
    "render_attribute_block",
    "build_manifest",
]

logger = get_logger(__name__)


class Emitter(Protocol):
    """Consumes the bindings of one compile run."""

    def emit(
        self,
        bindings: Sequence[Binding],
        sources: Sequence[str],
        include_paths: Sequence[str],
    ) -> None: ...


def render_attribute_block(bindings: Sequence[Binding], selector: str) -> str:
    """Render the attribute block preceding ``selector`` in generated code.

    Bindings are joined in registration order; texts are not altered.
    """
    return "\n".join(b.text for b in bindings if b.selector == selector)


def build_manifest(
    bindings: Sequence[Binding],
    sources: Sequence[str],
    include_paths: Sequence[str],
) -> dict[str, Any]:
    """Group bindings per selector, preserving first-seen and binding order.

    Every attribute line keeps the level of the binding it came from, since a
    type can collect message-level and enum-level bindings side by side.
    """
    entities: dict[str, list[dict[str, str]]] = {}
    for binding in bindings:
        entities.setdefault(binding.selector, []).extend(
            {"level": binding.level.value, "text": line}
            for line in binding.text.split("\n")
        )
    return {
        "sources": list(sources),
        "include_paths": list(include_paths),
        "entities": entities,
    }


class CollectingEmitter:
    """Keeps the last emitted snapshot; the default for in-memory registries."""

    def __init__(self) -> None:
        self.bindings: tuple[Binding, ...] = ()
        self.sources: list[str] = []
        self.include_paths: list[str] = []

    def emit(
        self,
        bindings: Sequence[Binding],
        sources: Sequence[str],
        include_paths: Sequence[str],
    ) -> None:
        self.bindings = tuple(bindings)
        self.sources = list(sources)
        self.include_paths = list(include_paths)

    def render(self, selector: str) -> str:
        return render_attribute_block(self.bindings, selector)


class ManifestEmitter:
    """Write the bindings as a YAML manifest under ``out_dir``.

    Attributes:
        out_dir: Directory the manifest is written to; created if missing.
        filename: Manifest file name.
    """

    def __init__(self, out_dir: Path, filename: str = DEFAULT_MANIFEST_NAME) -> None:
        self.out_dir = Path(out_dir)
        self.filename = filename

    @property
    def path(self) -> Path:
        return self.out_dir / self.filename

    def emit(
        self,
        bindings: Sequence[Binding],
        sources: Sequence[str],
        include_paths: Sequence[str],
    ) -> None:
        manifest = build_manifest(bindings, sources, include_paths)
        try:
            self.out_dir.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w") as f:
                yaml.safe_dump(manifest, f, sort_keys=False, allow_unicode=True)
        except OSError as e:
            raise CompileError(f"Failed to write manifest {self.path}: {e}") from e
        logger.info(
            "manifest_written",
            path=str(self.path),
            entities=len(manifest["entities"]),
        )
