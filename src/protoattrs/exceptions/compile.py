from __future__ import annotations

from protoattrs.exceptions.base import ProtoAttrsError


class CompileError(ProtoAttrsError):
    """Exception raised by the terminal compile step.

    Compile is the only place where accumulated bindings are checked. Failures
    are fatal and carry the offending selector when one is known.

    Attributes:
        message: Human-readable error message.
        selector: Entity name or field path the failure relates to, if any.
    """

    def __init__(self, message: str, selector: str | None = None) -> None:
        self.selector = selector
        super().__init__(message)


class UnknownEntityError(CompileError):
    """A binding targets a selector missing from the known entity set."""

    def __init__(self, selector: str) -> None:
        super().__init__(f"Unknown entity '{selector}'", selector=selector)


class AlreadyCompiledError(CompileError):
    """Compile was invoked on a registry whose bindings were already consumed."""

    def __init__(self) -> None:
        super().__init__("Registry has already been compiled")
