from __future__ import annotations


class ProtoAttrsError(Exception):
    """Base exception class for all protoattrs errors.

    The overlay itself only records intent and never raises; errors come from
    configuration loading and from the terminal compile step. Catch this at
    CLI boundaries and let system exceptions propagate naturally.

    Attributes:
        message: Human-readable error message describing what went wrong.

    Example:
        ```python
        try:
            overlay.compile(["protos/todo.proto"], ["protos"])
        except ProtoAttrsError as e:
            logger.error("compile_failed", error=e.message)
            sys.exit(1)
        ```
    """

    def __init__(self, message: str) -> None:
        """Initialize the ProtoAttrsError.

        Args:
            message: Human-readable error message.
        """
        self.message = message
        super().__init__(message)
