from __future__ import annotations

from typing import Any

from protoattrs.exceptions.base import ProtoAttrsError


class ConfigError(ProtoAttrsError):
    """Exception for configuration loading, parsing, and validation errors.

    Raised when configuration cannot be loaded, parsed, or validated. This
    includes YAML parsing failures, Pydantic validation errors (for instance an
    overlay step naming an unknown capability), and invalid environment
    variable values.

    Attributes:
        message: Human-readable error message describing the configuration issue.
        field: Optional dotted field name that caused the error
            (e.g., "steps.2.names").
        value: Optional value that failed validation (for debugging).

    Examples:
        ```python
        raise ConfigError("Invalid YAML in protoattrs.yaml: mapping expected")

        raise ConfigError(
            "Input should be a valid boolean",
            field="steps.0.serialize",
            value="sometimes",
        )
        ```
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
    ) -> None:
        """Initialize the ConfigError.

        Args:
            message: Human-readable error message.
            field: Optional field name that caused the error.
            value: Optional value that failed validation.
        """
        self.field = field
        self.value = value
        super().__init__(message)
