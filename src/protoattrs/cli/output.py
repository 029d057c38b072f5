"""Message formatting helpers for CLI commands."""

from __future__ import annotations

__all__ = [
    "format_error",
    "format_success",
]


def format_error(
    message: str, details: list[str] | None = None, suggestion: str | None = None
) -> str:
    """Format an error message with optional details and suggestion.

    Example:
        >>> print(format_error(
        ...     "Unknown entity 'todo.Todoo'",
        ...     details=["Selector: todo.Todoo"],
        ...     suggestion="Check known_entities in protoattrs.yaml",
        ... ))
        Error: Unknown entity 'todo.Todoo'
          Selector: todo.Todoo
        Suggestion: Check known_entities in protoattrs.yaml
    """
    lines = [f"Error: {message}"]
    for detail in details or []:
        lines.append(f"  {detail}")
    if suggestion:
        lines.append(f"Suggestion: {suggestion}")
    return "\n".join(lines)


def format_success(message: str) -> str:
    return f"✓ {message}"
