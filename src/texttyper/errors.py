"""Exception classes for texttyper.

Nothing on the reveal path raises: bad markup degrades to pass-through
text and bad reveal arguments are clamped. These exceptions cover invalid
configuration and callers that explicitly ask for strict parsing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from texttyper.tags import Tag


class TextTyperError(Exception):
    """Base exception for all texttyper errors."""

    pass


class ConfigError(TextTyperError):
    """Invalid typer configuration value.

    Raised when a TyperConfig is constructed with a value outside its
    valid range (negative delays, batch sizes below one).
    """

    def __init__(self, field_name: str, message: str) -> None:
        """Initialize config error.

        Args:
            field_name: Name of the offending TyperConfig field
            message: Description of the problem
        """
        self.field_name = field_name
        super().__init__(f"Invalid config '{field_name}': {message}")


class MarkupError(TextTyperError):
    """Tag content that could not be interpreted.

    Only raised when strict parsing is requested; the default behavior is
    to log a warning and fall back.
    """

    def __init__(self, tag: Tag, message: str) -> None:
        """Initialize markup error.

        Args:
            tag: The tag whose content failed to parse
            message: Description of the problem
        """
        self.tag = tag
        super().__init__(f"Tag {tag.raw_text!r} at offset {tag.start}: {message}")


__all__ = ["ConfigError", "MarkupError", "TextTyperError"]
