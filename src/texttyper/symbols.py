"""Symbol tokenizer for typed text.

Turns raw markup into a flat sequence of symbols: one CharSymbol per code
point of literal text and one TagSymbol per tag occurrence. Opening and
closing tags are separate symbols.

Also provides the strip transforms used to hand text to a renderer.

Example:
    >>> [s.text for s in tokenize("A<b>B</b>")]
    ['A', '<b>', 'B', '</b>']
    >>> strip_tags("Hi <color=red>there</color>!")
    'Hi there!'

"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass

from texttyper.errors import MarkupError
from texttyper.tags import Tag, iter_tags
from texttyper.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class CharSymbol:
    """One literal character of source text."""

    text: str

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def is_tag(self) -> bool:
        return False

    @property
    def is_sprite(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class TagSymbol:
    """One tag occurrence in source text.

    Sprite tags are markup, but the renderer draws a glyph in their place,
    so they occupy one visible index like a character.
    """

    tag: Tag

    @property
    def text(self) -> str:
        return self.tag.raw_text

    @property
    def length(self) -> int:
        return len(self.tag.raw_text)

    @property
    def is_tag(self) -> bool:
        return True

    @property
    def is_sprite(self) -> bool:
        # A stray </sprite> draws nothing
        return self.tag.is_sprite and not self.tag.is_closing

    def float_parameter(self, default: float = 0.0, *, strict: bool = False) -> float:
        """Parse the tag parameter as a finite float.

        Args:
            default: Value returned when the parameter is missing or invalid
            strict: Raise MarkupError instead of falling back

        Returns:
            The parsed value, or default.

        Raises:
            MarkupError: If strict and the parameter does not parse.
        """
        raw = self.tag.parameter
        try:
            value = float(raw) if raw is not None else math.nan
        except ValueError:
            value = math.nan

        if math.isfinite(value):
            return value

        if strict:
            raise MarkupError(self.tag, f"parameter {raw!r} is not a number")
        logger.warning(
            "Invalid parameter format in tag %r: %r does not parse to a float, using %s",
            self.tag.raw_text,
            raw,
            default,
        )
        return default


Symbol = CharSymbol | TagSymbol


def tokenize(text: str) -> list[Symbol]:
    """Split text into characters and tags.

    Literal runs are split per code point, so a multi-byte character stays
    one symbol. Every call builds a fresh list.

    Args:
        text: Raw markup

    Returns:
        Symbols in source order.
    """
    symbols: list[Symbol] = []
    pos = 0
    for tag in iter_tags(text):
        symbols.extend(CharSymbol(ch) for ch in text[pos : tag.start])
        symbols.append(TagSymbol(tag))
        pos = tag.end
    symbols.extend(CharSymbol(ch) for ch in text[pos:])
    return symbols


def _rebuild(text: str, drop: Callable[[Tag], bool]) -> str:
    parts: list[str] = []
    pos = 0
    for tag in iter_tags(text):
        parts.append(text[pos : tag.start])
        if not drop(tag):
            parts.append(tag.raw_text)
        pos = tag.end
    parts.append(text[pos:])
    return "".join(parts)


def strip_tags(text: str) -> str:
    """Remove every tag, leaving only literal characters.

    Sprite tags are dropped too: the renderer places their glyph outside
    the text stream.
    """
    return _rebuild(text, lambda tag: True)


def remove_custom_tags(text: str) -> str:
    """Remove delay, speed and animation tags; keep everything else verbatim.

    This is the text a renderer receives. Renderer tags such as ``<b>`` or
    ``<sprite=0>`` survive so the renderer can interpret them.
    """
    return _rebuild(text, lambda tag: tag.is_custom)


def remove_renderer_tags(text: str) -> str:
    """Remove renderer tags (``b``, ``color``, ``sprite``...); keep custom and unknown tags."""
    return _rebuild(text, lambda tag: tag.is_renderer_tag)


def visible_length(text: str) -> int:
    """Count visible units: literal characters plus sprite tags."""
    return sum(1 for symbol in tokenize(text) if not symbol.is_tag or symbol.is_sprite)


__all__ = [
    "CharSymbol",
    "Symbol",
    "TagSymbol",
    "remove_custom_tags",
    "remove_renderer_tags",
    "strip_tags",
    "tokenize",
    "visible_length",
]
