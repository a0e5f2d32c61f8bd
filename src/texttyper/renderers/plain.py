"""Plain-text renderer.

Interprets the display text the way the scheduler counts it: every tag is
invisible except sprites, which take one visible slot each. Useful for
terminals, logs and tests.
"""

from __future__ import annotations

from texttyper.symbols import tokenize

DEFAULT_SPRITE_PLACEHOLDER = "□"


class PlainTextRenderer:
    """TextRenderer that keeps the visible prefix as a string.

    Usage:
        >>> renderer = PlainTextRenderer()
        >>> renderer.set_stripped_text("Hi <b>there</b>")
        >>> renderer.set_visible_count(5)
        >>> renderer.visible_text
        'Hi th'

    """

    __slots__ = ("_full_text", "_units", "_visible_count", "sprite_placeholder")

    def __init__(self, sprite_placeholder: str = DEFAULT_SPRITE_PLACEHOLDER) -> None:
        self.sprite_placeholder = sprite_placeholder
        self._full_text = ""
        self._units: list[str] = []
        self._visible_count = 0

    def set_stripped_text(self, text: str) -> None:
        self._full_text = text
        self._units = [
            self.sprite_placeholder if symbol.is_sprite else symbol.text
            for symbol in tokenize(text)
            if not symbol.is_tag or symbol.is_sprite
        ]
        self._visible_count = 0

    def set_visible_count(self, count: int) -> None:
        self._visible_count = min(max(count, 0), len(self._units))

    @property
    def full_text(self) -> str:
        """Text as received, renderer tags included."""
        return self._full_text

    @property
    def visible_count(self) -> int:
        return self._visible_count

    @property
    def total_visible(self) -> int:
        return len(self._units)

    @property
    def visible_text(self) -> str:
        return "".join(self._units[: self._visible_count])

    def visible_units(self) -> list[str]:
        """Visible units so far, one entry per visible index."""
        return self._units[: self._visible_count]
