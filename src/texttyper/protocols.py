"""Protocols for texttyper collaborators.

The reveal scheduler never draws, animates or plays sound itself. It
talks to the host through these structural interfaces; any object with
matching methods conforms.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from texttyper.events import AnimationRange


@runtime_checkable
class TextRenderer(Protocol):
    """Displays text and limits how much of it is visible."""

    def set_stripped_text(self, text: str) -> None:
        """Replace the displayed text.

        Args:
            text: Markup with scheduler tags removed; renderer tags remain
        """
        ...

    def set_visible_count(self, count: int) -> None:
        """Show only the first count visible units (characters and sprites)."""
        ...


@runtime_checkable
class PresetLookup(Protocol):
    """Resolves an animation preset name to its family."""

    def contains_shake_preset(self, name: str) -> bool: ...

    def contains_curve_preset(self, name: str) -> bool: ...


@runtime_checkable
class AnimationRangeSink(Protocol):
    """Receives the animation ranges of the current text.

    Ranges use visible-character indices, the same index space as
    TextRenderer.set_visible_count().
    """

    def register_range(self, animation_range: AnimationRange) -> None: ...

    def clear_all(self) -> None: ...


CharacterPrintedListener = Callable[[str], None]
RevealCompletedListener = Callable[[], None]


__all__ = [
    "AnimationRangeSink",
    "CharacterPrintedListener",
    "PresetLookup",
    "RevealCompletedListener",
    "TextRenderer",
]
