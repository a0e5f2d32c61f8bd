"""Per-character timeline entries and animation ranges.

TypableCharacter is mutable because it lives in a PoolableList and is
re-initialized on every rebuild. AnimationRange is a frozen value handed
to the animation layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(slots=True)
class TypableCharacter:
    """One visible unit of the reveal timeline.

    Attributes:
        text: The character, or "" for a sprite
        delay: Seconds to wait after revealing this unit
        is_sprite: True when the unit is a sprite glyph

    """

    text: str = ""
    delay: float = 0.0
    is_sprite: bool = False

    def initialize_as_character(self, text: str) -> TypableCharacter:
        self.text = text or ""
        self.is_sprite = False
        self.delay = 0.0
        return self

    def initialize_as_sprite(self) -> TypableCharacter:
        self.text = ""
        self.is_sprite = True
        self.delay = 0.0
        return self

    def reset(self) -> None:
        self.initialize_as_character("")

    def __str__(self) -> str:
        return self.text


class AnimationKind(Enum):
    """Animation families an animation range can resolve to."""

    SHAKE = "shake"
    CURVE = "curve"


@dataclass(frozen=True, slots=True)
class AnimationRange:
    """Closed interval of visible-character indices to animate with a preset.

    Indices count visible units only (characters and sprites), never tags.
    An empty ``<anim=x></anim>`` pair yields end_index == start_index - 1.
    """

    start_index: int
    end_index: int
    preset: str
    kind: AnimationKind

    def contains(self, index: int) -> bool:
        return self.start_index <= index <= self.end_index

    def __len__(self) -> int:
        return max(self.end_index - self.start_index + 1, 0)


__all__ = ["AnimationKind", "AnimationRange", "TypableCharacter"]
