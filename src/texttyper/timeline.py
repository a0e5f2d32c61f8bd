"""Reveal timeline computation.

Walks a symbol sequence once and produces:
- one TypableCharacter per visible unit, carrying the delay to wait
  after revealing it
- one AnimationRange per closed anim/animation pair whose preset resolves

Pacing rules:
- ``<delay=s>`` sets the per-character delay to s seconds
- ``<speed=x>`` divides the base delay by x; a negative x multiplies by |x|
- closing either tag restores the base delay
- neither tag nests: a second open tag replaces the active value
- punctuation multiplies the delay after any override is applied

Thread Safety:
A Timeline is owned by one scheduler and rebuilt in place.

"""

from __future__ import annotations

import math
from collections.abc import Sequence

from texttyper.config import DEFAULT_PUNCTUATION_DELAY_MULTIPLIER, DEFAULT_PUNCTUATIONS
from texttyper.events import AnimationKind, AnimationRange, TypableCharacter
from texttyper.pool import PoolableList
from texttyper.profiling import get_reveal_accumulator
from texttyper.protocols import PresetLookup
from texttyper.symbols import CharSymbol, Symbol, TagSymbol
from texttyper.tags import CustomTags
from texttyper.utils.logger import get_logger

logger = get_logger(__name__)


def speed_to_delay(speed: float, base_delay: float) -> float:
    """Convert a speed factor into a per-character delay.

    Example:
        >>> speed_to_delay(2.0, 0.1)
        0.05
        >>> speed_to_delay(-3.0, 0.1)
        0.30000000000000004
    """
    if math.isclose(speed, 0.0, abs_tol=1e-6):
        return base_delay
    if speed < 0:
        return base_delay * abs(speed)
    return base_delay / speed


def resolve_animation_kind(presets: PresetLookup | None, name: str) -> AnimationKind | None:
    """Look the preset up as a shake first, then as a curve."""
    if presets is None:
        return None
    if presets.contains_shake_preset(name):
        return AnimationKind.SHAKE
    if presets.contains_curve_preset(name):
        return AnimationKind.CURVE
    return None


class Timeline:
    """Delays and animation ranges for one piece of text.

    Usage:
        >>> from texttyper.symbols import tokenize
        >>> timeline = Timeline()
        >>> timeline.rebuild(tokenize("A<delay=0.5>B</delay>C"), 0.1)
        >>> timeline.delays
        [0.1, 0.5, 0.1]

    """

    __slots__ = ("_characters", "_ranges")

    def __init__(self) -> None:
        self._characters: PoolableList[TypableCharacter] = PoolableList(
            TypableCharacter, on_return=TypableCharacter.reset
        )
        self._ranges: list[AnimationRange] = []

    def rebuild(
        self,
        symbols: Sequence[Symbol],
        base_delay: float,
        *,
        punctuations: frozenset[str] = DEFAULT_PUNCTUATIONS,
        punctuation_multiplier: float = DEFAULT_PUNCTUATION_DELAY_MULTIPLIER,
        presets: PresetLookup | None = None,
    ) -> None:
        """Recompute every delay and range from symbols.

        Previous entries go back to the pool first; the result replaces
        them entirely.

        Args:
            symbols: Output of tokenize()
            base_delay: Seconds per character outside any override
            punctuations: Characters whose delay gets multiplied
            punctuation_multiplier: Factor for punctuation delays
            presets: Resolves anim/animation parameters; None drops all ranges
        """
        characters = self._characters
        ranges = self._ranges
        characters.return_all()
        ranges.clear()

        active_delay = base_delay
        open_index = 0
        pending_preset = ""
        visible = 0

        for symbol in symbols:
            match symbol:
                case CharSymbol(text=text):
                    visible += 1
                    character = characters.get_item().initialize_as_character(text)
                    character.delay = active_delay
                    if text in punctuations:
                        character.delay *= punctuation_multiplier

                case TagSymbol() if symbol.is_sprite:
                    visible += 1
                    characters.get_item().initialize_as_sprite().delay = active_delay

                case TagSymbol(tag=tag) if tag.type == CustomTags.DELAY:
                    if tag.is_closing:
                        active_delay = base_delay
                    else:
                        active_delay = max(symbol.float_parameter(base_delay), 0.0)

                case TagSymbol(tag=tag) if tag.type == CustomTags.SPEED:
                    if tag.is_closing:
                        active_delay = base_delay
                    else:
                        active_delay = speed_to_delay(symbol.float_parameter(1.0), base_delay)

                case TagSymbol(tag=tag) if tag.type in CustomTags.ANIMATIONS:
                    if not tag.is_closing:
                        open_index = visible
                        pending_preset = tag.parameter or ""
                        continue
                    kind = resolve_animation_kind(presets, pending_preset)
                    if kind is None:
                        logger.debug("No shake or curve preset named %r; range dropped", pending_preset)
                        continue
                    ranges.append(AnimationRange(open_index, visible - 1, pending_preset, kind))

                case _:
                    # Renderer and unknown tags carry no timing
                    pass

        acc = get_reveal_accumulator()
        if acc is not None:
            acc.record_build(
                symbol_count=len(symbols),
                visible_count=visible,
                range_count=len(ranges),
            )

    @property
    def characters(self) -> tuple[TypableCharacter, ...]:
        return tuple(self._characters)

    @property
    def delays(self) -> list[float]:
        return [character.delay for character in self._characters]

    @property
    def ranges(self) -> tuple[AnimationRange, ...]:
        return tuple(self._ranges)

    def __len__(self) -> int:
        return len(self._characters)

    def __getitem__(self, index: int) -> TypableCharacter:
        return self._characters[index]


__all__ = ["Timeline", "resolve_animation_kind", "speed_to_delay"]
