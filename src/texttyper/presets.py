"""In-memory preset lookup and range sink.

Hosts with their own animation system implement PresetLookup and
AnimationRangeSink directly; these cover tests, tools and simple hosts.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from texttyper.events import AnimationKind, AnimationRange


class PresetLibrary:
    """Named shake and curve presets.

    Usage:
        >>> library = PresetLibrary(shake=["lightrot"], curve=["bounce"])
        >>> library.contains_shake_preset("lightrot")
        True
        >>> library.kind_of("bounce")
        <AnimationKind.CURVE: 'curve'>

    """

    __slots__ = ("_curve", "_shake")

    def __init__(self, shake: Iterable[str] = (), curve: Iterable[str] = ()) -> None:
        self._shake = frozenset(shake)
        self._curve = frozenset(curve)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PresetLibrary:
        """Build from ``{"shake": [...], "curve": [...]}``; missing keys mean no presets."""
        return cls(shake=data.get("shake", ()), curve=data.get("curve", ()))

    def contains_shake_preset(self, name: str) -> bool:
        return name in self._shake

    def contains_curve_preset(self, name: str) -> bool:
        return name in self._curve

    def kind_of(self, name: str) -> AnimationKind | None:
        """Shake presets win when a name is in both sets."""
        if name in self._shake:
            return AnimationKind.SHAKE
        if name in self._curve:
            return AnimationKind.CURVE
        return None

    @property
    def shake_presets(self) -> frozenset[str]:
        return self._shake

    @property
    def curve_presets(self) -> frozenset[str]:
        return self._curve


class RangeRecorder:
    """AnimationRangeSink that keeps what it is given."""

    __slots__ = ("_ranges", "clear_count")

    def __init__(self) -> None:
        self._ranges: list[AnimationRange] = []
        self.clear_count = 0

    def register_range(self, animation_range: AnimationRange) -> None:
        self._ranges.append(animation_range)

    def clear_all(self) -> None:
        self._ranges.clear()
        self.clear_count += 1

    @property
    def ranges(self) -> tuple[AnimationRange, ...]:
        return tuple(self._ranges)

    @property
    def shake_ranges(self) -> tuple[AnimationRange, ...]:
        return tuple(r for r in self._ranges if r.kind is AnimationKind.SHAKE)

    @property
    def curve_ranges(self) -> tuple[AnimationRange, ...]:
        return tuple(r for r in self._ranges if r.kind is AnimationKind.CURVE)

    def __iter__(self) -> Iterator[AnimationRange]:
        return iter(self._ranges)

    def __len__(self) -> int:
        return len(self._ranges)


__all__ = ["PresetLibrary", "RangeRecorder"]
