"""texttyper RevealAccumulator: opt-in profiling for timeline builds.

Records what each timeline rebuild processed:
- Number of builds
- Symbols walked
- Visible characters produced
- Animation ranges emitted

Zero overhead when disabled (get_reveal_accumulator() returns None).

Example:
    from texttyper.profiling import profiled_reveal

    with profiled_reveal() as metrics:
        scheduler.start("Hello <delay=0.5>there</delay>")

    print(metrics.summary())
    # {"total_ms": 0.3, "builds": 1, "symbols": 30, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class RevealAccumulator:
    """Accumulated metrics across timeline builds.

    Attributes:
        start_time: Profiling start timestamp.
        builds: Number of timeline rebuilds recorded.
        symbol_count: Symbols walked across all builds.
        visible_count: Visible characters produced across all builds.
        range_count: Animation ranges emitted across all builds.

    """

    start_time: float = field(default_factory=perf_counter)
    builds: int = 0
    symbol_count: int = 0
    visible_count: int = 0
    range_count: int = 0

    def record_build(self, symbol_count: int, visible_count: int, range_count: int) -> None:
        """Record one timeline rebuild."""
        self.builds += 1
        self.symbol_count += symbol_count
        self.visible_count += visible_count
        self.range_count += range_count

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of build metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "builds": self.builds,
            "symbols": self.symbol_count,
            "visible_characters": self.visible_count,
            "animation_ranges": self.range_count,
        }


_accumulator: ContextVar[RevealAccumulator | None] = ContextVar(
    "reveal_accumulator",
    default=None,
)


def get_reveal_accumulator() -> RevealAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_reveal() -> Iterator[RevealAccumulator]:
    """Context manager for profiled timeline builds.

    Yields:
        RevealAccumulator populated by every rebuild inside the block.

    """
    acc = RevealAccumulator()
    token: Token[RevealAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)


__all__ = ["RevealAccumulator", "get_reveal_accumulator", "profiled_reveal"]
