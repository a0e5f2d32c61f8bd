"""Reveal scheduler: the typewriter state machine.

The scheduler never waits. A host driver calls tick() (or advance() with
the elapsed frame time) and is told how long to wait before the next
batch. Pausing and skipping take effect synchronously.

States:
    IDLE -> REVEALING       start()
    REVEALING -> PAUSED     pause()
    PAUSED -> REVEALING     resume()
    REVEALING -> COMPLETED  tick() reveals the last unit
    any state -> COMPLETED  skip()

Usage:
    >>> scheduler = RevealScheduler()
    >>> scheduler.start("Hi!", print_delay=0.1)
    >>> scheduler.tick(), scheduler.tick()
    (0.1, 0.1)
    >>> scheduler.tick() is None, scheduler.state
    (True, <RevealState.COMPLETED: 4>)

Thread Safety:
Single-threaded. One driver owns a scheduler; no locks.

"""

from __future__ import annotations

from enum import Enum, auto

from texttyper.config import TyperConfig, get_typer_config
from texttyper.events import AnimationRange
from texttyper.protocols import (
    AnimationRangeSink,
    CharacterPrintedListener,
    PresetLookup,
    RevealCompletedListener,
    TextRenderer,
)
from texttyper.symbols import Symbol, remove_custom_tags, tokenize
from texttyper.timeline import Timeline
from texttyper.utils.logger import get_logger

logger = get_logger(__name__)


class RevealState(Enum):
    """Scheduler states."""

    IDLE = auto()
    REVEALING = auto()
    PAUSED = auto()
    COMPLETED = auto()


class RevealScheduler:
    """Reveals marked-up text a batch of characters at a time.

    Args:
        renderer: Receives the display text and the visible count
        presets: Resolves anim/animation parameters to shake or curve
        range_sink: Receives animation ranges whenever the timeline is rebuilt
        config: Pacing defaults; falls back to the context config

    """

    __slots__ = (
        "_active_config",
        "_character_listeners",
        "_completed_listeners",
        "_config",
        "_generation",
        "_presets",
        "_print_amount",
        "_printed",
        "_range_sink",
        "_renderer",
        "_state",
        "_stripped_text",
        "_symbols",
        "_timeline",
        "_wait",
    )

    def __init__(
        self,
        renderer: TextRenderer | None = None,
        *,
        presets: PresetLookup | None = None,
        range_sink: AnimationRangeSink | None = None,
        config: TyperConfig | None = None,
    ) -> None:
        self._renderer = renderer
        self._presets = presets
        self._range_sink = range_sink
        self._config = config
        self._active_config: TyperConfig = config or get_typer_config()

        self._character_listeners: list[CharacterPrintedListener] = []
        self._completed_listeners: list[RevealCompletedListener] = []

        self._symbols: list[Symbol] = []
        self._timeline = Timeline()
        self._stripped_text = ""
        self._state = RevealState.IDLE
        self._printed = 0
        self._print_amount = self._active_config.print_amount
        self._wait = 0.0
        # Bumped whenever the text or timeline is replaced
        self._generation = 0

    # -- listeners ---------------------------------------------------------

    def add_character_listener(self, listener: CharacterPrintedListener) -> None:
        """Call listener(text) for every revealed unit ("" for sprites)."""
        self._character_listeners.append(listener)

    def remove_character_listener(self, listener: CharacterPrintedListener) -> None:
        self._character_listeners.remove(listener)

    def add_completed_listener(self, listener: RevealCompletedListener) -> None:
        """Call listener() when a reveal finishes or is skipped."""
        self._completed_listeners.append(listener)

    def remove_completed_listener(self, listener: RevealCompletedListener) -> None:
        self._completed_listeners.remove(listener)

    # -- state -------------------------------------------------------------

    @property
    def state(self) -> RevealState:
        return self._state

    @property
    def is_typing(self) -> bool:
        return self._state is RevealState.REVEALING

    def is_skippable(self) -> bool:
        """True while a reveal is running, i.e. skipping would cut it short."""
        return self._state is RevealState.REVEALING

    @property
    def printed_characters(self) -> int:
        """Visible units revealed so far."""
        return self._printed

    @property
    def total_characters(self) -> int:
        return len(self._timeline)

    @property
    def print_amount(self) -> int:
        return self._print_amount

    @property
    def pending_delay(self) -> float:
        """Seconds left before the next tick is due (0 when due now)."""
        return max(self._wait, 0.0)

    @property
    def stripped_text(self) -> str:
        """Text handed to the renderer: scheduler tags removed."""
        return self._stripped_text

    @property
    def timeline(self) -> Timeline:
        return self._timeline

    @property
    def ranges(self) -> tuple[AnimationRange, ...]:
        return self._timeline.ranges

    @property
    def config(self) -> TyperConfig:
        """Config used by the current (or last) reveal."""
        return self._active_config

    @property
    def use_unscaled_time(self) -> bool:
        return self._active_config.use_unscaled_time

    # -- control -----------------------------------------------------------

    def start(
        self,
        text: str,
        *,
        print_delay: float | None = None,
        skip: int = 0,
        print_amount: int | None = None,
        config: TyperConfig | None = None,
    ) -> None:
        """Begin revealing text, cancelling any reveal in progress.

        Args:
            text: Markup to reveal
            print_delay: Base seconds per character; ignored unless > 0
            skip: Units already revealed at the start (clamped to the text)
            print_amount: Units per tick; ignored unless >= 1
            config: Replaces the scheduler config for this reveal
        """
        self._cancel()
        self._active_config = config or self._config or get_typer_config()

        self._symbols = tokenize(text)
        self._rebuild_timeline(print_delay)
        self._stripped_text = remove_custom_tags(text)

        total = len(self._timeline)
        self._printed = min(max(skip, 0), total)
        self._print_amount = self._resolve_print_amount(print_amount)

        if self._renderer is not None:
            self._renderer.set_stripped_text(self._stripped_text)
            self._renderer.set_visible_count(self._printed)

        self._state = RevealState.REVEALING
        logger.debug("Reveal started: %d units, %d already shown", total, self._printed)

    def tick(self) -> float | None:
        """Reveal the next batch.

        Returns:
            Seconds to wait before the next tick, or None once the reveal
            is complete or not running.
        """
        if self._state is not RevealState.REVEALING:
            return None

        total = len(self._timeline)
        before = self._printed
        self._printed = min(before + self._print_amount, total)
        batch = [str(self._timeline[index]) for index in range(before, self._printed)]
        delay = self._timeline[self._printed - 1].delay if self._printed else 0.0
        if self._renderer is not None and batch:
            self._renderer.set_visible_count(self._printed)

        # Listeners may pause, skip or restart; stop once this reveal is no longer ours
        generation = self._generation
        for text in batch:
            self._notify_character(text)
            if self._state is not RevealState.REVEALING or self._generation != generation:
                return None

        if self._printed >= total:
            self._complete()
            return None
        return delay

    def advance(self, elapsed: float) -> int:
        """Feed elapsed time from the host clock.

        Ticks as many times as the accumulated waits allow.

        Args:
            elapsed: Seconds since the previous call

        Returns:
            Number of units revealed by this call.
        """
        if self._state is not RevealState.REVEALING:
            return 0

        before = self._printed
        self._wait -= max(elapsed, 0.0)
        while self._wait <= 0:
            delay = self.tick()
            if delay is None:
                self._wait = 0.0
                break
            self._wait += delay
        # A listener may have restarted the reveal with a shorter prefix
        return max(self._printed - before, 0)

    def pause(self) -> None:
        """Stop revealing; the revealed count is kept."""
        if self._state is RevealState.REVEALING:
            self._cancel()
            self._state = RevealState.PAUSED
            logger.debug("Reveal paused at %d", self._printed)

    def resume(
        self,
        *,
        print_delay: float | None = None,
        skip: int | None = None,
        print_amount: int | None = None,
        config: TyperConfig | None = None,
    ) -> None:
        """Continue revealing the current text.

        Passing print_delay or config recomputes the timeline; otherwise the
        existing one is kept. Does nothing when skip (default: the current
        count) already covers the whole text.

        Args:
            print_delay: New base seconds per character; ignored unless > 0
            skip: Units to treat as revealed when resuming
            print_amount: New units per tick; ignored unless >= 1
            config: Replaces the scheduler config from here on
        """
        skip = self._printed if skip is None else skip
        if skip >= len(self._timeline):
            return

        self._cancel()
        if config is not None or (print_delay is not None and print_delay > 0):
            self._active_config = config or self._active_config
            self._rebuild_timeline(print_delay)

        self._printed = max(skip, 0)
        if print_amount is not None or config is not None:
            self._print_amount = self._resolve_print_amount(print_amount)
        if self._renderer is not None:
            self._renderer.set_visible_count(self._printed)

        self._state = RevealState.REVEALING
        logger.debug("Reveal resumed at %d", self._printed)

    def skip(self) -> None:
        """Reveal everything now and report completion.

        Every call notifies completion listeners once, even when the reveal
        has already finished or never started.
        """
        self._cancel()
        self._printed = len(self._timeline)
        if self._renderer is not None:
            self._renderer.set_visible_count(self._printed)
        self._complete()

    # -- internals ---------------------------------------------------------

    def _rebuild_timeline(self, print_delay: float | None) -> None:
        config = self._active_config
        base_delay = print_delay if print_delay is not None and print_delay > 0 else config.print_delay
        self._generation += 1
        self._timeline.rebuild(
            self._symbols,
            base_delay,
            punctuations=config.punctuations,
            punctuation_multiplier=config.punctuation_delay_multiplier,
            presets=self._presets,
        )
        if self._range_sink is not None:
            self._range_sink.clear_all()
            for animation_range in self._timeline.ranges:
                self._range_sink.register_range(animation_range)

    def _resolve_print_amount(self, print_amount: int | None) -> int:
        if print_amount is not None and print_amount >= 1:
            return print_amount
        return self._active_config.print_amount

    def _cancel(self) -> None:
        self._wait = 0.0

    def _complete(self) -> None:
        self._state = RevealState.COMPLETED
        self._wait = 0.0
        logger.debug("Reveal completed: %d units", self._printed)
        for listener in list(self._completed_listeners):
            listener()

    def _notify_character(self, text: str) -> None:
        for listener in list(self._character_listeners):
            listener(text)


__all__ = ["RevealScheduler", "RevealState"]
