"""
texttyper: typewriter-style text reveal with inline pacing markup

Reveals rich text one character at a time. Inline tags control pacing
(``<delay=0.5>``, ``<speed=2>``) and mark animated regions
(``<anim=shake>``); other tags (``<b>``, ``<color=red>``, ``<sprite=0>``)
pass through to the renderer untouched.

Quick Start:
    >>> from texttyper import RevealScheduler, PlainTextRenderer
    >>> renderer = PlainTextRenderer()
    >>> scheduler = RevealScheduler(renderer)
    >>> scheduler.start("Hello, <b>world</b>!")
    >>> scheduler.advance(0.0)
    1
    >>> renderer.visible_text
    'H'

    >>> # Or just compute the timeline
    >>> from texttyper import build_timeline
    >>> build_timeline("A<delay=0.5>B</delay>C", print_delay=0.1).delays
    [0.1, 0.5, 0.1]

"""

from texttyper.config import (
    TyperConfig,
    get_typer_config,
    reset_typer_config,
    set_typer_config,
    typer_config_context,
)
from texttyper.errors import ConfigError, MarkupError, TextTyperError
from texttyper.events import AnimationKind, AnimationRange, TypableCharacter
from texttyper.pool import PoolableList
from texttyper.presets import PresetLibrary, RangeRecorder
from texttyper.profiling import RevealAccumulator, get_reveal_accumulator, profiled_reveal
from texttyper.protocols import AnimationRangeSink, PresetLookup, TextRenderer
from texttyper.renderers.plain import PlainTextRenderer
from texttyper.scheduler import RevealScheduler, RevealState
from texttyper.symbols import (
    CharSymbol,
    Symbol,
    TagSymbol,
    remove_custom_tags,
    remove_renderer_tags,
    strip_tags,
    tokenize,
    visible_length,
)
from texttyper.tags import RENDERER_TAGS, SPRITE_TAG, CustomTags, Tag, iter_tags, scan_next
from texttyper.timeline import Timeline

__version__ = "0.1.0"


def build_timeline(
    text: str,
    *,
    print_delay: float | None = None,
    config: TyperConfig | None = None,
    presets: PresetLookup | None = None,
) -> Timeline:
    """Tokenize text and compute its reveal timeline.

    Args:
        text: Markup to analyze
        print_delay: Base seconds per character; ignored unless > 0
        config: Pacing config (uses the context config if None)
        presets: Resolves animation presets; None drops every range

    Returns:
        A fresh Timeline

    Example:
        >>> build_timeline("Hi!", print_delay=0.1).delays
        [0.1, 0.1, 0.8]
    """
    config = config or get_typer_config()
    base_delay = print_delay if print_delay is not None and print_delay > 0 else config.print_delay
    timeline = Timeline()
    timeline.rebuild(
        tokenize(text),
        base_delay,
        punctuations=config.punctuations,
        punctuation_multiplier=config.punctuation_delay_multiplier,
        presets=presets,
    )
    return timeline


__all__ = [
    "RENDERER_TAGS",
    "SPRITE_TAG",
    "AnimationKind",
    "AnimationRange",
    "AnimationRangeSink",
    "CharSymbol",
    "ConfigError",
    "CustomTags",
    "MarkupError",
    "PlainTextRenderer",
    "PoolableList",
    "PresetLibrary",
    "PresetLookup",
    "RangeRecorder",
    "RevealAccumulator",
    "RevealScheduler",
    "RevealState",
    "Symbol",
    "Tag",
    "TagSymbol",
    "TextRenderer",
    "TextTyperError",
    "Timeline",
    "TypableCharacter",
    "TyperConfig",
    "__version__",
    "build_timeline",
    "get_reveal_accumulator",
    "get_typer_config",
    "iter_tags",
    "profiled_reveal",
    "remove_custom_tags",
    "remove_renderer_tags",
    "reset_typer_config",
    "scan_next",
    "set_typer_config",
    "strip_tags",
    "tokenize",
    "typer_config_context",
    "visible_length",
]
