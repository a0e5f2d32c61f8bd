"""ContextVar-based typer configuration for texttyper.

Provides the pacing defaults a RevealScheduler falls back to when a call
does not override them. A config can be passed explicitly, set on a
scheduler, or installed for the current context.

Usage:
    # Explicit
    scheduler.start(text, config=TyperConfig(print_delay=0.05))

    # Context-wide default
    with typer_config_context(TyperConfig(print_amount=3)):
        scheduler.start(text)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any

from texttyper.errors import ConfigError

DEFAULT_PRINT_DELAY = 0.02
DEFAULT_PRINT_AMOUNT = 1
DEFAULT_PUNCTUATION_DELAY_MULTIPLIER = 8.0
DEFAULT_PUNCTUATIONS = frozenset({".", ",", "!", "?"})


@dataclass(frozen=True, slots=True)
class TyperConfig:
    """Immutable pacing configuration.

    Attributes:
        print_delay: Seconds before the next character may reveal
        punctuation_delay_multiplier: Factor applied to the delay of
            punctuation characters, after any delay/speed override
        punctuations: Literal characters that count as punctuation
        print_amount: Characters revealed per tick
        use_unscaled_time: Hint for the driver to wait in real time
            rather than scaled game time

    """

    print_delay: float = DEFAULT_PRINT_DELAY
    punctuation_delay_multiplier: float = DEFAULT_PUNCTUATION_DELAY_MULTIPLIER
    punctuations: frozenset[str] = DEFAULT_PUNCTUATIONS
    print_amount: int = DEFAULT_PRINT_AMOUNT
    use_unscaled_time: bool = False

    def __post_init__(self) -> None:
        if self.print_delay < 0:
            raise ConfigError("print_delay", f"must be >= 0, got {self.print_delay}")
        if self.punctuation_delay_multiplier < 0:
            raise ConfigError(
                "punctuation_delay_multiplier",
                f"must be >= 0, got {self.punctuation_delay_multiplier}",
            )
        if self.print_amount < 1:
            raise ConfigError("print_amount", f"must be >= 1, got {self.print_amount}")
        if not isinstance(self.punctuations, frozenset):
            # A plain string means "each of these characters"
            object.__setattr__(self, "punctuations", frozenset(self.punctuations))

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "TyperConfig":
        """Create TyperConfig from dictionary.

        Useful when pacing comes from an asset file or host settings.
        Unknown keys are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                TyperConfig attribute names.

        Returns:
            New TyperConfig instance with values from dict.

        Example:
            >>> config = TyperConfig.from_dict({
            ...     "print_delay": 0.05,
            ...     "punctuations": ".!",
            ... })
            >>> sorted(config.punctuations)
            ['!', '.']

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)

    def is_punctuation(self, text: str) -> bool:
        """Return True if text is one of the configured punctuation marks."""
        return text in self.punctuations


_DEFAULT_CONFIG: TyperConfig = TyperConfig()

_typer_config: ContextVar[TyperConfig] = ContextVar(
    "typer_config",
    default=_DEFAULT_CONFIG,
)


def get_typer_config() -> TyperConfig:
    """Get the typer configuration for the current context."""
    return _typer_config.get()


def set_typer_config(config: TyperConfig) -> None:
    """Set the typer configuration for the current context.

    Args:
        config: TyperConfig instance to use for this context.

    """
    _typer_config.set(config)


def reset_typer_config() -> None:
    """Reset to the module default configuration."""
    _typer_config.set(_DEFAULT_CONFIG)


@contextmanager
def typer_config_context(config: TyperConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: TyperConfig to use within the context.

    Example:
        >>> with typer_config_context(TyperConfig(print_delay=0.1)):
        ...     get_typer_config().print_delay
        0.1

    Restores the previous config even if an exception is raised.

    """
    previous = _typer_config.get()
    _typer_config.set(config)
    try:
        yield
    finally:
        _typer_config.set(previous)


__all__ = [
    "DEFAULT_PRINT_AMOUNT",
    "DEFAULT_PRINT_DELAY",
    "DEFAULT_PUNCTUATIONS",
    "DEFAULT_PUNCTUATION_DELAY_MULTIPLIER",
    "TyperConfig",
    "get_typer_config",
    "reset_typer_config",
    "set_typer_config",
    "typer_config_context",
]
