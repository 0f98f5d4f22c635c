"""ContextVar-based analysis configuration for arithlex.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per Analyzer instance, read by analyze() in the context.

Usage:
    # In the Analyzer class
    analyzer = Analyzer(AnalyzeConfig(max_workers=4))
    result = analyzer(lines)  # Sets config internally via ContextVar

    # Direct usage
    from arithlex.config import AnalyzeConfig, analyze_config_context

    with analyze_config_context(AnalyzeConfig(max_workers=4)):
        result = analyze(lines)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AnalyzeConfig:
    """Immutable analysis configuration.

    Note: source_file is per-call state, not configuration. It is passed
    to analyze() directly.

    Attributes:
        max_workers: Threads used to analyze lines; 1 means sequential
        parallel_threshold: Minimum number of input lines before worker
            threads are used

    """

    max_workers: int = 1
    parallel_threshold: int = 256

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")
        if self.parallel_threshold < 1:
            raise ValueError(
                f"parallel_threshold must be >= 1, got {self.parallel_threshold}"
            )

    @classmethod
    def from_dict(cls, config_dict: dict) -> "AnalyzeConfig":
        """Create AnalyzeConfig from dictionary.

        Only includes keys that are valid AnalyzeConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = AnalyzeConfig.from_dict({"max_workers": 4, "color": "red"})
            >>> config.max_workers
            4

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)

    def use_threads(self, line_count: int) -> bool:
        """Whether a batch of line_count lines should be analyzed in parallel."""
        return self.max_workers > 1 and line_count >= self.parallel_threshold


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: AnalyzeConfig = AnalyzeConfig()

_analyze_config: ContextVar[AnalyzeConfig] = ContextVar(
    "analyze_config",
    default=_DEFAULT_CONFIG,
)


def get_analyze_config() -> AnalyzeConfig:
    """Get current analysis configuration (thread-local)."""
    return _analyze_config.get()


def set_analyze_config(config: AnalyzeConfig) -> None:
    """Set analysis configuration for current context.

    Args:
        config: AnalyzeConfig instance to use for this context.

    """
    _analyze_config.set(config)


def reset_analyze_config() -> None:
    """Reset to the module-level default configuration."""
    _analyze_config.set(_DEFAULT_CONFIG)


@contextmanager
def analyze_config_context(config: AnalyzeConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with analyze_config_context(AnalyzeConfig(max_workers=2)):
        ...     get_analyze_config().max_workers
        2

    """
    previous = _analyze_config.get()
    _analyze_config.set(config)
    try:
        yield
    finally:
        _analyze_config.set(previous)


__all__ = [
    "AnalyzeConfig",
    "analyze_config_context",
    "get_analyze_config",
    "reset_analyze_config",
    "set_analyze_config",
]
