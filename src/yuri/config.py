"""ContextVar-based scan configuration for Yuri.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Scanner reads the active config once, at construction.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from yuri.config import ScanConfig, scan_config_context
    from yuri.lexer import Scanner

    with scan_config_context(ScanConfig(tab_width=4)):
        tokens = list(Scanner(source))

    # Or pass it explicitly
    tokens = list(Scanner(source, config=ScanConfig(trace_tokens=True)))

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Note: source_file is intentionally excluded. It is per-call state,
    not configuration, and stays on the Scanner instance.

    Attributes:
        tab_width: Tab stop interval for column counting in trivia.
            1 counts a tab as a single column.
        trace_tokens: Log every emitted token at DEBUG level

    """

    tab_width: int = 1
    trace_tokens: bool = False

    def __post_init__(self) -> None:
        if (
            not isinstance(self.tab_width, int)
            or isinstance(self.tab_width, bool)
            or self.tab_width < 1
        ):
            raise ValueError(f"tab_width must be an int >= 1, got {self.tab_width!r}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ScanConfig.from_dict({"tab_width": 4, "unknown_key": 1})
            >>> config.tab_width
            4

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (thread-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to the default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with scan_config_context(ScanConfig(tab_width=8)):
        ...     scanner = Scanner("\\tx")
        >>> # Automatically reset to previous config

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
