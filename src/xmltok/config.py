"""ContextVar-based scan configuration for xmltok.

Provides context-local configuration using Python's ContextVars (PEP 567).
A Tokenizer reads the active config once, when it is constructed.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from xmltok.config import ScanConfig, scan_config_context
    from xmltok import Tokenizer

    with scan_config_context(ScanConfig(strict_eof=True)):
        tokenizer = Tokenizer(data)
    # tokenizer keeps strict_eof=True after the block exits

    # Or pass it explicitly
    tokenizer = Tokenizer(data, config=ScanConfig(strict_eof=True))

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

# Largest file the command-line driver reads (matches a u32 length)
DEFAULT_MAX_FILE_BYTES = 2**32 - 1


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        strict_eof: Report input that ends inside an unterminated declaration,
            tag, attribute value or text run as INVALID (UNEXPECTED_EOF)
            instead of silently returning EOF
        max_file_bytes: Size limit applied when loading a file from disk

    """

    strict_eof: bool = False
    max_file_bytes: int = DEFAULT_MAX_FILE_BYTES

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ScanConfig attribute names.

        Returns:
            New ScanConfig instance with values from dict.

        Example:
            >>> config = ScanConfig.from_dict({
            ...     "strict_eof": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.strict_eof
            True

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
    """Get current scan configuration (context-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Args:
        config: ScanConfig instance to use for this context.

    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: ScanConfig to use within the context.

    Yields:
        None

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "DEFAULT_MAX_FILE_BYTES",
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
