"""Map exceptions to clean stderr messages and exit codes."""

from __future__ import annotations

import typer


def _err(msg: str, *, fg: str | None) -> None:
    """Print a styled message to stderr."""
    typer.echo(typer.style(msg, fg=fg), err=True)


def handle_error(exc: Exception, *, color: bool = True) -> int:
    """Print a clean error message to stderr and return an exit code.

    All errors map to exit code 1.  No tracebacks are printed.
    """
    from pipeline_sync.config.loader import ConfigError
    from pipeline_sync.core.errors import SyncError

    fg = typer.colors.RED if color else None

    if isinstance(exc, ConfigError):
        _err(f"Configuration error: {exc}", fg=fg)
    elif isinstance(exc, SyncError):
        _err(f"Sync error: {exc}", fg=fg)
    elif isinstance(exc, OSError):
        _err(f"I/O error: {exc}", fg=fg)
    else:
        _err(f"Error: {exc}", fg=fg)

    return 1
