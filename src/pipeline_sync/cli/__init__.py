"""``pipeline-sync`` command line: map BuildConfigs to jobs and reconcile them back."""

from __future__ import annotations

import logging
import os
import sys
from typing import Annotated

import typer

from pipeline_sync import __version__

LOG_ENV_VAR = "PIPELINE_SYNC_LOG"

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
_LOG_LEVELS: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

app = typer.Typer(
    name="pipeline-sync",
    help="Map OpenShift BuildConfigs to Jenkins pipeline jobs and back.",
    no_args_is_help=True,
    add_completion=False,
)


def _log_level(verbose: int) -> int | None:
    """Level for the ``pipeline_sync`` loggers, or None to leave logging alone.

    ``PIPELINE_SYNC_LOG`` wins over ``-v`` flags.  An unknown level name
    falls back to INFO with a warning on stderr.
    """
    name = os.environ.get(LOG_ENV_VAR, "").strip().upper()
    if name:
        level = _LOG_LEVELS.get(name)
        if level is None:
            typer.echo(
                f"WARNING: invalid {LOG_ENV_VAR} level '{name}', "
                f"expected one of {', '.join(_LOG_LEVELS)}; using INFO",
                err=True,
            )
            return logging.INFO
        return level
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return None


def _configure_logging(verbose: int) -> None:
    level = _log_level(verbose)
    if level is None:
        return
    # Third-party loggers stay at WARNING; only our own package is raised.
    logging.basicConfig(level=logging.WARNING, format=_LOG_FORMAT, stream=sys.stderr, force=True)
    logging.getLogger("pipeline_sync").setLevel(level)


def _show_version(value: bool) -> None:
    if not value:
        return
    typer.echo(f"pipeline-sync {__version__}")
    raise typer.Exit


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=_show_version,
            is_eager=True,
        ),
    ] = False,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            count=True,
            help="Log mapping decisions (-v) and field updates (-vv) to stderr.",
        ),
    ] = 0,
) -> None:
    del version
    _configure_logging(verbose)


# Commands register themselves on ``app``.
from pipeline_sync.cli import commands as _commands  # noqa: E402, F401
