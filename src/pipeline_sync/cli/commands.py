"""CLI command implementations."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated

import typer

from pipeline_sync.cli import app
from pipeline_sync.cli.errors import handle_error

BuildConfigPath = Annotated[
    Path,
    typer.Argument(help="Path to the BuildConfig manifest."),
]

NoColor = Annotated[
    bool,
    typer.Option("--no-color", help="Disable colored output."),
]


def _use_color(no_color: bool) -> bool:
    """Determine whether to use color output."""
    return not (no_color or os.environ.get("NO_COLOR"))


@app.command(name="map")
def map_cmd(
    build_config: BuildConfigPath,
    no_color: NoColor = False,
) -> None:
    """Show the pipeline definition a BuildConfig maps to."""
    from pipeline_sync.cli.formatting import format_definition_header
    from pipeline_sync.config import dump_definition, load_build_config, load_settings
    from pipeline_sync.core.credentials import SecretNameCredentialBridge
    from pipeline_sync.engine import map_to_definition

    color = _use_color(no_color)
    try:
        bc = load_build_config(build_config)
        settings = load_settings(build_config.parent)
        bridge = SecretNameCredentialBridge(namespaced=settings.credentials_prefix_namespace)
        definition = map_to_definition(bc, credentials=bridge, settings=settings)
    except Exception as exc:
        raise typer.Exit(handle_error(exc, color=color)) from exc

    if definition is None:
        typer.echo(f"BuildConfig {bc.namespace_name} does not map to a pipeline job.", err=True)
        raise typer.Exit(1)

    typer.echo(format_definition_header(definition, color=color))
    typer.echo(dump_definition(definition), nl=False)


@app.command(name="reconcile")
def reconcile_cmd(
    job: Annotated[
        Path,
        typer.Argument(help="Path to the job snapshot document."),
    ],
    build_config: BuildConfigPath,
    out: Annotated[
        Path | None,
        typer.Option("--out", "-o", help="Write the updated BuildConfig to file."),
    ] = None,
    no_sync_remote: Annotated[
        bool,
        typer.Option(
            "--no-sync-remote",
            help="Do not refresh git uri/ref from the job checkout.",
        ),
    ] = False,
    no_color: NoColor = False,
) -> None:
    """Show how a BuildConfig must change to match its job.

    Exits with 0 when the BuildConfig is up-to-date and 2 when it changed.
    """
    from pipeline_sync.cli.formatting import format_reconcile, format_reconcile_summary
    from pipeline_sync.config import load_build_config, load_job, load_settings, save_build_config
    from pipeline_sync.engine import reconcile

    color = _use_color(no_color)
    try:
        snapshot = load_job(job)
        bc = load_build_config(build_config)
        settings = load_settings(
            build_config.parent, sync_remote=False if no_sync_remote else None
        )
        result = reconcile(snapshot, bc, settings=settings)
    except Exception as exc:
        raise typer.Exit(handle_error(exc, color=color)) from exc

    typer.echo(format_reconcile(result, color=color))
    if not result.changed:
        raise typer.Exit(0)

    typer.echo()
    typer.echo(format_reconcile_summary(result, color=color))

    if out is not None:
        try:
            save_build_config(result.build_config, out)
        except OSError as exc:
            raise typer.Exit(handle_error(exc, color=color)) from exc
        typer.echo(f"\nBuildConfig saved to {out}")

    raise typer.Exit(2)
