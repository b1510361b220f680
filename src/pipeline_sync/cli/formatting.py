"""Reconcile and mapping output rendering (Terraform-style)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import typer

from pipeline_sync.jobs.definitions import InlineScript, ScmScript

if TYPE_CHECKING:
    from collections.abc import Callable

    from pipeline_sync.engine.types import ReconcileResult
    from pipeline_sync.jobs.definitions import PipelineDefinition

_UPDATE_COLOR = "yellow"
_UPDATE_SYMBOL = "~"


def styler(color: bool) -> Callable[..., str]:
    """Return ``typer.style`` when *color* is True, otherwise a passthrough."""
    if color:
        return typer.style
    return lambda text, **_kw: text


def _align_values(items: dict[str, str]) -> list[tuple[str, str]]:
    """Right-pad keys so ``=`` signs align."""
    if not items:
        return []
    max_key = max(len(k) for k in items)
    return [(k.ljust(max_key), v) for k, v in items.items()]


def _format_value(value: Any) -> str:
    """Format a value for display in a diff block."""
    if isinstance(value, str):
        if "\n" in value:
            return f"<{len(value.splitlines())} lines>"
        return f'"{value}"'
    if value is None:
        return "null"
    return str(value)


def format_reconcile(result: ReconcileResult, *, color: bool = True) -> str:
    """Render the fields a reconcile changed as a Terraform-style block."""
    name = result.build_config.namespace_name
    if not result.changed:
        return f"No changes. BuildConfig {name} is up-to-date with its job."

    style = styler(color)
    sc = {"fg": _UPDATE_COLOR}
    items = {
        c.path: f"{_format_value(c.before)} -> {_format_value(c.after)}" for c in result.changes
    }
    lines = [
        style(f"  # BuildConfig {name} will be updated in-place", bold=True, **sc),
        style(f'  {_UPDATE_SYMBOL} resource "BuildConfig" "{name}" {{', **sc),
        *[style(f"      {_UPDATE_SYMBOL} {k} = {v}", **sc) for k, v in _align_values(items)],
        style("    }", **sc),
    ]
    return "\n".join(lines)


def format_reconcile_summary(result: ReconcileResult, *, color: bool = True) -> str:
    """Render ``Reconcile: 2 fields to change.``"""
    style = styler(color)
    n = len(result.changes)
    text = f"{n} field{'s' if n != 1 else ''} to change"
    if n and color:
        text = style(text, fg=_UPDATE_COLOR)
    return f"Reconcile: {text}."


def format_definition_header(definition: PipelineDefinition, *, color: bool = True) -> str:
    """One-line description of a mapped definition."""
    style = styler(color)
    match definition:
        case InlineScript():
            text = "Inline pipeline script"
        case ScmScript(script_path=script_path):
            text = f"Pipeline script {script_path} from checkout"
        case _:
            text = "Unsupported pipeline definition"
    return style(f"# {text}", bold=True)
