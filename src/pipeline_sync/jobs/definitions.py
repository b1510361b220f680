"""Pipeline definition variants installed on a job."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Discriminator

from pipeline_sync.jobs.base import SnapshotModel
from pipeline_sync.jobs.scm import ScmConfig  # noqa: TC001 — Pydantic needs this at runtime


class InlineScript(SnapshotModel):
    """Pipeline script stored directly on the job."""

    kind: Literal["inline"] = "inline"
    script: str
    sandbox: bool = True


class ScmScript(SnapshotModel):
    """Pipeline script read from a checkout at ``script_path``."""

    kind: Literal["scm"] = "scm"
    scm: ScmConfig
    script_path: str = ""


class UnsupportedDefinition(SnapshotModel):
    """A definition kind the sync does not translate (e.g. multi-branch binders)."""

    kind: Literal["unsupported"] = "unsupported"
    class_name: str = ""


PipelineDefinition = Annotated[
    InlineScript | ScmScript | UnsupportedDefinition,
    Discriminator("kind"),
]


def describe_definition(definition: InlineScript | ScmScript | UnsupportedDefinition | None) -> str:
    """Short human-readable name of a definition kind, for log lines."""
    match definition:
        case None:
            return "none"
        case UnsupportedDefinition(class_name=class_name) if class_name:
            return class_name
        case _:
            return definition.kind
