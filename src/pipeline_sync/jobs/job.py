"""Job snapshot model."""

from __future__ import annotations

from pipeline_sync.jobs.base import SnapshotModel
from pipeline_sync.jobs.definitions import (
    PipelineDefinition,  # noqa: TC001 — Pydantic needs this at runtime
)
from pipeline_sync.jobs.scm import ScmConfig  # noqa: TC001 — Pydantic needs this at runtime


class BranchProperty(SnapshotModel):
    """Branch discovered by a multi-branch or organization folder."""

    name: str
    scm: ScmConfig | None = None


class JobSnapshot(SnapshotModel):
    """State of a pipeline job at the time it changed.

    Attributes:
        full_name: Job path in the controller (e.g. "ci/ci-my-app-pipeline")
        definition: The job's pipeline definition, if it has one
        branch: Discovered-branch property for jobs created by branch discovery
    """

    full_name: str = ""
    definition: PipelineDefinition | None = None
    branch: BranchProperty | None = None
