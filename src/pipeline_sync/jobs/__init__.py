"""Job-side models: checkout configurations, pipeline definitions, snapshots."""

from pipeline_sync.jobs.definitions import (
    InlineScript,
    PipelineDefinition,
    ScmScript,
    UnsupportedDefinition,
    describe_definition,
)
from pipeline_sync.jobs.job import BranchProperty, JobSnapshot
from pipeline_sync.jobs.scm import BranchSpec, GitScm, ScmConfig, UnsupportedScm, UserRemoteConfig

__all__ = [
    "BranchProperty",
    "BranchSpec",
    "GitScm",
    "InlineScript",
    "JobSnapshot",
    "PipelineDefinition",
    "ScmConfig",
    "ScmScript",
    "UnsupportedDefinition",
    "UnsupportedScm",
    "UserRemoteConfig",
    "describe_definition",
]
