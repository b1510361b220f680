"""Reconcile a BuildConfig with edits made to its pipeline job.

The job side is authoritative for what it carries: a non-blank inline
script replaces the stored one, and a git checkout replaces the stored
git uri/ref.  Only fields that differ afterwards are reported as changes,
so reconciling a job that was just mapped from the same BuildConfig is a
no-op.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pipeline_sync.config.schema import SyncSettings
from pipeline_sync.engine.refs import join_path, normalize_path, strip_context_dir
from pipeline_sync.engine.source_config import apply_scm_config, get_or_create_source
from pipeline_sync.engine.types import FieldChange, ReconcileResult
from pipeline_sync.jobs.definitions import InlineScript, ScmScript, describe_definition
from pipeline_sync.jobs.scm import GitScm, UserRemoteConfig

if TYPE_CHECKING:
    from pipeline_sync.jobs.job import BranchProperty, JobSnapshot
    from pipeline_sync.resources.build_config import (
        BuildConfig,
        BuildSource,
        JenkinsPipelineStrategy,
    )

logger = logging.getLogger(__name__)

GIT_URI = "spec.source.git.uri"
GIT_REF = "spec.source.git.ref"
JENKINSFILE = "spec.strategy.jenkinsPipelineStrategy.jenkinsfile"
JENKINSFILE_PATH = "spec.strategy.jenkinsPipelineStrategy.jenkinsfilePath"


def _tracked(bc: BuildConfig) -> dict[str, Any]:
    """Fields a reconcile may write, with empty strings folded into None."""
    source = bc.source
    git = source.git if source is not None else None
    strategy = bc.pipeline_strategy()
    return {
        GIT_URI: (git.uri if git is not None else None) or None,
        GIT_REF: (git.ref if git is not None else None) or None,
        JENKINSFILE: (strategy.jenkinsfile if strategy is not None else None) or None,
        JENKINSFILE_PATH: (strategy.jenkinsfile_path if strategy is not None else None) or None,
    }


def _diff(before: dict[str, Any], after: dict[str, Any]) -> list[FieldChange]:
    return [
        FieldChange(path=key, before=before[key], after=after[key])
        for key in before
        if before[key] != after[key]
    ]


def _with_source_secret(scm: GitScm, source: BuildSource) -> GitScm:
    """Add the source secret of the BuildConfig to the checkout remotes."""
    secret = source.source_secret
    if secret is None:
        return scm
    if any(r.credentials_id == secret.name for r in scm.user_remote_configs):
        return scm
    logger.info("Adding build source secret %s as remote credentials", secret.name)
    return scm.with_remote(UserRemoteConfig(credentials_id=secret.name))


def _reconcile_scm_script(
    definition: ScmScript,
    bc: BuildConfig,
    strategy: JenkinsPipelineStrategy,
    settings: SyncSettings,
) -> GitScm | None:
    source = get_or_create_source(bc)
    match definition.scm:
        case GitScm() as git_scm:
            git_scm = _with_source_secret(git_scm, source)
        case _:
            git_scm = None

    script_path = definition.script_path
    if not script_path.strip():
        return git_scm

    # Compare in the mapped (context-joined) form so spelling differences
    # such as "./src" or "a//b" do not count as edits.
    current = strategy.jenkinsfile_path or settings.default_jenkinsfile_path
    if source.context_dir:
        unchanged = normalize_path(script_path) == join_path(source.context_dir, current)
        script_path = strip_context_dir(script_path, source.context_dir)
    else:
        unchanged = normalize_path(script_path) == normalize_path(current)

    if not unchanged:
        logger.debug(
            "Updating BuildConfig %s jenkinsfile path to %s from %s",
            bc.namespace_name,
            script_path,
            current,
        )
        strategy.jenkinsfile_path = script_path

    if git_scm is not None and settings.sync_remote:
        apply_scm_config(bc, git_scm)
    return git_scm


def _reconcile_inline(
    definition: InlineScript, bc: BuildConfig, strategy: JenkinsPipelineStrategy
) -> None:
    script = definition.script
    if script.strip() and script != strategy.jenkinsfile:
        logger.debug("Updating BuildConfig %s inline jenkinsfile", bc.namespace_name)
        strategy.jenkinsfile = script


def _reconcile_branch(
    branch: BranchProperty | None,
    bc: BuildConfig,
    strategy: JenkinsPipelineStrategy,
    settings: SyncSettings,
) -> bool:
    """Sync from a discovered branch; return False if the job has none usable."""
    if branch is None:
        return False
    match branch.scm:
        case GitScm() as scm:
            if not apply_scm_config(bc, scm, ref_override=branch.name):
                return False
            if not strategy.jenkinsfile_path:
                strategy.jenkinsfile_path = settings.default_jenkinsfile_path
            return True
        case _:
            return False


def reconcile(
    job: JobSnapshot, bc: BuildConfig, *, settings: SyncSettings | None = None
) -> ReconcileResult:
    """Update a copy of *bc* from the current definition of *job*.

    *bc* itself is left untouched; the result carries the reconciled copy
    and the changed fields.  The caller persists the copy iff the result
    is truthy.
    """
    settings = settings if settings is not None else SyncSettings()
    updated = bc.model_copy(deep=True)

    strategy = updated.pipeline_strategy()
    if strategy is None:
        logger.warning(
            "No JenkinsPipeline strategy available in BuildConfig %s", bc.namespace_name
        )
        return ReconcileResult(build_config=updated)

    logger.info("Updating BuildConfig %s from job %s", bc.namespace_name, job.full_name)
    before = _tracked(updated)
    scm = None

    match job.definition:
        case ScmScript() as definition:
            scm = _reconcile_scm_script(definition, updated, strategy, settings)
        case InlineScript() as definition:
            _reconcile_inline(definition, updated, strategy)
        case definition:
            if not _reconcile_branch(job.branch, updated, strategy, settings):
                logger.warning(
                    "Cannot update BuildConfig %s as the job definition is %s",
                    bc.namespace_name,
                    describe_definition(definition),
                )

    changes = _diff(before, _tracked(updated))
    for change in changes:
        logger.debug("BuildConfig %s: %s changed", bc.namespace_name, change.path)
    return ReconcileResult(build_config=updated, changes=changes, scm=scm)
