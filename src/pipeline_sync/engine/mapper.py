"""Map a BuildConfig to the pipeline definition of its job."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pipeline_sync.config.schema import SyncSettings
from pipeline_sync.engine.refs import join_path
from pipeline_sync.engine.source_config import build_scm_config
from pipeline_sync.jobs.definitions import InlineScript, ScmScript

if TYPE_CHECKING:
    from pipeline_sync.core.credentials import CredentialBridge
    from pipeline_sync.jobs.definitions import PipelineDefinition
    from pipeline_sync.resources.build_config import BuildConfig

logger = logging.getLogger(__name__)


def map_to_definition(
    bc: BuildConfig,
    *,
    credentials: CredentialBridge | None = None,
    settings: SyncSettings | None = None,
) -> PipelineDefinition | None:
    """Build the pipeline definition a job for *bc* should run.

    An inline script always wins; otherwise the script is read from the
    git source at the strategy's script path (under the context directory,
    if any).  Returns None when *bc* is not a pipeline build or has neither
    an inline script nor a git source.
    """
    strategy = bc.pipeline_strategy()
    if strategy is None:
        return None
    settings = settings if settings is not None else SyncSettings()

    logger.info("Mapping %s %s to pipeline definition", bc.resource_kind, bc.namespace_name)
    if strategy.jenkinsfile:
        return InlineScript(script=strategy.jenkinsfile, sandbox=settings.sandbox)

    scm = build_scm_config(bc, credentials)
    if scm is None:
        logger.warning(
            "%s %s has no source repository, cannot map it to a pipeline job",
            bc.resource_kind,
            bc.namespace_name,
        )
        return None

    script_path = strategy.jenkinsfile_path or settings.default_jenkinsfile_path
    source = bc.source
    if source is not None and source.context_dir:
        script_path = join_path(source.context_dir, script_path)
    return ScmScript(scm=scm, script_path=script_path)
