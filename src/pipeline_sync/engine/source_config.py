"""Translate between a BuildConfig source and a git checkout configuration."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pipeline_sync.core.credentials import (
    CredentialResolved,
    CredentialUnavailable,
    resolve_credentials,
)
from pipeline_sync.engine.refs import strip_ref_decorations
from pipeline_sync.jobs.scm import BranchSpec, GitScm, UserRemoteConfig
from pipeline_sync.resources.build_config import (
    GIT_SOURCE_TYPE,
    BuildConfigSpec,
    BuildSource,
    GitBuildSource,
)

if TYPE_CHECKING:
    from pipeline_sync.core.credentials import CredentialBridge
    from pipeline_sync.resources.build_config import BuildConfig

logger = logging.getLogger(__name__)


def get_or_create_source(bc: BuildConfig) -> BuildSource:
    """Return the BuildConfig source, creating an empty one if it has none."""
    if bc.spec is None:
        bc.spec = BuildConfigSpec()
    if bc.spec.source is None:
        bc.spec.source = BuildSource()
    return bc.spec.source


def update_git_source_url(bc: BuildConfig, url: str, ref: str | None) -> None:
    """Point the git source of *bc* at *url* / *ref*."""
    source = get_or_create_source(bc)
    if source.git is None:
        source.git = GitBuildSource()
    source.git.uri = url
    source.git.ref = ref


def _credentials_id(bc: BuildConfig, credentials: CredentialBridge | None) -> str | None:
    if credentials is None:
        logger.debug("No credential bridge, checking out %s anonymously", bc.namespace_name)
        return None
    match resolve_credentials(credentials, bc):
        case CredentialResolved(credential_id=credential_id):
            return credential_id
        case CredentialUnavailable(reason=reason, detail=detail):
            logger.warning(
                "Source secret of BuildConfig %s unavailable (%s%s), checking out anonymously",
                bc.namespace_name,
                reason.value,
                f": {detail}" if detail else "",
            )
            return None


def build_scm_config(bc: BuildConfig, credentials: CredentialBridge | None = None) -> GitScm | None:
    """Build the git checkout configuration for *bc*.

    Returns None when the BuildConfig has no git source URL.
    """
    source = bc.source
    if source is None or source.git is None or not source.git.uri:
        return None

    ref = source.git.ref or ""
    credentials_id = None
    if source.source_secret is not None:
        credentials_id = _credentials_id(bc, credentials)

    remote = UserRemoteConfig(
        url=source.git.uri, refspec=ref or None, credentials_id=credentials_id
    )
    # No branch spec means "build the default branch".
    branches = (BranchSpec(name=ref),) if ref.strip() else ()
    return GitScm(user_remote_configs=(remote,), branches=branches)


def apply_scm_config(bc: BuildConfig, scm: GitScm, ref_override: str | None = None) -> bool:
    """Copy URL and ref of the first remote of *scm* into the git source of *bc*.

    *ref_override* wins over the branch spec of the checkout.  Returns True
    when a URL was written; the caller diffs if it needs to know whether
    anything actually changed.

    The source is created and typed ``Git`` before the URL is checked, so
    *bc* may gain an empty git-typed source even when False is returned.
    Neither is a tracked reconcile field.
    """
    source = get_or_create_source(bc)
    source.type = GIT_SOURCE_TYPE

    url = scm.first_url()
    if not url:
        logger.debug("Checkout for BuildConfig %s has no remote URL", bc.namespace_name)
        return False

    ref = ref_override or None
    if ref is None:
        branch = scm.first_branch()
        if branch is not None:
            ref = strip_ref_decorations(branch) or None

    update_git_source_url(bc, url, ref)
    return True
