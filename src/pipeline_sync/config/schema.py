"""Sync settings."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from pipeline_sync.resources.build_config import DEFAULT_JENKINSFILE_PATH


class SyncSettings(BaseSettings):
    """Tunables for mapping and reconciling pipeline jobs.

    Fields can be set via constructor kwargs or environment variables with
    the ``PIPELINE_SYNC_`` prefix.  Constructor kwargs take precedence.
    """

    model_config = SettingsConfigDict(env_prefix="PIPELINE_SYNC_")

    default_jenkinsfile_path: str = Field(default=DEFAULT_JENKINSFILE_PATH, min_length=1)
    # Sandbox flag put on generated inline definitions.
    sandbox: bool = True
    # Re-derive git uri/ref from the job checkout on every checkout edit,
    # including edits that only touch the script path.
    sync_remote: bool = True
    # Credential ids of synced secrets are "<namespace>-<secret>".
    credentials_prefix_namespace: bool = True
