"""Checkout configuration models."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import Discriminator

from pipeline_sync.jobs.base import SnapshotModel


class UserRemoteConfig(SnapshotModel):
    """A single remote repository endpoint.

    An entry with only ``credentials_id`` set carries credentials for the
    remote without naming a URL.
    """

    url: str | None = None
    name: str | None = None
    refspec: str | None = None
    credentials_id: str | None = None


class BranchSpec(SnapshotModel):
    name: str


class GitScm(SnapshotModel):
    """Git checkout configuration.

    Only the first remote and the first branch spec are meaningful to the
    sync; further entries are carried through untouched.
    """

    kind: Literal["git"] = "git"
    user_remote_configs: tuple[UserRemoteConfig, ...] = ()
    branches: tuple[BranchSpec, ...] = ()
    extensions: tuple[dict[str, Any], ...] = ()

    def first_url(self) -> str | None:
        """URL of the first remote repository, if one is configured."""
        if not self.user_remote_configs:
            return None
        return self.user_remote_configs[0].url or None

    def first_branch(self) -> str | None:
        return self.branches[0].name if self.branches else None

    def with_remote(self, remote: UserRemoteConfig) -> GitScm:
        """Return a copy with *remote* appended to the remote list."""
        return self.model_copy(update={"user_remote_configs": (*self.user_remote_configs, remote)})


class UnsupportedScm(SnapshotModel):
    """Any checkout kind other than git (Subversion, Mercurial, ...)."""

    kind: Literal["unsupported"] = "unsupported"
    class_name: str = ""


ScmConfig = Annotated[GitScm | UnsupportedScm, Discriminator("kind")]
