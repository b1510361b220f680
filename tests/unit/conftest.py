"""Shared fixtures for unit tests."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from pipeline_sync.config.schema import SyncSettings
from pipeline_sync.resources.build_config import BuildConfig

if TYPE_CHECKING:
    from collections.abc import Callable

_SYNC_ENV_VARS = (
    "PIPELINE_SYNC_DEFAULT_JENKINSFILE_PATH",
    "PIPELINE_SYNC_SANDBOX",
    "PIPELINE_SYNC_SYNC_REMOTE",
    "PIPELINE_SYNC_CREDENTIALS_PREFIX_NAMESPACE",
    "PIPELINE_SYNC_LOG",
    "NO_COLOR",
)

REPO_URL = "https://example/repo.git"


@pytest.fixture(autouse=True)
def _clean_sync_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove PIPELINE_SYNC_* env vars so unit tests don't leak host config."""
    for var in _SYNC_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def settings() -> SyncSettings:
    return SyncSettings()


@pytest.fixture
def make_bc() -> Callable[..., BuildConfig]:
    """Factory fixture: build a pipeline BuildConfig from keyword shortcuts.

    ``uri=None`` leaves out the git block; ``with_source=False`` leaves out
    the whole source.
    """

    def _make(
        *,
        uri: str | None = REPO_URL,
        ref: str | None = None,
        context_dir: str | None = None,
        secret: str | None = None,
        jenkinsfile: str | None = None,
        jenkinsfile_path: str | None = None,
        with_source: bool = True,
        strategy_type: str = "JenkinsPipeline",
    ) -> BuildConfig:
        spec: dict[str, Any] = {
            "strategy": {
                "type": strategy_type,
                "jenkinsPipelineStrategy": {
                    "jenkinsfile": jenkinsfile,
                    "jenkinsfilePath": jenkinsfile_path,
                },
            },
        }
        if with_source:
            source: dict[str, Any] = {"type": "Git", "contextDir": context_dir}
            if uri is not None:
                source["git"] = {"uri": uri, "ref": ref}
            if secret is not None:
                source["sourceSecret"] = {"name": secret}
            spec["source"] = source
        return BuildConfig.model_validate(
            {"metadata": {"namespace": "ci", "name": "app-pipeline"}, "spec": spec}
        )

    return _make
