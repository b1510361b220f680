"""BuildConfig resource model."""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from pipeline_sync.resources.base import ManifestModel, Resource

JENKINS_PIPELINE_BUILD_STRATEGY = "JenkinsPipeline"
DEFAULT_JENKINSFILE_PATH = "Jenkinsfile"
GIT_SOURCE_TYPE = "Git"


class GitBuildSource(ManifestModel):
    uri: str | None = None
    ref: str | None = None


class SecretReference(ManifestModel):
    name: str = Field(min_length=1)


class BuildSource(ManifestModel):
    """Where the build takes its sources from."""

    type: str | None = None
    git: GitBuildSource | None = None
    context_dir: str | None = None
    source_secret: SecretReference | None = None


class JenkinsPipelineStrategy(ManifestModel):
    """Pipeline strategy block.

    ``jenkinsfile`` holds an inline script body, ``jenkinsfile_path`` the
    path of a script inside the git checkout.
    """

    jenkinsfile: str | None = None
    jenkinsfile_path: str | None = None


class BuildStrategy(ManifestModel):
    type: str | None = None
    jenkins_pipeline_strategy: JenkinsPipelineStrategy | None = None


class BuildConfigSpec(ManifestModel):
    source: BuildSource | None = None
    strategy: BuildStrategy | None = None


class BuildConfig(Resource):
    """An OpenShift BuildConfig.

    Only the fields the pipeline sync reads or writes are modelled; every
    other manifest key is carried through as an extra.
    """

    resource_kind: ClassVar[str] = "BuildConfig"

    api_version: str = "build.openshift.io/v1"
    kind: str = "BuildConfig"
    spec: BuildConfigSpec | None = None

    @property
    def source(self) -> BuildSource | None:
        return self.spec.source if self.spec is not None else None

    def pipeline_strategy(self) -> JenkinsPipelineStrategy | None:
        """Return the pipeline strategy block, or None if this is not a pipeline build."""
        if self.spec is None or self.spec.strategy is None:
            return None
        strategy = self.spec.strategy
        strategy_type = strategy.type
        if strategy_type and strategy_type.lower() != JENKINS_PIPELINE_BUILD_STRATEGY.lower():
            return None
        return strategy.jenkins_pipeline_strategy
