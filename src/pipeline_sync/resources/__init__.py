"""OpenShift resource definitions."""

from pipeline_sync.resources.base import ObjectMeta, Resource
from pipeline_sync.resources.build_config import (
    DEFAULT_JENKINSFILE_PATH,
    GIT_SOURCE_TYPE,
    JENKINS_PIPELINE_BUILD_STRATEGY,
    BuildConfig,
    BuildConfigSpec,
    BuildSource,
    BuildStrategy,
    GitBuildSource,
    JenkinsPipelineStrategy,
    SecretReference,
)

__all__ = [
    "DEFAULT_JENKINSFILE_PATH",
    "GIT_SOURCE_TYPE",
    "JENKINS_PIPELINE_BUILD_STRATEGY",
    "BuildConfig",
    "BuildConfigSpec",
    "BuildSource",
    "BuildStrategy",
    "GitBuildSource",
    "JenkinsPipelineStrategy",
    "ObjectMeta",
    "Resource",
    "SecretReference",
]
