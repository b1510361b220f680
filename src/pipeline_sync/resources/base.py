"""Base resource class for OpenShift build resources."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ManifestModel(BaseModel):
    """Base for every model that round-trips through an OpenShift manifest.

    Python attributes are snake_case, manifest keys are camelCase. Keys a
    model does not declare are kept as extras so a dump never loses
    unrelated resource state.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class ObjectMeta(ManifestModel):
    """Identity of a resource in the cluster."""

    namespace: str = ""
    name: str = Field(min_length=1)


class Resource(ManifestModel):
    """Base class for all synced resources.

    Resources are pure data - they describe the desired state.
    The engine knows how to translate them to and from pipeline jobs.
    """

    resource_kind: ClassVar[str]

    api_version: str = ""
    kind: str = ""
    metadata: ObjectMeta

    @property
    def namespace_name(self) -> str:
        """Unique identity for this resource (e.g., 'ci/my-app-pipeline')."""
        return f"{self.metadata.namespace}/{self.metadata.name}"
