"""Base class for job-side snapshot models."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class SnapshotModel(BaseModel):
    """Immutable view of job state handed over by the job watcher.

    Snapshots are frozen: the engine never edits job state in place and
    returns adjusted copies instead.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid", frozen=True
    )
