"""Engine types (reconcile result, field changes)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, computed_field

from pipeline_sync.jobs.scm import GitScm  # noqa: TC001 — Pydantic needs this at runtime
from pipeline_sync.resources.build_config import (
    BuildConfig,  # noqa: TC001 — Pydantic needs this at runtime
)


class FieldChange(BaseModel):
    path: str
    before: Any = None
    after: Any = None


class ReconcileResult(BaseModel):
    """Outcome of reconciling a BuildConfig against its job.

    ``build_config`` is a reconciled copy; the caller persists it iff
    ``changed``.  ``scm`` is the job's git checkout with source secret
    credentials added, for the caller to install back on the job.
    """

    build_config: BuildConfig
    changes: list[FieldChange] = Field(default_factory=list)
    scm: GitScm | None = None

    @computed_field
    @property
    def changed(self) -> bool:
        return bool(self.changes)

    def __bool__(self) -> bool:
        return self.changed

    def summary(self) -> dict[str, dict[str, Any]]:
        return {c.path: {"from": c.before, "to": c.after} for c in self.changes}
