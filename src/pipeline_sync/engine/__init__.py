"""Mapping and reconcile engine."""

from pipeline_sync.engine.mapper import map_to_definition
from pipeline_sync.engine.reconcile import reconcile
from pipeline_sync.engine.refs import (
    join_path,
    normalize_path,
    relativize_path,
    strip_context_dir,
    strip_ref_decorations,
)
from pipeline_sync.engine.source_config import (
    apply_scm_config,
    build_scm_config,
    get_or_create_source,
    update_git_source_url,
)
from pipeline_sync.engine.types import FieldChange, ReconcileResult

__all__ = [
    "FieldChange",
    "ReconcileResult",
    "apply_scm_config",
    "build_scm_config",
    "get_or_create_source",
    "join_path",
    "map_to_definition",
    "normalize_path",
    "reconcile",
    "relativize_path",
    "strip_context_dir",
    "strip_ref_decorations",
    "update_git_source_url",
]
