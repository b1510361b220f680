"""YAML manifest and settings loader."""

from __future__ import annotations

import logging
import os
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import dotenv_values
from pydantic import ValidationError
from ruamel.yaml import YAML

from pipeline_sync.config.schema import SyncSettings
from pipeline_sync.jobs.job import JobSnapshot
from pipeline_sync.resources.build_config import BuildConfig

if TYPE_CHECKING:
    from pipeline_sync.jobs.definitions import PipelineDefinition

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised for manifest / settings loading and validation errors."""


# Field name → environment variable.
_SETTINGS_ENV_MAP: dict[str, str] = {
    "default_jenkinsfile_path": "PIPELINE_SYNC_DEFAULT_JENKINSFILE_PATH",
    "sandbox": "PIPELINE_SYNC_SANDBOX",
    "sync_remote": "PIPELINE_SYNC_SYNC_REMOTE",
    "credentials_prefix_namespace": "PIPELINE_SYNC_CREDENTIALS_PREFIX_NAMESPACE",
}


def load_settings(config_dir: Path | None = None, **overrides: Any) -> SyncSettings:
    """Resolve settings from kwargs, env vars, and a ``.env`` file in *config_dir*.

    Priority (highest wins): kwarg > env var > ``.env`` file.  Kwargs set
    to ``None`` are ignored.
    """
    config_dir = Path(config_dir) if config_dir is not None else Path.cwd()
    env_file = config_dir / ".env"
    dotenv_vals = dotenv_values(env_file, encoding="utf-8-sig") if env_file.is_file() else {}

    resolved: dict[str, Any] = {}
    for field, env_key in _SETTINGS_ENV_MAP.items():
        val = overrides.get(field)
        if val is None:
            val = os.environ.get(env_key)
        if val is None:
            val = dotenv_vals.get(env_key)
        if val is not None:
            resolved[field] = val

    try:
        return SyncSettings(**resolved)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        raw = YAML(typ="safe").load(path)
    except Exception as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError(f"{path} does not contain a YAML mapping")
    return raw


def load_build_config(path: Path | str) -> BuildConfig:
    """Load a BuildConfig manifest.

    Raises:
        ConfigError: On YAML parse errors, a non-BuildConfig document, or
            validation failures.
    """
    path = Path(path)
    raw = _read_yaml(path)
    kind = raw.get("kind", BuildConfig.resource_kind)
    if kind != BuildConfig.resource_kind:
        raise ConfigError(f"{path}: expected kind {BuildConfig.resource_kind}, got {kind}")
    try:
        bc = BuildConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
    logger.info("Loaded BuildConfig %s from %s", bc.namespace_name, path)
    return bc


def load_job(path: Path | str) -> JobSnapshot:
    """Load a job snapshot document.

    Raises:
        ConfigError: On YAML parse errors or validation failures.
    """
    path = Path(path)
    raw = _read_yaml(path)
    try:
        job = JobSnapshot.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
    logger.info("Loaded job %s from %s", job.full_name or "<unnamed>", path)
    return job


def _dump_yaml(data: Any) -> str:
    yaml = YAML(typ="safe", pure=True)
    yaml.default_flow_style = False
    buf = StringIO()
    yaml.dump(data, buf)
    return buf.getvalue()


def dump_build_config(bc: BuildConfig) -> str:
    """Render *bc* as a manifest, camelCase keys, unset fields omitted."""
    return _dump_yaml(bc.model_dump(mode="json", by_alias=True, exclude_none=True))


def dump_definition(definition: PipelineDefinition) -> str:
    """Render a pipeline definition as YAML, in the job snapshot format."""
    return _dump_yaml(definition.model_dump(mode="json", by_alias=True, exclude_none=True))


def save_build_config(bc: BuildConfig, path: Path | str) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_build_config(bc), encoding="utf-8")
