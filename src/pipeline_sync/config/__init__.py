"""Settings and YAML manifest loading."""

from pipeline_sync.config.loader import (
    ConfigError,
    dump_build_config,
    dump_definition,
    load_build_config,
    load_job,
    load_settings,
    save_build_config,
)
from pipeline_sync.config.schema import SyncSettings

__all__ = [
    "ConfigError",
    "SyncSettings",
    "dump_build_config",
    "dump_definition",
    "load_build_config",
    "load_job",
    "load_settings",
    "save_build_config",
]
