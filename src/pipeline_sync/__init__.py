"""Keep OpenShift BuildConfigs and Jenkins pipeline jobs in sync."""

from pipeline_sync.engine import ReconcileResult, map_to_definition, reconcile

__version__ = "0.1.0"

__all__ = ["ReconcileResult", "__version__", "map_to_definition", "reconcile"]
