"""Core infrastructure components for pipeline sync."""

from pipeline_sync.core.credentials import (
    CredentialBridge,
    CredentialResolved,
    CredentialResult,
    CredentialUnavailable,
    SecretNameCredentialBridge,
    resolve_credentials,
)
from pipeline_sync.core.errors import CredentialFailure, CredentialResolutionError, SyncError

__all__ = [
    "CredentialBridge",
    "CredentialFailure",
    "CredentialResolutionError",
    "CredentialResolved",
    "CredentialResult",
    "CredentialUnavailable",
    "SecretNameCredentialBridge",
    "SyncError",
    "resolve_credentials",
]
