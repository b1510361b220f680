"""Sync error types."""

from __future__ import annotations

from enum import Enum


class CredentialFailure(str, Enum):
    """Why a source secret could not be turned into a credential id."""

    NOT_CONFIGURED = "not-configured"
    NOT_FOUND = "not-found"
    BACKEND_UNAVAILABLE = "backend-unavailable"


class SyncError(Exception):
    """Base exception for pipeline sync errors."""


class CredentialResolutionError(SyncError):
    """Raised by credential bridges when a secret cannot be resolved.

    The mapper never lets this escape: it is converted to a
    ``CredentialUnavailable`` result and the mapping proceeds anonymously.
    """

    def __init__(self, secret_name: str, reason: CredentialFailure, detail: str = "") -> None:
        msg = f"Cannot resolve credentials for secret '{secret_name}' ({reason.value})"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)
        self.secret_name = secret_name
        self.reason = reason
