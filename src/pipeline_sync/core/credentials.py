"""Bridge between build source secrets and controller credential ids.

Storing and syncing the secrets themselves is owned by the credential store.
The sync only needs to know which credential id a source secret maps to,
so the mapper talks to a ``CredentialBridge`` and gets back a typed
result: either the id, or the reason there is none.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, TypeAlias

from pipeline_sync.core.errors import CredentialFailure, CredentialResolutionError

if TYPE_CHECKING:
    from collections.abc import Collection

    from pipeline_sync.resources.base import ObjectMeta
    from pipeline_sync.resources.build_config import BuildConfig


@dataclass(frozen=True, slots=True)
class CredentialResolved:
    credential_id: str


@dataclass(frozen=True, slots=True)
class CredentialUnavailable:
    reason: CredentialFailure
    detail: str = ""


CredentialResult: TypeAlias = CredentialResolved | CredentialUnavailable


class CredentialBridge(Protocol):
    """Resolves a source secret of a resource into a credential id."""

    def resolve(self, secret_name: str, owner: ObjectMeta) -> CredentialResult: ...


class SecretNameCredentialBridge:
    """Derive credential ids from secret names.

    Synced secrets are registered under ``<namespace>-<secret>`` so that
    equally named secrets from different namespaces do not collide. With
    ``namespaced=False`` the bare secret name is used.

    If *known* is given, only those secret names resolve; any other secret
    yields ``NOT_FOUND``.
    """

    def __init__(self, *, namespaced: bool = True, known: Collection[str] | None = None) -> None:
        self.namespaced = namespaced
        self.known = frozenset(known) if known is not None else None

    def resolve(self, secret_name: str, owner: ObjectMeta) -> CredentialResult:
        if self.known is not None and secret_name not in self.known:
            return CredentialUnavailable(
                reason=CredentialFailure.NOT_FOUND,
                detail=f"secret '{secret_name}' is not synced",
            )
        if self.namespaced and owner.namespace:
            return CredentialResolved(credential_id=f"{owner.namespace}-{secret_name}")
        return CredentialResolved(credential_id=secret_name)

def resolve_credentials(bridge: CredentialBridge, bc: BuildConfig) -> CredentialResult:
    """Resolve the source secret of *bc* through *bridge*.

    Bridges may return ``CredentialUnavailable`` or raise
    ``CredentialResolutionError``; both end up as a ``CredentialUnavailable``.
    Any other exception from the bridge (a dropped connection, a timeout)
    is reported as ``BACKEND_UNAVAILABLE``.
    """
    source = bc.source
    if source is None or source.source_secret is None:
        return CredentialUnavailable(reason=CredentialFailure.NOT_CONFIGURED)
    try:
        return bridge.resolve(source.source_secret.name, bc.metadata)
    except CredentialResolutionError as exc:
        return CredentialUnavailable(reason=exc.reason, detail=str(exc))
    except Exception as exc:
        return CredentialUnavailable(
            reason=CredentialFailure.BACKEND_UNAVAILABLE,
            detail=f"{type(exc).__name__}: {exc}",
        )
