"""ABOUTME: Kinsta API client, credential loading and client caching."""

from .client import KinstaClient, KinstaFailure, KinstaResult, KinstaSuccess
from .client_cache import (
    ClientReady,
    ClientResult,
    ClientUnavailable,
    KinstaClientCache,
    KinstaClientUnavailable,
    config_fingerprint,
)
from .config import (
    KinstaAuthError,
    KinstaConfig,
    KinstaSettings,
    is_kinsta_configured,
    load_kinsta_config,
)

__all__ = [
    # Client
    "KinstaClient",
    "KinstaResult",
    "KinstaSuccess",
    "KinstaFailure",
    # Cache
    "KinstaClientCache",
    "KinstaClientUnavailable",
    "ClientResult",
    "ClientReady",
    "ClientUnavailable",
    "config_fingerprint",
    # Config
    "KinstaConfig",
    "KinstaSettings",
    "KinstaAuthError",
    "load_kinsta_config",
    "is_kinsta_configured",
]
