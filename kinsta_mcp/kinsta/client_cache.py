"""ABOUTME: Cached KinstaClient handle, rebuilt whenever the Kinsta environment changes.

The cache holds a single (client, fingerprint) slot. The fingerprint is
recomputed from the live environment on every lookup, so credential changes
are picked up without an explicit invalidation call.

Concurrency: lookups are not locked. Two tools resolving the client at the
same moment after a configuration change may both miss and both build a
client. Both are valid for the same configuration and the last write wins.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Callable, Literal, Mapping, Optional, Union

from ..constants import ENV_API_BASE_URL, ENV_API_KEY, ENV_COMPANY_ID
from .client import KinstaClient
from .config import KinstaAuthError, KinstaConfig, load_kinsta_config

logger = logging.getLogger(__name__)

FINGERPRINT_FIELDS = (ENV_API_KEY, ENV_COMPANY_ID, ENV_API_BASE_URL)
FINGERPRINT_SEPARATOR = "|"
UNSET_PLACEHOLDER = "<unset>"
UNKNOWN_AUTH_ERROR = "Unknown auth error"


def config_fingerprint(environ: Optional[Mapping[str, str]] = None) -> str:
    """Fingerprint the Kinsta configuration variables.

    Fields are read in a fixed order. An unset variable renders as an explicit
    placeholder, so "unset" and "set to empty string" fingerprint differently.
    Set values are length-prefixed so a separator inside a value cannot make
    two configurations collide.
    """
    env = os.environ if environ is None else environ
    values = []
    for name in FINGERPRINT_FIELDS:
        value = env.get(name)
        values.append(UNSET_PLACEHOLDER if value is None else f"{len(value)}:{value}")
    return FINGERPRINT_SEPARATOR.join(values)


class KinstaClientUnavailable(RuntimeError):
    """Raised by get_client_or_raise when no client can be built."""


@dataclass(frozen=True)
class ClientReady:
    client: KinstaClient
    success: Literal[True] = field(default=True, init=False)


@dataclass(frozen=True)
class ClientUnavailable:
    error: str
    success: Literal[False] = field(default=False, init=False)


ClientResult = Union[ClientReady, ClientUnavailable]


class KinstaClientCache:
    """Single-slot cache for the KinstaClient built from the current environment."""

    def __init__(
        self,
        client_factory: Callable[[KinstaConfig], KinstaClient] = KinstaClient,
        config_loader: Callable[[], KinstaConfig] = load_kinsta_config,
    ):
        """Initialize an empty cache.

        Args:
            client_factory: Builds a client from a config (default KinstaClient)
            config_loader: Loads the config from the environment (default load_kinsta_config)
        """
        self._client_factory = client_factory
        self._config_loader = config_loader
        self._client: Optional[KinstaClient] = None
        self._fingerprint: Optional[str] = None

    def get_client(self) -> ClientResult:
        """Return the cached client, rebuilding it if the environment changed.

        Never raises. On a credential failure the slot is cleared and the
        failure message is returned.
        """
        fingerprint = config_fingerprint()
        if self._client is not None and self._fingerprint == fingerprint:
            return ClientReady(client=self._client)

        try:
            config = self._config_loader()
            client = self._client_factory(config)
        except KinstaAuthError as e:
            self.clear()
            logger.warning(f"Kinsta credentials unavailable [{e.code}]: {e}")
            return ClientUnavailable(error=str(e))
        except Exception as e:
            self.clear()
            logger.error(f"Failed to build Kinsta client: {e}", exc_info=True)
            return ClientUnavailable(error=str(e) or UNKNOWN_AUTH_ERROR)

        if self._client is not None:
            logger.info("Kinsta configuration changed, rebuilding client")
        self._client = client
        self._fingerprint = fingerprint
        return ClientReady(client=client)

    def get_client_or_raise(self) -> KinstaClient:
        """Return the client or raise KinstaClientUnavailable with the failure message."""
        result = self.get_client()
        if not result.success:
            raise KinstaClientUnavailable(result.error)
        return result.client

    def clear(self) -> None:
        """Drop the cached client."""
        self._client = None
        self._fingerprint = None
