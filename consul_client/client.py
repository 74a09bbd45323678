"""
Consul Client - Core client implementation.

Builds the shared HTTP transport from connection settings and exposes one
endpoint group per Consul subsystem.
"""

import logging
import os
from typing import Any, Dict, Optional

from consul_client.agent import AgentClient
from consul_client.catalog import CatalogClient
from consul_client.coordinate import CoordinateClient
from consul_client.event import EventClient
from consul_client.health import HealthClient
from consul_client.http import FetchFn, HttpClient
from consul_client.kv import KVClient
from consul_client.query import QueryClient
from consul_client.session import SessionClient
from consul_client.snapshot import SnapshotClient
from consul_client.status import StatusClient
from consul_client.txn import TxnClient

logger = logging.getLogger(__name__)

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 8500
TOKEN_HEADER = "X-Consul-Token"


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


class ConsulClient:
    """
    Client for the Consul HTTP API.

    Subsystems are available as attributes:
    agent, catalog, health, kv, session, event, status, coordinate, query,
    txn and snapshot. Configuration is fixed at construction, so one client
    can be shared between threads.
    """

    def __init__(
        self,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        secure: bool = False,
        token: Optional[str] = None,
        dc: Optional[str] = None,
        namespace: Optional[str] = None,
        partition: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        fetch_fn: Optional[FetchFn] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the Consul client.

        Args:
            host: Agent address (default: localhost)
            port: Agent HTTP port (default: 8500)
            secure: Use https instead of http
            token: ACL token, sent as the X-Consul-Token header
            dc: Default datacenter for every request
            namespace: Default namespace for every request (Enterprise)
            partition: Default admin partition for every request (Enterprise)
            headers: Extra headers sent with every request
            fetch_fn: Callable performing the network call (default: httpx)
            logger: Receives failures that operations swallow
        """
        protocol = "https" if secure else "http"
        self._base_url = f"{protocol}://{host}:{port}/v1"

        default_headers = dict(headers or {})
        if token:
            default_headers[TOKEN_HEADER] = token

        default_params: Dict[str, Any] = {"dc": dc, "ns": namespace, "partition": partition}
        self._http_client = HttpClient(
            self._base_url,
            headers=default_headers,
            fetch_fn=fetch_fn,
            params={k: v for k, v in default_params.items() if v is not None},
        )

        groups: Dict[str, Any] = {"client": self._http_client, "base_url": self._base_url, "logger": logger}
        self.agent = AgentClient(**groups)
        self.catalog = CatalogClient(**groups)
        self.health = HealthClient(**groups)
        self.kv = KVClient(**groups)
        self.session = SessionClient(**groups)
        self.event = EventClient(**groups)
        self.status = StatusClient(**groups)
        self.coordinate = CoordinateClient(**groups)
        self.query = QueryClient(**groups)
        self.txn = TxnClient(**groups)
        self.snapshot = SnapshotClient(**groups)

    @classmethod
    def from_env(cls, **overrides: Any) -> "ConsulClient":
        """
        Build a client from the standard Consul environment variables.

        Reads CONSUL_HTTP_ADDR ([scheme://]host[:port]), CONSUL_HTTP_TOKEN,
        CONSUL_HTTP_SSL, CONSUL_DATACENTER, CONSUL_NAMESPACE and
        CONSUL_PARTITION. Keyword arguments take precedence over the
        environment.
        """
        settings: Dict[str, Any] = {}

        addr = os.getenv("CONSUL_HTTP_ADDR", "").strip()
        if addr:
            if "://" in addr:
                scheme, addr = addr.split("://", 1)
                settings["secure"] = scheme.lower() == "https"
            addr = addr.rstrip("/")
            if ":" in addr:
                host, port = addr.rsplit(":", 1)
                settings["host"] = host
                settings["port"] = int(port)
            else:
                settings["host"] = addr

        if _env_flag("CONSUL_HTTP_SSL"):
            settings["secure"] = True

        env_names = {
            "token": "CONSUL_HTTP_TOKEN",
            "dc": "CONSUL_DATACENTER",
            "namespace": "CONSUL_NAMESPACE",
            "partition": "CONSUL_PARTITION",
        }
        for key, name in env_names.items():
            value = os.getenv(name)
            if value:
                settings[key] = value

        settings.update(overrides)
        return cls(**settings)

    @property
    def base_url(self) -> str:
        """API root, e.g. http://localhost:8500/v1."""
        return self._base_url

    @property
    def http_client(self) -> HttpClient:
        """Transport shared by all endpoint groups."""
        return self._http_client


# Global singleton instance
_client: Optional[ConsulClient] = None


def init(**kwargs: Any) -> ConsulClient:
    """
    Initialize the global Consul client.

    Args:
        **kwargs: ConsulClient arguments. Anything not given is read from the
                  CONSUL_* environment variables.

    Returns:
        The global client
    """
    global _client

    if _client is not None:
        logger.warning("Consul client already initialized, reinitializing...")

    _client = ConsulClient.from_env(**kwargs)
    logger.info(f"Consul client initialized for {_client.base_url}")
    return _client


def shutdown() -> None:
    """Drop the global Consul client."""
    global _client
    _client = None


def get_client() -> ConsulClient:
    """
    Get the global Consul client.

    Raises:
        RuntimeError: If init() hasn't been called
    """
    if _client is None:
        raise RuntimeError("Consul client not initialized. Call init() first.")

    return _client
