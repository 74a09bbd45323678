"""
Consul Client - Typed client for the Consul HTTP API.

Usage:
    from consul_client import ConsulClient
    from consul_client.types import FilterOptions, HealthServiceOptions

    consul = ConsulClient(host="localhost", port=8500, token="...")

    consul.kv.put("config/feature", "on")
    entry = consul.kv.get("config/feature")

    nodes = consul.catalog.nodes(FilterOptions(node_meta={"env": "prod"}))
    healthy = consul.health.service("web", HealthServiceOptions(passing=True))

Or with a process-wide client configured from CONSUL_* variables:
    from consul_client import init, get_client

    init()
    leader = get_client().status.leader()
"""

from consul_client.client import (
    init,
    shutdown,
    get_client,
    ConsulClient,
)
from consul_client.errors import (
    ConsulError,
    DecodeError,
    HttpRequestError,
    TransportError,
)
from consul_client.http import HttpClient, Request
from consul_client.kv import decode_value

__all__ = [
    "init",
    "shutdown",
    "get_client",
    "ConsulClient",
    "ConsulError",
    "DecodeError",
    "HttpRequestError",
    "TransportError",
    "HttpClient",
    "Request",
    "decode_value",
]

__version__ = "0.1.0"
