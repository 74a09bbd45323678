"""
Type definitions for the Consul HTTP API.

Option dataclasses describe what each call accepts and know how to turn
themselves into query parameters. Record shapes are TypedDicts that keep the
API's own PascalCase keys, so decoded JSON can be passed around unchanged.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, List, Literal, Optional, TypedDict

Consistency = Literal["default", "consistent", "stale"]
CheckStatus = Literal["passing", "warning", "critical"]
HealthState = Literal["passing", "warning", "critical", "any"]

# Python field name -> query parameter name, where they differ
_WIRE_NAMES = {
    "merge_central_config": "merge-central-config",
}


def _expand_node_meta(node_meta: Dict[str, str]) -> Dict[str, Any]:
    return {f"node-meta={key}": value for key, value in node_meta.items()}


# =============================================================================
# Query options
# =============================================================================


@dataclass
class QueryOptions:
    """Options accepted by every endpoint."""
    dc: Optional[str] = None
    ns: Optional[str] = None
    partition: Optional[str] = None
    pretty: bool = False

    def to_params(self) -> Dict[str, Any]:
        """
        Build the query parameters for this call.

        - None values are left out
        - boolean flags are only sent when True
        - consistency becomes a bare `consistent` or `stale` flag
        - node_meta becomes one `node-meta=<key>` entry per key
        """
        params: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None or value is False:
                continue

            if f.name == "consistency":
                if value == "consistent":
                    params["consistent"] = True
                elif value == "stale":
                    params["stale"] = True
            elif f.name == "node_meta":
                params.update(_expand_node_meta(value))
            else:
                params[_WIRE_NAMES.get(f.name, f.name)] = value
        return params


@dataclass
class BlockingQueryOptions(QueryOptions):
    """Options for reads that support blocking queries."""
    index: Optional[int] = None
    wait: Optional[str] = None
    consistency: Optional[Consistency] = None


@dataclass
class FilterOptions(BlockingQueryOptions):
    """Catalog listings that filter on node metadata or an expression."""
    node_meta: Optional[Dict[str, str]] = None
    filter: Optional[str] = None


@dataclass
class CatalogServiceOptions(FilterOptions):
    tag: Optional[str] = None


@dataclass
class HealthCheckOptions(BlockingQueryOptions):
    node_meta: Optional[Dict[str, str]] = None
    near: Optional[str] = None
    filter: Optional[str] = None


@dataclass
class HealthServiceOptions(HealthCheckOptions):
    tag: Optional[str] = None
    passing: bool = False
    peer: Optional[str] = None
    merge_central_config: bool = False
    sg: Optional[str] = None


@dataclass
class MembersOptions(QueryOptions):
    wan: bool = False
    segment: Optional[str] = None


@dataclass
class JoinOptions(QueryOptions):
    wan: bool = False


@dataclass
class MetricsOptions(QueryOptions):
    format: Optional[str] = None


@dataclass
class CheckUpdateOptions(QueryOptions):
    note: Optional[str] = None


@dataclass
class KVGetOptions(BlockingQueryOptions):
    raw: bool = False


@dataclass
class KVKeysOptions(BlockingQueryOptions):
    separator: Optional[str] = None


@dataclass
class KVPutOptions(QueryOptions):
    flags: Optional[int] = None
    cas: Optional[int] = None
    acquire: Optional[str] = None
    release: Optional[str] = None


@dataclass
class KVDeleteOptions(QueryOptions):
    recurse: bool = False
    cas: Optional[int] = None


@dataclass
class EventFireOptions(QueryOptions):
    node: Optional[str] = None
    service: Optional[str] = None
    tag: Optional[str] = None


@dataclass
class EventListOptions(BlockingQueryOptions):
    name: Optional[str] = None


@dataclass
class QueryExecuteOptions(QueryOptions):
    near: Optional[str] = None
    limit: Optional[int] = None


# =============================================================================
# Record shapes
# =============================================================================


class Node(TypedDict, total=False):
    ID: str
    Node: str
    Address: str
    Datacenter: str
    TaggedAddresses: Dict[str, str]
    Meta: Dict[str, str]
    CreateIndex: int
    ModifyIndex: int


class TaggedAddress(TypedDict):
    address: str
    port: int


class MeshGatewayConfig(TypedDict, total=False):
    Mode: str


class TransparentProxyConfig(TypedDict, total=False):
    OutboundListenerPort: int
    DialedDirectly: bool


class ServiceUpstream(TypedDict, total=False):
    Datacenter: str
    DestinationName: str
    DestinationNamespace: str
    DestinationType: str
    LocalBindAddress: str
    LocalBindPort: int
    MeshGateway: MeshGatewayConfig


class ServiceProxy(TypedDict, total=False):
    DestinationServiceID: str
    DestinationServiceName: str
    LocalServiceAddress: str
    LocalServicePort: int
    Mode: str
    Upstreams: List[ServiceUpstream]
    TransparentProxy: TransparentProxyConfig
    MeshGateway: MeshGatewayConfig


class Service(TypedDict, total=False):
    """Service definition, as registered with the agent or listed by the catalog."""
    ID: str
    Service: str
    Tags: List[str]
    Address: str
    Meta: Dict[str, str]
    Port: int
    TaggedAddresses: Dict[str, TaggedAddress]
    Namespace: str
    Kind: str
    Proxy: ServiceProxy
    Connect: "ServiceConnect"
    CreateIndex: int
    ModifyIndex: int


class ServiceConnect(TypedDict, total=False):
    Native: bool
    Proxy: ServiceProxy
    SidecarService: Service


class CheckDefinition(TypedDict, total=False):
    HTTP: str
    Header: Dict[str, List[str]]
    TCP: str
    TTL: str
    Interval: str
    Timeout: str
    Notes: str
    DeregisterCriticalServiceAfter: str
    TLSSkipVerify: bool
    Args: List[str]


class Check(TypedDict, total=False):
    Node: str
    CheckID: str
    Name: str
    Notes: str
    Status: CheckStatus
    ServiceID: str
    ServiceName: str
    Definition: CheckDefinition
    Namespace: str
    Output: str
    ServiceTags: List[str]
    CreateIndex: int
    ModifyIndex: int


class CatalogRegistration(TypedDict, total=False):
    ID: str
    Node: str
    Address: str
    Datacenter: str
    TaggedAddresses: Dict[str, str]
    NodeMeta: Dict[str, str]
    Service: Service
    Check: Check
    Checks: List[Check]
    SkipNodeUpdate: bool
    Namespace: str


class CatalogDeregistration(TypedDict, total=False):
    Node: str
    Address: str
    Datacenter: str
    ServiceID: str
    CheckID: str
    Namespace: str


class KVPair(TypedDict, total=False):
    """A KV entry. `Value` is base64 encoded by the API."""
    Key: str
    CreateIndex: int
    ModifyIndex: int
    LockIndex: int
    Flags: int
    Value: Optional[str]
    Session: str


class ServiceCheck(TypedDict, total=False):
    ID: str
    Namespace: str


class SessionEntry(TypedDict, total=False):
    ID: str
    Name: str
    Node: str
    Checks: List[str]
    NodeChecks: List[str]
    ServiceChecks: List[ServiceCheck]
    LockDelay: str
    Behavior: Literal["release", "delete"]
    TTL: str
    CreateIndex: int
    ModifyIndex: int


class Event(TypedDict, total=False):
    ID: str
    Name: str
    Payload: Optional[str]
    NodeFilter: str
    ServiceFilter: str
    TagFilter: str
    Version: int
    LTime: int


class KVTxnOp(TypedDict, total=False):
    """
    KV operation inside a transaction.

    Verb is one of: set, cas, lock, unlock, get, get-tree, check-index,
    check-session, check-not-exists, delete, delete-tree, delete-cas.
    """
    Verb: str
    Key: str
    Value: str
    Index: int
    Session: str
    Flags: int


class TxnOp(TypedDict, total=False):
    KV: KVTxnOp
    Service: Dict[str, Any]
    Check: Dict[str, Any]
    Node: Dict[str, Any]


class TxnResult(TypedDict, total=False):
    KV: KVPair


class TxnError(TypedDict):
    OpIndex: int
    What: str


class TxnResponse(TypedDict, total=False):
    Results: Optional[List[TxnResult]]
    Errors: Optional[List[TxnError]]
