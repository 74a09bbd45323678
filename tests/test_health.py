"""Tests for the health endpoints."""

import httpx
import pytest

from consul_client.errors import HttpRequestError, TransportError
from consul_client.types import HealthCheckOptions, HealthServiceOptions

BASE = "http://localhost:8500/v1"


@pytest.fixture
def service_entry():
    return {
        "Node": {"Node": "n1", "Address": "10.0.0.1"},
        "Service": {"ID": "web-1", "Service": "web", "Port": 80},
        "Checks": [{"CheckID": "serfHealth", "Status": "passing"}],
    }


class TestHealthClient:
    """Tests for HealthClient."""

    def test_node(self, consul, fetch, sent):
        fetch.return_value = httpx.Response(200, json=[{"CheckID": "serfHealth"}])

        assert consul.health.node("n1") == [{"CheckID": "serfHealth"}]
        assert sent()[0] == f"{BASE}/health/node/n1"

    def test_checks_with_near_and_filter(self, consul, sent):
        consul.health.checks("web", HealthCheckOptions(near="_agent", filter="Status == passing"))

        params = httpx.URL(sent()[0]).params
        assert sent()[0].startswith(f"{BASE}/health/checks/web?")
        assert params["near"] == "_agent"
        assert params["filter"] == "Status == passing"

    def test_service_passing_and_merge_central_config(self, consul, fetch, sent, service_entry):
        fetch.return_value = httpx.Response(200, json=[service_entry])

        result = consul.health.service(
            "web",
            HealthServiceOptions(tag="v1", passing=True, peer="east", merge_central_config=True),
        )

        assert result == [service_entry]
        assert sent()[0] == f"{BASE}/health/service/web?tag=v1&passing=true&peer=east&merge-central-config=true"

    def test_service_node_meta_and_consistency(self, consul, sent):
        consul.health.service("web", HealthServiceOptions(node_meta={"zone": "a"}, consistency="stale"))

        assert sent()[0] == f"{BASE}/health/service/web?stale=true&node-meta=zone=a"

    def test_service_sameness_group(self, consul, sent):
        consul.health.service("web", HealthServiceOptions(sg="shared"))
        assert sent()[0] == f"{BASE}/health/service/web?sg=shared"

    def test_connect_and_ingress(self, consul, sent):
        consul.health.connect("web")
        assert sent()[0] == f"{BASE}/health/connect/web"

        consul.health.ingress("web", HealthServiceOptions(passing=True))
        assert sent()[0] == f"{BASE}/health/ingress/web?passing=true"

    def test_state(self, consul, fetch, sent):
        fetch.return_value = httpx.Response(200, json=[{"CheckID": "db", "Status": "critical"}])

        assert consul.health.state("critical")[0]["Status"] == "critical"
        assert sent()[0] == f"{BASE}/health/state/critical"

    def test_http_failure_propagates(self, consul, fetch):
        fetch.return_value = httpx.Response(404, text="not found")

        with pytest.raises(HttpRequestError):
            consul.health.service("web")

    def test_transport_failure_propagates(self, consul, fetch):
        fetch.side_effect = httpx.ConnectTimeout("timed out")

        with pytest.raises(TransportError):
            consul.health.state("any")
