"""Tests for the agent endpoints."""

import json
import logging

import httpx
import pytest

from consul_client.types import CheckUpdateOptions, JoinOptions, MembersOptions, MetricsOptions

BASE = "http://localhost:8500/v1"


class TestAgentReads:
    """Reads pass the response through and raise on failure."""

    def test_self(self, consul, fetch, sent):
        fetch.return_value = httpx.Response(200, json={"Config": {"Datacenter": "dc1"}})

        assert consul.agent.self() == {"Config": {"Datacenter": "dc1"}}
        assert sent()[0] == f"{BASE}/agent/self"

    def test_members_wan(self, consul, fetch, sent):
        fetch.return_value = httpx.Response(200, json=[{"Name": "server-1"}])

        assert consul.agent.members(MembersOptions(wan=True)) == [{"Name": "server-1"}]
        assert sent()[0] == f"{BASE}/agent/members?wan=true"

    def test_services_and_checks(self, consul, fetch, sent):
        fetch.return_value = httpx.Response(200, json={"web": {"ID": "web", "Service": "web"}})
        assert consul.agent.services()["web"]["Service"] == "web"
        assert sent()[0] == f"{BASE}/agent/services"

        fetch.return_value = httpx.Response(200, json={"web-ttl": {"CheckID": "web-ttl"}})
        assert "web-ttl" in consul.agent.checks()
        assert sent()[0] == f"{BASE}/agent/checks"

    def test_metrics_format(self, consul, fetch, sent):
        fetch.return_value = httpx.Response(200, text="# TYPE consul_runtime_alloc_bytes gauge")

        result = consul.agent.metrics(MetricsOptions(format="prometheus"))

        assert result == "# TYPE consul_runtime_alloc_bytes gauge"
        assert sent()[0] == f"{BASE}/agent/metrics?format=prometheus"

    def test_connect(self, consul, sent):
        consul.agent.connect()
        assert sent()[0] == f"{BASE}/agent/connect"

    def test_read_failure_raises(self, consul, fetch):
        fetch.return_value = httpx.Response(500, text="agent down")

        with pytest.raises(Exception, match="500"):
            consul.agent.self()


class TestAgentWrites:
    """Writes report success as a boolean."""

    def test_service_register(self, consul, fetch, sent):
        service = {"ID": "web-1", "Service": "web", "Port": 8080, "Tags": ["v1"]}

        assert consul.agent.service_register(service) is True

        url, request = sent()
        assert url == f"{BASE}/agent/service/register"
        assert request.method == "PUT"
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.content) == service

    def test_service_register_failure_returns_false(self, consul, fetch, caplog):
        fetch.return_value = httpx.Response(400, text="Invalid service address")

        with caplog.at_level(logging.ERROR):
            assert consul.agent.service_register({"Service": "web"}) is False

        assert "Invalid service address" in caplog.text

    def test_service_deregister(self, consul, sent):
        assert consul.agent.service_deregister("web-1") is True

        url, request = sent()
        assert url == f"{BASE}/agent/service/deregister/web-1"
        assert request.method == "PUT"
        assert request.content is None

    def test_check_register_and_deregister(self, consul, sent):
        assert consul.agent.check_register({"Name": "mem", "TTL": "15s"}) is True
        assert sent()[0] == f"{BASE}/agent/check/register"

        assert consul.agent.check_deregister("mem") is True
        assert sent()[0] == f"{BASE}/agent/check/deregister/mem"

    def test_join_leave_reload(self, consul, sent):
        assert consul.agent.join("10.0.0.5", JoinOptions(wan=True)) is True
        assert sent()[0] == f"{BASE}/agent/join/10.0.0.5?wan=true"

        assert consul.agent.leave() is True
        assert sent()[0] == f"{BASE}/agent/leave"

        assert consul.agent.reload() is True
        assert sent()[0] == f"{BASE}/agent/reload"

    def test_join_transport_failure_returns_false(self, consul, fetch):
        fetch.side_effect = httpx.ConnectError("connection refused")
        assert consul.agent.join("10.0.0.5") is False

    def test_check_update_sends_status_and_note(self, consul, sent):
        result = consul.agent.check_update("web-ttl", "warning", CheckUpdateOptions(note="slow", dc="dc1"))

        assert result is True
        url, request = sent()
        assert url == f"{BASE}/agent/check/update/web-ttl?dc=dc1"
        assert json.loads(request.content) == {"Status": "warning", "Output": "slow"}

    def test_check_update_without_note(self, consul, sent):
        assert consul.agent.check_update("web-ttl", "passing") is True
        assert json.loads(sent()[1].content) == {"Status": "passing"}

    def test_check_id_is_percent_encoded(self, consul, sent):
        assert consul.agent.check_update("service:web 1", "passing") is True
        assert sent()[0] == f"{BASE}/agent/check/update/service%3Aweb%201"

    def test_check_update_failure_returns_false(self, consul, fetch):
        fetch.return_value = httpx.Response(404, text="CheckID does not have associated TTL")
        assert consul.agent.check_update("missing", "critical") is False
