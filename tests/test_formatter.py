"""Tests for table and description rendering (core/formatter.py)."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from kubesim.core.formatter import (
    ResourceFormatter,
    TABLE_COLUMNS,
    app_label,
    column_widths,
    parse_age,
    parse_ready,
    render_records,
    render_table,
    table_cells,
)
from kubesim.core.kinds import ResourceKind
from kubesim.core.store import ResourceStore

NOW = datetime(2024, 1, 10, 12, 0, 0, tzinfo=timezone.utc)


def _formatter() -> ResourceFormatter:
    return ResourceFormatter(now=NOW)


def _describe(store: ResourceStore, kind: ResourceKind, name: str, namespace: str | None = None) -> str:
    record = store.find(kind, name, namespace)
    assert record is not None
    return _formatter().render_description(kind, record)


# ---------------------------------------------------------------------------
# Aligned tables
# ---------------------------------------------------------------------------

class TestRenderTable:
    def test_literal_layout(self) -> None:
        text = render_table(("A", "BB"), [["x", "yyy"]])
        assert text.split("\n") == [
            "A   BB   ",
            "-- ----",
            "x   yyy  ",
        ]

    def test_widths_use_longest_cell_plus_padding(self) -> None:
        assert column_widths(("NAME", "AGE"), [["kube-system", "3d"]]) == [13, 5]

    def test_headers_only(self) -> None:
        text = render_table(("NAME", "STATUS"), [])
        assert text.split("\n") == ["NAME   STATUS  ", "----- -------"]

    def test_columns_line_up(self, store: ResourceStore) -> None:
        records = store.list_resources(ResourceKind.PODS)
        lines = render_records(ResourceKind.PODS, records).split("\n")
        assert len(lines) == 2 + len(records)
        status_col = lines[0].index("STATUS")
        for line in lines[2:]:
            assert line[status_col - 1] == " "
            assert line[status_col] != " "

    def test_namespace_headers(self, store: ResourceStore) -> None:
        text = render_records(ResourceKind.NAMESPACES, store.list_resources(ResourceKind.NAMESPACES))
        assert text.split()[:3] == ["NAME", "STATUS", "AGE"]

    def test_header_sets(self) -> None:
        assert TABLE_COLUMNS[ResourceKind.PODS] == (
            "NAME", "READY", "STATUS", "RESTARTS", "AGE", "NODE",
        )
        assert TABLE_COLUMNS[ResourceKind.DAEMONSETS][1:4] == ("DESIRED", "CURRENT", "READY")


class TestTableCells:
    def test_healthy_pod(self, store: ResourceStore) -> None:
        pod = store.find(ResourceKind.PODS, "web-1", "default")
        assert table_cells(ResourceKind.PODS, pod) == ["web-1", "2/2", "Running", "0", "2d4h", "node-1"]

    def test_error_pod_has_marker(self, store: ResourceStore) -> None:
        pod = store.find(ResourceKind.PODS, "api-1")
        assert table_cells(ResourceKind.PODS, pod)[2] == "CrashLoopBackOff ⚠"

    def test_pod_without_node(self, store: ResourceStore) -> None:
        pod = store.find(ResourceKind.PODS, "web-1", "staging")
        assert table_cells(ResourceKind.PODS, pod)[5] == "-"

    def test_deployment(self, store: ResourceStore) -> None:
        d = store.find(ResourceKind.DEPLOYMENTS, "web-deployment-1", "default")
        assert table_cells(ResourceKind.DEPLOYMENTS, d) == ["web-deployment-1", "1/3", "2", "1", "4d1h"]

    def test_daemonset(self, store: ResourceStore) -> None:
        d = store.find(ResourceKind.DAEMONSETS, "fluentd")
        assert table_cells(ResourceKind.DAEMONSETS, d) == ["fluentd", "3", "2", "1", "2", "1", "20d6h"]


# ---------------------------------------------------------------------------
# Small derivations
# ---------------------------------------------------------------------------

class TestDerivations:
    @pytest.mark.parametrize(
        ("age", "expected"),
        [
            ("3d4h", timedelta(days=3, hours=4)),
            ("5h3m", timedelta(hours=5, minutes=3)),
            ("12m", timedelta(minutes=12)),
            ("junk", timedelta(0)),
        ],
    )
    def test_parse_age(self, age: str, expected: timedelta) -> None:
        assert parse_age(age) == expected

    def test_parse_ready(self) -> None:
        assert parse_ready("1/3") == (1, 3)
        assert parse_ready("bogus") == (0, 0)

    def test_app_label(self) -> None:
        assert app_label("web-server-1234-567") == "web"
        assert app_label("fluentd") == "fluentd"


# ---------------------------------------------------------------------------
# Descriptions
# ---------------------------------------------------------------------------

class TestDescribePod:
    def test_healthy_pod_fields(self, store: ResourceStore) -> None:
        lines = _describe(store, ResourceKind.PODS, "web-1", "default").split("\n")
        assert lines[0] == "Name:         web-1"
        assert "Namespace:    default" in lines
        assert "Node:         node-1" in lines
        assert "Start Time:   2024-01-08T08:00:00Z" in lines
        assert "Labels:       app=web" in lines
        assert "Status:       Running" in lines
        assert "    Ready:          True" in lines
        assert "    Restart Count:  0" in lines
        assert "Events:" not in lines

    def test_error_pod_has_events(self, store: ResourceStore) -> None:
        lines = _describe(store, ResourceKind.PODS, "api-1").split("\n")
        assert "    Ready:          False" in lines
        assert "    Restart Count:  7" in lines
        assert lines[-3:] == [
            "Events:",
            "  Type     Reason          Message",
            "  Warning  CrashLoopBackOff    Back-off restarting failed container",
        ]

    def test_unscheduled_pod(self, store: ResourceStore) -> None:
        lines = _describe(store, ResourceKind.PODS, "web-1", "staging").split("\n")
        assert "Node:         <none>" in lines
        assert "    State:          Waiting" in lines

    def test_deterministic(self, store: ResourceStore) -> None:
        first = _describe(store, ResourceKind.PODS, "api-1")
        second = _describe(store, ResourceKind.PODS, "api-1")
        assert first == second

    def test_ip_within_pod_network(self, store: ResourceStore) -> None:
        text = _describe(store, ResourceKind.PODS, "dns-1")
        ip_line = next(line for line in text.split("\n") if line.startswith("IP:"))
        octets = ip_line.split()[1].split(".")
        assert octets[:2] == ["10", "244"]
        assert all(0 <= int(o) <= 255 for o in octets)


class TestDescribeOtherKinds:
    def test_deployment_partially_available(self, store: ResourceStore) -> None:
        lines = _describe(store, ResourceKind.DEPLOYMENTS, "web-deployment-1", "default").split("\n")
        assert lines[0] == "Name:                   web-deployment-1"
        assert "CreationTimestamp:      2024-01-06T11:00:00Z" in lines
        assert (
            "Replicas:               3 desired | 2 updated | 3 total | "
            "1 available | 2 unavailable"
        ) in lines
        assert "  Available      False   MinimumReplicasUnavailable" in lines

    def test_deployment_fully_available(self, store: ResourceStore) -> None:
        lines = _describe(store, ResourceKind.DEPLOYMENTS, "web-deployment-1", "staging").split("\n")
        assert "  Available      True    MinimumReplicasAvailable" in lines

    def test_daemonset(self, store: ResourceStore) -> None:
        lines = _describe(store, ResourceKind.DAEMONSETS, "fluentd").split("\n")
        assert "Desired Number of Nodes Scheduled: 3" in lines
        assert "Number of Nodes Misscheduled: 1" in lines
        assert lines[-1] == "Pods Status:   1 Running / 1 Waiting / 1 Succeeded / 0 Failed"

    def test_namespace(self, store: ResourceStore) -> None:
        assert _describe(store, ResourceKind.NAMESPACES, "staging") == "\n".join([
            "Name:         staging",
            "Labels:       <none>",
            "Annotations:  <none>",
            "Status:       Active",
            "No resource quota.",
            "No resource limits.",
        ])
