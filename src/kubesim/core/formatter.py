"""Plain-text rendering of resource tables and descriptions.

Every function in this module is a **pure** transformation — no I/O,
no randomness, fully deterministic.  Values that a real cluster would
report but the model does not carry (pod IPs, container IDs, start
times) are derived from a SHA-256 digest of ``namespace/name`` and from
the record's age relative to a reference time fixed when the
:class:`ResourceFormatter` is built.  Repeated describes of the same
record are therefore byte-identical.
"""

from __future__ import annotations

import hashlib
import re
from collections.abc import Callable, Sequence
from datetime import datetime, timedelta, timezone

from kubesim.constants import ERROR_MARKER, MISSING_CELL, NONE_PLACEHOLDER, TABLE_PADDING
from kubesim.core.kinds import ResourceKind
from kubesim.core.models import DaemonSet, Deployment, Namespace, Pod, PodStatus, Resource


# ---------------------------------------------------------------------------
# Aligned text tables
# ---------------------------------------------------------------------------

def column_widths(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> list[int]:
    """Width of each column: longest header or cell plus the padding."""
    widths: list[int] = []
    for i, header in enumerate(headers):
        longest = max([len(header)] + [len(row[i]) for row in rows if i < len(row)])
        widths.append(longest + TABLE_PADDING)
    return widths


def render_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """Render *rows* under *headers* as left-aligned text columns.

    Columns are joined by a single space; a row of dashes one shorter
    than each column width separates the header from the data.
    """
    widths = column_widths(headers, rows)

    def _format_row(cells: Sequence[str]) -> str:
        return " ".join(cell.ljust(widths[i]) for i, cell in enumerate(cells))

    separator = " ".join("-" * (width - 1) for width in widths)
    lines = [_format_row(headers), separator]
    lines.extend(_format_row(row) for row in rows)
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Per-kind columns
# ---------------------------------------------------------------------------

TABLE_COLUMNS: dict[ResourceKind, tuple[str, ...]] = {
    ResourceKind.NAMESPACES: ("NAME", "STATUS", "AGE"),
    ResourceKind.PODS: ("NAME", "READY", "STATUS", "RESTARTS", "AGE", "NODE"),
    ResourceKind.DEPLOYMENTS: ("NAME", "READY", "UP-TO-DATE", "AVAILABLE", "AGE"),
    ResourceKind.DAEMONSETS: (
        "NAME", "DESIRED", "CURRENT", "READY", "UP-TO-DATE", "AVAILABLE", "AGE",
    ),
}


def _namespace_cells(ns: Namespace) -> list[str]:
    return [ns.name, ns.status, ns.age]


def _pod_cells(pod: Pod) -> list[str]:
    status = pod.status.value + (ERROR_MARKER if pod.error is not None else "")
    return [
        pod.name,
        pod.ready,
        status,
        str(pod.restarts),
        pod.age,
        pod.node or MISSING_CELL,
    ]


def _deployment_cells(d: Deployment) -> list[str]:
    return [d.name, d.ready, str(d.up_to_date), str(d.available), d.age]


def _daemonset_cells(d: DaemonSet) -> list[str]:
    return [
        d.name,
        str(d.desired),
        str(d.current),
        str(d.ready),
        str(d.up_to_date),
        str(d.available),
        d.age,
    ]


_CELL_BUILDERS: dict[ResourceKind, Callable[[object], list[str]]] = {
    ResourceKind.NAMESPACES: _namespace_cells,  # type: ignore[dict-item]
    ResourceKind.PODS: _pod_cells,  # type: ignore[dict-item]
    ResourceKind.DEPLOYMENTS: _deployment_cells,  # type: ignore[dict-item]
    ResourceKind.DAEMONSETS: _daemonset_cells,  # type: ignore[dict-item]
}


def table_cells(kind: ResourceKind, record: Resource) -> list[str]:
    """Return the table cells of *record* in :data:`TABLE_COLUMNS` order."""
    return _CELL_BUILDERS[kind](record)


def render_records(kind: ResourceKind, records: Sequence[Resource]) -> str:
    """Render homogeneous *records* of *kind* as an aligned table."""
    rows = [table_cells(kind, record) for record in records]
    return render_table(TABLE_COLUMNS[kind], rows)


# ---------------------------------------------------------------------------
# Small derivations
# ---------------------------------------------------------------------------

_AGE_PART = re.compile(r"(\d+)([dhms])")
_AGE_UNITS = {"d": "days", "h": "hours", "m": "minutes", "s": "seconds"}


def parse_age(age: str) -> timedelta:
    """Convert an age such as ``"3d4h"`` or ``"12m"`` to a timedelta.

    Unrecognised input yields a zero delta.
    """
    parts = {_AGE_UNITS[unit]: int(value) for value, unit in _AGE_PART.findall(age)}
    return timedelta(**parts)


def parse_ready(ready: str) -> tuple[int, int]:
    """Split ``"x/y"`` into ``(x, y)``; malformed input yields ``(0, 0)``."""
    numerator, _, denominator = ready.partition("/")
    try:
        return int(numerator), int(denominator)
    except ValueError:
        return 0, 0


def app_label(name: str) -> str:
    """Application label derived from the first dash-separated word."""
    return name.split("-")[0]


def _digest(record: Resource) -> bytes:
    key = f"{record.namespace or ''}/{record.name}"
    return hashlib.sha256(key.encode("utf-8")).digest()


def _bool_word(value: bool) -> str:
    return "True" if value else "False"


# ---------------------------------------------------------------------------
# Descriptions
# ---------------------------------------------------------------------------

class ResourceFormatter:
    """Renders tables and ``describe`` reports.

    Parameters
    ----------
    now:
        Reference time used to turn ages into timestamps.  Defaults to
        the current UTC time at construction and never changes after.
    """

    def __init__(self, now: datetime | None = None) -> None:
        self._now: datetime = now if now is not None else datetime.now(timezone.utc)
        self._describers: dict[ResourceKind, Callable[[object], str]] = {
            ResourceKind.NAMESPACES: self._describe_namespace,  # type: ignore[dict-item]
            ResourceKind.PODS: self._describe_pod,  # type: ignore[dict-item]
            ResourceKind.DEPLOYMENTS: self._describe_deployment,  # type: ignore[dict-item]
            ResourceKind.DAEMONSETS: self._describe_daemonset,  # type: ignore[dict-item]
        }

    @staticmethod
    def render_table(kind: ResourceKind, records: Sequence[Resource]) -> str:
        return render_records(kind, records)

    def render_description(self, kind: ResourceKind, record: Resource) -> str:
        """Render the fixed multi-field report for *record*."""
        return self._describers[kind](record)

    def _timestamp(self, age: str) -> str:
        return (self._now - parse_age(age)).strftime("%Y-%m-%dT%H:%M:%SZ")

    # ------------------------------------------------------------------
    # Per-kind templates
    # ------------------------------------------------------------------

    def _describe_namespace(self, ns: Namespace) -> str:
        return "\n".join([
            f"Name:         {ns.name}",
            f"Labels:       {NONE_PLACEHOLDER}",
            f"Annotations:  {NONE_PLACEHOLDER}",
            f"Status:       {ns.status}",
            "No resource quota.",
            "No resource limits.",
        ])

    def _describe_pod(self, pod: Pod) -> str:
        app = app_label(pod.name)
        digest = _digest(pod)
        ready_count, total = parse_ready(pod.ready)
        ready = _bool_word(ready_count == total)
        state = "Running" if pod.status is PodStatus.RUNNING else "Waiting"

        lines = [
            f"Name:         {pod.name}",
            f"Namespace:    {pod.namespace}",
            "Priority:     0",
            f"Node:         {pod.node or NONE_PLACEHOLDER}",
            f"Start Time:   {self._timestamp(pod.age)}",
            f"Labels:       app={app}",
            f"Annotations:  {NONE_PLACEHOLDER}",
            f"Status:       {pod.status.value}",
            f"IP:           10.244.{digest[0]}.{digest[1]}",
            "Containers:",
            f"  {app}:",
            f"    Container ID:   docker://{digest[2:8].hex()}",
            f"    Image:          {app}:latest",
            f"    Image ID:       docker-pullable://{app}@sha256:{digest[8:16].hex()}",
            f"    Port:           {NONE_PLACEHOLDER}",
            f"    Host Port:      {NONE_PLACEHOLDER}",
            f"    State:          {state}",
            f"    Ready:          {ready}",
            f"    Restart Count:  {pod.restarts}",
            f"    Environment:    {NONE_PLACEHOLDER}",
            f"    Mounts:         {NONE_PLACEHOLDER}",
            "Conditions:",
            "  Type              Status",
            "  Initialized       True",
            f"  Ready             {ready}",
            f"  ContainersReady   {ready}",
            "  PodScheduled      True",
        ]
        if pod.error is not None:
            lines.extend([
                "Events:",
                "  Type     Reason          Message",
                f"  Warning  {pod.error.value}    {pod.error_message or ''}",
            ])
        return "\n".join(lines)

    def _describe_deployment(self, d: Deployment) -> str:
        app = app_label(d.name)
        _, desired = parse_ready(d.ready)
        available = d.available >= desired
        return "\n".join([
            f"Name:                   {d.name}",
            f"Namespace:              {d.namespace}",
            f"CreationTimestamp:      {self._timestamp(d.age)}",
            f"Labels:                 app={app}",
            "Annotations:            deployment.kubernetes.io/revision: 1",
            f"Selector:               app={app}",
            (
                f"Replicas:               {desired} desired | {d.up_to_date} updated | "
                f"{desired} total | {d.available} available | "
                f"{desired - d.available} unavailable"
            ),
            "StrategyType:           RollingUpdate",
            "MinReadySeconds:        0",
            "RollingUpdateStrategy:  25% max unavailable, 25% max surge",
            "Pod Template:",
            f"  Labels:  app={app}",
            "  Containers:",
            f"   {app}:",
            f"    Image:        {app}:latest",
            f"    Port:         {NONE_PLACEHOLDER}",
            f"    Environment:  {NONE_PLACEHOLDER}",
            f"    Mounts:       {NONE_PLACEHOLDER}",
            f"  Volumes:        {NONE_PLACEHOLDER}",
            "Conditions:",
            "  Type           Status  Reason",
            (
                f"  Available      {_bool_word(available):<7} "
                f"{'MinimumReplicasAvailable' if available else 'MinimumReplicasUnavailable'}"
            ),
            "  Progressing    True    NewReplicaSetAvailable",
        ])

    def _describe_daemonset(self, d: DaemonSet) -> str:
        return "\n".join([
            f"Name:           {d.name}",
            f"Namespace:      {d.namespace}",
            f"Selector:       app={d.name}",
            f"Node-Selector:  {NONE_PLACEHOLDER}",
            f"Labels:         app={d.name}",
            f"Annotations:    {NONE_PLACEHOLDER}",
            f"Desired Number of Nodes Scheduled: {d.desired}",
            f"Current Number of Nodes Scheduled: {d.current}",
            f"Number of Nodes Scheduled with Up-to-date Pods: {d.up_to_date}",
            f"Number of Nodes Scheduled with Ready Pods: {d.ready}",
            f"Number of Nodes Misscheduled: {d.desired - d.current}",
            (
                f"Pods Status:   {d.ready} Running / {d.current - d.ready} Waiting / "
                f"{d.desired - d.current} Succeeded / 0 Failed"
            ),
        ])
