"""Shared pytest fixtures and configuration for the kubesim test suite.

Guidelines
----------
* Tests build explicit, fixed stores — never the random generator,
  except generator tests that pin a seed.
* Core tests must be pure — no terminal interaction, no Rich assertions.
* Interactive prompts are replaced with scripted fakes.
"""

from __future__ import annotations

import pytest

from kubesim.core.models import (
    ClusterState,
    DaemonSet,
    Deployment,
    Namespace,
    Pod,
    PodErrorType,
    PodStatus,
)
from kubesim.core.store import ResourceStore


def make_cluster_state() -> ClusterState:
    """Three namespaces; ``web-1`` exists in both default and staging."""
    return ClusterState(
        namespaces=(
            Namespace(name="default", status="Active", age="10d2h"),
            Namespace(name="kube-system", status="Active", age="30d0h"),
            Namespace(name="staging", status="Active", age="3h15m"),
        ),
        pods=(
            Pod(name="web-1", namespace="default", status=PodStatus.RUNNING,
                ready="2/2", restarts=0, age="2d4h", node="node-1"),
            Pod(name="api-1", namespace="default", status=PodStatus.CRASH_LOOP_BACK_OFF,
                ready="0/2", restarts=7, age="5h3m", node="node-2",
                error=PodErrorType.CRASH_LOOP_BACK_OFF,
                error_message="Back-off restarting failed container"),
            Pod(name="web-1", namespace="staging", status=PodStatus.PENDING,
                ready="0/2", restarts=0, age="12m"),
            Pod(name="dns-1", namespace="kube-system", status=PodStatus.RUNNING,
                ready="1/1", restarts=1, age="30d0h", node="node-3"),
        ),
        deployments=(
            Deployment(name="web-deployment-1", namespace="default", ready="1/3",
                       up_to_date=2, available=1, age="4d1h"),
            Deployment(name="web-deployment-1", namespace="staging", ready="2/2",
                       up_to_date=2, available=2, age="1h5m"),
        ),
        daemonsets=(
            DaemonSet(name="fluentd", namespace="kube-system", desired=3, current=2,
                      ready=1, up_to_date=2, available=1, age="20d6h"),
        ),
    )


@pytest.fixture()
def cluster_state() -> ClusterState:
    return make_cluster_state()


@pytest.fixture()
def store(cluster_state: ClusterState) -> ResourceStore:
    return ResourceStore(cluster_state)
