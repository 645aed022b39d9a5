"""Tests for domain models (core/models.py)."""

from __future__ import annotations

import dataclasses

import pytest

from kubesim.core.kinds import ResourceKind
from kubesim.core.models import (
    ClusterState,
    Command,
    CommandResult,
    Namespace,
    Pod,
    PodErrorType,
    PodStatus,
    Verb,
)


def _make_pod(**overrides: object) -> Pod:
    defaults: dict[str, object] = dict(
        name="web-1",
        namespace="default",
        status=PodStatus.RUNNING,
        ready="1/1",
        restarts=0,
        age="1h0m",
    )
    defaults.update(overrides)
    return Pod(**defaults)  # type: ignore[arg-type]


class TestRecords:
    def test_records_are_frozen(self) -> None:
        pod = _make_pod()
        with pytest.raises(dataclasses.FrozenInstanceError):
            pod.name = "other"  # type: ignore[misc]

    def test_pod_optional_fields_default_to_none(self) -> None:
        pod = _make_pod()
        assert pod.node is None
        assert pod.error is None
        assert pod.error_message is None

    def test_namespace_has_no_namespace(self) -> None:
        assert Namespace(name="default", status="Active", age="1d0h").namespace is None

    def test_value_equality(self) -> None:
        assert _make_pod() == _make_pod()
        assert _make_pod() != _make_pod(namespace="staging")

    def test_cluster_state_defaults_empty(self) -> None:
        state = ClusterState()
        assert state.namespaces == state.pods == state.deployments == state.daemonsets == ()


class TestEnums:
    def test_pod_status_values(self) -> None:
        assert PodStatus.CRASH_LOOP_BACK_OFF.value == "CrashLoopBackOff"
        assert PodStatus("OOMKilled") is PodStatus.OOM_KILLED

    def test_error_types(self) -> None:
        assert PodErrorType.INIT_ERROR.value == "Init:Error"
        assert len(PodErrorType) == 8


class TestCommand:
    def test_args_ignored_in_equality(self) -> None:
        assert Command(verb=Verb.APPLY, args=("-f", "a.yaml")) == Command(verb=Verb.APPLY)

    def test_defaults(self) -> None:
        command = Command(verb=Verb.GET, kind=ResourceKind.PODS)
        assert command.name is None
        assert command.namespace is None
        assert command.args == ()

    def test_result_defaults_to_output(self) -> None:
        assert CommandResult("ok").error is False
