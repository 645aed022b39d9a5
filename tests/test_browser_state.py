"""Tests for the browser's table-view state (core/browser.py)."""

from __future__ import annotations

import pytest

from kubesim.core.browser import BrowserState
from kubesim.core.kinds import ResourceKind
from kubesim.core.models import Pod
from kubesim.core.store import ResourceStore


@pytest.fixture()
def state(store: ResourceStore) -> BrowserState:
    return BrowserState(store)


def _names(state: BrowserState) -> list[str]:
    return [r.name for r in state.rows()]


# ---------------------------------------------------------------------------
# Views
# ---------------------------------------------------------------------------

class TestViews:
    def test_starts_on_namespaces(self, state: BrowserState) -> None:
        assert state.kind is ResourceKind.NAMESPACES
        assert _names(state) == ["default", "kube-system", "staging"]

    def test_kind_cycle(self, state: BrowserState) -> None:
        seen = []
        for _ in range(4):
            state.next_kind()
            seen.append(state.kind)
        assert seen == [
            ResourceKind.PODS,
            ResourceKind.DEPLOYMENTS,
            ResourceKind.DAEMONSETS,
            ResourceKind.NAMESPACES,
        ]
        state.previous_kind()
        assert state.kind is ResourceKind.DAEMONSETS

    def test_activate_namespace_scopes_pods(self, state: BrowserState) -> None:
        state.activate(0)
        assert state.namespace == "default"
        assert state.kind is ResourceKind.PODS
        assert _names(state) == ["web-1", "api-1"]

    def test_activate_out_of_range(self, state: BrowserState) -> None:
        state.activate(9)
        assert state.kind is ResourceKind.NAMESPACES
        assert state.namespace is None

    def test_filter_is_substring(self, state: BrowserState) -> None:
        state.show(ResourceKind.PODS)
        state.set_filter("web")
        assert _names(state) == ["web-1", "web-1"]

    def test_filter_text_kept_verbatim(self, state: BrowserState) -> None:
        state.show(ResourceKind.PODS)
        state.set_filter(" web")
        assert state.name_filter == " web"
        assert _names(state) == []

    def test_filter_does_not_hide_namespaces(self, state: BrowserState) -> None:
        state.set_filter("zzz")
        assert len(state.rows()) == 3

    def test_clear(self, state: BrowserState) -> None:
        state.activate(2)
        state.set_filter("web")
        state.clear()
        assert state.namespace is None
        assert state.name_filter == ""
        assert len(state.rows()) == 4


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

class TestSelection:
    def test_move_is_clamped(self, state: BrowserState) -> None:
        state.move_up()
        assert state.selected_index == 0
        for _ in range(10):
            state.move_down()
        assert state.selected_index == 2

    def test_activate_row_selects_it(self, state: BrowserState) -> None:
        state.show(ResourceKind.PODS)
        state.activate(1)
        selected = state.selected()
        assert isinstance(selected, Pod)
        assert selected.name == "api-1"

    def test_error_details_only_for_error_pods(self, state: BrowserState) -> None:
        state.show(ResourceKind.PODS)
        assert state.error_details() is None
        state.activate(1)
        pod = state.error_details()
        assert pod is not None
        assert pod.name == "api-1"

    def test_selected_none_when_empty(self) -> None:
        state = BrowserState(ResourceStore())
        assert state.selected() is None
        state.move_down()
        assert state.selected_index == 0


# ---------------------------------------------------------------------------
# Status line
# ---------------------------------------------------------------------------

class TestStatusLine:
    def test_namespaces(self, state: BrowserState) -> None:
        assert state.status_line() == "namespaces: 3 |"

    def test_pods_with_scope(self, state: BrowserState) -> None:
        state.activate(0)
        assert state.status_line() == "Namespace: default | pods: 2 | Errors: 1"

    def test_error_count_spans_all_namespaces(self, state: BrowserState) -> None:
        state.activate(2)
        assert state.status_line() == "Namespace: staging | pods: 1 | Errors: 1"


# ---------------------------------------------------------------------------
# Store notifications
# ---------------------------------------------------------------------------

class TestNamespaceDeletion:
    def test_scope_cleared_when_namespace_deleted(
        self, state: BrowserState, store: ResourceStore,
    ) -> None:
        state.activate(0)
        store.delete(ResourceKind.NAMESPACES, "default")
        assert state.namespace is None
        assert _names(state) == ["web-1", "dns-1"]

    def test_other_scope_kept(self, state: BrowserState, store: ResourceStore) -> None:
        state.activate(2)
        store.delete(ResourceKind.NAMESPACES, "default")
        assert state.namespace == "staging"

    def test_selection_clamped_after_cascade(
        self, state: BrowserState, store: ResourceStore,
    ) -> None:
        state.move_down()
        state.move_down()
        store.delete(ResourceKind.NAMESPACES, "staging")
        assert state.selected_index == 1

    def test_close_stops_listening(self, state: BrowserState, store: ResourceStore) -> None:
        state.activate(0)
        state.close()
        store.delete(ResourceKind.NAMESPACES, "default")
        assert state.namespace == "default"
