"""Table-view state for the resource browser.

Holds what the browser shows — the selected kind, the namespace scope,
the name filter and the highlighted row — and answers the queries the
view needs.  It reads the store but never mutates it; it only listens
for namespace deletions so a scope never points at a vanished
namespace.
"""

from __future__ import annotations

from kubesim.core.kinds import KIND_ORDER, ResourceKind
from kubesim.core.models import Namespace, Pod, Resource
from kubesim.core.store import ResourceStore


class BrowserState:
    """Navigation state of the resource table view."""

    def __init__(self, store: ResourceStore) -> None:
        self._store: ResourceStore = store
        self.kind: ResourceKind = ResourceKind.NAMESPACES
        self.namespace: str | None = None
        self.name_filter: str = ""
        self.selected_index: int = 0
        self._unsubscribe = store.add_namespace_listener(self._on_namespace_deleted)

    def close(self) -> None:
        """Stop listening to the store."""
        self._unsubscribe()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def rows(self) -> list[Resource]:
        """Records visible in the current view."""
        if self.kind is ResourceKind.NAMESPACES:
            return self._store.list_resources(ResourceKind.NAMESPACES)
        records = self._store.list_resources(self.kind, self.namespace)
        if self.name_filter:
            records = [r for r in records if self.name_filter in r.name]
        return records

    def selected(self) -> Resource | None:
        rows = self.rows()
        if not rows:
            return None
        return rows[min(self.selected_index, len(rows) - 1)]

    def error_count(self) -> int:
        """Number of pods carrying an error, across all namespaces."""
        return sum(
            1 for pod in self._store.list_resources(ResourceKind.PODS)
            if isinstance(pod, Pod) and pod.error is not None
        )

    def status_line(self) -> str:
        parts = []
        if self.namespace:
            parts.append(f"Namespace: {self.namespace} | ")
        parts.append(f"{self.kind.plural}: {len(self.rows())} |")
        if self.kind is ResourceKind.PODS:
            parts.append(f" Errors: {self.error_count()}")
        return "".join(parts)

    def error_details(self) -> Pod | None:
        """The highlighted pod when it carries an error, else ``None``."""
        record = self.selected()
        if isinstance(record, Pod) and record.error is not None:
            return record
        return None

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def show(self, kind: ResourceKind) -> None:
        self.kind = kind
        self.selected_index = 0

    def next_kind(self) -> None:
        index = KIND_ORDER.index(self.kind)
        self.show(KIND_ORDER[(index + 1) % len(KIND_ORDER)])

    def previous_kind(self) -> None:
        index = KIND_ORDER.index(self.kind)
        self.show(KIND_ORDER[(index - 1) % len(KIND_ORDER)])

    def move_down(self) -> None:
        self.selected_index = min(self.selected_index + 1, max(len(self.rows()) - 1, 0))

    def move_up(self) -> None:
        self.selected_index = max(self.selected_index - 1, 0)

    def activate(self, index: int) -> None:
        """Select row *index*; a namespace row scopes the view to it."""
        rows = self.rows()
        if not 0 <= index < len(rows):
            return
        record = rows[index]
        if isinstance(record, Namespace):
            self.namespace = record.name
            self.show(ResourceKind.PODS)
        else:
            self.selected_index = index

    def set_filter(self, text: str) -> None:
        self.name_filter = text
        self.selected_index = 0

    def clear(self) -> None:
        """Drop the name filter and the namespace scope."""
        self.name_filter = ""
        self.namespace = None
        self.selected_index = 0

    def _on_namespace_deleted(self, name: str) -> None:
        if self.namespace == name:
            self.namespace = None
        rows = len(self.rows())
        self.selected_index = min(self.selected_index, max(rows - 1, 0))
