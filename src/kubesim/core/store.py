"""In-memory resource store — the session's only mutable state.

The store owns four ordered collections (namespaces, pods, deployments,
daemonsets).  Queries never mutate; :meth:`ResourceStore.delete` is the
only state transition and cascades when a namespace is removed.

Guarantees
----------
* Insertion order is preserved for every collection.
* Records are replaced, never edited: a deleted record simply leaves
  its collection.
* Namespace-deletion listeners are notified after the cascade has
  completed, so they always observe a consistent store.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from kubesim.core.kinds import ResourceKind
from kubesim.core.models import ClusterState, Resource
from kubesim.core.protocols import InitialStateProvider, NamespaceListener

logger = logging.getLogger(__name__)


class ResourceStore:
    """Mutable, ordered collections of the four resource kinds.

    Parameters
    ----------
    state:
        Starting collections.  ``None`` yields an empty store.
    """

    def __init__(self, state: ClusterState | None = None) -> None:
        state = state if state is not None else ClusterState()
        self._records: dict[ResourceKind, list[Resource]] = {
            ResourceKind.NAMESPACES: list(state.namespaces),
            ResourceKind.PODS: list(state.pods),
            ResourceKind.DEPLOYMENTS: list(state.deployments),
            ResourceKind.DAEMONSETS: list(state.daemonsets),
        }
        self._namespace_listeners: list[NamespaceListener] = []
        logger.debug(
            "Store loaded: %d namespaces, %d pods, %d deployments, %d daemonsets",
            *(len(records) for records in self._records.values()),
        )

    @classmethod
    def from_provider(cls, provider: InitialStateProvider) -> ResourceStore:
        """Build a store from the provider's starting state."""
        return cls(provider.load_state())

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_resources(
        self,
        kind: ResourceKind,
        namespace: str | None = None,
        name: str | None = None,
    ) -> list[Resource]:
        """Return records of *kind*, in insertion order.

        *namespace* restricts namespaced kinds to that namespace and is
        ignored for namespaces themselves.  *name* requires an exact
        match.  An empty list is a valid result.
        """
        records = self._records[kind]
        if namespace is not None and kind.namespaced:
            records = [r for r in records if r.namespace == namespace]
        if name is not None:
            records = [r for r in records if r.name == name]
        return list(records)

    def matches(
        self,
        kind: ResourceKind,
        name: str,
        namespace: str | None = None,
    ) -> list[Resource]:
        """Return every record of *kind* named *name*, in store order."""
        return self.list_resources(kind, namespace=namespace, name=name)

    def find(
        self,
        kind: ResourceKind,
        name: str,
        namespace: str | None = None,
    ) -> Resource | None:
        """Return the first record named *name*, or ``None``.

        Without *namespace*, a name present in several namespaces
        resolves to the first match in store order.
        """
        found = self.matches(kind, name, namespace)
        return found[0] if found else None

    def namespace_names(self) -> list[str]:
        return [ns.name for ns in self._records[ResourceKind.NAMESPACES]]

    def snapshot(self) -> ClusterState:
        """Return the current collections as an immutable state."""
        return ClusterState(
            namespaces=tuple(self._records[ResourceKind.NAMESPACES]),  # type: ignore[arg-type]
            pods=tuple(self._records[ResourceKind.PODS]),  # type: ignore[arg-type]
            deployments=tuple(self._records[ResourceKind.DEPLOYMENTS]),  # type: ignore[arg-type]
            daemonsets=tuple(self._records[ResourceKind.DAEMONSETS]),  # type: ignore[arg-type]
        )

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def delete(
        self,
        kind: ResourceKind,
        name: str,
        namespace: str | None = None,
    ) -> Resource | None:
        """Remove the record :meth:`find` resolves to and return it.

        Returns ``None`` (and changes nothing) when no record matches.
        Deleting a namespace also removes every pod, deployment and
        daemonset whose ``namespace`` equals its name, then notifies
        the namespace listeners.
        """
        target = self.find(kind, name, namespace)
        if target is None:
            return None

        records = self._records[kind]
        records[:] = [
            r for r in records
            if not (r.name == target.name and r.namespace == target.namespace)
        ]

        if kind is ResourceKind.NAMESPACES:
            self._cascade_namespace(target.name)
        else:
            logger.info("Deleted %s %s/%s", kind.singular, target.namespace, target.name)
        return target

    def _cascade_namespace(self, namespace: str) -> None:
        removed: dict[str, int] = {}
        for kind in (ResourceKind.PODS, ResourceKind.DEPLOYMENTS, ResourceKind.DAEMONSETS):
            records = self._records[kind]
            before = len(records)
            records[:] = [r for r in records if r.namespace != namespace]
            removed[kind.plural] = before - len(records)

        logger.info(
            "Deleted namespace %s (cascaded: %d pods, %d deployments, %d daemonsets)",
            namespace,
            removed["pods"],
            removed["deployments"],
            removed["daemonsets"],
        )
        for listener in list(self._namespace_listeners):
            listener(namespace)

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def add_namespace_listener(self, listener: NamespaceListener) -> Callable[[], None]:
        """Register *listener* for namespace deletions.

        Returns a callable that unregisters it.
        """
        self._namespace_listeners.append(listener)

        def _remove() -> None:
            if listener in self._namespace_listeners:
                self._namespace_listeners.remove(listener)

        return _remove
