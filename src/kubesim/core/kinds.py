"""Resource kinds and the alias table used by the console grammar.

The four kinds form a closed enumeration.  Aliases are resolved through
a lookup table built once at import time; resource tokens are matched
case-insensitively.
"""

from __future__ import annotations

from enum import Enum


class ResourceKind(Enum):
    """The resource kinds held by the store, valued by their plural name."""

    NAMESPACES = "namespaces"
    PODS = "pods"
    DEPLOYMENTS = "deployments"
    DAEMONSETS = "daemonsets"

    @property
    def plural(self) -> str:
        return self.value

    @property
    def singular(self) -> str:
        return self.value[:-1]

    @property
    def api_suffix(self) -> str:
        """``".apps"`` for kinds served by the ``apps`` API group."""
        return ".apps" if self in APPS_GROUP_KINDS else ""

    @property
    def namespaced(self) -> bool:
        return self is not ResourceKind.NAMESPACES

    @property
    def title(self) -> str:
        return _TITLES[self]


APPS_GROUP_KINDS = frozenset({ResourceKind.DEPLOYMENTS, ResourceKind.DAEMONSETS})

_TITLES: dict[ResourceKind, str] = {
    ResourceKind.NAMESPACES: "Namespaces",
    ResourceKind.PODS: "Pods",
    ResourceKind.DEPLOYMENTS: "Deployments",
    ResourceKind.DAEMONSETS: "DaemonSets",
}

# Ordered list for cycling through kinds in the browser.
KIND_ORDER: tuple[ResourceKind, ...] = tuple(ResourceKind)

RESOURCE_ALIASES: dict[str, ResourceKind] = {
    alias: kind
    for kind, aliases in (
        (ResourceKind.PODS, ("pods", "pod", "po")),
        (ResourceKind.DEPLOYMENTS, ("deployments", "deployment", "deploy")),
        (ResourceKind.DAEMONSETS, ("daemonsets", "daemonset", "ds")),
        (ResourceKind.NAMESPACES, ("namespaces", "namespace", "ns")),
    )
    for alias in aliases
}


def resolve_kind(token: str) -> ResourceKind | None:
    """Return the kind named by *token*, or ``None`` when it is unknown."""
    return RESOURCE_ALIASES.get(token.lower())
