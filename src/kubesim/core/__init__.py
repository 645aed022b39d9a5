"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from kubesim.core.browser import BrowserState
from kubesim.core.dispatcher import CommandDispatcher
from kubesim.core.formatter import ResourceFormatter, render_table
from kubesim.core.kinds import ResourceKind, resolve_kind
from kubesim.core.models import (
    ClusterState,
    Command,
    CommandResult,
    DaemonSet,
    Deployment,
    EntryKind,
    Namespace,
    OutputEntry,
    Pod,
    PodErrorType,
    PodStatus,
    Verb,
)
from kubesim.core.parser import parse_line
from kubesim.core.protocols import InitialStateProvider
from kubesim.core.session import ConsoleSession, OutputLog
from kubesim.core.store import ResourceStore

__all__: list[str] = [
    "BrowserState",
    "ClusterState",
    "Command",
    "CommandDispatcher",
    "CommandResult",
    "ConsoleSession",
    "DaemonSet",
    "Deployment",
    "EntryKind",
    "InitialStateProvider",
    "Namespace",
    "OutputEntry",
    "OutputLog",
    "Pod",
    "PodErrorType",
    "PodStatus",
    "ResourceFormatter",
    "ResourceKind",
    "ResourceStore",
    "Verb",
    "parse_line",
    "render_table",
    "resolve_kind",
]
