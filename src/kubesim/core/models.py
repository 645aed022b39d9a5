"""Domain models for kubesim.

All resource records are **frozen** dataclasses — immutable value
objects with no behaviour beyond data access.  The store never edits a
record in place; deletion is the only state transition.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from kubesim.core.kinds import ResourceKind


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class PodStatus(str, Enum):
    """Pod status as shown in the STATUS column."""

    RUNNING = "Running"
    PENDING = "Pending"
    FAILED = "Failed"
    SUCCEEDED = "Succeeded"
    UNKNOWN = "Unknown"
    CRASH_LOOP_BACK_OFF = "CrashLoopBackOff"
    IMAGE_PULL_BACK_OFF = "ImagePullBackOff"
    ERR_IMAGE_PULL = "ErrImagePull"
    OOM_KILLED = "OOMKilled"
    CPU_THROTTLED = "CPUThrottled"


class PodErrorType(str, Enum):
    """Reason attached to a pod that is not in a nominal state."""

    OOM_KILLED = "OOMKilled"
    CPU_THROTTLED = "CPUThrottled"
    IMAGE_PULL_BACK_OFF = "ImagePullBackOff"
    ERR_IMAGE_PULL = "ErrImagePull"
    UNSCHEDULABLE = "Unschedulable"
    CRASH_LOOP_BACK_OFF = "CrashLoopBackOff"
    CONTAINER_CREATING = "ContainerCreating"
    INIT_ERROR = "Init:Error"


class Verb(str, Enum):
    """Console verbs understood by the dispatcher."""

    GET = "get"
    DESCRIBE = "describe"
    DELETE = "delete"
    APPLY = "apply"
    HELP = "help"


class EntryKind(str, Enum):
    """Kind of an output-log entry; drives display styling only."""

    COMMAND = "command"
    OUTPUT = "output"
    ERROR = "error"


# ---------------------------------------------------------------------------
# Resource records
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Namespace:
    """A namespace, keyed by ``name`` alone."""

    name: str
    status: str
    age: str

    @property
    def namespace(self) -> None:
        """Namespaces are cluster-scoped and belong to no namespace."""
        return None


@dataclass(frozen=True, slots=True)
class Pod:
    """A pod, keyed by ``(name, namespace)``."""

    name: str
    namespace: str
    status: PodStatus
    ready: str
    """Ready containers as ``"x/y"``."""

    restarts: int
    age: str
    node: str | None = None
    error: PodErrorType | None = None
    error_message: str | None = None


@dataclass(frozen=True, slots=True)
class Deployment:
    """A deployment, keyed by ``(name, namespace)``.

    The replica count is the denominator of ``ready``.
    """

    name: str
    namespace: str
    ready: str
    up_to_date: int
    available: int
    age: str


@dataclass(frozen=True, slots=True)
class DaemonSet:
    """A daemonset, keyed by ``(name, namespace)``."""

    name: str
    namespace: str
    desired: int
    current: int
    ready: int
    up_to_date: int
    available: int
    age: str


Resource = Namespace | Pod | Deployment | DaemonSet


@dataclass(frozen=True, slots=True)
class ClusterState:
    """The four starting collections handed over by a state provider."""

    namespaces: tuple[Namespace, ...] = ()
    pods: tuple[Pod, ...] = ()
    deployments: tuple[Deployment, ...] = ()
    daemonsets: tuple[DaemonSet, ...] = ()


# ---------------------------------------------------------------------------
# Console command and output
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Command:
    """A parsed console line.

    ``kind`` is ``None`` only for verbs that take no resource
    (``apply`` and ``help``).
    """

    verb: Verb
    kind: ResourceKind | None = None
    name: str | None = None
    namespace: str | None = None
    args: tuple[str, ...] = field(default=(), compare=False)
    """Trailing tokens that the verb accepts but ignores (``apply -f x``)."""


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Text produced by one dispatch, flagged when it reports an error."""

    text: str
    error: bool = False


@dataclass(frozen=True, slots=True)
class OutputEntry:
    """One line-group in the console output log."""

    kind: EntryKind
    content: str
    timestamp: str
