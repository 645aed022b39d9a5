"""Infrastructure: seeded random cluster generator.

:class:`RandomClusterGenerator` satisfies
:class:`~kubesim.core.protocols.InitialStateProvider` and produces a
plausible-looking cluster: a fixed namespace pool, a handful of pods per
namespace (half of them in some failure state), a few deployments, and
an occasional daemonset.

Rules
-----
* All randomness flows through one :class:`random.Random` instance, so
  a seed reproduces the same cluster.
* Generated keys are unique per ``(kind, namespace)``.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable

from kubesim.constants import (
    DAEMONSET_NAME_POOL,
    DAEMONSET_PROBABILITY,
    DEPLOYMENT_NAME_POOL,
    DEPLOYMENTS_PER_NAMESPACE,
    MAX_AGE_DAYS,
    NAMESPACE_POOL,
    NODE_COUNT,
    POD_ERROR_PROBABILITY,
    POD_NAME_POOL,
    PODS_PER_NAMESPACE,
)
from kubesim.core.models import (
    ClusterState,
    DaemonSet,
    Deployment,
    Namespace,
    Pod,
    PodErrorType,
    PodStatus,
)
from kubesim.exceptions import KubesimError

logger = logging.getLogger(__name__)

ERROR_MESSAGES: dict[PodErrorType, str] = {
    PodErrorType.OOM_KILLED: "Container killed due to memory limit",
    PodErrorType.CPU_THROTTLED: "CPU throttling detected",
    PodErrorType.IMAGE_PULL_BACK_OFF: 'Back-off pulling image "registry.example.com/image:v1.0"',
    PodErrorType.ERR_IMAGE_PULL: (
        'Failed to pull image "registry.example.com/image:v1.0": network timeout'
    ),
    PodErrorType.UNSCHEDULABLE: "0/3 nodes are available: insufficient cpu, memory",
    PodErrorType.CRASH_LOOP_BACK_OFF: "Back-off restarting failed container",
    PodErrorType.CONTAINER_CREATING: "Container is being created",
    PodErrorType.INIT_ERROR: "Init container failed with exit code 1",
}

# error -> (status, restart range or None for zero restarts)
_ERROR_OUTCOMES: dict[PodErrorType, tuple[PodStatus, tuple[int, int] | None]] = {
    PodErrorType.OOM_KILLED: (PodStatus.FAILED, (3, 15)),
    PodErrorType.CPU_THROTTLED: (PodStatus.RUNNING, None),
    PodErrorType.IMAGE_PULL_BACK_OFF: (PodStatus.PENDING, None),
    PodErrorType.ERR_IMAGE_PULL: (PodStatus.PENDING, None),
    PodErrorType.UNSCHEDULABLE: (PodStatus.PENDING, None),
    PodErrorType.CRASH_LOOP_BACK_OFF: (PodStatus.CRASH_LOOP_BACK_OFF, (5, 20)),
    PodErrorType.CONTAINER_CREATING: (PodStatus.PENDING, None),
    PodErrorType.INIT_ERROR: (PodStatus.PENDING, (1, 5)),
}

_MAX_NAME_ATTEMPTS = 50


def format_age(days: int, hours: int, minutes: int) -> str:
    """Render an age the way ``kubectl`` abbreviates it."""
    if days > 0:
        return f"{days}d{hours}h"
    if hours > 0:
        return f"{hours}h{minutes}m"
    return f"{minutes}m"


class RandomClusterGenerator:
    """Concrete :class:`InitialStateProvider` producing random clusters.

    Parameters
    ----------
    seed:
        Seed for the private random generator.  ``None`` seeds from
        system entropy.
    """

    def __init__(self, seed: int | None = None) -> None:
        self.seed: int | None = seed
        self._rng: random.Random = random.Random(seed)

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def load_state(self) -> ClusterState:
        logger.debug("Generating cluster (seed=%s)", self.seed)
        return ClusterState(
            namespaces=tuple(self.generate_namespaces()),
            pods=tuple(self.generate_pods()),
            deployments=tuple(self.generate_deployments()),
            daemonsets=tuple(self.generate_daemonsets()),
        )

    # ------------------------------------------------------------------
    # Collections
    # ------------------------------------------------------------------

    def generate_namespaces(self) -> list[Namespace]:
        return [
            Namespace(name=name, status="Active", age=self._age())
            for name in NAMESPACE_POOL
        ]

    def generate_pods(self) -> list[Pod]:
        pods: list[Pod] = []
        for namespace in NAMESPACE_POOL:
            taken: set[str] = set()
            for _ in range(self._rng.randint(*PODS_PER_NAMESPACE)):
                name = self._unique_name(taken, self._pod_name)
                pods.append(self._pod(name, namespace))
        return pods

    def generate_deployments(self) -> list[Deployment]:
        deployments: list[Deployment] = []
        for namespace in NAMESPACE_POOL:
            taken: set[str] = set()
            for _ in range(self._rng.randint(*DEPLOYMENTS_PER_NAMESPACE)):
                name = self._unique_name(taken, self._deployment_name)
                replicas = self._rng.randint(2, 5)
                up_to_date = self._rng.randint(0, replicas)
                available = self._rng.randint(0, up_to_date)
                deployments.append(Deployment(
                    name=name,
                    namespace=namespace,
                    ready=f"{available}/{replicas}",
                    up_to_date=up_to_date,
                    available=available,
                    age=self._age(),
                ))
        return deployments

    def generate_daemonsets(self) -> list[DaemonSet]:
        daemonsets: list[DaemonSet] = []
        for namespace in NAMESPACE_POOL:
            if self._rng.random() >= DAEMONSET_PROBABILITY:
                continue
            desired = NODE_COUNT
            current = self._rng.randint(2, desired)
            ready = self._rng.randint(1, current)
            daemonsets.append(DaemonSet(
                name=self._rng.choice(DAEMONSET_NAME_POOL),
                namespace=namespace,
                desired=desired,
                current=current,
                ready=ready,
                up_to_date=current,
                available=ready,
                age=self._age(),
            ))
        return daemonsets

    # ------------------------------------------------------------------
    # Single records
    # ------------------------------------------------------------------

    def _pod(self, name: str, namespace: str) -> Pod:
        error: PodErrorType | None = None
        status = PodStatus.RUNNING
        restarts = 0

        if self._rng.random() < POD_ERROR_PROBABILITY:
            error = self._rng.choice(list(PodErrorType))
            status, restart_range = _ERROR_OUTCOMES[error]
            if restart_range is not None:
                restarts = self._rng.randint(*restart_range)
        elif self._rng.random() < 0.2:
            restarts = self._rng.randint(0, 2)

        if status is PodStatus.RUNNING and error is None:
            ready = f"{self._rng.randint(1, 2)}/2"
        elif status is PodStatus.RUNNING:
            ready = "2/2"
        else:
            ready = "0/2"

        return Pod(
            name=name,
            namespace=namespace,
            status=status,
            ready=ready,
            restarts=restarts,
            age=self._age(),
            node=f"node-{self._rng.randint(1, NODE_COUNT)}",
            error=error,
            error_message=ERROR_MESSAGES[error] if error is not None else None,
        )

    def _pod_name(self) -> str:
        base = self._rng.choice(POD_NAME_POOL)
        return f"{base}-{self._rng.randint(1000, 9999)}-{self._rng.randint(100, 999)}"

    def _deployment_name(self) -> str:
        return f"{self._rng.choice(DEPLOYMENT_NAME_POOL)}-{self._rng.randint(1, 5)}"

    def _unique_name(self, taken: set[str], make: Callable[[], str]) -> str:
        for _ in range(_MAX_NAME_ATTEMPTS):
            name = make()
            if name not in taken:
                taken.add(name)
                return name
        raise KubesimError("Name pool exhausted while generating unique names.")

    def _age(self) -> str:
        return format_age(
            self._rng.randint(0, MAX_AGE_DAYS),
            self._rng.randint(0, 23),
            self._rng.randint(0, 59),
        )
