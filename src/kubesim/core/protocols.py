"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — so a session can be seeded from a random generator
in production and from a fixed fixture in tests.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Protocol

from kubesim.core.models import ClusterState, OutputEntry


class InitialStateProvider(Protocol):
    """Contract for the source of a session's starting cluster state.

    Any object that implements :meth:`load_state` with the correct
    signature satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def load_state(self) -> ClusterState:
        """Return the four starting collections.

        Called exactly once, when the store is constructed.  The
        returned records must satisfy the model invariants (ready
        numerator ≤ denominator, daemonset counters ordered, unique
        keys per namespace).
        """
        ...  # pragma: no cover


Clock = Callable[[], datetime]
"""Zero-argument callable returning the current time."""

EntryListener = Callable[[OutputEntry], None]
"""Callback notified with every entry appended to an output log."""

NamespaceListener = Callable[[str], None]
"""Callback notified with the name of a deleted namespace."""
