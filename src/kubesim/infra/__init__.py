"""Infrastructure layer — sources of starting cluster state.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from kubesim.infra.generator import RandomClusterGenerator, format_age

__all__: list[str] = [
    "RandomClusterGenerator",
    "format_age",
]
