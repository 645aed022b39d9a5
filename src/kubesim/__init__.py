"""kubesim — simulated Kubernetes cluster inspector.

Browse a generated, in-memory cluster through a table view and a
``kubectl``-style console (``get`` / ``describe`` / ``delete``).  No
real cluster is ever contacted.
"""

from kubesim.version import __version__

__all__: list[str] = ["__version__"]
