"""Allow ``python -m kubesim`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m kubesim`` behaves identically to the ``kubesim``
console script.
"""

from __future__ import annotations

from kubesim.cli.app import cli

if __name__ == "__main__":
    cli()
