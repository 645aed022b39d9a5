"""CLI application entry point and command routing for kubesim.

This module is the **sole error boundary** for the entire application.
It catches :class:`~kubesim.exceptions.KubesimError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core
  session and the infra state provider.
* ``print()`` is forbidden outside the CLI layer; the console proxy is
  used exclusively.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import TYPE_CHECKING

from kubesim.cli import exit_codes
from kubesim.cli.console import console
from kubesim.constants import ENV_SEED
from kubesim.exceptions import ConfigurationError, KubesimError
from kubesim.version import __version__

if TYPE_CHECKING:
    from kubesim.core.session import ConsoleSession
    from kubesim.core.store import ResourceStore

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``kubesim``                       — interactive browser
    * ``kubesim --terminal``            — interactive console
    * ``kubesim kubectl get pods ...``  — run one console line and exit
    * ``kubesim doctor``                — environment diagnostics
    * ``kubesim --version``
    """
    parser = argparse.ArgumentParser(
        prog="kubesim",
        description="Simulated Kubernetes cluster inspector.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--seed",
        default=None,
        help=f"Seed for the generated cluster (env: {ENV_SEED}).",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level: DEBUG, INFO, WARNING, ERROR (env: KUBESIM_LOG_LEVEL).",
    )
    parser.add_argument(
        "--terminal",
        action="store_true",
        help="Start in the kubectl console instead of the browser.",
    )
    parser.add_argument(
        "command",
        nargs=argparse.REMAINDER,
        help="'doctor', or a console line such as 'kubectl get pods -n default'.",
    )
    return parser


def _resolve_seed(raw: str | None) -> int | None:
    """Return the generator seed from *raw* or ``$KUBESIM_SEED``."""
    value = raw if raw is not None else os.getenv(ENV_SEED)
    if value is None or value == "":
        return None
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigurationError(
            f"Invalid seed: {value}",
            hint="The seed must be an integer.",
        ) from exc


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _build_session(seed: int | None) -> tuple[ResourceStore, ConsoleSession]:
    """Instantiate the state provider, store, dispatcher and session."""
    from kubesim.core.dispatcher import CommandDispatcher
    from kubesim.core.session import ConsoleSession
    from kubesim.core.store import ResourceStore
    from kubesim.infra.generator import RandomClusterGenerator

    store = ResourceStore.from_provider(RandomClusterGenerator(seed))
    return store, ConsoleSession(CommandDispatcher(store))


def _handle_line(words: list[str], seed: int | None) -> int:
    """Run a single console line and print its result."""
    from kubesim.cli.terminal import render_entry
    from kubesim.core.models import EntryKind

    _store, session = _build_session(seed)
    before = len(session.log)
    session.submit_line(" ".join(words))

    has_error = False
    for entry in session.log.entries[before:]:
        if entry.kind is EntryKind.COMMAND:
            continue
        has_error = has_error or entry.kind is EntryKind.ERROR
        render_entry(entry)
    return exit_codes.GENERAL_ERROR if has_error else exit_codes.SUCCESS


def _handle_interactive(seed: int | None, *, terminal: bool) -> int:
    """Open the browser (or the console directly) on a generated cluster."""
    from kubesim.cli.browser import run_browser
    from kubesim.cli.terminal import run_terminal

    store, session = _build_session(seed)
    if terminal:
        run_terminal(session)
    else:
        run_browser(store, session)
    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from kubesim.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the kubesim CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    from kubesim.utils.log import configure_logging

    configure_logging(args.log_level)
    seed = _resolve_seed(args.seed)

    words: list[str] = args.command
    if not words:
        return _handle_interactive(seed, terminal=args.terminal)

    if words == ["doctor"]:
        return _handle_doctor()

    return _handle_line(words, seed)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except KubesimError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        logger.debug("Unexpected error", exc_info=True)
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
