"""Interactive ``kubectl`` console for the CLI layer.

This module is responsible for:

* Reading lines with a questionary text prompt.
* Feeding them to :meth:`ConsoleSession.submit_line`.
* Rendering every output-log entry as it is appended.

No parsing and no store access happen here — the session owns both.
"""

from __future__ import annotations

from typing import Any

from kubesim.cli.console import console
from kubesim.core.models import EntryKind, OutputEntry
from kubesim.core.session import ConsoleSession
from kubesim.exceptions import EnvironmentError

ENTRY_STYLES: dict[EntryKind, str | None] = {
    EntryKind.COMMAND: "bold green",
    EntryKind.OUTPUT: None,
    EntryKind.ERROR: "red",
}

PROMPT = "$"


def _import_questionary() -> Any:
    """Import questionary lazily for interactive input."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def render_entry(entry: OutputEntry) -> None:
    """Print one log entry with the style of its kind."""
    console.print_text(entry.content, style=ENTRY_STYLES[entry.kind])


def run_terminal(session: ConsoleSession) -> None:
    """Run the console until the user cancels the prompt (Ctrl+C / Esc).

    Entries already in the log are replayed first; new ones are printed
    as the session appends them.
    """
    questionary = _import_questionary()

    for entry in session.log:
        render_entry(entry)

    unsubscribe = session.log.subscribe(render_entry)
    try:
        while True:
            line: str | None = questionary.text(
                PROMPT,
                qmark="",
                default="",
            ).ask()  # Returns None on Ctrl+C / Esc
            if line is None:
                break
            session.submit_line(line)
    finally:
        unsubscribe()
