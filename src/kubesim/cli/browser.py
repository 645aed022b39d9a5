"""Interactive resource browser for the CLI layer.

This module is responsible for:

* Rendering the current view of :class:`BrowserState` as a Rich table,
  with a status line and an error-details panel.
* Prompting for the next action via questionary arrow keys.
* Handing over to the console when the user opens the terminal.

All display-related logic lives here — navigation rules live in
:mod:`kubesim.core.browser`.
"""

from __future__ import annotations

from typing import Any

from kubesim.cli.console import console
from kubesim.cli.terminal import _import_questionary, run_terminal
from kubesim.core.browser import BrowserState
from kubesim.core.formatter import TABLE_COLUMNS, table_cells
from kubesim.core.kinds import ResourceKind
from kubesim.core.models import Pod, PodStatus, Resource
from kubesim.core.session import ConsoleSession
from kubesim.core.store import ResourceStore
from kubesim.exceptions import EnvironmentError

HELP_LINE = "Next/Previous switch resource | Select row | Filter | Clear | Terminal"

ACTIONS: tuple[tuple[str, str], ...] = (
    ("Next resource", "next"),
    ("Previous resource", "previous"),
    ("Select row…", "select"),
    ("Filter…", "filter"),
    ("Clear filter and namespace", "clear"),
    ("Open terminal", "terminal"),
    ("Quit", "quit"),
)


def _import_rich_table() -> type[Any]:
    """Import rich table lazily for resource rendering."""
    try:
        from rich.table import Table
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms, no I/O)
# ---------------------------------------------------------------------------

def _status_style(pod: Pod) -> str:
    """Colour for a pod's STATUS cell."""
    if pod.error is not None:
        return "red"
    if pod.status is PodStatus.RUNNING:
        return "green"
    return "yellow"


def _styled_cells(kind: ResourceKind, record: Resource) -> list[str]:
    """Table cells with Rich markup for status and restarts."""
    cells = [cell.replace("[", "\\[") for cell in table_cells(kind, record)]
    if isinstance(record, Pod):
        cells[2] = f"[{_status_style(record)}]{cells[2]}[/]"
        if record.restarts > 0:
            cells[3] = f"[yellow]{cells[3]}[/]"
    elif kind is ResourceKind.NAMESPACES:
        cells[1] = f"[green]{cells[1]}[/]"
    return cells


def _row_label(kind: ResourceKind, record: Resource) -> str:
    """Single-line label shown in the row selector."""
    if kind.namespaced:
        return f"{record.name}  ({record.namespace})"
    return record.name


# ---------------------------------------------------------------------------
# Rich rendering
# ---------------------------------------------------------------------------

def _display_view(state: BrowserState) -> None:
    """Print the status line, the resource table and any error details."""
    table_class = _import_rich_table()

    title = state.kind.title
    if state.name_filter:
        title += f"  /{state.name_filter}"

    table = table_class(
        title=title,
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    for header in TABLE_COLUMNS[state.kind]:
        table.add_column(header, justify="left")

    rows = state.rows()
    selected = state.selected()
    for record in rows:
        table.add_row(
            *_styled_cells(state.kind, record),
            style="reverse" if record is selected else None,
        )

    console.print()
    console.print_text(state.status_line(), style="bold cyan")
    console.print_text(HELP_LINE, style="dim")
    console.print(table)

    pod = state.error_details()
    if pod is not None:
        console.print()
        console.print_text(f"Pod Details: {pod.name}", style="bold")
        console.print_text(f"Namespace:     {pod.namespace}")
        console.print_text(f"Status:        {pod.status.value}", style="red")
        console.print_text(f"Error Type:    {pod.error.value if pod.error else ''}", style="red")
        console.print_text(f"Error Message: {pod.error_message or ''}")
        console.print_text(f"Restarts:      {pod.restarts}")
        console.print_text(f"Node:          {pod.node or 'N/A'}")
    console.print()


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------

def _prompt_row(questionary: Any, state: BrowserState) -> int | None:
    rows = state.rows()
    if not rows:
        return None
    choices = [
        questionary.Choice(title=_row_label(state.kind, record), value=index)
        for index, record in enumerate(rows)
    ]
    selected: int | None = questionary.select(
        "Select row:",
        choices=choices,
        use_arrow_keys=True,
        use_shortcuts=False,
    ).ask()
    return selected


def run_browser(store: ResourceStore, session: ConsoleSession) -> None:
    """Browse *store* until the user quits or cancels the action prompt."""
    questionary = _import_questionary()
    state = BrowserState(store)

    try:
        while True:
            _display_view(state)
            action: str | None = questionary.select(
                "Action:",
                choices=[questionary.Choice(title=title, value=value) for title, value in ACTIONS],
                use_arrow_keys=True,
                use_shortcuts=False,
            ).ask()  # Returns None on Ctrl+C / Esc

            if action is None or action == "quit":
                break
            if action == "next":
                state.next_kind()
            elif action == "previous":
                state.previous_kind()
            elif action == "select":
                index = _prompt_row(questionary, state)
                if index is not None:
                    state.activate(index)
            elif action == "filter":
                text: str | None = questionary.text("Filter:").ask()
                if text is not None:
                    state.set_filter(text)
            elif action == "clear":
                state.clear()
            elif action == "terminal":
                run_terminal(session)
    finally:
        state.close()
