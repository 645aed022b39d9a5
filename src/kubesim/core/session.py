"""Console session — the ``submit_line`` entry point and its output log.

A session ties a :class:`~kubesim.core.dispatcher.CommandDispatcher`
to an append-only :class:`OutputLog` that views observe through
listeners.  Submitting a line appends exactly two entries: the echoed
``$ <line>`` and the dispatch result.  Blank lines are ignored.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import datetime

from kubesim.constants import TIMESTAMP_FORMAT
from kubesim.core.dispatcher import CommandDispatcher
from kubesim.core.models import EntryKind, OutputEntry
from kubesim.core.protocols import Clock, EntryListener

WELCOME_TEXT = 'Kubernetes terminal ready. Type "kubectl" commands or "help" for usage.'


class OutputLog:
    """Append-only, unbounded sequence of :class:`OutputEntry` items."""

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock: Clock = clock or datetime.now
        self._entries: list[OutputEntry] = []
        self._listeners: list[EntryListener] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[OutputEntry]:
        return iter(tuple(self._entries))

    @property
    def entries(self) -> tuple[OutputEntry, ...]:
        return tuple(self._entries)

    def append(self, kind: EntryKind, content: str) -> OutputEntry:
        """Record a new entry and notify every listener with it."""
        entry = OutputEntry(
            kind=kind,
            content=content,
            timestamp=self._clock().strftime(TIMESTAMP_FORMAT),
        )
        self._entries.append(entry)
        for listener in list(self._listeners):
            listener(entry)
        return entry

    def subscribe(self, listener: EntryListener) -> Callable[[], None]:
        """Register *listener*; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe


class CommandHistory:
    """Shell-style history of submitted lines with a browsing cursor.

    :meth:`previous` walks back from the newest line and stops at the
    oldest; :meth:`next` walks forward and returns ``""`` once it moves
    past the newest line, resetting the cursor.
    """

    def __init__(self) -> None:
        self._lines: list[str] = []
        self._cursor: int | None = None

    def __len__(self) -> int:
        return len(self._lines)

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    def record(self, line: str) -> None:
        self._lines.append(line)
        self._cursor = None

    def previous(self) -> str | None:
        """Return the previous line, or ``None`` when history is empty."""
        if not self._lines:
            return None
        if self._cursor is None:
            self._cursor = len(self._lines) - 1
        else:
            self._cursor = max(0, self._cursor - 1)
        return self._lines[self._cursor]

    def next(self) -> str | None:
        """Return the next line, ``""`` past the end, ``None`` if not browsing."""
        if self._cursor is None:
            return None
        self._cursor += 1
        if self._cursor >= len(self._lines):
            self._cursor = None
            return ""
        return self._lines[self._cursor]


class ConsoleSession:
    """One interactive console run over a single store.

    Parameters
    ----------
    dispatcher:
        Executes each submitted line.
    clock:
        Source of entry timestamps (``datetime.now`` by default).
    greeting:
        When true, the log starts with the welcome entry.
    """

    def __init__(
        self,
        dispatcher: CommandDispatcher,
        *,
        clock: Clock | None = None,
        greeting: bool = True,
    ) -> None:
        self._dispatcher: CommandDispatcher = dispatcher
        self.log: OutputLog = OutputLog(clock)
        self.history: CommandHistory = CommandHistory()
        if greeting:
            self.log.append(EntryKind.OUTPUT, WELCOME_TEXT)

    def submit_line(self, text: str) -> None:
        """Echo *text* into the log, dispatch it, and log the result."""
        if not text.strip():
            return

        self.history.record(text)
        self.log.append(EntryKind.COMMAND, f"$ {text}")
        result = self._dispatcher.execute(text)
        self.log.append(EntryKind.ERROR if result.error else EntryKind.OUTPUT, result.text)
