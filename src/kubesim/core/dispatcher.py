"""Command dispatcher — resolves parsed commands against the store.

Each verb is a single request/response step:

* ``get``      — list records, render a table (or "No resources found").
* ``describe`` — resolve one record, render its report.
* ``delete``   — resolve one record, remove it, confirm.
* ``apply``    — acknowledge only; the store is never touched.
* ``help``     — fixed usage block.

:meth:`CommandDispatcher.execute` is the error boundary of the console:
every :class:`~kubesim.exceptions.CommandError` raised while parsing or
dispatching becomes an error :class:`~kubesim.core.models.CommandResult`
and never escapes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from kubesim.core.kinds import ResourceKind
from kubesim.core.formatter import ResourceFormatter
from kubesim.core.models import Command, CommandResult, Resource, Verb
from kubesim.core.parser import parse_line
from kubesim.core.store import ResourceStore
from kubesim.exceptions import (
    AmbiguousResourceError,
    CommandError,
    MissingNameError,
    ResourceNotFoundError,
)

logger = logging.getLogger(__name__)

HELP_TEXT = """\
Available commands:
  kubectl get <resource> [name] [-n namespace]
  kubectl describe <resource> <name> [-n namespace]
  kubectl delete <resource> <name> [-n namespace]
  kubectl apply -f <file> (simulated)

Resources: pods, deployments, daemonsets, namespaces
Shortcuts: po, deploy, ds, ns

Examples:
  kubectl get pods
  kubectl get pods -n default
  kubectl describe pod <pod-name>
  kubectl delete pod <pod-name> -n default
  kubectl get deployments
  kubectl get namespaces"""

APPLY_TEXT = (
    "Note: This is a mock cluster. Apply command is simulated.\n"
    "In a real cluster, this would apply the configuration from the specified file."
)


class CommandDispatcher:
    """Maps commands to store operations and formatter calls.

    Parameters
    ----------
    store:
        The session's resource store; the only object ever mutated.
    formatter:
        Renderer for tables and descriptions.  A default one is built
        when omitted.
    """

    def __init__(
        self,
        store: ResourceStore,
        formatter: ResourceFormatter | None = None,
    ) -> None:
        self._store: ResourceStore = store
        self._formatter: ResourceFormatter = formatter or ResourceFormatter()
        self._handlers: dict[Verb, Callable[[Command], str]] = {
            Verb.GET: self._get,
            Verb.DESCRIBE: self._describe,
            Verb.DELETE: self._delete,
            Verb.APPLY: self._apply,
            Verb.HELP: self._help,
        }

    @property
    def store(self) -> ResourceStore:
        return self._store

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def execute(self, line: str) -> CommandResult:
        """Parse and dispatch *line*, converting console errors to text."""
        try:
            return CommandResult(self.dispatch(parse_line(line)))
        except CommandError as exc:
            return CommandResult(str(exc), error=True)

    def dispatch(self, command: Command) -> str:
        """Run *command* and return its output text.

        Raises
        ------
        MissingNameError
            If ``describe``/``delete`` carries no name.
        ResourceNotFoundError
            If the name/namespace combination matches nothing.
        AmbiguousResourceError
            If the name matches several namespaces and no ``-n`` was given.
        """
        logger.debug("Dispatching %s", command)
        return self._handlers[command.verb](command)

    # ------------------------------------------------------------------
    # Verb handlers
    # ------------------------------------------------------------------

    def _get(self, command: Command) -> str:
        kind = _require_kind(command)
        records = self._store.list_resources(kind, command.namespace, command.name)
        if not records:
            if command.namespace is not None and kind.namespaced:
                return f"No resources found in {command.namespace} namespace."
            return "No resources found."
        return self._formatter.render_table(kind, records)

    def _describe(self, command: Command) -> str:
        kind = _require_kind(command)
        name = _require_name(command)
        record = self._resolve(kind, name, command.namespace)
        return self._formatter.render_description(kind, record)

    def _delete(self, command: Command) -> str:
        kind = _require_kind(command)
        name = _require_name(command)
        record = self._resolve(kind, name, command.namespace)
        self._store.delete(kind, record.name, record.namespace)
        return f'{kind.singular}{kind.api_suffix} "{name}" deleted'

    @staticmethod
    def _apply(_command: Command) -> str:
        return APPLY_TEXT

    @staticmethod
    def _help(_command: Command) -> str:
        return HELP_TEXT

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def _resolve(self, kind: ResourceKind, name: str, namespace: str | None) -> Resource:
        """Return the single record addressed by *name* and *namespace*."""
        found = self._store.matches(kind, name, namespace)
        if not found:
            raise ResourceNotFoundError(
                f'Error from server (NotFound): {kind.plural}{kind.api_suffix} "{name}" not found',
            )

        if len(found) > 1 and namespace is None and kind.namespaced:
            namespaces = ", ".join(str(r.namespace) for r in found)
            logger.warning("Ambiguous %s %r found in: %s", kind.singular, name, namespaces)
            raise AmbiguousResourceError(
                f'Error: {kind.plural}{kind.api_suffix} "{name}" is ambiguous: '
                f"found in namespaces {namespaces}. Use -n <namespace> to select one.",
            )
        return found[0]


def _require_kind(command: Command) -> ResourceKind:
    if command.kind is None:
        raise CommandError(f"Error: {command.verb.value} requires a resource type.")
    return command.kind


def _require_name(command: Command) -> str:
    if not command.name:
        raise MissingNameError(
            f"Error: resource name is required for {command.verb.value} command.",
        )
    return command.name
