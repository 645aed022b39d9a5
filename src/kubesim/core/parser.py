"""Console line parser.

Turns one line of free text into a :class:`~kubesim.core.models.Command`
or raises a :class:`~kubesim.exceptions.CommandError` subclass.

Grammar
-------
::

    line        := "help" | "?" | kubectl-cmd
    kubectl-cmd := "kubectl" WS verb WS resource [WS name] [WS "-n" WS namespace]
    verb        := "get" | "describe" | "delete" | "apply"

* The verb is case-sensitive; resource aliases are not.
* The first ``-n <value>`` pair may appear anywhere after ``kubectl``
  and is consumed before positional tokens are read.
* ``apply`` accepts and ignores any trailing tokens, ``-n`` included.

Parsing is pure: no store access, no output.
"""

from __future__ import annotations

import logging

from kubesim.core.kinds import resolve_kind
from kubesim.core.models import Command, Verb
from kubesim.exceptions import (
    MissingFlagValueError,
    MissingResourceError,
    UnknownCommandError,
    UnknownResourceError,
    UnknownVerbError,
)

logger = logging.getLogger(__name__)

HELP_WORDS = frozenset({"help", "?"})
KUBECTL_PREFIX = "kubectl "
NAMESPACE_FLAG = "-n"

_KUBECTL_VERBS: dict[str, Verb] = {
    verb.value: verb
    for verb in (Verb.GET, Verb.DESCRIBE, Verb.DELETE, Verb.APPLY)
}


def extract_namespace(tokens: list[str]) -> tuple[list[str], str | None]:
    """Remove the first ``-n <value>`` pair from *tokens*.

    Returns the remaining tokens and the namespace (``None`` when the
    flag is absent).

    Raises
    ------
    MissingFlagValueError
        If ``-n`` is the last token.
    """
    if NAMESPACE_FLAG not in tokens:
        return list(tokens), None

    index = tokens.index(NAMESPACE_FLAG)
    if index + 1 >= len(tokens):
        raise MissingFlagValueError("error: flag needs an argument: 'n' in -n")

    remaining = tokens[:index] + tokens[index + 2:]
    return remaining, tokens[index + 1]


def parse_line(line: str) -> Command:
    """Parse one console line.

    Raises
    ------
    UnknownCommandError
        If the line is neither ``help``/``?`` nor starts with ``kubectl ``.
    UnknownVerbError
        If the ``kubectl`` verb is not recognised.
    MissingResourceError
        If a resource-taking verb has no resource token.
    UnknownResourceError
        If the resource token matches no alias.
    MissingFlagValueError
        If ``-n`` is given without a value.
    """
    stripped = line.strip()

    if stripped in HELP_WORDS:
        return Command(verb=Verb.HELP)

    if not stripped.startswith(KUBECTL_PREFIX):
        logger.debug("Rejected line: %r", stripped)
        raise UnknownCommandError(
            f'Command not found: {stripped}. Type "help" for available commands.',
        )

    raw_tokens = stripped[len(KUBECTL_PREFIX):].split()
    if raw_tokens[:1] == [Verb.APPLY.value]:
        return Command(verb=Verb.APPLY, args=tuple(raw_tokens[1:]))

    tokens, namespace = extract_namespace(raw_tokens)

    verb_token = tokens[0] if tokens else ""
    verb = _KUBECTL_VERBS.get(verb_token)
    if verb is None:
        raise UnknownVerbError(
            f'Error: unknown kubectl command "{verb_token}". '
            'Use "help" for available commands.',
        )

    if verb is Verb.APPLY:
        return Command(verb=verb, namespace=namespace, args=tuple(tokens[1:]))

    if len(tokens) < 2:
        raise MissingResourceError(
            f"error: you must specify the type of resource to {verb.value}. "
            'Use "help" for available commands.',
        )

    resource_token = tokens[1]
    kind = resolve_kind(resource_token)
    if kind is None:
        raise UnknownResourceError(f'Error: unknown resource type "{resource_token}".')

    name = tokens[2] if len(tokens) > 2 else None
    return Command(verb=verb, kind=kind, name=name, namespace=namespace)
