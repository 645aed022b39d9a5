"""Custom exception hierarchy for kubesim.

All exceptions that cross layer boundaries must inherit from
:class:`KubesimError`.  Console-level failures derive from
:class:`CommandError`; their message is the exact text shown to the
user, so the dispatcher can turn any of them into a single log entry.

Hierarchy
---------
KubesimError
├── CommandError
│   ├── UnknownCommandError
│   ├── UnknownVerbError
│   ├── UnknownResourceError
│   ├── MissingResourceError
│   ├── MissingNameError
│   ├── MissingFlagValueError
│   ├── ResourceNotFoundError
│   └── AmbiguousResourceError
├── ConfigurationError
└── EnvironmentError
"""

from __future__ import annotations


class KubesimError(Exception):
    """Base exception for all kubesim errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Console commands ------------------------------------------------------

class CommandError(KubesimError):
    """Raised for a console line that cannot be executed.

    Recoverable by definition: the session and the store are left
    untouched and the message is appended to the output log verbatim.
    """


class UnknownCommandError(CommandError):
    """Raised when a line is neither ``help`` nor a ``kubectl`` command."""


class UnknownVerbError(CommandError):
    """Raised when the ``kubectl`` verb is not get/describe/delete/apply."""


class UnknownResourceError(CommandError):
    """Raised when the resource token matches no known alias."""


class MissingResourceError(CommandError):
    """Raised when a verb that needs a resource type is given none."""


class MissingNameError(CommandError):
    """Raised when ``describe`` or ``delete`` is given no resource name."""


class MissingFlagValueError(CommandError):
    """Raised when ``-n`` is the last token and carries no value."""


class ResourceNotFoundError(CommandError):
    """Raised when no record matches the requested name and namespace."""


class AmbiguousResourceError(CommandError):
    """Raised when a name matches records in several namespaces and no
    ``-n`` flag was given to pick one."""


# --- Configuration / environment -------------------------------------------

class ConfigurationError(KubesimError):
    """Raised when a CLI flag or environment variable is invalid."""


class EnvironmentError(KubesimError):
    """Raised when a required runtime dependency is not available."""
