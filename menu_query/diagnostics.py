"""Error taxonomy and the diagnostic channel queries report through.

Queries never raise these. Each problem is recorded as a ``Diagnostic``
on the query and logged; the query is left with no items.
"""

import logging
from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass

from menu_query.caller_context import CallerContext, find_caller

logger = logging.getLogger(__name__)

ERROR = "error"
WARNING = "warning"


class MenuQueryError(Exception):
    """Base class for fatal query problems."""


class MissingLocationError(MenuQueryError):
    """The required ``location`` option was not given."""


class MenuNotFoundError(MenuQueryError):
    """A location has a menu assigned but the menu could not be loaded."""


class MenuQueryWarning(UserWarning):
    """Base class for recoverable query problems."""


class UnregisteredLocationWarning(MenuQueryWarning):
    """The location is not registered."""


class NoMenuAttachedWarning(MenuQueryWarning):
    """The location is registered but no menu is assigned to it."""


@dataclass(frozen=True)
class Diagnostic:
    """A single reported problem with the place it was triggered from."""

    problem: Exception
    caller: CallerContext

    @property
    def severity(self) -> str:
        return WARNING if isinstance(self.problem, Warning) else ERROR

    @property
    def category(self) -> str:
        return type(self.problem).__name__

    @property
    def message(self) -> str:
        return f"{self.problem} in {self.caller}"

    def as_dict(self) -> dict[str, object]:
        return {
            "severity": self.severity,
            "category": self.category,
            "message": str(self.problem),
            "function": self.caller.function,
            "file": self.caller.file,
            "line": self.caller.line,
        }


class DiagnosticLog:
    """Collects diagnostics for one query and mirrors them to the logger."""

    def __init__(self) -> None:
        """Start empty."""
        self.entries: list[Diagnostic] = []

    def report(self, problem: Exception) -> Diagnostic:
        """Record a problem, attributing it to the caller outside the package."""
        diagnostic = Diagnostic(problem, find_caller())
        self.entries.append(diagnostic)
        if diagnostic.severity == ERROR:
            logger.error("%s", diagnostic.message)
        else:
            logger.warning("%s", diagnostic.message)
        return diagnostic

    def clear(self) -> None:
        """Forget previously reported problems."""
        self.entries = []

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.entries if d.severity == ERROR]

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.entries if d.severity == WARNING]

    def has_errors(self) -> bool:
        """Check if a fatal problem was reported."""
        return bool(self.errors)

    def categories(self) -> dict[str, int]:
        """Count diagnostics per problem class name."""
        return dict(Counter(d.category for d in self.entries))

    def raise_first(self) -> None:
        """Raise the first fatal problem, for callers that want exceptions."""
        for d in self.errors:
            raise d.problem

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)
