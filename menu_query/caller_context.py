"""Logic for attributing diagnostics to the code that ran the query."""

import sys
from dataclasses import dataclass
from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parent


@dataclass(frozen=True)
class CallerContext:
    """Where a query was started from, outside this package."""

    function: str
    file: str
    line: int

    def __str__(self) -> str:
        return f"{self.function} called from {self.file} on line {self.line}"


def _in_package(filename: str, package_dir: Path) -> bool:
    try:
        Path(filename).resolve().relative_to(package_dir)
    except (ValueError, OSError):
        return False
    return True


def find_caller(package_dir: Path = PACKAGE_DIR) -> CallerContext:
    """Return the first stack frame outside the package.

    The reported function is the package entry point that frame called,
    e.g. ``MenuQuery()`` for a constructor or ``MenuQuery.query``.
    """
    frame = sys._getframe(1)
    entry = "<unknown>"
    while frame is not None and _in_package(
        frame.f_code.co_filename, package_dir
    ):
        code = frame.f_code
        owner = frame.f_locals.get("self")
        if code.co_name == "__init__" and owner is not None:
            entry = f"{type(owner).__name__}()"
        elif owner is not None:
            entry = f"{type(owner).__name__}.{code.co_name}"
        else:
            entry = code.co_name
        frame = frame.f_back

    if frame is None:
        return CallerContext(entry, "<unknown>", 0)
    return CallerContext(entry, frame.f_code.co_filename, frame.f_lineno)
