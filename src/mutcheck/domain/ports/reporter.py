"""Reporter protocols.

ErrorReporterProtocol is the diagnostic sink the checker writes to while
walking. ReporterProtocol formats a finished CheckResult.
Users extend mutcheck by implementing either Protocol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from mutcheck.domain.model.check_result import CheckResult
    from mutcheck.domain.model.location import Location


class ErrorReporterProtocol(Protocol):
    """Contract for diagnostic sinks.

    Compiler drivers usually pass their own reporter so mutability
    diagnostics land next to the other analysis phases' output.

    Example:
        class PrintingReporter:
            def error(self, location: Location, message: str) -> None:
                print(f"{location}: Error: {message}")

            def warning(self, location: Location, message: str) -> None:
                print(f"{location}: Warning: {message}")

            def info(self, location: Location, message: str) -> None:
                print(f"{location}: Info: {message}")
    """

    def error(self, location: Location, message: str) -> None:
        """Report a hard error. The checker run fails."""
        ...

    def warning(self, location: Location, message: str) -> None:
        """Report a warning. The checker run still passes."""
        ...

    def info(self, location: Location, message: str) -> None:
        """Report an informational note."""
        ...


class ReporterProtocol(Protocol):
    """Contract for result reporters.

    mutcheck provides ConsoleReporter (returns text) and JSONReporter
    (writes to a stream).
    """

    def report(self, result: CheckResult) -> object:
        """Report check results.

        Implementation decides output format, destination and return value.

        Args:
            result: Complete check result
        """
        ...
