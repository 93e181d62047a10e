"""Collecting diagnostic sink.

Default ErrorReporterProtocol implementation: keeps every diagnostic in
emission order. Compiler drivers may pass their own sink instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mutcheck.domain.model.diagnostic import Diagnostic
from mutcheck.domain.model.enums import Severity

if TYPE_CHECKING:
    from mutcheck.domain.model.location import Location


class ErrorReporter:
    """Collects diagnostics reported by analysis phases."""

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def error(self, location: Location, message: str) -> None:
        self._append(Severity.ERROR, location, message)

    def warning(self, location: Location, message: str) -> None:
        self._append(Severity.WARNING, location, message)

    def info(self, location: Location, message: str) -> None:
        self._append(Severity.INFO, location, message)

    def _append(self, severity: Severity, location: Location, message: str) -> None:
        self._diagnostics.append(Diagnostic(severity=severity, location=location, message=message))

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """All diagnostics in emission order."""
        return tuple(self._diagnostics)

    @property
    def errors(self) -> tuple[Diagnostic, ...]:
        return tuple(d for d in self._diagnostics if d.severity is Severity.ERROR)

    @property
    def warnings(self) -> tuple[Diagnostic, ...]:
        return tuple(d for d in self._diagnostics if d.severity is Severity.WARNING)

    @property
    def has_errors(self) -> bool:
        return any(d.severity is Severity.ERROR for d in self._diagnostics)

    def clear(self) -> None:
        """Drop all collected diagnostics."""
        self._diagnostics.clear()
