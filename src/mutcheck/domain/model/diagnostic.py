"""Diagnostic value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mutcheck.domain.model.enums import DiagnosticKind, Severity
    from mutcheck.domain.model.location import Location


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Finding reported about a checked contract.

    Attributes:
        severity: ERROR/WARNING/INFO
        location: Source location of the offending node
        message: Human-readable message
        kind: What was found. None when reported through a bare reporter call.
    """

    severity: Severity
    location: Location
    message: str
    kind: DiagnosticKind | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.location is None:
            raise TypeError("location must not be None")
        if not self.message:
            raise ValueError("message must not be empty")

    def __str__(self) -> str:
        """Format as `location: severity: message`."""
        return f"{self.location}: {self.severity.name.lower()}: {self.message}"
