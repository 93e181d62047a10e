"""Checker configuration.

Defaults reproduce the deprecation-window behavior: writing state from a
view function is only a warning.
"""

from __future__ import annotations

from dataclasses import dataclass

from mutcheck.domain.model.enums import Severity


@dataclass(frozen=True, slots=True)
class CheckerConfig:
    """Immutable checker configuration with FAIL-FIRST validation.

    Attributes:
        view_writes_are_errors: Report state writes in view functions as
            errors instead of warnings.
        suggest_restrictions: Emit "can be restricted" suggestions.
        suggestion_severity: Severity of suggestions (WARNING or INFO).
    """

    view_writes_are_errors: bool = False
    suggest_restrictions: bool = True
    suggestion_severity: Severity = Severity.WARNING

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.suggestion_severity, Severity):
            raise TypeError(
                f"suggestion_severity must be Severity, got {type(self.suggestion_severity).__name__}"
            )
        if self.suggestion_severity is Severity.ERROR:
            raise ValueError("suggestion_severity must be WARNING or INFO, got ERROR")
