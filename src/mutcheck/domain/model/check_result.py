"""Check result aggregate."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from mutcheck.domain.model.enums import Severity

if TYPE_CHECKING:
    from mutcheck.domain.model.diagnostic import Diagnostic
    from mutcheck.domain.model.mutability import StateMutability
    from mutcheck.domain.model.nodes import FunctionDefinition, ModifierDefinition


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of one checker run.

    Attributes:
        diagnostics: Diagnostics emitted during the run, in emission order
        modifier_mutability: Inferred level of every modifier
        function_mutability: Best achievable level of every walked function
    """

    diagnostics: tuple[Diagnostic, ...]
    modifier_mutability: Mapping[ModifierDefinition, StateMutability] = field(
        default_factory=lambda: MappingProxyType({})
    )
    function_mutability: Mapping[FunctionDefinition, StateMutability] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @property
    def passed(self) -> bool:
        """True iff no hard error was emitted."""
        return self.error_count == 0

    @property
    def error_count(self) -> int:
        return self._count(Severity.ERROR)

    @property
    def warning_count(self) -> int:
        return self._count(Severity.WARNING)

    @property
    def info_count(self) -> int:
        return self._count(Severity.INFO)

    def _count(self, severity: Severity) -> int:
        return sum(1 for d in self.diagnostics if d.severity is severity)

    @classmethod
    def empty(cls) -> CheckResult:
        """Create empty check result (passed, nothing inferred)."""
        return cls(diagnostics=())
