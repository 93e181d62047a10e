"""Main facade for state-mutability checking.

ViewPureChecker runs two passes over all contracts of a program:
1. Walk every modifier definition and infer its level.
2. Walk every function definition and check it against its declared level,
   using the inferred levels for modifier invocations.

Two passes suffice while modifier bodies cannot invoke modifiers: pass one
walks modifiers in source order without sorting them by dependency.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from types import MappingProxyType
from typing import TYPE_CHECKING

from mutcheck.application.analysis.walker import MutabilityWalker
from mutcheck.domain.model.check_result import CheckResult
from mutcheck.domain.model.configuration import CheckerConfig
from mutcheck.domain.model.enums import Severity
from mutcheck.infrastructure.traversal import collect_contracts

if TYPE_CHECKING:
    from mutcheck.domain.model.diagnostic import Diagnostic
    from mutcheck.domain.model.mutability import StateMutability
    from mutcheck.domain.model.nodes import FunctionDefinition, ModifierDefinition, SourceUnit
    from mutcheck.domain.ports.reporter import ErrorReporterProtocol

logger = logging.getLogger(__name__)


class ViewPureChecker:
    """Checks declared state mutability of every function in a program.

    Does not own the AST. Each check()/analyze() call starts from an empty
    inferred-modifier map, so repeated runs give identical results.

    Example:
        reporter = ErrorReporter()
        checker = ViewPureChecker(source_units, reporter)
        if not checker.check():
            for diagnostic in reporter.errors:
                print(diagnostic)
    """

    def __init__(
        self,
        source_units: Sequence[SourceUnit],
        reporter: ErrorReporterProtocol,
        config: CheckerConfig | None = None,
    ) -> None:
        """Initialize checker.

        Args:
            source_units: Parsed, fully annotated source units
            reporter: Diagnostic sink
            config: Checker configuration (defaults if None)
        """
        self._source_units = tuple(source_units)
        self._reporter = reporter
        self._config = config or CheckerConfig()

    def check(self) -> bool:
        """Run both passes.

        Returns:
            True iff no hard error was emitted in this run

        Raises:
            InvariantViolationError: If the AST is malformed
        """
        return self.analyze().passed

    def analyze(self) -> CheckResult:
        """Run both passes and collect everything the run found.

        Returns:
            CheckResult with diagnostics, inferred modifier levels and
            best achievable level of every function

        Raises:
            InvariantViolationError: If the AST is malformed
        """
        contracts = collect_contracts(self._source_units)
        diagnostics: list[Diagnostic] = []
        inferred: dict[ModifierDefinition, StateMutability] = {}
        function_levels: dict[FunctionDefinition, StateMutability] = {}

        def emit(diagnostic: Diagnostic) -> None:
            diagnostics.append(diagnostic)
            self._forward(diagnostic)

        walker = MutabilityWalker(inferred, emit, self._config)

        logger.debug("inferring modifiers of %d contract(s)", len(contracts))
        for contract in contracts:
            for modifier in contract.function_modifiers:
                result = walker.walk_modifier(modifier)
                logger.debug("modifier %s.%s inferred as %s", contract.name, modifier.name, result.best)

        logger.debug("checking functions of %d contract(s)", len(contracts))
        for contract in contracts:
            for function in contract.defined_functions:
                result = walker.walk_function(function)
                function_levels[function] = result.best

        check_result = CheckResult(
            diagnostics=tuple(diagnostics),
            modifier_mutability=MappingProxyType(inferred),
            function_mutability=MappingProxyType(function_levels),
        )
        logger.info(
            "mutability check: %d error(s), %d warning(s) in %d function(s)",
            check_result.error_count,
            check_result.warning_count,
            len(function_levels),
        )
        return check_result

    def _forward(self, diagnostic: Diagnostic) -> None:
        match diagnostic.severity:
            case Severity.ERROR:
                self._reporter.error(diagnostic.location, diagnostic.message)
            case Severity.WARNING:
                self._reporter.warning(diagnostic.location, diagnostic.message)
            case Severity.INFO:
                self._reporter.info(diagnostic.location, diagnostic.message)


def check_source_units(
    source_units: Sequence[SourceUnit],
    config: CheckerConfig | None = None,
) -> CheckResult:
    """Check source units with a fresh collecting reporter.

    Args:
        source_units: Parsed, fully annotated source units
        config: Checker configuration (defaults if None)

    Returns:
        CheckResult of the run
    """
    from mutcheck.application.reporters.error_reporter import ErrorReporter

    return ViewPureChecker(source_units, ErrorReporter(), config).analyze()
