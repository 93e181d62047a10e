"""JSON reporter for machine-readable output."""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

from mutcheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from mutcheck.domain.model.check_result import CheckResult
    from mutcheck.domain.model.diagnostic import Diagnostic


class JSONReporter(BaseReporter):
    """JSON reporter for CI integration and editor tooling."""

    def __init__(self, output: TextIO | None = None, *, indent: int | None = 2) -> None:
        """Writes to output (sys.stdout if None); indent=None gives one line per run."""
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, result: CheckResult) -> None:
        """Write check result as one JSON document."""
        json.dump(self._result_to_dict(result), self._output, indent=self._indent)
        self._output.write("\n")

    def _result_to_dict(self, result: CheckResult) -> dict[str, object]:
        return {
            "passed": result.passed,
            "summary": {
                "error_count": result.error_count,
                "warning_count": result.warning_count,
                "info_count": result.info_count,
            },
            "diagnostics": [self._diagnostic_to_dict(d) for d in result.diagnostics],
            # List, not dict: modifiers of different contracts may share a name
            "modifiers": [
                {
                    "name": modifier.name,
                    "mutability": level.render(),
                    "location": str(modifier.location),
                }
                for modifier, level in result.modifier_mutability.items()
            ],
        }

    def _diagnostic_to_dict(self, diagnostic: Diagnostic) -> dict[str, object]:
        return {
            "severity": diagnostic.severity.name,
            "kind": diagnostic.kind.name if diagnostic.kind is not None else None,
            "message": diagnostic.message,
            "location": {
                "source": diagnostic.location.source,
                "line": diagnostic.location.line,
                "column": diagnostic.location.column,
            },
        }
