"""Shared base for CheckResult formatters.

ConsoleReporter returns rendered text, JSONReporter writes to a stream;
both satisfy ReporterProtocol. Subclass BaseReporter for a formatter that
writes somewhere else, e.g. an editor's problem list.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mutcheck.domain.model.check_result import CheckResult


class BaseReporter(ABC):
    """Formats a finished CheckResult.

    Example:
        class ExitCodeReporter(BaseReporter):
            def report(self, result: CheckResult) -> int:
                return 0 if result.passed else 1
    """

    @abstractmethod
    def report(self, result: CheckResult) -> object:
        """Format diagnostics and inferred levels of one checker run."""
