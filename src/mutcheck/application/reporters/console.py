"""Console reporter: CheckResult → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from mutcheck.application.reporters._base import BaseReporter
from mutcheck.domain.model.enums import Severity

if TYPE_CHECKING:
    from mutcheck.domain.model.check_result import CheckResult
    from mutcheck.domain.model.diagnostic import Diagnostic

# Lower rank = more severe
_SEVERITY_RANK = {Severity.ERROR: 0, Severity.WARNING: 1, Severity.INFO: 2}

_SEVERITY_STYLE = {Severity.ERROR: "bold red", Severity.WARNING: "yellow", Severity.INFO: "cyan"}


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        width: Console width in characters.
        show_inferred: Show the inferred modifier levels section.
        min_severity: Least severe diagnostic shown. INFO = show all.
    """

    width: int = 120
    show_inferred: bool = True
    min_severity: Severity = Severity.INFO

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")
        if not isinstance(self.min_severity, Severity):
            raise TypeError(
                f"min_severity must be Severity, got {type(self.min_severity).__name__}"
            )


class ConsoleReporter(BaseReporter):
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, result: CheckResult) -> str:
        """Format check result as rich formatted string.

        Args:
            result: Check result to format.

        Returns:
            Formatted string with colors and tables.
        """
        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self._config.width)

        self._render_header(console, result)

        diagnostics = self._filter(result.diagnostics)
        if diagnostics:
            self._render_diagnostics(console, diagnostics)

        if self._config.show_inferred and result.modifier_mutability:
            self._render_inferred(console, result)

        return output.getvalue()

    def _filter(self, diagnostics: tuple[Diagnostic, ...]) -> tuple[Diagnostic, ...]:
        limit = _SEVERITY_RANK[self._config.min_severity]
        return tuple(d for d in diagnostics if _SEVERITY_RANK[d.severity] <= limit)

    def _render_header(self, console: Console, result: CheckResult) -> None:
        console.print()
        console.rule("[bold]STATE MUTABILITY CHECK[/bold]")
        console.print()

        status = "[bold green]PASSED[/bold green]" if result.passed else "[bold red]FAILED[/bold red]"
        console.print(
            f"{status}  [bold]Errors:[/bold] {result.error_count}  "
            f"[bold]Warnings:[/bold] {result.warning_count}  "
            f"[bold]Info:[/bold] {result.info_count}"
        )
        console.print()

    def _render_diagnostics(self, console: Console, diagnostics: tuple[Diagnostic, ...]) -> None:
        table = Table(title="DIAGNOSTICS", show_lines=False)
        table.add_column("Severity", no_wrap=True)
        table.add_column("Location", no_wrap=True)
        table.add_column("Message")

        for diagnostic in diagnostics:
            style = _SEVERITY_STYLE[diagnostic.severity]
            table.add_row(
                f"[{style}]{diagnostic.severity.name}[/{style}]",
                str(diagnostic.location),
                diagnostic.message,
            )

        console.print(table)
        console.print()

    def _render_inferred(self, console: Console, result: CheckResult) -> None:
        table = Table(title="INFERRED MODIFIERS")
        table.add_column("Modifier", no_wrap=True)
        table.add_column("Mutability", no_wrap=True)

        for modifier, level in result.modifier_mutability.items():
            table.add_row(modifier.name, level.render())

        console.print(table)
        console.print()
