"""mutcheck - state mutability checker for smart-contract ASTs."""

__version__ = "0.1.0"

from mutcheck.application.reporters.error_reporter import ErrorReporter
from mutcheck.application.services.checker import ViewPureChecker, check_source_units
from mutcheck.domain.model.check_result import CheckResult
from mutcheck.domain.model.configuration import CheckerConfig
from mutcheck.domain.model.mutability import StateMutability

__all__ = [
    "CheckResult",
    "CheckerConfig",
    "ErrorReporter",
    "StateMutability",
    "ViewPureChecker",
    "__version__",
    "check_source_units",
]
