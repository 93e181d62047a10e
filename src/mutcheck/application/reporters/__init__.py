"""Reporters: diagnostic sink and check result formatters.

ConsoleReporter renders with rich, JSONReporter uses stdlib json.
"""

from mutcheck.application.reporters._base import BaseReporter
from mutcheck.application.reporters.console import ConsoleConfig, ConsoleReporter
from mutcheck.application.reporters.error_reporter import ErrorReporter
from mutcheck.application.reporters.json_reporter import JSONReporter

__all__ = [
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "ErrorReporter",
    "JSONReporter",
]
