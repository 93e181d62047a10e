"""Domain model."""

from mutcheck.domain.model.check_result import CheckResult
from mutcheck.domain.model.configuration import CheckerConfig
from mutcheck.domain.model.diagnostic import Diagnostic
from mutcheck.domain.model.enums import (
    DataLocation,
    DiagnosticKind,
    FunctionCallKind,
    MagicKind,
    Severity,
    TypeCategory,
)
from mutcheck.domain.model.location import Location
from mutcheck.domain.model.mutability import StateMutability, join_all

__all__ = [
    "CheckResult",
    "CheckerConfig",
    "DataLocation",
    "Diagnostic",
    "DiagnosticKind",
    "FunctionCallKind",
    "Location",
    "MagicKind",
    "Severity",
    "StateMutability",
    "TypeCategory",
    "join_all",
]
