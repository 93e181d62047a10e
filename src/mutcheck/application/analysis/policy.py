"""Diagnostic policy: which (declared, required) pairs are reported, and how.

| Declared \\ Required | VIEW  | NONPAYABLE                  |
|---------------------|-------|-----------------------------|
| PURE                | error | error                       |
| VIEW                | -     | warning (error if configured) |
| NONPAYABLE/PAYABLE  | -     | -                           |
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from mutcheck.domain.exceptions import InvariantViolationError
from mutcheck.domain.model.diagnostic import Diagnostic
from mutcheck.domain.model.enums import DiagnosticKind, Severity
from mutcheck.domain.model.mutability import StateMutability

if TYPE_CHECKING:
    from mutcheck.domain.model.configuration import CheckerConfig
    from mutcheck.domain.model.location import Location
    from mutcheck.domain.model.nodes import FunctionDefinition

READS_ENVIRONMENT_MESSAGE = (
    "Function declared as pure, but this expression reads from the "
    'environment and thus requires "view".'
)

MODIFIES_STATE_MESSAGE = (
    "Function declared as {declared}, but this expression modifies the state "
    "and thus requires non-payable (the default) or payable."
)

RESTRICTION_MESSAGE = "Function state mutability can be restricted to {level}"


def excess_diagnostic(
    declared: StateMutability,
    required: StateMutability,
    location: Location,
    config: CheckerConfig,
) -> Diagnostic | None:
    """Diagnostic for an expression requiring more than the declared level.

    Args:
        declared: Declared level of the enclosing function
        required: Level the expression requires
        location: Location of the expression
        config: Checker configuration

    Returns:
        Diagnostic, or None when required <= declared

    Raises:
        InvariantViolationError: For pairs a correct classifier never produces
    """
    if required <= declared:
        return None

    match required:
        case StateMutability.VIEW:
            kind = DiagnosticKind.READS_ENVIRONMENT
            message = READS_ENVIRONMENT_MESSAGE
        case StateMutability.NONPAYABLE:
            kind = DiagnosticKind.MODIFIES_STATE
            message = MODIFIES_STATE_MESSAGE.format(declared=declared.render())
        case _:
            raise InvariantViolationError(f"no expression can require {required.render()}")

    match declared:
        case StateMutability.PURE:
            severity = Severity.ERROR
        case StateMutability.VIEW:
            # Deprecation window: older revisions accepted writes in view functions
            severity = Severity.ERROR if config.view_writes_are_errors else Severity.WARNING
        case _:
            raise InvariantViolationError(
                f"{declared.render()} function cannot be exceeded by {required.render()}"
            )

    return Diagnostic(severity=severity, location=location, message=message, kind=kind)


def can_be_restricted(function: FunctionDefinition, best: StateMutability) -> bool:
    """Check whether a tighter level should be suggested for a function.

    Payable is never downgraded: dropping it changes what callers may send,
    not just what the body may do.
    """
    declared = function.state_mutability
    return (
        best < declared
        and declared is not StateMutability.PAYABLE
        and function.is_implemented
        and not function.is_constructor
        and function.super_function is None
    )


def restriction_suggestion(
    function: FunctionDefinition,
    best: StateMutability,
    config: CheckerConfig,
) -> Diagnostic | None:
    """Suggestion naming the tightest level the body allows.

    Returns:
        Diagnostic, or None if no suggestion applies or suggestions are off
    """
    if not config.suggest_restrictions or not can_be_restricted(function, best):
        return None
    return Diagnostic(
        severity=config.suggestion_severity,
        location=function.location,
        message=RESTRICTION_MESSAGE.format(level=best.render()),
        kind=DiagnosticKind.CAN_BE_RESTRICTED,
    )
