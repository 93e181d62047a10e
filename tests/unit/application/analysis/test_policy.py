"""Tests for application/analysis/policy.py."""

import pytest

from mutcheck.application.analysis.policy import (
    can_be_restricted,
    excess_diagnostic,
    restriction_suggestion,
)
from mutcheck.domain.exceptions import InvariantViolationError
from mutcheck.domain.model.configuration import CheckerConfig
from mutcheck.domain.model.enums import DiagnosticKind, Severity
from mutcheck.domain.model.mutability import StateMutability
from tests.factories import make_function, make_location

PURE = StateMutability.PURE
VIEW = StateMutability.VIEW
NONPAYABLE = StateMutability.NONPAYABLE
PAYABLE = StateMutability.PAYABLE

DEFAULT = CheckerConfig()


class TestExcessDiagnostic:
    """The (declared, required) severity table."""

    @pytest.mark.parametrize("declared", [PURE, VIEW, NONPAYABLE, PAYABLE])
    def test_pure_never_reported(self, declared: StateMutability) -> None:
        assert excess_diagnostic(declared, PURE, make_location(), DEFAULT) is None

    @pytest.mark.parametrize("declared", [VIEW, NONPAYABLE, PAYABLE])
    def test_view_within_bound(self, declared: StateMutability) -> None:
        assert excess_diagnostic(declared, VIEW, make_location(), DEFAULT) is None

    @pytest.mark.parametrize("declared", [NONPAYABLE, PAYABLE])
    def test_write_within_bound(self, declared: StateMutability) -> None:
        assert excess_diagnostic(declared, NONPAYABLE, make_location(), DEFAULT) is None

    def test_pure_reading_is_error(self) -> None:
        loc = make_location()
        diagnostic = excess_diagnostic(PURE, VIEW, loc, DEFAULT)
        assert diagnostic is not None
        assert diagnostic.severity is Severity.ERROR
        assert diagnostic.kind is DiagnosticKind.READS_ENVIRONMENT
        assert diagnostic.location == loc
        assert diagnostic.message == (
            "Function declared as pure, but this expression reads from the "
            'environment and thus requires "view".'
        )

    def test_pure_writing_is_error(self) -> None:
        diagnostic = excess_diagnostic(PURE, NONPAYABLE, make_location(), DEFAULT)
        assert diagnostic is not None
        assert diagnostic.severity is Severity.ERROR
        assert diagnostic.kind is DiagnosticKind.MODIFIES_STATE
        assert diagnostic.message == (
            "Function declared as pure, but this expression modifies the state "
            "and thus requires non-payable (the default) or payable."
        )

    def test_view_writing_is_warning(self) -> None:
        diagnostic = excess_diagnostic(VIEW, NONPAYABLE, make_location(), DEFAULT)
        assert diagnostic is not None
        assert diagnostic.severity is Severity.WARNING
        assert diagnostic.message.startswith("Function declared as view, but")

    def test_view_writing_error_when_configured(self) -> None:
        config = CheckerConfig(view_writes_are_errors=True)
        diagnostic = excess_diagnostic(VIEW, NONPAYABLE, make_location(), config)
        assert diagnostic is not None
        assert diagnostic.severity is Severity.ERROR

    def test_payable_requirement_is_invariant_violation(self) -> None:
        with pytest.raises(InvariantViolationError, match="require payable"):
            excess_diagnostic(NONPAYABLE, PAYABLE, make_location(), DEFAULT)


class TestCanBeRestricted:
    """Suggestion preconditions."""

    def test_view_without_reads(self) -> None:
        assert can_be_restricted(make_function("f", mutability=VIEW), PURE) is True

    def test_nonpayable_reading(self) -> None:
        assert can_be_restricted(make_function("f"), VIEW) is True

    def test_not_when_best_equals_declared(self) -> None:
        assert can_be_restricted(make_function("f", mutability=VIEW), VIEW) is False

    def test_not_when_best_exceeds_declared(self) -> None:
        assert can_be_restricted(make_function("f", mutability=VIEW), NONPAYABLE) is False

    def test_not_for_payable(self) -> None:
        assert can_be_restricted(make_function("f", mutability=PAYABLE), PURE) is False

    def test_not_for_unimplemented(self) -> None:
        assert can_be_restricted(make_function("f", implemented=False), PURE) is False

    def test_not_for_constructor(self) -> None:
        assert can_be_restricted(make_function("C", is_constructor=True), PURE) is False

    def test_not_for_override(self) -> None:
        base = make_function("f", implemented=False)
        assert can_be_restricted(make_function("f", super_function=base), PURE) is False


class TestRestrictionSuggestion:
    """Suggestion diagnostics."""

    def test_message_names_level(self) -> None:
        function = make_function("f")
        diagnostic = restriction_suggestion(function, VIEW, DEFAULT)
        assert diagnostic is not None
        assert diagnostic.message == "Function state mutability can be restricted to view"
        assert diagnostic.severity is Severity.WARNING
        assert diagnostic.kind is DiagnosticKind.CAN_BE_RESTRICTED
        assert diagnostic.location == function.location

    def test_none_when_not_restrictable(self) -> None:
        assert restriction_suggestion(make_function("f"), NONPAYABLE, DEFAULT) is None

    def test_disabled_by_config(self) -> None:
        config = CheckerConfig(suggest_restrictions=False)
        assert restriction_suggestion(make_function("f"), PURE, config) is None

    def test_configured_severity(self) -> None:
        config = CheckerConfig(suggestion_severity=Severity.INFO)
        diagnostic = restriction_suggestion(make_function("f"), PURE, config)
        assert diagnostic is not None
        assert diagnostic.severity is Severity.INFO
