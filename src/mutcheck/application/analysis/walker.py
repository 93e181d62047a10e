"""Function and modifier body walker.

Folds classifier results over one body in post-order:

    Idle --enter--> InBody(PURE) --observe(r)--> InBody(join(best, r)) --exit--> Idle

Exit side effects: modifiers record their inferred level, functions may
receive a "can be restricted" suggestion.
"""

from __future__ import annotations

from collections.abc import Callable, MutableMapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from mutcheck.application.analysis.classifier import classify
from mutcheck.application.analysis.policy import excess_diagnostic, restriction_suggestion
from mutcheck.domain.exceptions import InvariantViolationError
from mutcheck.domain.model.mutability import StateMutability
from mutcheck.domain.model.nodes import FunctionDefinition, ModifierDefinition
from mutcheck.infrastructure.traversal import post_order

if TYPE_CHECKING:
    from mutcheck.domain.model.configuration import CheckerConfig
    from mutcheck.domain.model.diagnostic import Diagnostic
    from mutcheck.domain.model.nodes import Node


@dataclass(frozen=True, slots=True)
class WalkResult:
    """Outcome of walking one function or modifier.

    Attributes:
        subject: Walked function or modifier
        declared: Declared level (None for modifiers)
        best: Tightest level the body allows
        observations: Running best level after each visited node, in visit order
        diagnostics: Diagnostics emitted during this walk
    """

    subject: FunctionDefinition | ModifierDefinition
    declared: StateMutability | None
    best: StateMutability
    observations: tuple[StateMutability, ...]
    diagnostics: tuple[Diagnostic, ...]


@dataclass(slots=True)
class _Frame:
    """Body currently being walked.

    Attributes:
        function: Current function, None while walking a modifier
        best: Running best achievable level
    """

    function: FunctionDefinition | None
    best: StateMutability = StateMutability.PURE


class MutabilityWalker:
    """Walks function and modifier bodies, one at a time.

    Holds the inferred-modifier map it fills (modifiers) and reads
    (functions). Diagnostics go to the emit callback as they are found.
    """

    def __init__(
        self,
        inferred_modifiers: MutableMapping[ModifierDefinition, StateMutability],
        emit: Callable[[Diagnostic], None],
        config: CheckerConfig,
    ) -> None:
        """Initialize walker.

        Args:
            inferred_modifiers: Map filled by walk_modifier, read by walk_function
            emit: Diagnostic sink
            config: Checker configuration
        """
        self._inferred = inferred_modifiers
        self._emit = emit
        self._config = config
        self._frame: _Frame | None = None

    @property
    def current_function(self) -> FunctionDefinition | None:
        """Function being walked, None outside a function body."""
        return self._frame.function if self._frame is not None else None

    def walk_modifier(self, modifier: ModifierDefinition) -> WalkResult:
        """Infer the level of a modifier and record it.

        Raises:
            InvariantViolationError: If another body is being walked
        """
        self._enter(_Frame(function=None))
        observations, diagnostics = self._walk_body(modifier)
        best = self._exit().best

        self._inferred[modifier] = best
        return WalkResult(
            subject=modifier,
            declared=None,
            best=best,
            observations=observations,
            diagnostics=diagnostics,
        )

    def walk_function(self, function: FunctionDefinition) -> WalkResult:
        """Check a function against its declared level.

        Raises:
            InvariantViolationError: If another body is being walked
        """
        self._enter(_Frame(function=function))
        observations, diagnostics = self._walk_body(function)
        frame = self._exit()

        suggestion = restriction_suggestion(function, frame.best, self._config)
        if suggestion is not None:
            self._emit(suggestion)
            diagnostics = (*diagnostics, suggestion)

        return WalkResult(
            subject=function,
            declared=function.state_mutability,
            best=frame.best,
            observations=observations,
            diagnostics=diagnostics,
        )

    def _enter(self, frame: _Frame) -> None:
        if self._frame is not None:
            raise InvariantViolationError("body walks cannot be nested", frame.function)
        self._frame = frame

    def _exit(self) -> _Frame:
        frame = self._frame
        if frame is None:
            raise InvariantViolationError("exit without an active body walk")
        self._frame = None
        return frame

    def _walk_body(
        self, subject: Node
    ) -> tuple[tuple[StateMutability, ...], tuple[Diagnostic, ...]]:
        observations: list[StateMutability] = []
        diagnostics: list[Diagnostic] = []

        for node in post_order(subject):
            diagnostic = self._observe(classify(node, self._inferred), node)
            if diagnostic is not None:
                diagnostics.append(diagnostic)
            observations.append(self._require_frame().best)

        return tuple(observations), tuple(diagnostics)

    def _observe(self, required: StateMutability, node: Node) -> Diagnostic | None:
        frame = self._require_frame()

        diagnostic = None
        if frame.function is not None:
            diagnostic = excess_diagnostic(
                frame.function.state_mutability, required, node.location, self._config
            )
            if diagnostic is not None:
                self._emit(diagnostic)

        frame.best = frame.best.join(required)
        return diagnostic

    def _require_frame(self) -> _Frame:
        if self._frame is None:
            raise InvariantViolationError("node observed outside a body walk")
        return self._frame
