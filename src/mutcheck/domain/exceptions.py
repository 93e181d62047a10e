"""Domain exceptions: all public errors of mutcheck.

Findings in checked contracts are NOT exceptions - they are diagnostics
emitted through the error reporter. Exceptions here signal misuse of the
library or a malformed AST handed over by upstream phases.
"""


class MutCheckError(Exception):
    """Base for all mutcheck error exceptions.

    Allows: except MutCheckError to catch all library errors.
    """


class InvariantViolationError(MutCheckError, AssertionError):
    """Internal invariant broken, usually by a malformed AST.

    Inherits AssertionError: never expected on valid inputs, aborts the run.

    Attributes:
        reason: Which invariant was broken.
        node: Offending node (None when not node-specific).
    """

    def __init__(self, reason: str, node: object | None = None) -> None:
        """Initialize with reason and optional offending node."""
        if not reason:
            raise ValueError("reason must not be empty")
        self.reason = reason
        self.node = node
        location = getattr(node, "location", None)
        if location is not None:
            super().__init__(f"{reason} at {location}")
        else:
            super().__init__(reason)


class UnknownMutabilityError(MutCheckError, ValueError):
    """Text does not name a state mutability level.

    Attributes:
        text: Rejected text.
    """

    def __init__(self, text: str) -> None:
        """Initialize with rejected text."""
        self.text = text
        super().__init__(f"unknown state mutability {text!r}")
