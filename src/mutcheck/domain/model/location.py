"""Source location value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Location:
    """Span of a node inside a source unit.

    Attributes:
        source: Source unit name as given to the compiler (e.g. "token.sol")
        line: Line of the span start (1-based, must be > 0)
        column: Column of the span start (0-based, must be >= 0)
        length: Span length in characters (must be >= 0)
    """

    source: str
    line: int
    column: int
    length: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.source:
            raise ValueError("source must not be empty")
        if self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")
        if self.column < 0:
            raise ValueError(f"column must be >= 0, got {self.column}")
        if self.length < 0:
            raise ValueError(f"length must be >= 0, got {self.length}")

    def __str__(self) -> str:
        """Format as source:line:column."""
        return f"{self.source}:{self.line}:{self.column}"
