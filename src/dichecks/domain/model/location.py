"""Diagnostic anchor value object."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Location:
    """Where a declaration sits in its source file.

    Diagnostics point at (file, line, column). A statement spanning
    several lines also records its last line, so pragmas written after
    a wrapped call are still found.

    Attributes:
        file: Source file
        line: First line (1-based)
        column: Column of the first character (0-based)
        end_line: Last line of the statement, None for one-line statements
    """

    file: Path
    line: int
    column: int = 0
    end_line: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.file is None:
            raise TypeError("file must not be None")
        if self.line < 1:
            raise ValueError(f"line must be > 0, got {self.line}")
        if self.column < 0:
            raise ValueError(f"column must be >= 0, got {self.column}")
        if self.end_line is not None and self.end_line < self.line:
            raise ValueError(f"end_line ({self.end_line}) must be >= line ({self.line})")

    @property
    def lines(self) -> range:
        """Every line of the statement, first to last."""
        return range(self.line, (self.end_line or self.line) + 1)

    def __str__(self) -> str:
        """Format as file:line:column, the shape editors jump to."""
        return f"{self.file}:{self.line}:{self.column}"
