"""Source host exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dichecks.domain.exceptions.base import DIChecksError

if TYPE_CHECKING:
    from pathlib import Path

    from dichecks.domain.model.location import Location


class ParsingError(DIChecksError):
    """A source file could not be turned into declaration sites.

    Covers unreadable files, syntax errors and imports that cannot be
    resolved. The round is aborted: checking a partial hierarchy would
    miss ancestors and under-report.

    Attributes:
        path: Offending file
        reason: What went wrong (must not be empty)
    """

    def __init__(self, path: Path, reason: str) -> None:
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must not be empty")

        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse {path}: {reason}")


class ASTError(ParsingError):
    """A syntax tree node lacks what the analyzers rely on.

    Attributes:
        location: Best known position of the node
    """

    def __init__(self, path: Path, location: Location, reason: str) -> None:
        if location is None:
            raise TypeError("location must not be None")

        self.location = location
        super().__init__(path, f"{reason} at {location}")
