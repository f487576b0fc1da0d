"""
Error types and source location tracking for the tyrender type printer.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """
    Represents a location in the source code of the program being described.

    Attributes:
        line: 1-indexed line number
        column: 1-indexed column number
        offset: 0-indexed byte offset from start of source
        filename: Optional filename for error reporting
    """

    line: int
    column: int
    offset: int = 0
    filename: Optional[str] = None

    def __str__(self) -> str:
        if self.filename:
            return f"{self.filename}:{self.line}:{self.column}"
        return f"{self.line}:{self.column}"


class TyRenderError(Exception):
    """Base exception for all tyrender errors."""

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
    ) -> None:
        self.message = message
        self.location = location
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.location:
            return f"[{self.location}] {self.message}"
        return self.message


class ItemLookupError(TyRenderError):
    """Raised by a type context when an item identifier is unknown to it."""

    def __init__(self, message: str, def_id: object = None) -> None:
        self.def_id = def_id
        super().__init__(message)


class SubstitutionError(TyRenderError):
    """Raised when a parameter has no slot in the substitution record."""

    pass


class InternalConsistencyError(TyRenderError):
    """
    Raised when a collaborator breaks a guarantee the printer relies on.

    This signals a bug upstream of the printer (for example a trait object
    whose principal trait reference cannot be lifted out of its local arena)
    and is never recovered from.
    """

    pass


class DecodeError(TyRenderError):
    """
    Raised when a JSON type document is malformed.

    Attributes:
        pointer: Path into the document where decoding failed, e.g. ``values[2].type``
    """

    def __init__(
        self,
        message: str,
        pointer: Optional[str] = None,
        location: Optional[SourceLocation] = None,
    ) -> None:
        self.pointer = pointer
        super().__init__(message, location)

    def _format_message(self) -> str:
        message = self.message
        if self.pointer:
            message = f"{self.pointer}: {message}"
        if self.location:
            message = f"[{self.location}] {message}"
        return message
