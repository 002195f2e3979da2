"""Domain error codes for the statements module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    UNKNOWN_PLAY_TYPE = "UNKNOWN_PLAY_TYPE"
    PLAY_NOT_FOUND = "PLAY_NOT_FOUND"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class UnknownPlayTypeError(DomainError):
    """Raised when a play's genre is not one we know how to price."""

    def __init__(self, play_type: str) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_PLAY_TYPE,
            message=f"unknown type: {play_type}",
        )
        self.play_type = play_type


class PlayNotFoundError(DomainError):
    """Raised when a performance references a play missing from the catalog."""

    def __init__(self, play_id: str) -> None:
        super().__init__(
            code=ErrorCode.PLAY_NOT_FOUND,
            message=f"Play not found in catalog: {play_id}",
        )
        self.play_id = play_id
