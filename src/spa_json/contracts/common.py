"""Error types and the pydantic response envelope used by the CLI."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class SpaJsonError(Exception):
    """Base class for every error a serialization call can surface."""


class MessageError(SpaJsonError):
    """Raised by a producer that cannot describe one of its own values."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @classmethod
    def custom(cls, msg: object) -> "MessageError":
        """Build an error from any displayable object."""
        return cls(str(msg))

    def __str__(self) -> str:
        return self.message


class SpaIOError(SpaJsonError):
    """Raised when persisting serialized text fails."""

    def __init__(self, error: OSError) -> None:
        super().__init__(error)
        self.error = error

    def __str__(self) -> str:
        return f"IO error: {self.error}"


class NestingError(RuntimeError):
    """Begin/end protocol calls were not properly nested.

    This is a bug in the producer, not a recoverable serialization error,
    so it does not derive from :class:`SpaJsonError`.
    """


class Target(BaseModel):
    """Identifies the input and output files of a command."""

    file: str | None = None
    out: str | None = None


class WarningDetail(BaseModel):
    """Structured warning."""

    code: str
    message: str


class ErrorDetail(BaseModel):
    """Structured error."""

    code: str
    message: str
    details: dict[str, Any] | None = None


class Metrics(BaseModel):
    """Execution metrics."""

    duration_ms: int = 0


class ResponseEnvelope(BaseModel):
    """Standard response envelope returned by every command."""

    ok: bool = True
    command: str = ""
    target: Target = Field(default_factory=Target)
    result: Any = None
    warnings: list[WarningDetail] = Field(default_factory=list)
    errors: list[ErrorDetail] = Field(default_factory=list)
    metrics: Metrics = Field(default_factory=Metrics)
