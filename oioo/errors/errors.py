"""
OIOO Error Hierarchy

Errors carry a human-readable message plus a context dict describing the
offending values, so callers can log them structurally or correct the
input and retry.

Only configuration can fail. Retrieval from an empty container is not an
error and returns the EMPTY marker instead.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class OIOOError(Exception):
    """
    Base exception for OIOO container errors.

    All errors carry:
    - message: Human-readable description
    - context: Additional debugging info
    - cause: Original exception if wrapping

    Example:
        raise InvalidConfiguration(
            "Occupancy must be positive",
            field="occupancy",
            value=0,
        )
    """

    message: str
    context: dict[str, Any] = field(default_factory=dict)
    cause: BaseException | None = None

    def __str__(self) -> str:
        ctx = f" {self.context}" if self.context else ""
        cause = ""
        if self.cause:
            cause_str = str(self.cause)
            cause_type = type(self.cause).__name__
            if cause_str:
                cause = f" (caused by {cause_type}: {cause_str})"
            else:
                cause = f" (caused by {cause_type})"
        return f"{self.message}{ctx}{cause}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"context={self.context})"
        )

    def with_context(self, **kwargs: Any) -> "OIOOError":
        """Add additional context to the error."""
        self.context.update(kwargs)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for structured logging."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "context": self.context,
            "cause": str(self.cause) if self.cause else None,
        }


class InvalidConfiguration(OIOOError):
    """
    A Phase or container configuration was rejected.

    Fatal to the construction attempt that raised it. The context names
    the rejected field and value.
    """

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        **context: Any,
    ):
        super().__init__(
            message=message,
            context=context,
            cause=cause,
        )
