"""Core exceptions for fallible.

The library deliberately originates almost no errors of its own: failures
travel as ``Failure`` values, and exceptions raised by caller transforms pass
through untouched. What remains lives here.
"""

from __future__ import annotations

import typing


class FallibleError(Exception):
    """Base exception for all library-specific errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        """Initialize with an optional actionable hint."""
        self.hint = hint
        # Store just the message in the base Exception for clean programmatic access
        super().__init__(message)

    def __str__(self) -> str:
        """Return the full error message including the hint."""
        msg = super().__str__()
        return f"{msg}. {self.hint}" if self.hint else msg


class UnwrapFailedError(FallibleError):
    """Raised by ``Failure.get()`` when the stored error is not an exception.

    Python can only raise ``BaseException`` instances, so a failure payload of
    any other type (a string, an error code) is wrapped instead and kept on
    ``payload`` for the caller to inspect.
    """

    def __init__(self, payload: typing.Any) -> None:
        """Create an unwrap error for a non-exception failure payload.

        Args:
            payload: The failure payload that could not be raised directly.
        """
        self.payload = payload
        super().__init__(
            f"Cannot raise failure payload of type {type(payload).__name__}: "
            f"{payload!r}",
            hint=(
                "Use .error to inspect the payload, or map_failure() it into an "
                "Exception before calling get()"
            ),
        )
