"""Result Monad for Explicit Error Handling.

A ``Result`` is either a ``Success`` holding a computed value or a ``Failure``
holding an error. Failures travel as data through ``map``/``flat_map`` and
friends instead of unwinding the stack, so each call site can choose between
inspecting results and catching exceptions.

``capture`` and ``get`` are the only seams between the two conventions:
``capture`` turns a raised ``Exception`` into a ``Failure``, ``get`` turns a
``Failure`` back into a raised exception.

Example:
    .. code-block:: python

        from fallible import Failure, Success, capture

        parsed = capture(lambda: int(raw))
        doubled = parsed.map(lambda n: n * 2)

        match doubled:
            case Success(value):
                print(value)
            case Failure(error):
                print(f"bad input: {error}")
"""

from __future__ import annotations

import dataclasses
import functools
import logging
import typing

from fallible._dev_flags import dev_capture_logging_enabled
from fallible.core.exceptions import UnwrapFailedError

if typing.TYPE_CHECKING:
    from collections.abc import Callable

log = logging.getLogger(__name__)

TSuccess = typing.TypeVar("TSuccess")
TFailure = typing.TypeVar("TFailure")


@dataclasses.dataclass(frozen=True)
class Success[TSuccess]:
    """A successful result, containing the computed value."""

    # Not slots=True: the generated frozen __setattr__ must close over this class.
    __slots__ = ("value",)

    value: TSuccess

    @property
    def error(self) -> None:
        """Always ``None``; a success carries no error."""
        return None

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    def map[U](self, transform: Callable[[TSuccess], U]) -> Success[U]:
        """Return a new ``Success`` holding ``transform(value)``."""
        return Success(transform(self.value))

    def map_failure(self, transform: Callable[..., object]) -> Success[TSuccess]:
        """Return a new ``Success`` with the same value; ``transform`` is not called."""
        del transform
        return Success(self.value)

    def flat_map[U, E](
        self, transform: Callable[[TSuccess], Result[U, E]]
    ) -> Result[U, E]:
        """Chain a step that may itself fail.

        The ``Result`` returned by ``transform`` becomes the result, so a
        successful value can turn into a failure without nesting.
        """
        return transform(self.value)

    def flat_map_failure(self, transform: Callable[..., object]) -> Success[TSuccess]:
        """Return a new ``Success`` with the same value; ``transform`` is not called."""
        del transform
        return Success(self.value)

    def get(self) -> TSuccess:
        """Return the value."""
        return self.value

    def map_throws[U](
        self, transform: Callable[[TSuccess], U]
    ) -> Result[U, Exception]:
        """Like ``map``, but an exception from ``transform`` becomes a ``Failure``."""
        return capture(functools.partial(transform, self.value))


@dataclasses.dataclass(frozen=True)
class Failure[TFailure]:
    """A failed result, containing the error."""

    __slots__ = ("error",)

    error: TFailure

    @property
    def value(self) -> None:
        """Always ``None``; a failure carries no value."""
        return None

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    def map(self, transform: Callable[..., object]) -> Failure[TFailure]:
        """Return a new ``Failure`` with the same error; ``transform`` is not called."""
        del transform
        return Failure(self.error)

    def map_failure[U](self, transform: Callable[[TFailure], U]) -> Failure[U]:
        """Return a new ``Failure`` holding ``transform(error)``."""
        return Failure(transform(self.error))

    def flat_map(self, transform: Callable[..., object]) -> Failure[TFailure]:
        """Return a new ``Failure`` with the same error; ``transform`` is not called."""
        del transform
        return Failure(self.error)

    def flat_map_failure[S, U](
        self, transform: Callable[[TFailure], Result[S, U]]
    ) -> Result[S, U]:
        """Chain a recovery step; the ``Result`` it returns becomes the result."""
        return transform(self.error)

    def get(self: Failure[BaseException]) -> typing.NoReturn:
        """Re-raise the stored error.

        The same exception instance is raised each time, so its
        ``__traceback__`` grows with every call, and raising it inside an
        ``except`` block sets its ``__context__`` to the exception being handled.

        Raises:
            BaseException: The stored error itself.
            UnwrapFailedError: If the stored error is not an exception instance.
        """
        if isinstance(self.error, BaseException):
            raise self.error
        raise UnwrapFailedError(self.error)

    def map_throws(
        self: Failure[Exception], transform: Callable[..., object]
    ) -> Failure[Exception]:
        """Return a new ``Failure`` with the same error; ``transform`` is not called."""
        del transform
        return Failure(self.error)


Result = Success[TSuccess] | Failure[TFailure]


def capture[T](computation: Callable[[], T]) -> Result[T, Exception]:
    """Run ``computation`` and wrap its outcome.

    Returns ``Success`` with the return value, or ``Failure`` with the raised
    exception. Only ``Exception`` is caught; ``KeyboardInterrupt``,
    ``SystemExit`` and other bare ``BaseException`` subclasses propagate.
    """
    try:
        value = computation()
    except Exception as exc:
        if dev_capture_logging_enabled():
            log.debug(
                "Captured %s from %r: %s",
                type(exc).__name__,
                computation,
                exc,
                exc_info=exc,
            )
        return Failure(exc)
    else:
        return Success(value)


def is_success[T](result: Result[T, typing.Any]) -> typing.TypeGuard[Success[T]]:
    """Return True if ``result`` is a ``Success``, narrowing its type."""
    return isinstance(result, Success)


def is_failure[E](result: Result[typing.Any, E]) -> typing.TypeGuard[Failure[E]]:
    """Return True if ``result`` is a ``Failure``, narrowing its type."""
    return isinstance(result, Failure)
