"""fallible: explicit success/failure results for Python.

Public API:
    - Success / Failure: The two result variants
    - Result: ``Success[T] | Failure[E]`` alias for annotations
    - capture(): Run a callable, turning a raised exception into a Failure
    - is_success() / is_failure(): Type-narrowing predicates
"""

from __future__ import annotations

import logging

from fallible.core.exceptions import FallibleError, UnwrapFailedError
from fallible.core.result_primitives import (
    Failure,
    Result,
    Success,
    capture,
    is_failure,
    is_success,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("fallible")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("fallible").addHandler(logging.NullHandler())

__all__ = [
    "Failure",
    "FallibleError",
    "Result",
    "Success",
    "UnwrapFailedError",
    "__version__",
    "capture",
    "is_failure",
    "is_success",
]
