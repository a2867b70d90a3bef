"""Public exceptions surface for end-users.

Re-exports core exception types under a dedicated, discoverable module.
"""

from __future__ import annotations

from fallible.core.exceptions import FallibleError, UnwrapFailedError

__all__ = [
    "FallibleError",
    "UnwrapFailedError",
]
