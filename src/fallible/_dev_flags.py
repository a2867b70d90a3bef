"""Internal helpers for development-time feature flags.

Flags are opt-in and read from the environment on every call, so tests and
long-running processes can toggle them without re-importing the library.
"""

from __future__ import annotations

import os

__all__ = ["dev_capture_logging_enabled"]


def dev_capture_logging_enabled(*, override: bool | None = None) -> bool:
    """Return True when exceptions absorbed by ``capture`` should be logged.

    - If ``override`` is provided, it takes precedence.
    - Otherwise, returns True when the environment variable
      ``FALLIBLE_DEBUG_CAPTURE`` is exactly ``"1"``.
    """
    if override is not None:
        return bool(override)
    return os.getenv("FALLIBLE_DEBUG_CAPTURE") == "1"
