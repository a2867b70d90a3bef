"""Curated re-export surface for the core data types."""

from __future__ import annotations

from .result_primitives import (
    Failure,
    Result,
    Success,
    capture,
    is_failure,
    is_success,
)

__all__ = [
    "Failure",
    "Result",
    "Success",
    "capture",
    "is_failure",
    "is_success",
]

# Hide the __future__ feature binding from the public surface if present
try:  # pragma: no cover - environment specific  # noqa: SIM105
    del annotations
except NameError:  # pragma: no cover - defensive
    pass
