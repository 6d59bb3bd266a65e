"""Mini README: Draw capture boundary.

Converts raw pointer-drawn coordinates into validated geographic coordinates
and models the lifecycle of a single draw session.
"""

from .draw_capture import (
    CoordinateValidationError,
    DrawCapture,
    DrawKind,
    DrawSession,
    DrawSessionError,
    DrawSessionState,
    InsertPosition,
)

__all__ = [
    "CoordinateValidationError",
    "DrawCapture",
    "DrawKind",
    "DrawSession",
    "DrawSessionError",
    "DrawSessionState",
    "InsertPosition",
]
