"""
glesmath: immutable 2, 3 and 4 component float32 vectors for OpenGL ES style
graphics and physics code.
"""
from glesmath.mode import (
    MODE_DEBUG,
    MODE_RELEASE,
    Mode,
    ModeRegistry,
    get_mode,
    is_debug_mode,
    set_mode,
)
from glesmath.logging_config import setup_logging
from glesmath.vectors import Vector, Vector2, Vector3, Vector4

__version__ = "0.1.0"

__all__ = [
    "MODE_DEBUG",
    "MODE_RELEASE",
    "Mode",
    "ModeRegistry",
    "get_mode",
    "is_debug_mode",
    "set_mode",
    "setup_logging",
    "Vector",
    "Vector2",
    "Vector3",
    "Vector4",
]
