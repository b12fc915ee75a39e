from .base import Vector
from .vector2 import Vector2
from .vector3 import Vector3
from .vector4 import Vector4

__all__ = [
    "Vector",
    "Vector2",
    "Vector3",
    "Vector4",
]
