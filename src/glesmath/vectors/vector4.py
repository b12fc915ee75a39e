"""4 component vector."""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from glesmath.vectors.base import Vector


@dataclass(frozen=True, repr=False)
class Vector4(Vector):
    """A 4 component vector. The component names are x, y, z and w respectively."""
    COMPONENTS: ClassVar[tuple[str, ...]] = ("x", "y", "z", "w")
    NUM_COMPONENTS: ClassVar[int] = 4

    # Array index for each component
    X: ClassVar[int] = 0
    Y: ClassVar[int] = 1
    Z: ClassVar[int] = 2
    W: ClassVar[int] = 3

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0
