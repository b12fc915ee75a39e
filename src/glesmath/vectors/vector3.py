"""3 component vector, the only one with a cross product."""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Self

import numpy as np

from glesmath.vectors.base import Vector


@dataclass(frozen=True, repr=False)
class Vector3(Vector):
    """A 3 component vector. The component names are x, y and z respectively."""
    COMPONENTS: ClassVar[tuple[str, ...]] = ("x", "y", "z")
    NUM_COMPONENTS: ClassVar[int] = 3

    # Array index for each component
    X: ClassVar[int] = 0
    Y: ClassVar[int] = 1
    Z: ClassVar[int] = 2

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def cross(self, other: Vector3) -> Self:
        """
        Cross product (this x other).

        Args:
            other: The right hand operand.

        Returns:
            A new vector orthogonal to both operands.
        """
        self._check_operand(other, "cross")
        with np.errstate(all="ignore"):
            return type(self)(
                self.y * other.z - self.z * other.y,
                self.z * other.x - self.x * other.z,
                self.x * other.y - self.y * other.x,
            )
