"""2 component vector."""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from glesmath.vectors.base import Vector


@dataclass(frozen=True, repr=False)
class Vector2(Vector):
    """A 2 component vector. The component names are x and y respectively."""
    COMPONENTS: ClassVar[tuple[str, ...]] = ("x", "y")
    NUM_COMPONENTS: ClassVar[int] = 2

    # Array index for each component
    X: ClassVar[int] = 0
    Y: ClassVar[int] = 1

    x: float = 0.0
    y: float = 0.0
