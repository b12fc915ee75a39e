"""
Fixed-Size Vector Base
======================
Behaviour shared by Vector2, Vector3 and Vector4.

Concrete vectors are frozen dataclasses whose fields are listed, in order, in
COMPONENTS. This base implements every operation once in terms of that tuple,
so the concrete classes only declare their fields (plus Vector3.cross).

Numerics:
    Components are numpy.float32. Arithmetic is carried out in float32 (the
    reciprocal in divide() is taken in float64 and rounded once) with numpy
    floating point errors ignored, so undefined results (normalizing a
    zero vector, dividing by zero) come back as NaN or Inf without raising or
    warning.

Array view:
    to_array() materializes the components into a float32 ndarray once and
    returns that same object on every call. The array is NOT read-only; a
    caller may write into it (e.g. when handing it to a GL buffer API). Writing
    into it never changes the vector. In DEBUG mode a warning is logged when
    every slot of the cached array differs from its component.
"""
from __future__ import annotations

import logging
import numbers
import threading
from typing import Any, ClassVar, Iterator, Optional, Self, TYPE_CHECKING

import numpy as np

from glesmath import mode
from glesmath.config import COMPONENT_DTYPE

if TYPE_CHECKING:
    import numpy.typing as npt
    from glesmath.mode import ModeRegistry

logger = logging.getLogger(__name__)

# Guards first materialization of the cached array on any vector instance.
_ARRAY_LOCK = threading.Lock()


class Vector:
    """
    Base class for immutable fixed-size float32 vectors.

    Subclasses must be declared as `@dataclass(frozen=True, repr=False)` with one
    float field per entry of COMPONENTS.
    """
    COMPONENTS: ClassVar[tuple[str, ...]] = ()
    NUM_COMPONENTS: ClassVar[int] = 0

    # Lazily built flat view, see to_array()
    _array: Optional[npt.NDArray[np.float32]] = None

    def __post_init__(self) -> None:
        with np.errstate(all="ignore"):
            for name in self.COMPONENTS:
                value = getattr(self, name)
                if not isinstance(value, numbers.Real):
                    raise TypeError(
                        f"{self.__class__.__name__}.{name} must be a real number, "
                        f"got {type(value).__name__}."
                    )
                object.__setattr__(self, name, COMPONENT_DTYPE(value))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def make(cls, *components: float) -> Self:
        """
        Create a new vector.

        Args:
            *components: Either nothing (every component is 0) or exactly
                NUM_COMPONENTS values in declared order.

        Raises:
            TypeError: If the number of values is neither 0 nor NUM_COMPONENTS.

        Returns:
            A new vector.
        """
        if not components:
            return cls()
        if len(components) != cls.NUM_COMPONENTS:
            raise TypeError(
                f"{cls.__name__}.make() takes 0 or {cls.NUM_COMPONENTS} components, "
                f"got {len(components)}."
            )
        return cls(*components)

    def _from_components(self, values: Iterator[np.float32]) -> Self:
        return type(self)(*values)

    def components(self) -> tuple[np.float32, ...]:
        """Component values in declared order."""
        return tuple(getattr(self, name) for name in self.COMPONENTS)

    # ------------------------------------------------------------------
    # Array view
    # ------------------------------------------------------------------
    def to_array(self, registry: Optional[ModeRegistry] = None) -> npt.NDArray[np.float32]:
        """
        Get an array containing the values of all the components, in declared order.

        WARNING: The returned array is the cached one and is mutable. Changing it
        does not change the vector and the cache is never rebuilt. Use DEBUG mode
        to get warnings about it.

        Args:
            registry: Mode registry deciding whether to check the cache.
                Defaults to the process-wide mode.DEFAULT_REGISTRY.

        Returns:
            float32 array of shape (NUM_COMPONENTS,).
        """
        array = self._array
        if array is None:
            with _ARRAY_LOCK:
                array = self._array
                if array is None:
                    array = np.array(self.components(), dtype=COMPONENT_DTYPE)
                    object.__setattr__(self, "_array", array)
            return array

        if registry is None:
            registry = mode.DEFAULT_REGISTRY
        if registry.is_debug_mode() and self._is_array_altered(array):
            logger.warning(
                f"Values of the array of {self!r} have been altered and do not "
                f"represent the vector components: {array.tolist()}"
            )
        return array

    def _is_array_altered(self, array: npt.NDArray[np.float32]) -> bool:
        # Reported only when every slot differs from its component.
        return all(slot != value for slot, value in zip(array, self.components()))

    # ------------------------------------------------------------------
    # Scalar queries
    # ------------------------------------------------------------------
    def length(self) -> np.float32:
        """
        Get the length (magnitude or norm) of the vector.
        https://en.wikipedia.org/wiki/Euclidean_vector#Length
        """
        with np.errstate(all="ignore"):
            squared = sum((c * c for c in self.components()), COMPONENT_DTYPE(0.0))
            return COMPONENT_DTYPE(np.sqrt(squared))

    def dot(self, other: Self) -> np.float32:
        """Dot product (this . other)."""
        self._check_operand(other, "dot")
        with np.errstate(all="ignore"):
            return sum(
                (a * b for a, b in zip(self.components(), other.components())),
                COMPONENT_DTYPE(0.0),
            )

    # ------------------------------------------------------------------
    # Vector producing operations
    # ------------------------------------------------------------------
    def normalize(self) -> Self:
        """
        Scale the vector to unit length.

        A zero-length vector yields NaN components; no error is raised.
        """
        length = self.length()
        with np.errstate(all="ignore"):
            return self._from_components(c / length for c in self.components())

    def negate(self) -> Self:
        return self.multiply(-1)

    def add(self, other: Self) -> Self:
        """Component-wise sum (this + other)."""
        self._check_operand(other, "add")
        with np.errstate(all="ignore"):
            return self._from_components(
                a + b for a, b in zip(self.components(), other.components())
            )

    def subtract(self, other: Self) -> Self:
        """Component-wise difference (this - other)."""
        self._check_operand(other, "subtract")
        with np.errstate(all="ignore"):
            return self._from_components(
                a - b for a, b in zip(self.components(), other.components())
            )

    def multiply(self, scalar: float) -> Self:
        """Scale every component by `scalar` (this * s)."""
        with np.errstate(all="ignore"):
            s = COMPONENT_DTYPE(scalar)
            return self._from_components(c * s for c in self.components())

    def divide(self, scalar: float) -> Self:
        """
        Divide every component by `scalar`, computed as multiply(1 / scalar).

        The reciprocal is taken in float64 and rounded to float32 once, by
        multiply(), so the result is identical to multiply(1 / scalar).
        A zero divisor yields Inf/NaN components; no error is raised.
        """
        with np.errstate(all="ignore"):
            reciprocal = np.float64(1.0) / np.float64(scalar)
        return self.multiply(reciprocal)

    def _check_operand(self, other: Any, operation: str) -> None:
        if not isinstance(other, Vector) or other.NUM_COMPONENTS != self.NUM_COMPONENTS:
            raise TypeError(
                f"{self.__class__.__name__}.{operation}() expects a {self.__class__.__name__}, "
                f"got {type(other).__name__}."
            )

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------
    def __add__(self, other: Self) -> Self:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Self) -> Self:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, scalar: float) -> Self:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.multiply(scalar)

    def __rmul__(self, scalar: float) -> Self:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Self:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.divide(scalar)

    def __neg__(self) -> Self:
        return self.negate()

    def __iter__(self) -> Iterator[np.float32]:
        return iter(self.components())

    def __len__(self) -> int:
        return self.NUM_COMPONENTS

    def __repr__(self) -> str:
        values = ", ".join(f"{name}={getattr(self, name)}" for name in self.COMPONENTS)
        return f"{self.__class__.__name__}({values})"

    def __getstate__(self) -> dict[str, Any]:
        # Copies and pickles get their own cache.
        state = dict(self.__dict__)
        state.pop("_array", None)
        return state
