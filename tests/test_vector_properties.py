"""
Algebraic properties shared by all vector types.

Values are small dyadic fractions, so float32 results are exact unless a
tolerance is given.
"""
import numpy as np
import pytest

from glesmath import Vector2, Vector3, Vector4
from glesmath.vectors import Vector

SAMPLES = [
    (Vector2.make(1.5, -2.0), Vector2.make(0.25, 4.0)),
    (Vector3.make(1.5, -2.0, 3.0), Vector3.make(-0.5, 0.25, 8.0)),
    (Vector4.make(1.5, -2.0, 3.0, -0.75), Vector4.make(2.0, 0.5, -1.0, 6.0)),
]


@pytest.mark.parametrize("a, b", SAMPLES)
class TestProperties:
    def test_add_negation_is_zero(self, a: Vector, b: Vector) -> None:
        assert a.add(a.negate()) == type(a).make()

    def test_normalized_length_is_one(self, a: Vector, b: Vector) -> None:
        assert a.normalize().length() == pytest.approx(1.0, rel=1e-6)
        assert b.normalize().length() == pytest.approx(1.0, rel=1e-6)

    def test_dot_is_commutative(self, a: Vector, b: Vector) -> None:
        assert a.dot(b) == b.dot(a)

    def test_dot_with_self_is_squared_length(self, a: Vector, b: Vector) -> None:
        assert a.dot(a) == pytest.approx(float(a.length()) ** 2, rel=1e-6)

    @pytest.mark.parametrize("s", [3.0, 7.0, -2.5, 0.25, 0.1, 1.1, 2.2, 9.9, 1e-3, 123.456])
    def test_divide_is_multiply_by_reciprocal(self, a: Vector, b: Vector, s: float) -> None:
        assert a.divide(s) == a.multiply(1 / s)

    def test_subtract_is_add_of_negation(self, a: Vector, b: Vector) -> None:
        assert a.subtract(b) == a.add(b.negate())

    def test_negate_is_multiply_by_minus_one(self, a: Vector, b: Vector) -> None:
        assert a.negate() == a.multiply(-1)

    def test_to_array_matches_components(self, a: Vector, b: Vector) -> None:
        assert a.to_array().tolist() == [float(c) for c in a]


def test_cross_is_anti_commutative() -> None:
    a = Vector3.make(1.5, -2.0, 3.0)
    b = Vector3.make(-0.5, 0.25, 8.0)
    assert a.cross(b) == b.cross(a).negate()


def test_operators_match_named_operations() -> None:
    a = Vector3.make(1.0, 2.0, 3.0)
    b = Vector3.make(0.5, -1.0, 4.0)
    assert a + b == a.add(b)
    assert a - b == a.subtract(b)
    assert a * 2 == a.multiply(2)
    assert 2 * a == a.multiply(2)
    assert a / 4 == a.divide(4)
    assert -a == a.negate()


def test_operators_reject_mismatched_operands() -> None:
    with pytest.raises(TypeError):
        Vector3.make() + 1.0  # type: ignore[operator]
    with pytest.raises(TypeError):
        Vector3.make() * Vector3.make()  # type: ignore[operator]
    with pytest.raises(TypeError):
        Vector3.make() + Vector2.make()  # type: ignore[operator]


def test_sequence_protocol() -> None:
    v = Vector4.make(1, 2, 3, 4)
    assert len(v) == 4
    assert list(v) == [1.0, 2.0, 3.0, 4.0]
    assert v.components() == (1.0, 2.0, 3.0, 4.0)


def test_repr() -> None:
    assert repr(Vector3.make(1, -2.5, 0)) == "Vector3(x=1.0, y=-2.5, z=0.0)"


def test_overflow_is_silent() -> None:
    v = Vector2.make(3e38, 3e38)
    assert np.isposinf(v.multiply(10).x)
    assert np.isposinf(v.length())


def test_nan_propagates() -> None:
    v = Vector3.make(float("nan"), 1.0, 2.0)
    assert np.isnan(v.add(Vector3.make(1, 1, 1)).x)
    assert np.isnan(v.dot(Vector3.make(1, 1, 1)))


@pytest.mark.parametrize("s", [0.1, 0.3, 1.1, 3.3, 7.7, 1e-3, 123.456, 2.2, 9.9])
def test_divide_by_non_float32_divisor(s: float) -> None:
    v = Vector2.make(1.0, 3.0)
    assert v.divide(s) == v.multiply(1 / s)
    assert v / s == v * (1 / s)


def test_divide_by_zero_stays_silent() -> None:
    v = Vector2.make(2.0, 0.0).divide(0)
    assert np.isposinf(v.x)
    assert np.isnan(v.y)
