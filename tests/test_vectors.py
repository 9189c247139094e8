import pytest

from celestial.vectors import Vector2, Vector3


def test_defaults_are_zero():
    assert Vector2() == Vector2(0, 0)
    assert Vector3() == Vector3(0, 0, 0)


@pytest.mark.parametrize(
    "a, b",
    [
        (Vector2(1.5, -2.0), Vector2(3.0, 4.25)),
        (Vector3(1.5, -2.0, 8.0), Vector3(3.0, 4.25, -0.5)),
    ],
)
def test_add_then_subtract_round_trip(a, b):
    original = type(a)(*vars(a).values())
    result = (a + b) - b
    assert result == original
    assert a == original
    assert a + b == b + a


@pytest.mark.parametrize(
    "a, b",
    [
        (Vector2(3.0, -6.0), Vector2(0.5, 4.0)),
        (Vector3(3.0, -6.0, 10.0), Vector3(0.5, 4.0, 0.25)),
    ],
)
def test_multiply_then_divide_round_trip(a, b):
    assert (a * b) / b == a
    assert a * b == b * a


def test_augmented_operators_mutate_in_place():
    v = Vector2(1.0, 2.0)
    alias = v
    v += Vector2(3.0, 4.0)
    assert v is alias
    v -= Vector2(3.0, 4.0)
    v *= Vector2(2.0, 8.0)
    v /= Vector2(2.0, 8.0)
    assert alias == Vector2(1.0, 2.0)


def test_vector3_augmented_operators_mutate_in_place():
    v = Vector3(1.0, 2.0, 3.0)
    alias = v
    v += Vector3(0.5, 0.5, 0.5)
    v *= Vector3(2.0, 2.0, 2.0)
    v /= Vector3(2.0, 2.0, 2.0)
    v -= Vector3(0.5, 0.5, 0.5)
    assert v is alias
    assert alias == Vector3(1.0, 2.0, 3.0)


def test_str_format():
    assert str(Vector2(1, 0.5)) == "(1, 0.5)"
    assert str(Vector3(-2, 0, 2.25)) == "(-2, 0, 2.25)"


def test_divide_by_zero_component_raises():
    with pytest.raises(ZeroDivisionError):
        Vector2(1.0, 1.0) / Vector2(1.0, 0.0)
    with pytest.raises(ZeroDivisionError):
        Vector3(1.0, 1.0, 1.0) / Vector3(0.0, 1.0, 1.0)


def test_mixing_types_raises():
    with pytest.raises(TypeError):
        Vector2(1, 2) + 3
    with pytest.raises(TypeError):
        Vector3(1, 2, 3) + Vector2(1, 2)