import itertools

import pytest
import torch

from densitycurve import SMOOTHING_TENSION, Point, Vector, clamp, control_point
from densitycurve.geometry import points_to_tensor


def test_clamp_bounds_value() -> None:
    assert clamp(-5.0, 0.0, 10.0) == 0.0
    assert clamp(15.0, 0.0, 10.0) == 10.0
    assert clamp(3.5, 0.0, 10.0) == 3.5


def test_clamp_is_idempotent_and_stays_in_range() -> None:
    values = [-100.0, -0.5, 0.0, 0.25, 1.0, 42.0, 1e9]
    bounds = [(0.0, 1.0), (-10.0, 10.0), (25.0, 250.0), (3.0, 3.0)]
    for value, (lo, hi) in itertools.product(values, bounds):
        once = clamp(value, lo, hi)
        assert clamp(once, lo, hi) == once
        assert lo <= once <= hi


def test_clamp_with_inverted_bounds_returns_maximum() -> None:
    assert clamp(5.0, 10.0, 1.0) == 1.0


def test_vector_between_and_reverse() -> None:
    vector = Vector.between(Point(1.0, 2.0), Point(4.0, -2.0))
    assert vector == Vector(3.0, -4.0)
    assert vector.components() == (3.0, -4.0)
    assert vector.components(reverse=True) == (-3.0, 4.0)


def test_control_point_without_neighbours_is_the_point_itself() -> None:
    point = Point(123.4, 56.7)
    assert control_point(point) == point
    assert control_point(point, None, None, reverse=True) == point


def test_control_point_follows_neighbour_vector() -> None:
    current = Point(500.0, 50.0)
    forward = control_point(current, Point(0.0, 100.0), Point(1000.0, 50.0))
    backward = control_point(current, Point(0.0, 100.0), Point(1000.0, 50.0), reverse=True)
    assert forward.x == pytest.approx(700.0)
    assert forward.y == pytest.approx(40.0)
    assert backward.x == pytest.approx(300.0)
    assert backward.y == pytest.approx(60.0)


def test_control_point_at_sequence_start_uses_current_as_previous() -> None:
    current = Point(0.0, 100.0)
    handle = control_point(current, None, Point(500.0, 50.0))
    assert handle.x == pytest.approx(500.0 * SMOOTHING_TENSION)
    assert handle.y == pytest.approx(100.0 - 50.0 * SMOOTHING_TENSION)


def test_points_to_tensor_layout() -> None:
    tensor = points_to_tensor([Point(0.0, 100.0), Point(1000.0, 0.0)])
    assert tensor.shape == (2, 2)
    assert tensor.dtype == torch.float64
    assert points_to_tensor([]).shape == (0, 2)
