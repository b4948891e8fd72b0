import re

import pytest

from densitycurve import HeightBand, Point, build_point_series, density_path, format_coordinate, serialize_path


def test_empty_points_give_empty_path() -> None:
    assert serialize_path([], True) == ""
    assert serialize_path([], False) == ""


def test_single_point_is_a_move_command() -> None:
    assert serialize_path([Point(0, 100)], True) == "M 0.0,100.0"
    assert serialize_path([Point(0, 100)], False) == "M 0.0,100.0"


def test_polyline_path() -> None:
    points = [Point(0, 100), Point(1000, 0)]
    assert serialize_path(points, False) == "M 0.0,100.0 L 1000.0,0.0"


def test_two_point_bezier_path() -> None:
    points = [Point(0, 100), Point(1000, 0)]
    assert serialize_path(points) == "M 0.0,100.0 C 200.0,80.0 800.0,20.0 1000.0,0.0"


def test_three_point_bezier_path() -> None:
    points = [Point(0.0, 100.0), Point(500.0, 50.0), Point(1000.0, 100.0)]
    assert serialize_path(points, True) == (
        "M 0.0,100.0"
        " C 100.0,90.0 300.0,50.0 500.0,50.0"
        " C 700.0,50.0 900.0,90.0 1000.0,100.0"
    )


def test_curve_commands_end_on_input_points() -> None:
    points = build_point_series(
        [{"intensityScoreNormalized": v} for v in (0.12, 0.87, 0.33, 0.61, 0.05)],
        HeightBand(4, 40, 36),
        smooth=True,
    )
    data = serialize_path(points)
    curves = re.findall(r"C (\S+) (\S+) (\S+)", data)
    assert len(curves) == len(points) - 1
    for (_, _, end), point in zip(curves, points[1:]):
        assert end == f"{format_coordinate(point.x)},{format_coordinate(point.y)}"


def test_format_coordinate_rounding() -> None:
    assert format_coordinate(1000) == "1000.0"
    assert format_coordinate(62.5) == "62.5"
    assert format_coordinate(12.345) == "12.3"
    assert format_coordinate(0.25) == "0.3"
    assert format_coordinate(-0.25) == "-0.3"
    assert format_coordinate(1e-12) == "0.0"


def test_format_coordinate_normalises_negative_zero() -> None:
    assert format_coordinate(-0.0) == "0.0"
    assert format_coordinate(-0.04) == "0.0"


def test_format_coordinate_rejects_non_finite() -> None:
    with pytest.raises(ValueError):
        format_coordinate(float("nan"))
    with pytest.raises(ValueError):
        format_coordinate(float("inf"))


def test_density_path_polyline() -> None:
    data = density_path([{"intensityScoreNormalized": 0.5}], smooth=False)
    assert data == "M 0.0,100.0 L 0.0,50.0 L 500.0,50.0 L 1000.0,50.0 L 1000.0,100.0"


def test_density_path_smooth_uses_curves() -> None:
    data = density_path([{"intensityScoreNormalized": 0.5}, {"intensityScoreNormalized": 0.2}])
    assert data.startswith("M 0.0,100.0 C ")
    assert " L " not in data
    assert data.endswith(" 1000.0,100.0")


def test_density_path_of_nothing_is_empty() -> None:
    assert density_path([]) == ""


def test_format_coordinate_handles_large_values() -> None:
    assert format_coordinate(1e27) == f"{int(1e27)}.0"
    assert serialize_path([Point(1e300, 0.0)], False).startswith("M 1")
    assert serialize_path([Point(-1.5e308, 0.0)], False).endswith(".0,0.0")
