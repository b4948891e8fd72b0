"""Heatmap density curves as SVG path data. / 以 SVG 路径数据表示的热力图密度曲线。

This package turns a list of normalised intensity scores into a polyline or smooth cubic-Bézier path
laid out in a ``0 0 1000 100`` viewBox. /
本包将一组归一化强度分数转换为 ``0 0 1000 100`` viewBox 中的折线或平滑三次贝塞尔路径。
Every function is pure, so independent curves can be built concurrently without coordination. /
所有函数均为纯函数，可在无需协调的情况下并发生成互不相关的曲线。
"""

from .bezier import CubicBezier
from .geometry import SMOOTHING_TENSION, Point, Vector, clamp, control_point
from .path import density_path, format_coordinate, serialize_path
from .points import (
    VIEWBOX_HEIGHT,
    VIEWBOX_WIDTH,
    HeightBand,
    IntensityRecord,
    build_point_series,
    build_points,
)

__all__ = [
    "CubicBezier",
    "HeightBand",
    "IntensityRecord",
    "Point",
    "SMOOTHING_TENSION",
    "VIEWBOX_HEIGHT",
    "VIEWBOX_WIDTH",
    "Vector",
    "build_point_series",
    "build_points",
    "clamp",
    "control_point",
    "density_path",
    "format_coordinate",
    "serialize_path",
]
