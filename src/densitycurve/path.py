"""Serialise point series into SVG path data. / 将点序列序列化为 SVG 路径数据。

The output is meant for the ``d`` attribute of a ``<path>`` inside a ``0 0 1000 100`` viewBox. /
输出用于 ``0 0 1000 100`` viewBox 内 ``<path>`` 元素的 ``d`` 属性。
Polyline mode emits ``M`` followed by ``L`` commands; smooth mode emits ``M`` followed by cubic ``C`` commands. /
折线模式输出 ``M`` 加若干 ``L`` 命令；平滑模式输出 ``M`` 加若干三次 ``C`` 命令。
"""
from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import List, Optional, Sequence

from .bezier import CubicBezier
from .geometry import Point
from .points import HeightBand, RecordLike, build_point_series

logger = logging.getLogger(__name__)

_ONE_DECIMAL = Decimal("0.1")
# Wide enough for every finite float written with one decimal place. / 足以容纳所有有限浮点数的一位小数形式。
_WIDE_CONTEXT = Context(prec=400)


def format_coordinate(value: float) -> str:
    """Format a coordinate with exactly one decimal place. / 以一位小数格式化坐标。

    Ties round away from zero and ``-0.0`` is written as ``0.0``. / 恰好居中时远离零舍入，``-0.0`` 写作 ``0.0``。
    """

    if not math.isfinite(value):
        raise ValueError(f"Cannot serialise non-finite coordinate {value!r}")
    rounded = Decimal(value).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP, context=_WIDE_CONTEXT)
    if rounded.is_zero():
        return "0.0"
    return f"{rounded:f}"


def _pair(point: Point) -> str:
    return f"{format_coordinate(point.x)},{format_coordinate(point.y)}"


def serialize_path(points: Sequence[Point], use_bezier: bool = True) -> str:
    """Walk ``points`` in order and emit path commands. / 按顺序遍历 ``points`` 并输出路径命令。

    An empty sequence produces an empty string, a single point only the ``M`` command. /
    空序列返回空字符串，单个点只输出 ``M`` 命令。
    """

    if not points:
        return ""

    commands: List[str] = [f"M {_pair(points[0])}"]
    if len(points) > 1:
        if use_bezier:
            curve = CubicBezier.from_points(points)
            for _, handle_out, handle_in, end in curve.segments():
                commands.append(f"C {_pair(handle_out)} {_pair(handle_in)} {_pair(end)}")
        else:
            commands.extend(f"L {_pair(point)}" for point in points[1:])
    return " ".join(commands)


def density_path(
    records: Sequence[RecordLike],
    band: Optional[HeightBand] = None,
    smooth: bool = True,
) -> str:
    """Build the full path data for a list of intensity records. / 为一组强度记录生成完整的路径数据。"""

    points = build_point_series(records, band, smooth=smooth)
    data = serialize_path(points, use_bezier=smooth)
    logger.debug("Serialised %d points into %d characters of path data", len(points), len(data))
    return data


__all__ = ["density_path", "format_coordinate", "serialize_path"]
