"""Cubic Bézier segments through a point series. / 穿过点序列的三次贝塞尔曲线段。

A smooth density curve is a chain of cubic segments, one per consecutive pair of points. /
平滑密度曲线由一串三次曲线段组成，每对相邻点对应一段。
Segment ``i`` starts at ``points[i]``, ends at ``points[i + 1]`` and takes its two handles from
:func:`densitycurve.geometry.control_point`, so consecutive segments share tangent directions at their joints. /
第 ``i`` 段从 ``points[i]`` 出发，止于 ``points[i + 1]``，两个控制柄由 :func:`densitycurve.geometry.control_point` 给出，
因此相邻曲线段在连接处的切线方向一致。
Control points are kept in float64 tensors so serialised coordinates match plain float arithmetic. /
控制点以 float64 张量保存，使序列化后的坐标与普通浮点运算结果一致。
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

import torch

from .geometry import Point, control_point, points_to_tensor

Tensor = torch.Tensor


@dataclass
class CubicBezier:
    """Batch of cubic Bézier control points. / 批量存储的三次贝塞尔控制点。

    The control points are stored in the order ``(p0, p1, p2, p3)`` with layout ``(..., 4, 2)``. /
    控制点按照 ``(p0, p1, p2, p3)`` 的顺序存储，布局为 ``(..., 4, 2)``。
    """

    control_points: Tensor

    def __post_init__(self) -> None:
        if self.control_points.shape[-2:] != (4, 2):
            raise ValueError(
                "CubicBezier.control_points must have shape (..., 4, 2). "
                f"Received {tuple(self.control_points.shape)}"
            )

    @classmethod
    def from_points(cls, points: Sequence[Point]) -> "CubicBezier":
        """Build the ``(N - 1, 4, 2)`` segment batch for a point series. / 为点序列构建 ``(N - 1, 4, 2)`` 曲线段批次。"""

        if len(points) < 2:
            raise ValueError("At least two points are required to build a cubic segment")

        rows = []
        for i in range(1, len(points)):
            start, end = points[i - 1], points[i]
            # Python indexing wraps around, so out-of-range neighbours are passed explicitly as None. /
            # Python 的负索引会回绕，越界的相邻点需显式传入 None。
            before = points[i - 2] if i >= 2 else None
            after = points[i + 1] if i + 1 < len(points) else None
            outgoing = control_point(start, before, end)
            incoming = control_point(end, start, after, reverse=True)
            rows.append(points_to_tensor((start, outgoing, incoming, end)))
        return cls(torch.stack(rows))

    def segments(self) -> Iterator[Tuple[Point, Point, Point, Point]]:
        """Yield each segment as ``(start, handle_out, handle_in, end)``. / 以 ``(起点, 出射控制点, 入射控制点, 终点)`` 逐段输出。"""

        for row in self.control_points.reshape(-1, 4, 2).tolist():
            p0, p1, p2, p3 = (Point(x, y) for x, y in row)
            yield p0, p1, p2, p3


__all__ = ["CubicBezier"]
