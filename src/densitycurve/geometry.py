"""Planar primitives shared by the density curve pipeline. / 密度曲线流水线共用的平面几何基元。

Points live in the heatmap viewBox ``0 0 1000 100`` where ``y = 0`` is the top edge. /
点位于热力图 viewBox ``0 0 1000 100`` 中，``y = 0`` 表示顶部边缘。
Smooth curves orient each Bézier control point along the vector joining a point's two neighbours,
which gives a Catmull-Rom style interpolation without storing curvature state. /
平滑曲线让每个贝塞尔控制点沿相邻两点的连线方向摆放，无需保存曲率状态即可得到类似 Catmull-Rom 的插值效果。
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import torch

Tensor = torch.Tensor

# Control points sit 20% of the way along the local tangent. / 控制点位于局部切向量 20% 处。
SMOOTHING_TENSION = 0.2


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Bound ``value`` to ``[minimum, maximum]``. / 将 ``value`` 限制在 ``[minimum, maximum]`` 区间。

    Bounds are not validated: when ``minimum > maximum`` the result is ``maximum``. /
    不校验上下界：当 ``minimum > maximum`` 时返回 ``maximum``。
    """

    return min(max(value, minimum), maximum)


@dataclass(frozen=True)
class Point:
    """Immutable 2D point in viewBox units. / viewBox 单位下的不可变二维点。"""

    x: float
    y: float


@dataclass(frozen=True)
class Vector:
    """Displacement between two points. / 两点之间的位移向量。"""

    dx: float
    dy: float

    @classmethod
    def between(cls, start: Point, end: Point) -> "Vector":
        return cls(dx=end.x - start.x, dy=end.y - start.y)

    def components(self, reverse: bool = False) -> Tuple[float, float]:
        """Return ``(dx, dy)``, negated when ``reverse`` is set. / 返回 ``(dx, dy)``，``reverse`` 为真时取反。"""

        if reverse:
            return -self.dx, -self.dy
        return self.dx, self.dy


def control_point(
    current: Point,
    previous: Optional[Point] = None,
    next_point: Optional[Point] = None,
    reverse: bool = False,
    tension: float = SMOOTHING_TENSION,
) -> Point:
    """Derive a Bézier control point next to ``current``. / 在 ``current`` 附近推导贝塞尔控制点。

    Parameters
    ----------
    current:
        Anchor the control point is attached to. / 控制点所依附的锚点。
    previous, next_point:
        Neighbours defining the tangent direction. A missing neighbour falls back to ``current``,
        so a point with no neighbours yields itself. /
        决定切线方向的相邻点。缺失的相邻点以 ``current`` 代替，因此没有相邻点时返回其自身。
    reverse:
        Point the control backwards along the tangent, used for the incoming handle of a segment end. /
        沿切线反向放置控制点，用于线段终点的入射控制柄。
    """

    start = current if previous is None else previous
    end = current if next_point is None else next_point
    tangent = Vector.between(start, end)
    dx, dy = tangent.components(reverse)
    return Point(x=current.x + dx * tension, y=current.y + dy * tension)


def points_to_tensor(points: Sequence[Point], dtype: torch.dtype = torch.float64) -> Tensor:
    """Stack points into an ``(N, 2)`` tensor. / 将点堆叠为 ``(N, 2)`` 张量。"""

    return torch.tensor([[p.x, p.y] for p in points], dtype=dtype).reshape(-1, 2)


__all__ = ["SMOOTHING_TENSION", "Point", "Vector", "clamp", "control_point", "points_to_tensor"]
