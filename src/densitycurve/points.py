"""Map intensity records onto viewBox points. / 将强度记录映射为 viewBox 坐标点。

Each record owns an equal horizontal slot of the ``1000`` unit wide viewBox and is placed at the slot centre. /
每条记录在宽度为 ``1000`` 的 viewBox 中占据等宽区段，并放置在区段中心。
Its height comes from the normalised intensity, clamped to the band described by :class:`HeightBand`
and inverted because ``y = 0`` is the top of the canvas. /
其高度来自归一化强度，受 :class:`HeightBand` 所描述的区间约束，并因 ``y = 0`` 位于画布顶部而做翻转。
Fixed anchors at the bottom corners close the series into a fillable region. /
底部两角的固定锚点把序列闭合为可填充区域。
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Sequence, Union

import torch

from .geometry import Point, clamp

logger = logging.getLogger(__name__)

VIEWBOX_WIDTH = 1000.0
VIEWBOX_HEIGHT = 100.0


@dataclass(frozen=True)
class IntensityRecord:
    """One heatmap sample carrying a normalised intensity in ``[0, 1]``. / 携带 ``[0, 1]`` 归一化强度的单个热力图样本。"""

    intensity_score_normalized: Optional[float] = None

    @property
    def intensity(self) -> float:
        """Intensity with missing, false-like or NaN values read as ``0``. / 缺失、假值或 NaN 视为 ``0`` 的强度。"""

        value = self.intensity_score_normalized
        if not value or math.isnan(value):
            return 0.0
        return float(value)

    @classmethod
    def coerce(cls, record: Union["IntensityRecord", Mapping[str, Any]]) -> "IntensityRecord":
        """Accept a record or a JSON-style mapping. / 接受记录对象或 JSON 风格的映射。"""

        if isinstance(record, IntensityRecord):
            return record
        if isinstance(record, Mapping):
            if "intensityScoreNormalized" in record:
                return cls(record["intensityScoreNormalized"])
            return cls(record.get("intensity_score_normalized"))
        raise TypeError(f"Cannot interpret {type(record).__name__} as an intensity record")


RecordLike = Union[IntensityRecord, Mapping[str, Any]]


@dataclass
class HeightBand:
    """Pixel triple controlling how intensity maps to height. / 控制强度到高度映射的像素三元组。

    ``min_pixels`` and ``max_pixels`` are expressed relative to ``base_pixels``; with the defaults the curve
    spans the full viewBox height. / ``min_pixels`` 与 ``max_pixels`` 以 ``base_pixels`` 为基准换算；默认值下曲线覆盖整个 viewBox 高度。
    The bounds are not ordered or sign-checked: when ``min_pixels`` exceeds ``max_pixels`` every height is the upper bound. /
    上下界不做大小或符号检查：当 ``min_pixels`` 大于 ``max_pixels`` 时所有高度均取上界。
    """

    min_pixels: float = 0.0
    base_pixels: float = 40.0
    max_pixels: float = 40.0

    @property
    def lower_bound(self) -> float:
        return self.min_pixels / self.base_pixels * 100.0

    @property
    def upper_bound(self) -> float:
        return self.max_pixels / self.base_pixels * 100.0

    def validate(self) -> None:
        values = (self.min_pixels, self.base_pixels, self.max_pixels)
        if not all(math.isfinite(v) for v in values):
            raise ValueError(f"HeightBand values must be finite, got {values}")
        if self.base_pixels == 0:
            raise ValueError("base_pixels must be non-zero since it normalises the other bounds")


def build_point_series(
    records: Sequence[RecordLike],
    band: Optional[HeightBand] = None,
    smooth: bool = False,
) -> List[Point]:
    """Convert intensity records into an ordered point series. / 将强度记录转换为有序点序列。

    Parameters
    ----------
    records:
        Samples ordered left to right. An empty sequence yields an empty series. /
        自左向右排列的样本。空序列返回空结果。
    band:
        Height configuration, :class:`HeightBand` defaults when omitted. / 高度配置，省略时使用 :class:`HeightBand` 默认值。
    smooth:
        Skip the flat left edge used by polyline rendering. The flat right edge is always emitted. /
        省略折线模式所需的左侧平台点；右侧平台点始终输出。
    """

    band = band or HeightBand()
    band.validate()

    samples = [IntensityRecord.coerce(record) for record in records]
    count = len(samples)
    if count == 0:
        logger.debug("No intensity records supplied; returning an empty point series")
        return []

    segment_width = VIEWBOX_WIDTH / count
    centres = (torch.arange(count, dtype=torch.float64) + 0.5) * segment_width
    raw = torch.tensor([s.intensity for s in samples], dtype=torch.float64) * 100.0
    # Inverted: larger intensity moves the point towards the top edge. / 翻转坐标：强度越大越靠近顶部。
    heights = VIEWBOX_HEIGHT - torch.clamp(raw, min=band.lower_bound, max=band.upper_bound)

    points = [Point(0.0, VIEWBOX_HEIGHT)]
    last = count - 1
    for index, (x, y) in enumerate(zip(centres.tolist(), heights.tolist())):
        y = clamp(y, 0.0, VIEWBOX_HEIGHT)
        if index == 0 and not smooth:
            points.append(Point(0.0, y))
        points.append(Point(x, y))
        if index == last:
            points.append(Point(VIEWBOX_WIDTH, y))
    points.append(Point(VIEWBOX_WIDTH, VIEWBOX_HEIGHT))

    logger.debug("Built %d points from %d records (smooth=%s)", len(points), count, smooth)
    return points


def build_points(
    records: Sequence[RecordLike],
    min_pixels: float,
    base_pixels: float,
    max_pixels: float,
    smooth: bool = False,
) -> List[Point]:
    """Flat-argument form of :func:`build_point_series`. / :func:`build_point_series` 的展开参数形式。"""

    return build_point_series(records, HeightBand(min_pixels, base_pixels, max_pixels), smooth=smooth)


__all__ = [
    "VIEWBOX_HEIGHT",
    "VIEWBOX_WIDTH",
    "HeightBand",
    "IntensityRecord",
    "build_point_series",
    "build_points",
]
