"""Write a heatmap density curve to an SVG file. / 将热力图密度曲线写入 SVG 文件。

Run the script with ``python examples/write_heatmap_svg.py``; it saves an SVG in ``examples`` and prints its location. /
使用 ``python examples/write_heatmap_svg.py`` 运行脚本，会在 ``examples`` 目录保存 SVG 并打印其路径。
Both the polyline and the smooth variant are drawn so the effect of the Bézier handles is easy to compare. /
同时绘制折线与平滑两种曲线，便于比较贝塞尔控制柄的效果。
"""
from __future__ import annotations

import math
from pathlib import Path

from densitycurve import HeightBand, density_path

OUTPUT_PATH = Path(__file__).with_suffix(".svg")


def make_records(count: int = 48) -> list:
    # Two overlapping bumps, normalised to [0, 1]. / 两个相互重叠的峰，已归一化到 [0, 1]。
    values = [
        math.exp(-((i - count * 0.3) ** 2) / 40.0) + 0.6 * math.exp(-((i - count * 0.7) ** 2) / 20.0)
        for i in range(count)
    ]
    peak = max(values)
    return [{"intensityScoreNormalized": v / peak} for v in values]


def main() -> None:
    records = make_records()
    band = HeightBand(min_pixels=4.0, base_pixels=40.0, max_pixels=40.0)
    smooth = density_path(records, band, smooth=True)
    polyline = density_path(records, band, smooth=False)
    svg = (
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 1000 100" preserveAspectRatio="none" '
        'width="800" height="80">'
        f'<path d="{polyline}" fill="none" stroke="#999" stroke-width="1"/>'
        f'<path d="{smooth}" fill="rgba(255,0,0,0.4)" stroke="none"/>'
        "</svg>"
    )
    OUTPUT_PATH.write_text(svg, encoding="utf-8")
    print(f"Saved heatmap example to {OUTPUT_PATH}")  # 提示保存路径 / Notify where the output was saved


if __name__ == "__main__":
    main()
