"""Draw a cubic Bézier curve with its control polygon and bounding box. / 绘制三次贝塞尔曲线及其控制多边形和包围盒。

Run the script with ``python examples/plot_bounding_box.py``; it saves a PNG next to this file. /
使用 ``python examples/plot_bounding_box.py`` 运行脚本，会在本文件旁保存一张 PNG。
"""
from __future__ import annotations

from pathlib import Path

from PIL import Image, ImageDraw

from bzcurves import CubicBezier, PointN

OUTPUT_PATH = Path(__file__).with_suffix(".png")
CANVAS = (640, 480)
MARGIN = 40


def make_curve() -> CubicBezier:
    return CubicBezier(
        PointN([0.0, 1.77]),
        PointN([1.1, -1.0]),
        PointN([4.3, 3.0]),
        PointN([3.2, -4.0]),
    )


def main() -> None:
    curve = make_curve()
    (xmin, xmax), (ymin, ymax) = curve.bounding_box()

    # Fit the bounding box into the canvas, flipping y so it points up. / 将包围盒缩放到画布中，并翻转 y 轴使其向上。
    scale = min((CANVAS[0] - 2 * MARGIN) / (xmax - xmin), (CANVAS[1] - 2 * MARGIN) / (ymax - ymin))

    def to_px(x: float, y: float) -> tuple:
        return (MARGIN + (x - xmin) * scale, CANVAS[1] - MARGIN - (y - ymin) * scale)

    image = Image.new("RGB", CANVAS, "white")
    draw = ImageDraw.Draw(image)

    draw.rectangle([to_px(xmin, ymax), to_px(xmax, ymin)], outline=(200, 30, 30))
    control = [to_px(p.axis(0), p.axis(1)) for p in curve.control_points]
    draw.line(control, fill=(150, 150, 150), width=1)
    for x, y in control:
        draw.ellipse([x - 3, y - 3, x + 3, y + 3], fill=(90, 90, 90))

    polyline = curve.polyline(1000)
    draw.line([to_px(float(x), float(y)) for x, y in polyline], fill=(20, 60, 200), width=2)

    image.save(OUTPUT_PATH)
    print(f"Saved bounding box example to {OUTPUT_PATH}")


if __name__ == "__main__":
    main()
