"""Straight line segments. / 直线段。"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

from .point import Point

P = TypeVar("P", bound=Point)


def _dot(a: Point, b: Point) -> float:
    return sum(a.axis(i) * b.axis(i) for i in range(a.dim))


@dataclass(frozen=True)
class LineSegment(Generic[P]):
    """Segment between ``start`` and ``end``. / 连接 ``start`` 与 ``end`` 的线段。"""

    start: P
    end: P

    def evaluate(self, t: float) -> P:
        return self.start + (self.end - self.start) * t

    def length(self) -> float:
        return math.sqrt((self.end - self.start).squared_length())

    def _project(self, point: P) -> tuple[float, float]:
        # Returns (v.d, d.d) for v = point - start and d = end - start.
        direction = self.end - self.start
        return _dot(point - self.start, direction), direction.squared_length()

    def perpendicular_distance(self, point: P) -> float:
        """Distance from ``point`` to the infinite line through the segment. / ``point`` 到线段所在直线的距离。

        Falls back to the distance to ``start`` when the segment has zero length. / 线段长度为零时退化为到 ``start`` 的距离。
        """

        offset = point - self.start
        projection, dd = self._project(point)
        if dd == 0.0:
            return math.sqrt(offset.squared_length())
        # Clamp rounding noise that can push the squared distance slightly below zero.
        return math.sqrt(max(offset.squared_length() - projection * projection / dd, 0.0))

    def distance_to_point(self, point: P) -> float:
        """Distance from ``point`` to the closest point on the segment. / ``point`` 到线段上最近点的距离。"""

        projection, dd = self._project(point)
        if dd == 0.0:
            return math.sqrt((point - self.start).squared_length())
        t = min(max(projection / dd, 0.0), 1.0)
        return math.sqrt((point - self.evaluate(t)).squared_length())


__all__ = ["LineSegment"]
