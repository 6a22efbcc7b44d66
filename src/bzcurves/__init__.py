"""Bézier curve evaluation and analysis. / 贝塞尔曲线的求值与分析。

This package evaluates, subdivides and differentiates Bézier curves of any degree and offers a
dedicated cubic curve with arc length, degeneracy tests and exact bounding boxes. /
本包用于任意次数贝塞尔曲线的求值、细分与求导，并提供专门的三次曲线类，支持弧长、退化检测与精确包围盒。
Curves are generic over any point type implementing :class:`Point`; :class:`PointN` is a ready-made
PyTorch-backed implementation. / 曲线可作用于任何实现 :class:`Point` 协议的点类型；:class:`PointN` 是现成的基于 PyTorch 的实现。
"""

import logging

from .bezier import Bezier
from .bspline import BSpline
from .config import DEFAULT_CONFIG, EPSILON, CurveConfig
from .cubic_bezier import CubicBezier
from .line import LineSegment
from .point import Point, PointN, stack_points
from .quadratic_bezier import QuadraticBezier
from .roots import real_roots, roots_in_unit_interval

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Bezier",
    "BSpline",
    "CubicBezier",
    "CurveConfig",
    "DEFAULT_CONFIG",
    "EPSILON",
    "LineSegment",
    "Point",
    "PointN",
    "QuadraticBezier",
    "real_roots",
    "roots_in_unit_interval",
    "stack_points",
]
