"""Cubic Bézier curves. / 三次贝塞尔曲线。

Cubic curves are the workhorse of vector graphics, so they get a dedicated class with unrolled
algorithms on top of what :class:`bzcurves.bezier.Bezier` offers: closed-form evaluation, arc length,
degeneracy tests and exact bounding boxes. / 三次曲线是矢量图形的主力，因此在 :class:`bzcurves.bezier.Bezier` 之外提供专门的类，
包含展开后的算法：闭式求值、弧长、退化检测以及精确包围盒。
The curve is ``P(t) = (1-t)^3 start + 3t(1-t)^2 ctrl1 + 3t^2(1-t) ctrl2 + t^3 end``. /
曲线定义为 ``P(t) = (1-t)^3 start + 3t(1-t)^2 ctrl1 + 3t^2(1-t) ctrl2 + t^3 end``。
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Generic, List, Optional, Tuple, TypeVar

import torch

from .bezier import Bezier, unit_parameters
from .config import CurveConfig, resolve_config
from .line import LineSegment
from .point import Point, stack_points
from .quadratic_bezier import QuadraticBezier
from .roots import real_roots, roots_in_unit_interval

Tensor = torch.Tensor

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=Point)


@dataclass(frozen=True)
class CubicBezier(Generic[P]):
    """Cubic curve from a start point, two control points and an end point. / 由起点、两个控制点和终点定义的三次曲线。

    Degenerate inputs (coincident or collinear points) are accepted; use :meth:`is_degenerate_point`,
    :meth:`is_linear` and :meth:`is_closed` to detect them. / 允许退化输入（重合或共线的点），可通过
    :meth:`is_degenerate_point`、:meth:`is_linear` 与 :meth:`is_closed` 进行检测。
    """

    start: P
    ctrl1: P
    ctrl2: P
    end: P
    config: Optional[CurveConfig] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        dims = {p.dim for p in (self.start, self.ctrl1, self.ctrl2, self.end)}
        if len(dims) != 1:
            raise ValueError(f"CubicBezier points must share one dimension. Received {sorted(dims)}")

    @classmethod
    def from_bezier(cls, curve: Bezier[P]) -> "CubicBezier[P]":
        if len(curve) != 4:
            raise ValueError(f"A cubic curve needs exactly 4 control points. Received {len(curve)}")
        return cls(*curve.control_points, config=curve.config)

    def to_bezier(self) -> Bezier[P]:
        return Bezier(self.control_points, self.config)

    @property
    def control_points(self) -> Tuple[P, P, P, P]:
        return (self.start, self.ctrl1, self.ctrl2, self.end)

    @property
    def dim(self) -> int:
        return self.start.dim

    @property
    def _config(self) -> CurveConfig:
        return resolve_config(self.config)

    def evaluate(self, t: float) -> P:
        """Direct Bernstein evaluation. / 直接使用伯恩斯坦基求值。

        Cheap but loses precision near ``t = 0`` and ``t = 1``; prefer :meth:`evaluate_stable`. /
        计算量小，但在 ``t = 0`` 与 ``t = 1`` 附近精度较差；推荐使用 :meth:`evaluate_stable`。
        """

        return (
            self.start * ((1.0 - t) * (1.0 - t) * (1.0 - t))
            + self.ctrl1 * (3.0 * t * (1.0 - t) * (1.0 - t))
            + self.ctrl2 * (3.0 * t * t * (1.0 - t))
            + self.end * (t * t * t)
        )

    def evaluate_stable(self, t: float) -> P:
        """Unrolled De Casteljau evaluation. / 展开的德卡斯特里奥求值。"""

        # _1ab interpolates the first (a) and second (b) point of level one, and so on
        ctrl_1ab = self.start + (self.ctrl1 - self.start) * t
        ctrl_1bc = self.ctrl1 + (self.ctrl2 - self.ctrl1) * t
        ctrl_1cd = self.ctrl2 + (self.end - self.ctrl2) * t
        ctrl_2ab = ctrl_1ab + (ctrl_1bc - ctrl_1ab) * t
        ctrl_2bc = ctrl_1bc + (ctrl_1cd - ctrl_1bc) * t
        return ctrl_2ab + (ctrl_2bc - ctrl_2ab) * t

    def axis_at(self, t: float, axis: int) -> float:
        """Single coordinate of :meth:`evaluate`. / :meth:`evaluate` 结果的单个坐标。"""

        t2 = t * t
        t3 = t2 * t
        one_t = 1.0 - t
        one_t2 = one_t * one_t
        one_t3 = one_t2 * one_t
        return (
            self.start.axis(axis) * one_t3
            + self.ctrl1.axis(axis) * 3.0 * one_t2 * t
            + self.ctrl2.axis(axis) * 3.0 * one_t * t2
            + self.end.axis(axis) * t3
        )

    def arc_length(self, steps: Optional[int] = None) -> float:
        """Length of the polyline through ``steps + 1`` equally spaced samples. / 经过 ``steps + 1`` 个等距采样点的折线长度。

        A chord sum always underestimates the true length and converges as ``steps`` grows; expect
        about two correct decimals at 1000 steps. / 弦长之和总是低估真实弧长，并随 ``steps`` 增大而收敛；1000 步时约有两位小数精度。
        """

        steps = steps if steps is not None else self._config.arc_length_steps
        if steps < 1:
            raise ValueError("steps must be at least 1")
        length = 0.0
        previous = self.evaluate_stable(0.0)
        for i in range(1, steps + 1):
            current = self.evaluate_stable(i / steps)
            length += math.sqrt((current - previous).squared_length())
            previous = current
        return length

    def split(self, t: float) -> Tuple["CubicBezier[P]", "CubicBezier[P]"]:
        """Subdivide at ``t``. / 在 ``t`` 处细分曲线。"""

        ctrl_1ab = self.start + (self.ctrl1 - self.start) * t
        ctrl_1bc = self.ctrl1 + (self.ctrl2 - self.ctrl1) * t
        ctrl_1cd = self.ctrl2 + (self.end - self.ctrl2) * t
        ctrl_2ab = ctrl_1ab + (ctrl_1bc - ctrl_1ab) * t
        ctrl_2bc = ctrl_1bc + (ctrl_1cd - ctrl_1bc) * t
        ctrl_3ab = ctrl_2ab + (ctrl_2bc - ctrl_2ab) * t
        return (
            CubicBezier(self.start, ctrl_1ab, ctrl_2ab, ctrl_3ab, self.config),
            CubicBezier(ctrl_3ab, ctrl_2bc, ctrl_1cd, self.end, self.config),
        )

    def derivative(self) -> QuadraticBezier[P]:
        """Hodograph of the curve; call ``evaluate`` on it to get tangents. / 曲线的速端曲线；对其调用 ``evaluate`` 可得到切向量。"""

        return QuadraticBezier(
            (self.ctrl1 - self.start) * 3.0,
            (self.ctrl2 - self.ctrl1) * 3.0,
            (self.end - self.ctrl2) * 3.0,
            self.config,
        )

    def tangent_axis(self, t: float, axis: int) -> float:
        """Single coordinate of the first derivative at ``t``. / ``t`` 处一阶导数的单个坐标。

        Same value as ``derivative().axis_at(t, axis)`` without building the quadratic. /
        与 ``derivative().axis_at(t, axis)`` 结果相同，但无需构造二次曲线。
        """

        u = 1.0 - t
        s, c1, c2, e = (p.axis(axis) for p in self.control_points)
        return 3.0 * u * u * (c1 - s) + 6.0 * u * t * (c2 - c1) + 3.0 * t * t * (e - c2)

    def baseline(self) -> LineSegment[P]:
        return LineSegment(self.start, self.end)

    def is_closed(self, tolerance: float) -> bool:
        return (self.start - self.end).squared_length() <= tolerance * tolerance

    def is_degenerate_point(self, tolerance: float) -> bool:
        """Whether all control points collapse into one point. / 所有控制点是否收缩为同一点。"""

        tolerance_squared = tolerance * tolerance
        # <= so that a zero tolerance still matches exactly coincident points
        return (
            (self.start - self.end).squared_length() <= tolerance_squared
            and (self.start - self.ctrl1).squared_length() <= tolerance_squared
            and (self.end - self.ctrl2).squared_length() <= tolerance_squared
        )

    def is_linear(self, tolerance: float) -> bool:
        """Whether both control points lie within ``tolerance`` of the baseline. / 两个控制点是否都位于基线 ``tolerance`` 距离之内。

        Closed curves are never linear because their baseline has no direction. / 闭合曲线的基线没有方向，因此永远不视为直线。
        """

        if (self.start - self.end).squared_length() < self._config.epsilon:
            return False
        return self._are_points_collinear(tolerance)

    def _are_points_collinear(self, tolerance: float) -> bool:
        line = self.baseline()
        return line.perpendicular_distance(self.ctrl1) <= tolerance and line.perpendicular_distance(self.ctrl2) <= tolerance

    def solve_t_for_axis(self, value: float, axis: int) -> List[float]:
        """Parameters in ``(0, 1)`` where coordinate ``axis`` equals ``value``. / 坐标 ``axis`` 等于 ``value`` 时位于 ``(0, 1)`` 内的参数。

        A curve collapsed into a point has no meaningful answer and yields an empty list. / 收缩为一点的曲线没有有意义的解，返回空列表。
        """

        if self.is_degenerate_point(0.0):
            return []
        s, c1, c2, e = (p.axis(axis) for p in self.control_points)
        a = -s + 3.0 * c1 - 3.0 * c2 + e
        b = 3.0 * s - 6.0 * c1 + 3.0 * c2
        c = -3.0 * s + 3.0 * c1
        d = s - value
        return roots_in_unit_interval(real_roots(a, b, c, d, self._config.epsilon))

    def bounding_box(self) -> List[Tuple[float, float]]:
        """Tight axis-aligned bounds, one ``(min, max)`` per dimension. / 紧致的轴对齐包围盒，每个维度一个 ``(min, max)``。

        A coordinate of a cubic reaches its extrema only at roots of its derivative or at the
        endpoints, so the interior control points never bound the curve directly. /
        三次曲线的坐标只在导数的根或端点处取得极值，因此内部控制点不会直接决定包围盒。
        """

        epsilon = self._config.epsilon
        derivative = self.derivative()
        # power basis of the hodograph: a t^2 + b t + c
        a = derivative.start + derivative.ctrl * -2.0 + derivative.end
        b = derivative.start * -2.0 + derivative.ctrl * 2.0
        c = derivative.start

        bounds = []
        for dim in range(self.dim):
            roots = roots_in_unit_interval(real_roots(0.0, a.axis(dim), b.axis(dim), c.axis(dim), epsilon))
            extrema = [self.evaluate_stable(t).axis(dim) for t in roots]
            extrema.append(self.start.axis(dim))
            extrema.append(self.end.axis(dim))
            logger.debug("bounding_box: axis %d roots %s candidates %s", dim, roots, extrema)
            bounds.append((min(extrema), max(extrema)))
        return bounds

    def sample(self, num_samples: Optional[int] = None) -> List[P]:
        """Points at equally spaced parameters in ``[0, 1]``. / 在 ``[0, 1]`` 上等间距参数处的点。"""

        count = num_samples if num_samples is not None else self._config.sample_count
        return [self.evaluate_stable(t) for t in unit_parameters(count)]

    def polyline(self, num_samples: Optional[int] = None) -> Tensor:
        """Flatten into a ``(num_samples, dim)`` float64 tensor for renderers. / 展平为供渲染器使用的 ``(num_samples, dim)`` float64 张量。"""

        return stack_points(self.sample(num_samples))


__all__ = ["CubicBezier"]
