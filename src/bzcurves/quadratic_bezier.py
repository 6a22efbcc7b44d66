"""Quadratic Bézier curves. / 二次贝塞尔曲线。

In this package quadratics mostly appear as the derivative (hodograph) of a cubic curve, which is
why they carry their own bounding box and root helpers. / 在本包中二次曲线主要作为三次曲线的导数（速端曲线）出现，因此它们自带包围盒与求根辅助函数。
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, List, Optional, Tuple, TypeVar

from .bezier import Bezier, lerp
from .config import CurveConfig, resolve_config
from .point import Point
from .roots import real_roots, roots_in_unit_interval

P = TypeVar("P", bound=Point)


@dataclass(frozen=True)
class QuadraticBezier(Generic[P]):
    """Curve ``(1-t)^2 * start + 2t(1-t) * ctrl + t^2 * end``. / 曲线 ``(1-t)^2 * start + 2t(1-t) * ctrl + t^2 * end``。"""

    start: P
    ctrl: P
    end: P
    config: Optional[CurveConfig] = field(default=None, compare=False, repr=False)

    @property
    def control_points(self) -> Tuple[P, P, P]:
        return (self.start, self.ctrl, self.end)

    @property
    def dim(self) -> int:
        return self.start.dim

    def to_bezier(self) -> Bezier[P]:
        return Bezier(self.control_points, self.config)

    def evaluate(self, t: float) -> P:
        one_t = 1.0 - t
        return self.start * (one_t * one_t) + self.ctrl * (2.0 * one_t * t) + self.end * (t * t)

    def evaluate_stable(self, t: float) -> P:
        return lerp(lerp(self.start, self.ctrl, t), lerp(self.ctrl, self.end, t), t)

    def axis_at(self, t: float, axis: int) -> float:
        one_t = 1.0 - t
        return (
            self.start.axis(axis) * one_t * one_t
            + self.ctrl.axis(axis) * 2.0 * one_t * t
            + self.end.axis(axis) * t * t
        )

    def split(self, t: float) -> Tuple["QuadraticBezier[P]", "QuadraticBezier[P]"]:
        ctrl_1ab = lerp(self.start, self.ctrl, t)
        ctrl_1bc = lerp(self.ctrl, self.end, t)
        on_curve = lerp(ctrl_1ab, ctrl_1bc, t)
        return (
            QuadraticBezier(self.start, ctrl_1ab, on_curve, self.config),
            QuadraticBezier(on_curve, ctrl_1bc, self.end, self.config),
        )

    def derivative(self) -> Bezier[P]:
        """Linear hodograph ``2(ctrl - start), 2(end - ctrl)``. / 一次速端曲线 ``2(ctrl - start), 2(end - ctrl)``。"""

        return Bezier(((self.ctrl - self.start) * 2.0, (self.end - self.ctrl) * 2.0), self.config)

    def tangent_axis(self, t: float, axis: int) -> float:
        s, c, e = self.start.axis(axis), self.ctrl.axis(axis), self.end.axis(axis)
        return 2.0 * (1.0 - t) * (c - s) + 2.0 * t * (e - c)

    def real_roots(self, a: float, b: float, c: float) -> List[float]:
        """Roots of ``a*t^2 + b*t + c``. / 求 ``a*t^2 + b*t + c`` 的根。"""

        return real_roots(0.0, a, b, c, resolve_config(self.config).epsilon)

    def bounding_box(self) -> List[Tuple[float, float]]:
        """Exact ``(min, max)`` per axis. / 每个坐标轴上精确的 ``(min, max)``。"""

        bounds = []
        for dim in range(self.dim):
            s, c, e = self.start.axis(dim), self.ctrl.axis(dim), self.end.axis(dim)
            # derivative / 2 == (s - 2c + e) t + (c - s)
            candidates = [
                self.evaluate_stable(t).axis(dim)
                for t in roots_in_unit_interval(self.real_roots(0.0, s - 2.0 * c + e, c - s))
            ]
            candidates.extend((s, e))
            bounds.append((min(candidates), max(candidates)))
        return bounds


__all__ = ["QuadraticBezier"]
