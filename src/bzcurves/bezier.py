"""Bézier curves of arbitrary degree. / 任意次数的贝塞尔曲线。

A curve with ``N`` control points has degree ``N - 1``. All operations use De Casteljau's algorithm,
which only ever interpolates linearly between two points and therefore stays numerically stable. /
具有 ``N`` 个控制点的曲线次数为 ``N - 1``。所有运算均基于德卡斯特里奥算法，该算法只在两点之间做线性插值，因此数值上保持稳定。
Every operation works on its own scratch copy of the control points and returns new curves, so a
curve can be shared freely between threads. / 每个运算都在控制点的临时副本上进行并返回新曲线，因此曲线可在线程间自由共享。
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterator, List, Optional, Sequence, Tuple, TypeVar

import torch

from .config import CurveConfig, resolve_config
from .point import Point, stack_points

Tensor = torch.Tensor

P = TypeVar("P", bound=Point)


def lerp(a: P, b: P, t: float) -> P:
    """Linear interpolation ``a * (1 - t) + b * t``. / 线性插值 ``a * (1 - t) + b * t``。"""

    return a * (1.0 - t) + b * t


def unit_parameters(num_samples: int) -> List[float]:
    """Equally spaced parameters covering ``[0, 1]`` inclusive. / 均匀覆盖闭区间 ``[0, 1]`` 的参数序列。"""

    if num_samples < 2:
        raise ValueError("num_samples must be at least 2 to include both endpoints")
    step = 1.0 / (num_samples - 1)
    return [i * step for i in range(num_samples - 1)] + [1.0]


@dataclass(frozen=True)
class Bezier(Generic[P]):
    """Bézier curve defined solely by its control points. / 仅由控制点定义的贝塞尔曲线。

    ``t`` outside ``[0, 1]`` is accepted and extrapolates the polynomial. / 允许 ``t`` 超出 ``[0, 1]``，此时对多项式进行外推。
    """

    control_points: Tuple[P, ...]
    config: Optional[CurveConfig] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        points = tuple(self.control_points)
        if not points:
            raise ValueError("Bezier needs at least one control point")
        dim = points[0].dim
        if any(p.dim != dim for p in points):
            raise ValueError("All control points of a Bezier curve must share one dimension")
        # frozen dataclass: normalise lists into tuples so the curve cannot be mutated through them
        object.__setattr__(self, "control_points", points)

    @classmethod
    def from_points(cls, points: Sequence[P], config: Optional[CurveConfig] = None) -> "Bezier[P]":
        return cls(tuple(points), config)

    @property
    def degree(self) -> int:
        return len(self.control_points) - 1

    @property
    def dim(self) -> int:
        return self.control_points[0].dim

    def __len__(self) -> int:
        return len(self.control_points)

    def __iter__(self) -> Iterator[P]:
        return iter(self.control_points)

    def __getitem__(self, index: int) -> P:
        return self.control_points[index]

    def evaluate(self, t: float) -> P:
        """Point on the curve at ``t`` via De Casteljau. / 使用德卡斯特里奥算法计算参数 ``t`` 处的曲线点。

        Each pass replaces point ``j`` with the interpolation of points ``j`` and ``j + 1``; after
        ``N - 1`` passes a single point remains. / 每一轮将第 ``j`` 个点替换为第 ``j`` 与第 ``j + 1`` 个点的插值，经过 ``N - 1`` 轮后只剩一个点。
        """

        points = list(self.control_points)
        n = len(points)
        for i in range(1, n):
            for j in range(n - i):
                points[j] = lerp(points[j], points[j + 1], t)
        return points[0]

    def split(self, t: float) -> Tuple["Bezier[P]", "Bezier[P]"]:
        """Subdivide at ``t`` into two curves of the same degree. / 在 ``t`` 处细分为两条同次曲线。

        ``left.evaluate(s) == self.evaluate(s * t)`` and
        ``right.evaluate(s) == self.evaluate(t + s * (1 - t))`` up to rounding. /
        在舍入误差范围内满足上述两个等式。
        """

        n = len(self.control_points)
        casteljau = list(self.control_points)
        left: List[P] = [casteljau[0]] * n
        right: List[P] = [casteljau[-1]] * n
        for i in range(1, n + 1):
            # first and last point of the current pyramid level
            left[i - 1] = casteljau[0]
            right[n - i] = casteljau[n - i]
            for j in range(n - i):
                casteljau[j] = lerp(casteljau[j], casteljau[j + 1], t)
        return Bezier(tuple(left), self.config), Bezier(tuple(right), self.config)

    def derivative(self) -> "Bezier[P]":
        """Hodograph with ``N - 1`` control points. / 具有 ``N - 1`` 个控制点的导数曲线。

        Point ``i`` is ``(P[i+1] - P[i]) * N`` where ``N`` is the number of control points, so the
        result is the tangent direction up to a constant scale. / 第 ``i`` 个点为 ``(P[i+1] - P[i]) * N``，其中 ``N`` 为控制点个数，因此结果是相差常数倍的切向量。
        A curve with a single control point has no derivative curve. / 只有一个控制点的曲线没有导数曲线。
        """

        n = len(self.control_points)
        if n < 2:
            raise ValueError("A constant Bezier curve (one control point) has no derivative curve")
        pts = self.control_points
        return Bezier(tuple((pts[i + 1] - pts[i]) * float(n) for i in range(n - 1)), self.config)

    def sample(self, num_samples: Optional[int] = None) -> List[P]:
        """Evaluate at equally spaced parameters in ``[0, 1]``. / 在 ``[0, 1]`` 上按等间距参数求值。"""

        count = num_samples if num_samples is not None else resolve_config(self.config).sample_count
        return [self.evaluate(t) for t in unit_parameters(count)]

    def polyline(self, num_samples: Optional[int] = None) -> Tensor:
        """Samples as a ``(num_samples, dim)`` tensor. / 以 ``(num_samples, dim)`` 张量返回采样点。"""

        return stack_points(self.sample(num_samples))


__all__ = ["Bezier", "lerp", "unit_parameters"]
