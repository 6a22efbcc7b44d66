"""B-spline container with knot-vector bookkeeping. / 带节点向量管理的 B 样条容器。

Only construction checks, the knot domain and the knot-span search live here; the class does not
evaluate points on the spline. / 这里只包含构造校验、节点定义域与节点区间查找；该类不负责计算样条上的点。
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, Optional, Sequence, Tuple, TypeVar

from .point import Point

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=Point)


def _validation_error(degree: int, n_points: int, n_knots: int) -> Optional[str]:
    if degree < 0:
        return f"degree must be non-negative, got {degree}"
    if n_points <= degree:
        return f"too few control points for degree {degree}: got {n_points}, need at least {degree + 1}"
    if n_knots != n_points + degree + 1:
        return f"invalid number of knots, got {n_knots}, expected {n_points + degree + 1}"
    return None


@dataclass(frozen=True)
class BSpline(Generic[P]):
    """Degree, control points and knots of a B-spline curve. / B 样条曲线的次数、控制点与节点。

    The knots must be sorted in non-decreasing order; :meth:`upper_bound` relies on it. /
    节点必须按非递减顺序排列，:meth:`upper_bound` 依赖这一点。
    """

    degree: int
    control_points: Tuple[P, ...]
    knots: Tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "control_points", tuple(self.control_points))
        object.__setattr__(self, "knots", tuple(float(k) for k in self.knots))
        error = _validation_error(self.degree, len(self.control_points), len(self.knots))
        if error is not None:
            raise ValueError(error)

    @classmethod
    def create(cls, degree: int, control_points: Sequence[P], knots: Sequence[float]) -> Optional["BSpline[P]"]:
        """Build a spline or return ``None`` for malformed input. / 构造样条；输入不合法时返回 ``None``。

        A spline needs more control points than its degree and exactly
        ``len(control_points) + degree + 1`` knots. / 样条的控制点数必须大于次数，且节点数必须恰好为 ``len(control_points) + degree + 1``。
        """

        error = _validation_error(degree, len(control_points), len(knots))
        if error is not None:
            logger.debug("BSpline.create rejected input: %s", error)
            return None
        return cls(degree, tuple(control_points), tuple(knots))

    def knot_domain(self) -> Tuple[float, float]:
        """Inclusive parameter range ``[min, max]`` of the curve. / 曲线参数的闭区间 ``[min, max]``。"""

        return self.knots[self.degree], self.knots[len(self.knots) - 1 - self.degree]

    def upper_bound(self, value: float) -> Optional[int]:
        """Index of the first knot strictly greater than ``value``. / 第一个严格大于 ``value`` 的节点下标。

        Binary search over the sorted knots; ``None`` when no knot is greater. / 在有序节点上二分查找；若不存在更大的节点则返回 ``None``。
        """

        first = 0
        count = len(self.knots)
        while count > 0:
            step = count // 2
            it = first + step
            if not value < self.knots[it]:
                first = it + 1
                count -= step + 1
            else:
                count = step
        if first == len(self.knots):
            return None
        return first

    def knot_span(self, t: float) -> int:
        """Index ``i`` with ``knots[i] <= t < knots[i + 1]`` inside the domain. / 定义域内满足 ``knots[i] <= t < knots[i + 1]`` 的下标 ``i``。

        Parameters at or past the end of the domain map to the last non-empty span. /
        位于定义域末端或超出末端的参数映射到最后一个非空区间。
        """

        last = len(self.knots) - self.degree - 2
        upper = self.upper_bound(t)
        if upper is None:
            return last
        return min(max(upper - 1, self.degree), last)


__all__ = ["BSpline"]
