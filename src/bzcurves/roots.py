"""Real roots of polynomials up to degree three. / 三次及以下多项式的实根求解。

:func:`real_roots` solves ``a*t^3 + b*t^2 + c*t + d = 0``. / :func:`real_roots` 求解 ``a*t^3 + b*t^2 + c*t + d = 0``。
Leading coefficients whose magnitude is below ``epsilon`` are treated as zero, so the same call
handles cubic, quadratic and linear equations. / 绝对值小于 ``epsilon`` 的首项系数视为零，因此同一个函数可处理三次、二次及一次方程。
Cubics use Cardano's method with the trigonometric form for three distinct real roots. /
三次方程使用卡尔达诺公式，在有三个不同实根时采用三角形式。

The solver never raises: an empty list simply means there is no real solution. Roots are not
sorted and callers filter them to whatever interval they care about. /
求解器从不抛出异常：返回空列表即表示无实数解。根不保证有序，调用方需自行筛选所需区间。
"""
from __future__ import annotations

import logging
import math
from typing import Iterable, List

from .config import EPSILON

logger = logging.getLogger(__name__)

_ONE_THIRD = 1.0 / 3.0


def _signed_cbrt(x: float) -> float:
    return math.copysign(abs(x) ** _ONE_THIRD, x)


def real_roots(a: float, b: float, c: float, d: float, epsilon: float = EPSILON) -> List[float]:
    """Return the real roots of ``a*t^3 + b*t^2 + c*t + d``. / 返回 ``a*t^3 + b*t^2 + c*t + d`` 的实根。

    Parameters
    ----------
    a, b, c, d:
        Polynomial coefficients, highest power first. / 多项式系数，按幂次从高到低排列。
    epsilon:
        Magnitude below which a coefficient or discriminant counts as zero. / 系数或判别式的绝对值低于该值时视为零。
    """

    roots: List[float] = []

    if abs(a) < epsilon:
        if abs(b) < epsilon:
            if abs(c) < epsilon:
                logger.debug("real_roots: constant polynomial, no roots")
                return roots
            roots.append(-d / c)
            return roots

        delta = c * c - 4.0 * b * d
        if delta > 0.0:
            sqrt_delta = math.sqrt(delta)
            roots.append((-c - sqrt_delta) / (2.0 * b))
            roots.append((-c + sqrt_delta) / (2.0 * b))
        elif abs(delta) < epsilon:
            roots.append(-c / (2.0 * b))
        return roots

    bn = b / a
    cn = c / a
    dn = d / a

    delta0 = (3.0 * cn - bn * bn) / 9.0
    delta1 = (9.0 * bn * cn - 27.0 * dn - 2.0 * bn * bn * bn) / 54.0
    delta01 = delta0 * delta0 * delta0 + delta1 * delta1

    if delta01 >= 0.0:
        sqrt_delta01 = math.sqrt(delta01)
        s = _signed_cbrt(delta1 + sqrt_delta01)
        t = _signed_cbrt(delta1 - sqrt_delta01)
        roots.append(-bn * _ONE_THIRD + (s + t))
        # s + t == 0 would make the repeated root equal to the first one.
        if abs(s - t) < epsilon and abs(s + t) >= epsilon:
            roots.append(-bn * _ONE_THIRD - (s + t) / 2.0)
    else:
        # delta0 < 0 here; rounding can push the ratio just past +-1.
        ratio = delta1 / math.sqrt(-delta0 * delta0 * delta0)
        theta = math.acos(min(max(ratio, -1.0), 1.0))
        two_sqrt_delta0 = 2.0 * math.sqrt(-delta0)
        for k in range(3):
            roots.append(two_sqrt_delta0 * math.cos((theta + 2.0 * math.pi * k) * _ONE_THIRD) - bn * _ONE_THIRD)

    logger.debug("real_roots: cubic branch (delta01=%g) -> %s", delta01, roots)
    return roots


def roots_in_unit_interval(roots: Iterable[float]) -> List[float]:
    """Keep roots strictly inside ``(0, 1)``. / 仅保留严格位于 ``(0, 1)`` 内的根。"""

    return [root for root in roots if 0.0 < root < 1.0]


__all__ = ["real_roots", "roots_in_unit_interval"]
