from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import pytest
import torch

from bzcurves import Bezier, CubicBezier, PointN

MAX_ERR = 1e-14


def _six_point_curve() -> Bezier:
    return Bezier.from_points(
        [
            PointN([0.0, 1.77]),
            PointN([1.1, -1.0]),
            PointN([4.3, 3.0]),
            PointN([3.2, -4.0]),
            PointN([7.3, 2.7]),
            PointN([8.9, 1.7]),
        ]
    )


def _assert_close(a, b, tol: float = MAX_ERR) -> None:
    for x, y in zip(a, b):
        assert abs(x - y) < tol


def test_eval_endpoints() -> None:
    curve = _six_point_curve()
    assert curve.degree == 5
    assert len(curve) == 6
    _assert_close(curve.evaluate(0.0), curve.control_points[0])
    _assert_close(curve.evaluate(1.0), curve.control_points[-1])


def test_split_equivalence() -> None:
    curve = Bezier.from_points(
        [PointN([0.0, 1.77]), PointN([2.9, 0.0]), PointN([4.3, 3.0]), PointN([3.2, -4.0])]
    )
    left, right = curve.split(0.5)
    assert left.degree == right.degree == curve.degree
    nsteps = 1000
    for i in range(nsteps + 1):
        s = i / nsteps
        _assert_close(curve.evaluate(s / 2.0), left.evaluate(s))
        _assert_close(curve.evaluate(s * 0.5 + 0.5), right.evaluate(s))


def test_split_shares_the_point_at_t() -> None:
    curve = _six_point_curve()
    left, right = curve.split(0.3)
    on_curve = curve.evaluate(0.3)
    assert left.control_points[0] == curve.control_points[0]
    assert right.control_points[-1] == curve.control_points[-1]
    _assert_close(left.control_points[-1], on_curve, 1e-12)
    _assert_close(right.control_points[0], on_curve, 1e-12)


def test_derivative_scales_differences_by_point_count() -> None:
    curve = Bezier.from_points([PointN([0.0, 0.0]), PointN([1.0, 2.0]), PointN([3.0, 3.0])])
    derivative = curve.derivative()
    assert derivative.control_points == (PointN([3.0, 6.0]), PointN([6.0, 3.0]))

    with pytest.raises(ValueError):
        Bezier.from_points([PointN([1.0, 1.0])]).derivative()


def test_agrees_with_cubic_specialisation() -> None:
    points = [PointN([0.0, 1.77]), PointN([1.1, -1.0]), PointN([4.3, 3.0]), PointN([3.2, -4.0])]
    generic = Bezier.from_points(points)
    cubic = CubicBezier.from_bezier(generic)
    for i in range(101):
        t = i / 100
        _assert_close(generic.evaluate(t), cubic.evaluate_stable(t))

    generic_left, _ = generic.split(0.4)
    cubic_left, _ = cubic.split(0.4)
    for a, b in zip(generic_left.control_points, cubic_left.control_points):
        _assert_close(a, b)
    assert cubic.to_bezier() == generic


def test_extrapolates_outside_unit_interval() -> None:
    line = Bezier.from_points([PointN([0.0]), PointN([1.0])])
    assert line.evaluate(2.0).axis(0) == pytest.approx(2.0)
    assert line.evaluate(-1.0).axis(0) == pytest.approx(-1.0)


def test_construction_checks() -> None:
    with pytest.raises(ValueError):
        Bezier.from_points([])
    with pytest.raises(ValueError):
        Bezier.from_points([PointN([0.0, 0.0]), PointN([1.0, 1.0, 1.0])])
    constant = Bezier.from_points([PointN([2.0, 3.0])])
    assert constant.degree == 0
    assert constant.evaluate(0.7) == PointN([2.0, 3.0])


def test_sample_and_polyline() -> None:
    curve = _six_point_curve()
    samples = curve.sample(5)
    assert len(samples) == 5
    assert samples[0] == curve.evaluate(0.0)
    polyline = curve.polyline(11)
    assert polyline.shape == (11, 2)
    assert polyline.dtype == torch.float64
    with pytest.raises(ValueError):
        curve.sample(1)


@dataclass(frozen=True)
class _TuplePoint:
    """Minimal foreign point type, used to check that curves only rely on the protocol."""

    coords: Tuple[float, ...]

    @property
    def dim(self) -> int:
        return len(self.coords)

    def __add__(self, other: "_TuplePoint") -> "_TuplePoint":
        return _TuplePoint(tuple(a + b for a, b in zip(self.coords, other.coords)))

    def __sub__(self, other: "_TuplePoint") -> "_TuplePoint":
        return _TuplePoint(tuple(a - b for a, b in zip(self.coords, other.coords)))

    def __mul__(self, scalar: float) -> "_TuplePoint":
        return _TuplePoint(tuple(a * scalar for a in self.coords))

    def axis(self, index: int) -> float:
        return self.coords[index]

    def squared_length(self) -> float:
        return sum(a * a for a in self.coords)

    def zero_like(self) -> "_TuplePoint":
        return _TuplePoint((0.0,) * self.dim)


def test_curves_accept_foreign_point_types() -> None:
    points = [_TuplePoint((0.0, 0.0)), _TuplePoint((1.0, 2.0)), _TuplePoint((3.0, 2.0)), _TuplePoint((4.0, 0.0))]
    generic = Bezier.from_points(points)
    cubic = CubicBezier(*points)
    mid = generic.evaluate(0.5)
    assert mid.coords == pytest.approx((2.0, 1.5))
    assert cubic.evaluate_stable(0.5).coords == pytest.approx((2.0, 1.5))
    assert cubic.bounding_box()[1] == pytest.approx((0.0, 1.5))
