import logging

import pytest

from bzcurves import DEFAULT_CONFIG, CubicBezier, CurveConfig, PointN, real_roots


@pytest.mark.parametrize(
    "kwargs",
    [{"epsilon": 0.0}, {"arc_length_steps": 0}, {"sample_count": 1}],
)
def test_invalid_config_is_rejected(kwargs) -> None:
    with pytest.raises(ValueError):
        CurveConfig(**kwargs).validate()


def test_curves_validate_their_config_on_use() -> None:
    curve = CubicBezier(
        PointN([0.0, 0.0]), PointN([1.0, 1.0]), PointN([2.0, 1.0]), PointN([3.0, 0.0]),
        config=CurveConfig(sample_count=1),
    )
    with pytest.raises(ValueError):
        curve.sample()
    DEFAULT_CONFIG.validate()


def test_solver_logs_at_debug_level(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="bzcurves.roots"):
        real_roots(1.0, -6.0, 11.0, -6.0)
    assert any("cubic branch" in record.getMessage() for record in caplog.records)
