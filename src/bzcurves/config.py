"""Numeric tolerances shared by the curve types. / 曲线类型共享的数值容差。

Every "approximately zero" comparison in the package reads its threshold from :class:`CurveConfig`
instead of comparing floats exactly. / 包内所有“近似为零”的比较都从 :class:`CurveConfig` 读取阈值，而不是直接比较浮点数是否相等。
"""
from __future__ import annotations

from dataclasses import dataclass

EPSILON = 1e-10


@dataclass(frozen=True)
class CurveConfig:
    """Tolerances and sampling defaults. / 容差与采样的默认设置。"""

    epsilon: float = EPSILON  # threshold below which a value counts as zero / 小于该阈值视为零
    arc_length_steps: int = 1000
    sample_count: int = 64

    def validate(self) -> None:
        if self.epsilon <= 0:
            raise ValueError("epsilon must be positive")
        if self.arc_length_steps < 1:
            raise ValueError("arc_length_steps must be at least 1")
        if self.sample_count < 2:
            raise ValueError("sample_count must be at least 2 to include both endpoints")


DEFAULT_CONFIG = CurveConfig()


def resolve_config(config: CurveConfig | None) -> CurveConfig:
    """Return ``config`` validated, or the package default. / 返回校验后的 ``config``，缺省时返回包默认配置。"""

    if config is None:
        return DEFAULT_CONFIG
    config.validate()
    return config


__all__ = ["CurveConfig", "DEFAULT_CONFIG", "EPSILON", "resolve_config"]
