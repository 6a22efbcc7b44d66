"""Point capability consumed by the curve types. / 曲线类型所依赖的点能力接口。

The curves never look inside a point: they only add, subtract, scale, read single axes and take
squared lengths. / 曲线从不关心点的内部结构：只做加、减、数乘、读取单个坐标轴以及求平方长度。
Any class providing those operations satisfies :class:`Point`, so applications can pass their own
vector types. / 任何提供这些运算的类都满足 :class:`Point` 协议，因此应用可以直接使用自己的向量类型。
:class:`PointN` is the reference implementation backed by a 1-D ``float64`` PyTorch tensor. /
:class:`PointN` 是参考实现，内部使用一维 ``float64`` PyTorch 张量存储坐标。
"""
from __future__ import annotations

import math
from typing import Iterable, Iterator, Protocol, Sequence, TypeVar, Union, runtime_checkable

import torch

Tensor = torch.Tensor

P = TypeVar("P", bound="Point")


@runtime_checkable
class Point(Protocol):
    """Structural interface for fixed-dimension points. / 固定维度点的结构化接口。"""

    @property
    def dim(self) -> int:
        ...

    def __add__(self: P, other: P) -> P:
        ...

    def __sub__(self: P, other: P) -> P:
        ...

    def __mul__(self: P, scalar: float) -> P:
        ...

    def axis(self, index: int) -> float:
        ...

    def squared_length(self) -> float:
        ...

    def zero_like(self: P) -> P:
        ...


class PointN:
    """Immutable point with ``dim`` coordinates. / 具有 ``dim`` 个坐标的不可变点。

    Coordinates are copied into a fresh ``float64`` tensor on construction, so a point never aliases
    caller-owned storage. / 构造时坐标会被复制到新的 ``float64`` 张量中，因此点不会与调用方的数据共享内存。
    """

    __slots__ = ("_coords",)

    def __init__(self, coords: Union[Sequence[float], Tensor]):
        if isinstance(coords, Tensor):
            tensor = coords.detach().to(dtype=torch.float64).clone()
        else:
            tensor = torch.tensor([float(c) for c in coords], dtype=torch.float64)
        if tensor.dim() != 1:
            raise ValueError(f"PointN expects a 1-D coordinate vector. Received shape {tuple(tensor.shape)}")
        if tensor.numel() == 0:
            raise ValueError("PointN needs at least one coordinate")
        self._coords = tensor

    @classmethod
    def _wrap(cls, tensor: Tensor) -> "PointN":
        # Arithmetic results are already fresh tensors; skip the defensive copy.
        point = cls.__new__(cls)
        point._coords = tensor
        return point

    @classmethod
    def zeros(cls, dim: int) -> "PointN":
        if dim < 1:
            raise ValueError("dim must be at least 1")
        return cls._wrap(torch.zeros(dim, dtype=torch.float64))

    @property
    def dim(self) -> int:
        return self._coords.shape[0]

    def zero_like(self) -> "PointN":
        return PointN.zeros(self.dim)

    def _check_dim(self, other: "PointN") -> None:
        if not isinstance(other, PointN):
            raise TypeError(f"Expected PointN, got {type(other).__name__}")
        if other.dim != self.dim:
            raise ValueError(f"Dimension mismatch: {self.dim} vs {other.dim}")

    def __add__(self, other: "PointN") -> "PointN":
        self._check_dim(other)
        return PointN._wrap(self._coords + other._coords)

    def __sub__(self, other: "PointN") -> "PointN":
        self._check_dim(other)
        return PointN._wrap(self._coords - other._coords)

    def __mul__(self, scalar: float) -> "PointN":
        return PointN._wrap(self._coords * float(scalar))

    __rmul__ = __mul__

    def __neg__(self) -> "PointN":
        return PointN._wrap(-self._coords)

    def axis(self, index: int) -> float:
        """Read a single coordinate as a Python float. / 以 Python 浮点数读取单个坐标。"""

        if not 0 <= index < self.dim:
            raise IndexError(f"axis {index} out of range for a {self.dim}-D point")
        return float(self._coords[index])

    def squared_length(self) -> float:
        return float(torch.dot(self._coords, self._coords))

    def length(self) -> float:
        return math.sqrt(self.squared_length())

    def distance(self, other: "PointN") -> float:
        return (self - other).length()

    def as_tensor(self) -> Tensor:
        return self._coords.clone()

    def __iter__(self) -> Iterator[float]:
        return iter(self._coords.tolist())

    def __len__(self) -> int:
        return self.dim

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PointN):
            return NotImplemented
        return self.dim == other.dim and bool(torch.equal(self._coords, other._coords))

    def __hash__(self) -> int:
        return hash(tuple(self._coords.tolist()))

    def isclose(self, other: "PointN", abs_tol: float) -> bool:
        """Per-axis comparison within ``abs_tol``. / 在 ``abs_tol`` 范围内逐轴比较。"""

        self._check_dim(other)
        return bool(torch.all(torch.abs(self._coords - other._coords) <= abs_tol))

    def __repr__(self) -> str:
        return f"PointN({self._coords.tolist()})"


def stack_points(points: Iterable[Point]) -> Tensor:
    """Pack points into a ``(len(points), dim)`` float64 tensor. / 将点打包为 ``(len(points), dim)`` 的 float64 张量。

    Only :meth:`Point.axis` is used, so foreign point types work too. / 只调用 :meth:`Point.axis`，因此也适用于其他点类型。
    """

    rows = [[p.axis(i) for i in range(p.dim)] for p in points]
    if not rows:
        raise ValueError("stack_points needs at least one point")
    return torch.tensor(rows, dtype=torch.float64)


__all__ = ["Point", "PointN", "stack_points"]
