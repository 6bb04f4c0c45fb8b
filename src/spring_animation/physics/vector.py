from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from numbers import Real
from typing import Any, Callable, Generic, Protocol, TypeVar, runtime_checkable

import numpy as np

V = TypeVar("V")


@runtime_checkable
class VectorLike(Protocol):
    """Types that carry their own vector-space arithmetic.

    Implementers provide ``+``/``-`` with their own type, ``scaled`` by a
    float, ``magnitude_squared`` and a ``zero()`` classmethod.
    """

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def scaled(self, scalar: float) -> Any: ...

    @property
    def magnitude_squared(self) -> float: ...


@dataclass(frozen=True, slots=True)
class Point:
    """2D point; both axes integrate together as one vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def scaled(self, scalar: float) -> "Point":
        return Point(self.x * scalar, self.y * scalar)

    @property
    def magnitude_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    @classmethod
    def zero(cls) -> "Point":
        return cls(0.0, 0.0)


@dataclass(frozen=True, slots=True)
class VectorOps(Generic[V]):
    """Bundle of the vector-space operations a spring needs for one value type."""

    name: str
    add: Callable[[V, V], V]
    sub: Callable[[V, V], V]
    scale: Callable[[V, float], V]
    zero: Callable[[V], V]  # receives a sample value so shapes can be matched
    squared_magnitude: Callable[[V], float]


SCALAR_OPS: VectorOps[float] = VectorOps(
    name="scalar",
    add=lambda a, b: a + b,
    sub=lambda a, b: a - b,
    scale=lambda a, s: a * s,
    zero=lambda _sample: 0.0,
    squared_magnitude=lambda a: float(a * a),
)

POINT_OPS: VectorOps[Point] = VectorOps(
    name="point",
    add=lambda a, b: a + b,
    sub=lambda a, b: a - b,
    scale=lambda a, s: a.scaled(s),
    zero=lambda _sample: Point.zero(),
    squared_magnitude=lambda a: a.magnitude_squared,
)

ARRAY_OPS: VectorOps[np.ndarray] = VectorOps(
    name="array",
    add=lambda a, b: a + b,
    sub=lambda a, b: a - b,
    scale=lambda a, s: a * s,
    zero=lambda sample: np.zeros_like(sample, dtype=float),
    squared_magnitude=lambda a: float(np.dot(a.ravel(), a.ravel())),
)


@lru_cache(maxsize=None)
def _protocol_ops(value_type: type) -> VectorOps[Any]:
    return VectorOps(
        name=value_type.__name__,
        add=lambda a, b: a + b,
        sub=lambda a, b: a - b,
        scale=lambda a, s: a.scaled(s),
        zero=lambda _sample: value_type.zero(),
        squared_magnitude=lambda a: float(a.magnitude_squared),
    )


def ops_for(value: Any) -> VectorOps[Any]:
    """Resolve the vector operations for ``value``.

    Raises ``TypeError`` when the value is neither a real number, a numpy
    array nor a type implementing the vector protocol.
    """
    if isinstance(value, bool):
        raise TypeError("bool values cannot be animated")
    if isinstance(value, Real):
        return SCALAR_OPS
    if isinstance(value, Point):
        return POINT_OPS
    if isinstance(value, np.ndarray):
        if not np.issubdtype(value.dtype, np.number):
            raise TypeError(f"Array of dtype {value.dtype} cannot be animated")
        return ARRAY_OPS
    if isinstance(value, VectorLike) and callable(getattr(type(value), "zero", None)):
        return _protocol_ops(type(value))
    raise TypeError(f"No vector operations for values of type {type(value).__name__}")


def coerce_value(value: Any, ops: VectorOps[Any]) -> Any:
    """Normalise ints to floats and arrays to float copies so updates never alias."""
    if ops is SCALAR_OPS:
        return float(value)
    if ops is ARRAY_OPS:
        return np.array(value, dtype=float)
    return value


def coerce_like(value: Any, ops: VectorOps[Any], sample: Any) -> Any:
    """Coerce ``value`` for a spring whose state uses ``ops`` and matches ``sample``.

    Raises ``TypeError`` when ``value`` is another kind of vector and
    ``ValueError`` when an array's shape differs from ``sample``.
    """
    if ops_for(value) is not ops:
        raise TypeError(f"Expected a {ops.name} value, got {type(value).__name__}")
    result = coerce_value(value, ops)
    if ops is ARRAY_OPS and result.shape != sample.shape:
        raise ValueError(f"Expected an array of shape {sample.shape}, got {result.shape}")
    return result
