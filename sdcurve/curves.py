from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, NamedTuple

import numpy as np
import pandas as pd

from .errors import InvalidCurveError, InvalidInputError


# ==================================================================================================
# Curve types
# ==================================================================================================

class Point(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True)
class Curve:
    """
    Piecewise-linear curve given by its points in drawing order.

    Invariants (checked on construction):
      * at least two points
      * every coordinate is a finite float
    """

    points: tuple[Point, ...]

    def __post_init__(self):
        try:
            points = tuple(Point(float(x), float(y)) for x, y in self.points)
        except (TypeError, ValueError):
            raise InvalidCurveError(f"curve points must be (x, y) number pairs: {self.points!r}") from None
        object.__setattr__(self, "points", points)
        if len(points) < 2:
            raise InvalidCurveError(f"a curve needs at least 2 points, got {len(points)}")
        for p in points:
            if not (math.isfinite(p.x) and math.isfinite(p.y)):
                raise InvalidCurveError(f"curve has a non-finite point: ({p.x}, {p.y})")

    @classmethod
    def from_points(cls, points: Iterable) -> "Curve":
        out = []
        for item in points:
            try:
                x, y = item
                out.append(Point(float(x), float(y)))
            except (TypeError, ValueError):
                raise InvalidInputError(
                    f"only curve data is accepted: {item!r} is not an (x, y) pair"
                ) from None
        return cls(tuple(out))

    @classmethod
    def from_frame(cls, df: pd.DataFrame) -> "Curve":
        """Build from a DataFrame with `x`/`y` columns (or its first two columns)."""
        if {"x", "y"}.issubset(df.columns):
            cols = df[["x", "y"]]
        elif df.shape[1] >= 2:
            cols = df.iloc[:, :2]
        else:
            raise InvalidInputError("only curve data is accepted: a curve table needs x and y columns")
        numeric = cols.apply(pd.to_numeric, errors="coerce")
        # blanks stay NaN (rejected as non-finite); text that is not a number is not curve data
        text = numeric.isna() & cols.notna()
        if text.any().any():
            bad = cols.to_numpy()[text.to_numpy()][0]
            raise InvalidInputError(f"only curve data is accepted: {bad!r} is not a number")
        xs = numeric.iloc[:, 0].to_numpy(dtype=float)
        ys = numeric.iloc[:, 1].to_numpy(dtype=float)
        return cls(tuple(Point(float(x), float(y)) for x, y in zip(xs, ys)))

    @property
    def xs(self) -> np.ndarray:
        return np.asarray([p.x for p in self.points], float)

    @property
    def ys(self) -> np.ndarray:
        return np.asarray([p.y for p in self.points], float)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({"x": self.xs, "y": self.ys})

    def max_coordinate(self) -> float:
        return float(max(self.xs.max(), self.ys.max()))


def as_curve(obj) -> Curve:
    """Coerce a Curve, DataFrame, (n, 2) array or sequence of (x, y) pairs into a Curve."""
    if isinstance(obj, Curve):
        return obj
    if isinstance(obj, pd.DataFrame):
        return Curve.from_frame(obj)
    if isinstance(obj, np.ndarray):
        if obj.ndim != 2 or obj.shape[1] != 2:
            raise InvalidInputError(f"only curve data is accepted: array of shape {obj.shape}")
        return Curve.from_points(obj.tolist())
    if isinstance(obj, (list, tuple)):
        return Curve.from_points(obj)
    raise InvalidInputError(f"only curve data is accepted, got {type(obj).__name__}")


def function_of_x(curve: Curve) -> tuple[np.ndarray, np.ndarray]:
    """
    Sorted (x, y) arrays suitable for np.interp.

    Points sharing the same x collapse into one point at their mean y.
    """
    df = curve.to_frame().groupby("x", sort=True, as_index=False)["y"].mean()
    return df["x"].to_numpy(dtype=float), df["y"].to_numpy(dtype=float)


def interpolate(curve: Curve, x: float) -> float:
    xs, ys = function_of_x(curve)
    return float(np.interp(x, xs, ys))


# ==================================================================================================
# Built-in curves
# ==================================================================================================

BEZIER_EVALUATION = 100


def bezier(x, y, evaluation: int = BEZIER_EVALUATION) -> Curve:
    """
    Bezier curve through the given control points.

    B(t) = sum_i C(n, i) (1-t)^(n-i) t^i P_i,   t in [0, 1]
    """
    cx = np.asarray(x, float)
    cy = np.asarray(y, float)
    n = len(cx) - 1
    t = np.linspace(0.0, 1.0, evaluation)
    weights = np.array([math.comb(n, i) * (1 - t) ** (n - i) * t ** i for i in range(n + 1)])
    bx = weights.T @ cx
    by = weights.T @ cy
    return Curve(tuple(Point(float(a), float(b)) for a, b in zip(bx, by)))


def default_curves(xmax: float = 9, ymax: float = 9) -> tuple[Curve, Curve]:
    """The sample supply (upward) and demand (downward) curves used when none are given."""
    supply = bezier([1, 8, xmax], [1, 5, xmax])
    demand = bezier([1, 3, xmax], [ymax, 3, 1])
    return supply, demand
