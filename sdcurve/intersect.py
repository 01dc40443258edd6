from __future__ import annotations

from typing import Sequence

import numpy as np

from .curves import Curve, Point, as_curve, function_of_x
from .errors import NoIntersectionError, OddCurveCountError


ZERO_ATOL = 1e-12


def crossings_on_grid(X: np.ndarray, D: np.ndarray) -> list[float]:
    """
    x positions where the piecewise-linear D(X) reaches zero.

    D is linear between consecutive grid points, so every sign flip brackets
    exactly one root, found by linear interpolation.
    """
    X = np.asarray(X, float)
    D = np.asarray(D, float)
    roots = X[np.isclose(D, 0.0, atol=ZERO_ATOL)].tolist()
    if len(X) < 2:
        return sorted(roots)
    idx = np.where(np.signbit(D[:-1]) != np.signbit(D[1:]))[0]
    for i in idx:
        x0, x1, d0, d1 = X[i], X[i + 1], D[i], D[i + 1]
        if d1 != d0:
            roots.append(x0 - d0 * (x1 - x0) / (d1 - d0))
    return sorted(float(x) for x in roots)


def intersect(curve_a, curve_b) -> Point:
    """
    Point where two piecewise-linear curves cross.

    Only the x-range both curves cover is searched. When the curves cross
    more than once the leftmost crossing is returned.
    """
    a = as_curve(curve_a)
    b = as_curve(curve_b)
    xa, ya = function_of_x(a)
    xb, yb = function_of_x(b)

    lo = max(xa[0], xb[0])
    hi = min(xa[-1], xb[-1])
    if lo > hi:
        raise NoIntersectionError(
            f"curves share no x-range: [{xa[0]:g}, {xa[-1]:g}] vs [{xb[0]:g}, {xb[-1]:g}]"
        )

    grid = np.union1d(xa, xb)
    grid = grid[(grid >= lo) & (grid <= hi)]
    grid = np.union1d(grid, [lo, hi])
    diff = np.interp(grid, xa, ya) - np.interp(grid, xb, yb)

    roots = crossings_on_grid(grid, diff)
    if not roots:
        raise NoIntersectionError(f"curves do not cross on x in [{lo:g}, {hi:g}]")
    x = roots[0]
    return Point(x, float(np.interp(x, xb, yb)))


def intersect_pairs(curves: Sequence[Curve]) -> list[Point]:
    """Intersections of (1st, 2nd), (3rd, 4th), ... in pair order."""
    if len(curves) % 2 != 0:
        raise OddCurveCountError(
            f"equilibrium needs supply/demand pairs, got {len(curves)} curves"
        )
    return [intersect(curves[i], curves[i + 1]) for i in range(0, len(curves), 2)]
