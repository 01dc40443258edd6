import numpy as np
import pandas as pd
import pytest

from sdcurve import (
    Curve,
    InvalidCurveError,
    NoIntersectionError,
    OddCurveCountError,
    intersect,
    intersect_pairs,
)
from sdcurve.intersect import crossings_on_grid


def _line_crossing(a, b):
    (x1, y1), (x2, y2) = a
    (x3, y3), (x4, y4) = b
    den = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / den
    return x1 + t * (x2 - x1), y1 + t * (y2 - y1)


@pytest.mark.parametrize(
    "a,b",
    [
        ([(1, 1), (9, 9)], [(7, 2), (2, 7)]),
        ([(0, 2), (10, 7)], [(0, 10), (10, 0)]),
        ([(2, 1), (8, 13)], [(1, 11), (9, 3)]),
        ([(0.5, 0.25), (3.0, 4.0)], [(0.0, 3.5), (4.0, 0.5)]),
    ],
)
def test_two_point_lines_match_algebra(a, b):
    p = intersect(a, b)
    ex, ey = _line_crossing(a, b)
    assert p.x == pytest.approx(ex, abs=1e-6)
    assert p.y == pytest.approx(ey, abs=1e-6)


def test_textbook_market():
    p = intersect([(1, 1), (9, 9)], [(7, 2), (2, 7)])
    assert p.x == pytest.approx(4.5)
    assert p.y == pytest.approx(4.5)


def test_parallel_lines_do_not_cross():
    with pytest.raises(NoIntersectionError):
        intersect([(0, 0), (1, 1)], [(0, 1), (1, 2)])


def test_disjoint_x_ranges():
    with pytest.raises(NoIntersectionError):
        intersect([(0, 0), (1, 1)], [(2, 5), (3, 0)])


def test_point_order_does_not_matter():
    assert intersect([(9, 9), (1, 1)], [(2, 7), (7, 2)]) == intersect([(1, 1), (9, 9)], [(7, 2), (2, 7)])


def test_piecewise_curves():
    supply = [(0, 1), (6, 4), (6.5, 9)]
    demand = [(1, 8), (8, 1)]
    p = intersect(supply, demand)
    assert p.x == pytest.approx(16 / 3)
    assert p.y == pytest.approx(9 - 16 / 3)


def test_leftmost_crossing_wins():
    wavy = [(0, 0), (2, 4), (4, 0), (6, 4)]
    flat = [(0, 2), (6, 2)]
    assert intersect(wavy, flat).x == pytest.approx(1.0)


def test_touching_at_a_vertex():
    p = intersect([(0, 0), (2, 2), (4, 0)], [(0, 2), (4, 2)])
    assert p == (pytest.approx(2.0), pytest.approx(2.0))


def test_accepts_frames_and_curves():
    s = pd.DataFrame({"x": [1, 9], "y": [1, 9]})
    d = Curve.from_points([(7, 2), (2, 7)])
    assert intersect(s, d).x == pytest.approx(4.5)


def test_invalid_curves():
    with pytest.raises(InvalidCurveError):
        intersect([(1, 1)], [(0, 5), (5, 0)])
    with pytest.raises(InvalidCurveError):
        intersect([(0, 0), (1, np.inf)], [(0, 5), (5, 0)])
    with pytest.raises(InvalidCurveError):
        intersect(pd.DataFrame({"x": [0, 1], "y": [0, None]}), [(0, 5), (5, 0)])


def test_pairs_in_order():
    curves = [
        Curve.from_points([(1, 1), (9, 9)]),
        Curve.from_points([(7, 2), (2, 7)]),
        Curve.from_points([(2, 1), (10, 9)]),
        Curve.from_points([(8, 2), (2, 8)]),
    ]
    points = intersect_pairs(curves)
    assert [p.x for p in points] == [pytest.approx(4.5), pytest.approx(5.5)]
    assert [p.y for p in points] == [pytest.approx(4.5), pytest.approx(4.5)]


def test_pairs_need_even_count():
    with pytest.raises(OddCurveCountError):
        intersect_pairs([Curve.from_points([(0, 0), (1, 1)])])


def test_crossings_on_grid():
    X = np.array([0.0, 1.0, 2.0, 3.0])
    D = np.array([-1.0, 1.0, 1.0, -1.0])
    assert crossings_on_grid(X, D) == [pytest.approx(0.5), pytest.approx(2.5)]
    assert crossings_on_grid(X, np.ones(4)) == []
