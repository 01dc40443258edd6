"""sdcurve - supply and demand curve charts for teaching economics."""

import logging

from .chart import (
    AxisScale,
    ChartDescription,
    ChartStyle,
    LabelLayer,
    LineLayer,
    PointLayer,
    SegmentLayer,
    build_chart,
    equilibrium_table,
)
from .curves import Curve, Point, as_curve, bezier, default_curves
from .errors import (
    InvalidBoundsError,
    InvalidCurveError,
    InvalidInputError,
    NoIntersectionError,
    OddCurveCountError,
    SDCurveError,
)
from .examples import market_examples
from .intersect import intersect, intersect_pairs
from .options import ChartOptions
from .render import render, sdcurve

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AxisScale",
    "ChartDescription",
    "ChartOptions",
    "ChartStyle",
    "Curve",
    "InvalidBoundsError",
    "InvalidCurveError",
    "InvalidInputError",
    "LabelLayer",
    "LineLayer",
    "NoIntersectionError",
    "OddCurveCountError",
    "Point",
    "PointLayer",
    "SDCurveError",
    "SegmentLayer",
    "as_curve",
    "bezier",
    "build_chart",
    "default_curves",
    "equilibrium_table",
    "intersect",
    "intersect_pairs",
    "market_examples",
    "render",
    "sdcurve",
]
