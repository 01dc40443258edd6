"""
Supply & demand chart builder.

build_chart() turns curves + ChartOptions into a ChartDescription: an
immutable, ordered set of layers (lines, equilibrium overlays, price bounds,
curve labels), two axis scales and a style block. Nothing is drawn here;
render.render() maps the description onto a plotly Figure.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

import pandas as pd

from .curves import Curve, Point, default_curves, interpolate
from .errors import InvalidBoundsError, InvalidInputError, OddCurveCountError
from .intersect import intersect_pairs
from .options import (
    DROP_LINE_DASH,
    LABEL_X_OFFSET,
    LINE_WIDTH,
    MARGIN,
    POINT_SIZE,
    TICK_DECIMALS,
    TITLE_SCALE,
    ChartOptions,
    palette_color,
)

logger = logging.getLogger(__name__)


# ==================================================================================================
# Layers
# ==================================================================================================

@dataclass(frozen=True)
class LineLayer:
    curve: Curve
    color: str
    role: str  # "supply" | "demand"
    width: float = LINE_WIDTH


@dataclass(frozen=True)
class SegmentLayer:
    x: float
    y: float
    xend: float
    yend: float
    kind: str  # "drop-x" | "drop-y" | "ceiling" | "floor"
    dash: str = DROP_LINE_DASH
    color: str = "black"


@dataclass(frozen=True)
class PointLayer:
    x: float
    y: float
    size: float = POINT_SIZE
    color: str = "black"


@dataclass(frozen=True)
class LabelLayer:
    x: float
    y: float
    text: str
    fill: str
    color: str = "white"


Layer = Union[LineLayer, SegmentLayer, PointLayer, LabelLayer]


@dataclass(frozen=True)
class AxisScale:
    range: tuple[float, float]
    tickvals: Optional[tuple[float, ...]] = None
    ticktext: Optional[tuple[str, ...]] = None
    title: Optional[str] = None


@dataclass(frozen=True)
class ChartStyle:
    title: Optional[str] = None
    subtitle: Optional[str] = None
    bg_color: str = "white"
    title_scale: float = TITLE_SCALE
    margin: tuple[tuple[str, int], ...] = tuple(MARGIN.items())
    theme: str = "classic"


@dataclass(frozen=True)
class ChartDescription:
    layers: tuple[Layer, ...]
    x_axis: AxisScale
    y_axis: AxisScale
    style: ChartStyle = field(default_factory=ChartStyle)
    intersections: tuple[Point, ...] = ()

    def with_layers(self, *layers: Layer) -> "ChartDescription":
        """New description with `layers` drawn on top of the existing ones."""
        return dataclasses.replace(self, layers=self.layers + tuple(layers))

    def layers_of(self, kind: type) -> list:
        return [layer for layer in self.layers if isinstance(layer, kind)]


# ==================================================================================================
# Helpers
# ==================================================================================================

def _round_label(v: float) -> str:
    return f"{round(v, TICK_DECIMALS):.{TICK_DECIMALS}f}".rstrip("0").rstrip(".")


def _resolve_curves(curves: Optional[Sequence[Curve]], opts: ChartOptions) -> list[Curve]:
    if not curves:
        return list(default_curves(opts.xmax, opts.ymax))
    curves = list(curves)
    for c in curves:
        if not isinstance(c, Curve):
            raise InvalidInputError(
                f"only curve data is accepted, got {type(c).__name__}; use as_curve() to convert tables"
            )
    return curves


def _validate(curves: list[Curve], opts: ChartOptions) -> None:
    if opts.max_price is not None and opts.min_price is not None:
        if opts.min_price >= opts.max_price:
            raise InvalidBoundsError(
                f"max_price ({opts.max_price}) must be greater than min_price ({opts.min_price})"
            )
    if opts.names is not None and len(opts.names) != len(curves):
        raise InvalidInputError(f"got {len(opts.names)} names for {len(curves)} curves")
    if opts.lines_color is not None and len(opts.lines_color) != len(curves):
        raise InvalidInputError(f"got {len(opts.lines_color)} colors for {len(curves)} curves")
    if opts.equilibrium and len(curves) % 2 != 0:
        raise OddCurveCountError(
            f"equilibrium needs supply/demand pairs, got {len(curves)} curves"
        )


def _role(i: int) -> str:
    # first curve is a supply curve, then they alternate
    return "supply" if i % 2 == 0 else "demand"


def _ticks(points: list[Point], generic: bool):
    xs = pd.unique(pd.Series([p.x for p in points], dtype=float)).tolist()
    ys = pd.unique(pd.Series([p.y for p in points], dtype=float).round(TICK_DECIMALS)).tolist()
    if generic:
        xt = [f"Q{i}" for i in range(1, len(xs) + 1)]
        yt = [f"P{i}" for i in range(1, len(ys) + 1)]
    else:
        xt = [_round_label(v) for v in xs]
        yt = [_round_label(v) for v in ys]
    return (tuple(xs), tuple(xt)), (tuple(ys), tuple(yt))


def equilibrium_table(chart: ChartDescription) -> pd.DataFrame:
    """Intersections of a chart as a table, one row per supply/demand pair."""
    return pd.DataFrame(
        {
            "pair": range(1, len(chart.intersections) + 1),
            "x": [p.x for p in chart.intersections],
            "y": [p.y for p in chart.intersections],
        }
    )


# ==================================================================================================
# Builder
# ==================================================================================================

def build_chart(
    curves: Optional[Sequence[Curve]] = None,
    options: Optional[ChartOptions] = None,
    **overrides,
) -> ChartDescription:
    """
    Build the description of a supply & demand chart.

    curves: supply, demand, supply, demand, ... (empty → the default pair)
    options: ChartOptions; keyword overrides replace individual fields.
    """
    opts = options or ChartOptions()
    if overrides:
        opts = dataclasses.replace(opts, **overrides)

    curves = _resolve_curves(curves, opts)
    _validate(curves, opts)

    points = intersect_pairs(curves) if opts.equilibrium else []
    top = max(c.max_coordinate() for c in curves)
    colors = list(opts.lines_color) if opts.lines_color is not None else [
        palette_color(i) for i in range(len(curves))
    ]

    layers: list[Layer] = []
    for i, c in enumerate(curves):
        layers.append(LineLayer(curve=c, color=colors[i], role=_role(i)))

    for p in points:
        layers.append(PointLayer(x=p.x, y=p.y))
        layers.append(SegmentLayer(x=p.x, y=0.0, xend=p.x, yend=p.y, kind="drop-x"))
        layers.append(SegmentLayer(x=0.0, y=p.y, xend=p.x, yend=p.y, kind="drop-y"))

    for price, kind in ((opts.max_price, "ceiling"), (opts.min_price, "floor")):
        if price is not None:
            layers.append(SegmentLayer(x=0.0, y=float(price), xend=top, yend=float(price), kind=kind))

    if opts.curve_names:
        for i, c in enumerate(curves):
            # stay on the curve when it is narrower than the offset
            lx = max(float(c.xs.max()) - LABEL_X_OFFSET, float(c.xs.min()))
            text = opts.names[i] if opts.names is not None else ("S" if _role(i) == "supply" else "D")
            layers.append(LabelLayer(x=lx, y=interpolate(c, lx), text=str(text), fill=palette_color(i)))

    axis_range = (0.0, top + 1.0)
    if points:
        (xv, xt), (yv, yt) = _ticks(points, opts.generic)
        x_axis = AxisScale(range=axis_range, tickvals=xv, ticktext=xt, title=opts.xlab)
        y_axis = AxisScale(range=axis_range, tickvals=yv, ticktext=yt, title=opts.ylab)
    else:
        x_axis = AxisScale(range=axis_range, title=opts.xlab)
        y_axis = AxisScale(range=axis_range, title=opts.ylab)

    chart = ChartDescription(
        layers=tuple(layers),
        x_axis=x_axis,
        y_axis=y_axis,
        style=ChartStyle(title=opts.main, subtitle=opts.sub, bg_color=opts.bg_color),
        intersections=tuple(points),
    )
    if points:
        logger.debug("equilibrium points:\n%s", equilibrium_table(chart).to_string(index=False))
    logger.debug("built chart: %d curves, %d layers", len(curves), len(chart.layers))
    return chart
