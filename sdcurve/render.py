from __future__ import annotations

import re
from typing import Optional

import plotly.graph_objects as go

from .chart import (
    AxisScale,
    ChartDescription,
    LabelLayer,
    LineLayer,
    PointLayer,
    SegmentLayer,
    build_chart,
)
from .curves import as_curve
from .options import BASE_FONT_SIZE, LABEL_FONT_SIZE, THEMES, ChartOptions

_SYMBOL = re.compile(r"^([A-Za-z]+)(\d+)$")


def _subscript(text: str) -> str:
    """Q1 -> Q<sub>1</sub>; anything else is left alone."""
    return _SYMBOL.sub(r"\1<sub>\2</sub>", text)


def _axis(scale: AxisScale) -> dict:
    out = dict(
        range=list(scale.range),
        showgrid=False,
        zeroline=False,
        showline=True,
        linecolor="black",
        ticks="outside",
    )
    if scale.tickvals is not None:
        out.update(
            tickmode="array",
            tickvals=list(scale.tickvals),
            ticktext=[_subscript(t) for t in scale.ticktext],
        )
    else:
        out.update(tickmode="auto")
    return out


def render(chart: ChartDescription) -> go.Figure:
    """
    Draw a ChartDescription with plotly.

    The returned Figure is a normal plotly figure: callers can keep adding
    traces, shapes or annotations to it.
    """
    fig = go.Figure()

    for layer in chart.layers:
        if isinstance(layer, LineLayer):
            fig.add_trace(
                go.Scatter(
                    x=layer.curve.xs,
                    y=layer.curve.ys,
                    mode="lines",
                    name=layer.role.title(),
                    line=dict(color=layer.color, width=layer.width),
                    showlegend=False,
                )
            )
        elif isinstance(layer, SegmentLayer):
            fig.add_shape(
                type="line",
                x0=layer.x,
                y0=layer.y,
                x1=layer.xend,
                y1=layer.yend,
                line=dict(color=layer.color, width=1, dash=layer.dash),
            )
        elif isinstance(layer, PointLayer):
            fig.add_trace(
                go.Scatter(
                    x=[layer.x],
                    y=[layer.y],
                    mode="markers",
                    marker=dict(size=layer.size, color=layer.color),
                    hovertemplate="Q=%{x:.2f}<br>P=%{y:.2f}<extra></extra>",
                    showlegend=False,
                    cliponaxis=False,
                )
            )
        elif isinstance(layer, LabelLayer):
            fig.add_annotation(
                x=layer.x,
                y=layer.y,
                text=_subscript(layer.text),
                showarrow=False,
                bgcolor=layer.fill,
                borderpad=4,
                font=dict(color=layer.color, size=LABEL_FONT_SIZE),
            )
        else:
            raise TypeError(f"cannot render layer of type {type(layer).__name__}")

    # axis titles sit horizontally at the far end of each axis
    if chart.x_axis.title:
        fig.add_annotation(
            xref="paper", yref="paper", x=1, y=0, text=chart.x_axis.title,
            showarrow=False, xanchor="right", yanchor="top", yshift=-28,
        )
    if chart.y_axis.title:
        fig.add_annotation(
            xref="paper", yref="paper", x=0, y=1, text=chart.y_axis.title,
            showarrow=False, xanchor="right", yanchor="bottom", xshift=-10,
        )

    style = chart.style
    margin = dict(style.margin)
    margin["t"] += 30 if chart.y_axis.title else 0
    margin["b"] += 40 if chart.x_axis.title else 20
    margin["l"] += 30
    layout = dict(
        template=THEMES[style.theme],
        paper_bgcolor=style.bg_color,
        plot_bgcolor="white",
        font=dict(size=BASE_FONT_SIZE),
        showlegend=False,
        hovermode="closest",
    )
    if style.title or style.subtitle:
        text = style.title or ""
        if style.subtitle:
            text += f"<br><sup>{style.subtitle}</sup>"
        layout["title"] = dict(text=text, font=dict(size=BASE_FONT_SIZE * style.title_scale), x=0, xanchor="left")
        margin["t"] += 60

    fig.update_layout(margin=margin, **layout)
    fig.update_xaxes(**_axis(chart.x_axis))
    fig.update_yaxes(**_axis(chart.y_axis))
    return fig


def sdcurve(*curves, options: Optional[ChartOptions] = None, **kwargs) -> go.Figure:
    """
    Supply and demand chart in one call.

    Curves are given supply first (supply, demand, supply, demand, ...) as
    DataFrames with x/y columns, (x, y) point lists or Curve objects; with no
    curves the default pair is drawn. Keyword arguments are ChartOptions
    fields (xmax, ymax, max_price, min_price, generic, equilibrium,
    curve_names, names, lines_color, main, sub, xlab, ylab, bg_color).
    """
    chart = build_chart([as_curve(c) for c in curves], options, **kwargs)
    return render(chart)
