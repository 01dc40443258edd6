import numpy as np
import plotly.graph_objects as go
import pytest

from sdcurve import (
    InvalidInputError,
    OddCurveCountError,
    SegmentLayer,
    build_chart,
    market_examples,
    render,
    sdcurve,
)


@pytest.fixture
def frames():
    return market_examples()["Single market (S: y=x, D: y=9-x)"]


def test_sdcurve_returns_figure(frames):
    fig = sdcurve(*frames)
    assert isinstance(fig, go.Figure)
    # two curves + one equilibrium marker
    assert len(fig.data) == 3
    np.testing.assert_allclose(fig.data[0].x, [1, 9])
    assert fig.data[0].line.color == "black"
    assert fig.data[2].mode == "markers"


def test_axes(frames):
    fig = sdcurve(*frames)
    assert list(fig.layout.xaxis.range) == [0.0, 10.0]
    assert list(fig.layout.xaxis.tickvals) == [4.5]
    assert list(fig.layout.xaxis.ticktext) == ["Q<sub>1</sub>"]
    assert list(fig.layout.yaxis.ticktext) == ["P<sub>1</sub>"]
    assert fig.layout.xaxis.showgrid is False


def test_numeric_axes(frames):
    fig = sdcurve(*frames, generic=False)
    assert list(fig.layout.xaxis.ticktext) == ["4.5"]


def test_segments_become_shapes(frames):
    fig = sdcurve(*frames, max_price=7, min_price=2)
    assert len(fig.layout.shapes) == 4
    assert {s.line.dash for s in fig.layout.shapes} == {"dot"}


def test_labels_become_annotations(frames):
    fig = sdcurve(*frames, names=["S1", "D1"])
    texts = [a.text for a in fig.layout.annotations]
    assert texts == ["S<sub>1</sub>", "D<sub>1</sub>"]
    assert fig.layout.annotations[1].bgcolor == "#DF536B"


def test_titles_and_background(frames):
    fig = sdcurve(*frames, main="Coffee", sub="per day", xlab="Q", ylab="P", bg_color="#fff3cd")
    assert fig.layout.title.text == "Coffee<br><sup>per day</sup>"
    assert fig.layout.paper_bgcolor == "#fff3cd"
    texts = [a.text for a in fig.layout.annotations]
    assert "Q" in texts and "P" in texts


def test_default_plot():
    fig = sdcurve()
    assert len(fig.data) == 3
    assert len(fig.data[0].x) == 100


def test_figure_stays_composable(frames):
    fig = sdcurve(*frames)
    before = len(fig.layout.annotations)
    fig.add_annotation(x=2.5, y=6.5, ax=3, ay=7, axref="x", ayref="y", text="", showarrow=True)
    assert len(fig.layout.annotations) == before + 1


def test_extended_description_renders():
    chart = build_chart()
    arrow = SegmentLayer(x=2.5, y=6.5, xend=3.0, yend=7.0, kind="arrow", dash="solid", color="grey")
    fig = render(chart.with_layers(arrow))
    assert fig.layout.shapes[-1].line.color == "grey"


def test_errors_surface(frames):
    with pytest.raises(OddCurveCountError):
        sdcurve(*frames, frames[0])
    with pytest.raises(InvalidInputError):
        sdcurve(*frames, "demand")
