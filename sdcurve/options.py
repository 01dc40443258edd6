from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

# ==================================================================================================
# Defaults shared by the builder and the renderer
# ==================================================================================================

DEFAULT_XMAX = 9.0
DEFAULT_YMAX = 9.0

# Colors picked by curve index (first curve = index 0), cycled when there are more curves.
PALETTE = [
    "black",
    "#DF536B",
    "#61D04F",
    "#2297E6",
    "#28E2E5",
    "#CD0BBC",
    "#F5C710",
    "#9E9E9E",
]

LINE_WIDTH = 2.5
POINT_SIZE = 9
LABEL_FONT_SIZE = 13
TITLE_SCALE = 1.3
BASE_FONT_SIZE = 14
DROP_LINE_DASH = "dot"
LABEL_X_OFFSET = 0.5
TICK_DECIMALS = 2

# ChartStyle.theme -> plotly template
THEMES = {"classic": "simple_white"}

# 0.5cm / 1cm / 0.5cm / 0.5cm around the plot, in pixels.
MARGIN = dict(t=19, r=38, b=19, l=19)


def palette_color(i: int) -> str:
    return PALETTE[i % len(PALETTE)]


@dataclass(frozen=True)
class ChartOptions:
    """
    Everything that customises a supply & demand chart.

    `None` means "not given": default curves use `xmax`/`ymax`, a missing
    `max_price`/`min_price` draws no bound, missing `names` fall back to
    S/D, missing `lines_color` falls back to the palette.
    """

    xmax: float = DEFAULT_XMAX
    ymax: float = DEFAULT_YMAX
    max_price: Optional[float] = None
    min_price: Optional[float] = None
    generic: bool = True
    equilibrium: bool = True
    curve_names: bool = True
    names: Optional[Sequence[str]] = None
    lines_color: Optional[Sequence[str]] = None
    main: Optional[str] = None
    sub: Optional[str] = None
    xlab: Optional[str] = None
    ylab: Optional[str] = None
    bg_color: str = "white"
