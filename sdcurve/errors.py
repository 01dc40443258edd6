"""Errors raised while validating curves or building a chart."""


class SDCurveError(ValueError):
    """Base class for every error raised by sdcurve."""


class InvalidInputError(SDCurveError):
    """Non-curve data passed as a curve, or per-curve options of the wrong length."""


class InvalidCurveError(SDCurveError):
    """A curve with fewer than two points or non-finite coordinates."""


class OddCurveCountError(SDCurveError):
    """Equilibrium requested but the curves do not form supply/demand pairs."""


class NoIntersectionError(SDCurveError):
    """A supply/demand pair does not cross inside the x-range both curves share."""


class InvalidBoundsError(SDCurveError):
    """Price floor at or above the price ceiling."""
