"""Slope rules that assign a target first derivative to each knot.

Every rule looks only at a knot and its immediate neighbours, which is what
lets :class:`~pyhermite.spline.CubicSpline` recompute slopes locally after
an insertion.
"""

from __future__ import annotations

import enum
from typing import Sequence

from pyhermite._linalg import SingularSystemError


class SplineStyle(enum.Enum):
    """How knot slopes are chosen.

    STANDARD
        Mean of the two adjacent secant slopes.
    MIDARC
        Secant across the two neighbours, ignoring the knot's own ordinate.
    MONOTONE
        Monotonicity-preserving slopes.  Not implemented: using it raises
        ``NotImplementedError``.
    """

    STANDARD = "standard"
    MIDARC = "midarc"
    MONOTONE = "monotone"

    @classmethod
    def parse(cls, value) -> "SplineStyle":
        """Return the style for *value* (a member or a case-insensitive name).

        Raises
        ------
        ValueError
            If *value* does not name a style.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace("_", "").replace("-", "")
            for style in cls:
                if style.value == key:
                    return style
        valid = ", ".join(repr(s.value) for s in cls)
        raise ValueError(f"Unknown spline style {value!r}; expected one of {valid}")


def _secant(xs: Sequence[float], ys: Sequence[float], i: int, j: int) -> float:
    dx = xs[j] - xs[i]
    if dx == 0:
        raise SingularSystemError(
            f"Knots {i} and {j} share x={xs[i]!r}; a zero-width segment "
            f"has no unique cubic fit"
        )
    return (ys[j] - ys[i]) / dx


def _boundary_slope(xs, ys, idx):
    if idx == 0:
        return _secant(xs, ys, 0, 1)
    return _secant(xs, ys, idx - 1, idx)


def standard_slope(xs: Sequence[float], ys: Sequence[float], idx: int) -> float:
    """Mean of the secants on either side of knot *idx*."""
    if len(xs) < 2:
        return 0.0
    if idx == 0 or idx == len(xs) - 1:
        return _boundary_slope(xs, ys, idx)
    left = _secant(xs, ys, idx - 1, idx)
    right = _secant(xs, ys, idx, idx + 1)
    return (left + right) / 2


def midarc_slope(xs: Sequence[float], ys: Sequence[float], idx: int) -> float:
    """Secant between the neighbours of knot *idx*."""
    if len(xs) < 2:
        return 0.0
    if idx == 0 or idx == len(xs) - 1:
        return _boundary_slope(xs, ys, idx)
    # a degenerate side is rejected even when the outer span is not
    _secant(xs, ys, idx - 1, idx)
    _secant(xs, ys, idx, idx + 1)
    return _secant(xs, ys, idx - 1, idx + 1)


def monotone_slope(xs: Sequence[float], ys: Sequence[float], idx: int) -> float:
    raise NotImplementedError("Monotone cubic splines are not implemented yet")


_SLOPE_RULES = {
    SplineStyle.STANDARD: standard_slope,
    SplineStyle.MIDARC: midarc_slope,
    SplineStyle.MONOTONE: monotone_slope,
}


def compute_slope(style: SplineStyle, xs: Sequence[float],
                  ys: Sequence[float], idx: int) -> float:
    """Slope at knot *idx* under *style*.

    Raises
    ------
    NotImplementedError
        For :attr:`SplineStyle.MONOTONE`.
    SingularSystemError
        If a secant next to the knot has zero width.
    ValueError
        If *style* is not a :class:`SplineStyle`.
    """
    try:
        rule = _SLOPE_RULES[style]
    except KeyError:
        raise ValueError(f"Unknown spline style {style!r}") from None
    return rule(xs, ys, idx)
