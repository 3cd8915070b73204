"""Incremental piecewise-cubic Hermite interpolation.

Knots are inserted one at a time.  Each knot gets a slope from the spline's
:class:`~pyhermite._slopes.SplineStyle`, and each interval between
consecutive knots gets a :class:`~pyhermite.polynomial.CubicPolynomial`
matching the values and slopes at both ends.  Because a knot's slope only
depends on its immediate neighbours, an insertion recomputes at most three
slopes and refits at most four segments.

References
----------
- Fritsch & Carlson (1980), "Monotone Piecewise Cubic Interpolation",
  SIAM J. Numer. Anal. 17(2):238-246 (cubic Hermite form, slope choices).
"""

from __future__ import annotations

import math
import time
import warnings
from typing import Callable, List, Sequence, Tuple

import numpy as np

from pyhermite._kahan import CompensatedSum
from pyhermite._slopes import SplineStyle, compute_slope
from pyhermite.polynomial import CubicPolynomial


class CubicSpline:
    """Piecewise cubic spline, continuous up to the first derivative.

    Parameters
    ----------
    style : SplineStyle or str, optional
        Slope rule used for every knot (default ``SplineStyle.STANDARD``).

    Raises
    ------
    ValueError
        If *style* does not name a :class:`SplineStyle`.

    Notes
    -----
    With no knots every query returns 0.  With a single knot ``(x0, y0)``
    the spline is the constant ``y0``.  Queries outside the knot range
    extrapolate with the nearest boundary segment.

    A spline is not safe to mutate from several threads at once.
    Concurrent queries without a concurrent :meth:`add` are fine.

    Examples
    --------
    >>> sp = CubicSpline()
    >>> for x, y in [(0.0, 0.0), (1.0, 1.0), (2.0, 0.0)]:
    ...     sp.add(x, y)
    >>> round(sp.eval(1.0), 12)
    1.0
    >>> sp.slopes
    [1.0, 0.0, -1.0]
    """

    def __init__(self, style: SplineStyle | str = SplineStyle.STANDARD):
        self._style = SplineStyle.parse(style)
        self._x: List[float] = []
        self._y: List[float] = []
        self._slopes: List[float] = []
        self._segments: List[CubicPolynomial] = []

    @classmethod
    def from_points(
        cls,
        xs: Sequence[float],
        ys: Sequence[float],
        style: SplineStyle | str = SplineStyle.STANDARD,
        verbose: bool = False,
    ) -> "CubicSpline":
        """Build a spline by adding each ``(xs[i], ys[i])`` in turn.

        Parameters
        ----------
        xs, ys : sequence of float
            Knot coordinates.  Order does not matter; a ``UserWarning`` is
            issued if *xs* is not sorted.
        style : SplineStyle or str, optional
            Slope rule (default standard).
        verbose : bool, optional
            If True, print a build summary.  Default is False.

        Returns
        -------
        CubicSpline

        Raises
        ------
        ValueError
            If *xs* and *ys* differ in length, or any coordinate is NaN/Inf.
        SingularSystemError
            If two knots share an x value.
        """
        xs = np.asarray(xs, dtype=float).ravel()
        ys = np.asarray(ys, dtype=float).ravel()
        if xs.shape != ys.shape:
            raise ValueError(
                f"xs and ys must have the same length, got {xs.size} and {ys.size}"
            )
        if xs.size > 1 and np.any(np.diff(xs) < 0):
            warnings.warn(
                "xs is not sorted; knots will be placed in sorted order.",
                UserWarning,
                stacklevel=2,
            )

        start = time.time()
        spline = cls(style)
        for x, y in zip(xs, ys):
            spline.add(float(x), float(y))
        elapsed = time.time() - start

        if verbose:
            print(
                f"Built {spline._style.value} cubic spline "
                f"({spline.num_knots} knots, {spline.num_segments} segments) "
                f"in {elapsed:.3f}s"
            )
        return spline

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------

    def add(self, x: float, y: float) -> None:
        """Insert the knot ``(x, y)`` and refit the affected segments.

        The knot goes before any existing knot with the same x.  Slopes are
        recomputed at the new knot and its neighbours; the segments on each
        side of the new knot and the next segment beyond each neighbour are
        refitted.

        The insertion is all-or-nothing: if any slope or fit fails, the
        spline is left exactly as it was and the exception propagates.

        Raises
        ------
        ValueError
            If *x* or *y* is NaN or infinite.
        NotImplementedError
            If the spline uses :attr:`SplineStyle.MONOTONE`.
        SingularSystemError
            If the knot duplicates an existing x, or a segment system is too
            ill-conditioned to fit.
        """
        x = float(x)
        y = float(y)
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError(f"Knot ({x}, {y}) must be finite")

        idx = int(np.searchsorted(self._x, x, side="left"))
        self._x.insert(idx, x)
        self._y.insert(idx, y)
        self._slopes.insert(idx, 0.0)
        n = len(self._x)

        touched = [i for i in (idx - 1, idx, idx + 1) if 0 <= i < n]
        previous = {i: self._slopes[i] for i in touched}
        try:
            for i in touched:
                self._slopes[i] = compute_slope(self._style, self._x, self._y, i)
            fitted = {j: self._fit_segment(j) for j in self._refit_indices(idx, n)}
        except BaseException:
            for i, slope in previous.items():
                self._slopes[i] = slope
            del self._x[idx]
            del self._y[idx]
            del self._slopes[idx]
            raise

        if n > 1:
            self._segments.insert(idx, None)
        for j, poly in fitted.items():
            self._segments[j] = poly

    @staticmethod
    def _refit_indices(idx: int, n: int) -> List[int]:
        """Segments to refit after inserting knot *idx* into *n* knots."""
        indices = []
        if idx > 0:
            indices.append(idx - 1)
            if idx > 1:
                indices.append(idx - 2)
        if idx < n - 1:
            indices.append(idx)
            if idx < n - 2:
                indices.append(idx + 1)
        return indices

    def _fit_segment(self, j: int) -> CubicPolynomial:
        return CubicPolynomial.fit_hermite(
            self._x[j], self._x[j + 1],
            self._y[j], self._y[j + 1],
            self._slopes[j], self._slopes[j + 1],
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def _segment_index(self, x: float) -> int:
        idx = int(np.searchsorted(self._x, x, side="left")) - 1
        return min(max(idx, 0), len(self._segments) - 1)

    def eval(self, x: float) -> float:
        """Evaluate the spline at *x*.

        Returns 0 for an empty spline and the constant knot value for a
        single-knot spline.
        """
        if len(self._y) == 1:
            return self._y[0]
        if not self._y:
            return 0.0
        return self._segments[self._segment_index(x)].eval(x)

    def deriv(self, x: float) -> float:
        """Evaluate the first derivative of the spline at *x*."""
        if len(self._y) < 2:
            return 0.0
        return self._segments[self._segment_index(x)].deriv(x)

    def integ(self, x1: float, x2: float) -> float:
        """Definite integral of the spline from *x1* to *x2*.

        ``integ(x2, x1)`` is computed as ``-integ(x1, x2)``.  Segment
        contributions are added with compensated summation.
        """
        if x1 == x2:
            return 0.0
        if x1 > x2:
            return -self.integ(x2, x1)
        if len(self._y) == 1:
            return self._y[0] * (x2 - x1)
        if not self._y:
            return 0.0

        first = self._segment_index(x1)
        last = self._segment_index(x2)
        acc = CompensatedSum()
        for i in range(first, last + 1):
            lo = x1 if i == first else self._x[i]
            hi = x2 if i == last else self._x[i + 1]
            acc.add(self._segments[i].integ(lo, hi))
        return acc.sum()

    def _batch(self, xs, method: Callable, empty, single) -> np.ndarray:
        xs = np.asarray(xs, dtype=float)
        if len(self._y) < 2:
            value = single if len(self._y) == 1 else empty
            return np.full(xs.shape, value, dtype=float)

        flat = xs.ravel()
        results = np.empty(flat.shape, dtype=float)
        seg_idx = np.searchsorted(self._x, flat, side="left") - 1
        np.clip(seg_idx, 0, len(self._segments) - 1, out=seg_idx)
        for j in np.unique(seg_idx):
            mask = seg_idx == j
            results[mask] = method(self._segments[j], flat[mask])
        return results.reshape(xs.shape)

    def eval_batch(self, xs) -> np.ndarray:
        """Evaluate the spline at every point of *xs*.

        Points are routed to segments with one vectorised search and each
        segment is evaluated on its group.  Results match :meth:`eval`.

        Parameters
        ----------
        xs : array_like
            Query points, any shape.

        Returns
        -------
        ndarray
            Values with the same shape as *xs*.
        """
        single = self._y[0] if self._y else 0.0
        return self._batch(xs, CubicPolynomial.eval, 0.0, single)

    def deriv_batch(self, xs) -> np.ndarray:
        """Evaluate the first derivative at every point of *xs*."""
        return self._batch(xs, CubicPolynomial.deriv, 0.0, 0.0)

    def find_root(self, start: float, end: float, prec: float = 1e-12) -> float:
        """Locate a root of the spline in ``[start, end]`` by bisection.

        The spline must change sign over the interval (or vanish at one of
        its ends).

        Raises
        ------
        ValueError
            If ``start > end`` or the interval does not bracket a root.
        """
        from pyhermite.bisection import bisection_prec

        return bisection_prec(self.eval, start, end, prec)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def style(self) -> SplineStyle:
        """Slope rule this spline was created with."""
        return self._style

    @property
    def knots(self) -> List[Tuple[float, float]]:
        """Knots as ``(x, y)`` pairs in ascending x order."""
        return list(zip(self._x, self._y))

    @property
    def slopes(self) -> List[float]:
        """Slope at each knot."""
        return list(self._slopes)

    @property
    def segments(self) -> Tuple[CubicPolynomial, ...]:
        """Polynomial of each segment, left to right."""
        return tuple(self._segments)

    @property
    def num_knots(self) -> int:
        return len(self._x)

    @property
    def num_segments(self) -> int:
        return len(self._segments)

    @property
    def domain(self) -> Tuple[float, float] | None:
        """``(x_min, x_max)`` of the knots, or None if there are none."""
        if not self._x:
            return None
        return self._x[0], self._x[-1]

    def __len__(self) -> int:
        return len(self._x)

    # ------------------------------------------------------------------
    # Printing
    # ------------------------------------------------------------------

    def __repr__(self) -> str:
        return (
            f"CubicSpline("
            f"style={self._style.value!r}, "
            f"knots={self.num_knots}, "
            f"segments={self.num_segments})"
        )

    def __str__(self) -> str:
        max_display = 6

        if self.num_knots > max_display:
            knots_str = (
                "["
                + ", ".join(f"({x:g}, {y:g})" for x, y in self.knots[:max_display])
                + ", ...]"
            )
        else:
            knots_str = "[" + ", ".join(f"({x:g}, {y:g})" for x, y in self.knots) + "]"

        domain = self.domain
        domain_str = "empty" if domain is None else f"[{domain[0]:g}, {domain[1]:g}]"

        lines = [
            f"CubicSpline ({self._style.value})",
            f"  Knots:       {self.num_knots}",
            f"  Segments:    {self.num_segments}",
            f"  Domain:      {domain_str}",
            f"  Points:      {knots_str}",
        ]
        return "\n".join(lines)
