"""Root bracketing by bisection.

Works for any continuous ``f: float -> float`` whose sign differs at the two
ends of the starting interval.
"""

from __future__ import annotations

import math
from typing import Callable


class Bisector:
    """Step-by-step bisection on ``[start, end]``.

    If *f* is exactly zero at either end, or at any midpoint visited, that
    point is the root and the bisector is done.

    Parameters
    ----------
    f : callable
        Continuous function of one float.
    start, end : float
        Bracketing interval, ``start <= end``.

    Raises
    ------
    ValueError
        If ``start > end`` or ``f(start)`` and ``f(end)`` have the same sign.
    """

    def __init__(self, f: Callable[[float], float], start: float, end: float):
        if start > end:
            raise ValueError(f"start={start} must not exceed end={end}")
        self.function = f
        self.start = float(start)
        self.end = float(end)
        self.done = False

        start_val = f(self.start)
        if start_val == 0:
            self._finish(self.start)
            return
        end_val = f(self.end)
        if end_val == 0:
            self._finish(self.end)
            return
        if (start_val > 0) == (end_val > 0):
            raise ValueError(
                f"f does not change sign on [{start}, {end}] "
                f"(f(start)={start_val}, f(end)={end_val})"
            )
        self._start_positive = start_val > 0

    def _finish(self, root: float) -> None:
        self.start = root
        self.end = root
        self.done = True

    def step(self) -> None:
        """Halve the interval, keeping the half that contains the sign change."""
        if self.done:
            return
        mid = self.root
        val = self.function(mid)
        if val == 0:
            self._finish(mid)
        elif (val > 0) == self._start_positive:
            self.start = mid
        else:
            self.end = mid

    @property
    def root(self) -> float:
        """Current root estimate: the interval midpoint, or the exact root."""
        if self.done:
            return self.start
        return (self.start + self.end) / 2

    def bounded(self, e: float) -> bool:
        """Return True if the root estimate is within *e* of the true root."""
        return (self.end - self.start) / 2 <= e


def bisection(f: Callable[[float], float], start: float, end: float,
              steps: int) -> float:
    """Approximate a root of *f* in ``[start, end]`` using *steps* bisections."""
    b = Bisector(f, start, end)
    for _ in range(steps):
        if b.done:
            break
        b.step()
    return b.root


def bisection_prec(f: Callable[[float], float], start: float, end: float,
                   prec: float) -> float:
    """Like :func:`bisection`, running enough steps to shrink the interval below *prec*."""
    if prec <= 0:
        raise ValueError(f"prec must be positive, got {prec}")
    return bisection(f, start, end, bisection_steps(start, end, prec))


def bisection_steps(start: float, end: float, prec: float) -> int:
    """Number of halvings needed for ``end - start`` to drop below *prec*."""
    width = end - start
    if width <= prec:
        return 0
    return int(math.ceil(math.log2(width / prec)))
