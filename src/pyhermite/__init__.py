"""pyhermite: incremental piecewise-cubic Hermite interpolation.

Provides the :class:`CubicSpline` class, which keeps a sorted set of knots,
assigns each a slope under a selectable :class:`SplineStyle`, and fits one
:class:`CubicPolynomial` per interval from the endpoint values and slopes.
Knots can be added one at a time; only the neighbourhood of the new knot is
refitted.  Supporting numerics (compensated summation, a guarded dense
solver and bisection) are exposed as well.

Example
-------
>>> from pyhermite import CubicSpline
>>> sp = CubicSpline("standard")
>>> for x, y in [(0, 0), (1, 1), (2, 0)]:
...     sp.add(x, y)
>>> round(sp.integ(0, 2), 10)
1.1666666667
"""

from pyhermite._kahan import CompensatedSum, compensated_sum
from pyhermite._linalg import SingularSystemError, solve_dense
from pyhermite._slopes import SplineStyle
from pyhermite._version import __version__
from pyhermite.bisection import Bisector, bisection, bisection_prec
from pyhermite.polynomial import CubicPolynomial
from pyhermite.spline import CubicSpline

__all__ = [
    "Bisector",
    "CompensatedSum",
    "CubicPolynomial",
    "CubicSpline",
    "SingularSystemError",
    "SplineStyle",
    "bisection",
    "bisection_prec",
    "compensated_sum",
    "solve_dense",
    "__version__",
]
