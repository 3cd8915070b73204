"""Cubic polynomials in monomial form.

A :class:`CubicPolynomial` is the per-segment building block of
:class:`~pyhermite.spline.CubicSpline`.  Coefficients are stored as
``(a, b, c, d)`` for ``a + b*x + c*x**2 + d*x**3``.
"""

from __future__ import annotations

from typing import Iterator, Tuple

from pyhermite._kahan import CompensatedSum
from pyhermite._linalg import hermite_system, solve_dense


class CubicPolynomial:
    """Immutable cubic ``a + b*x + c*x**2 + d*x**3``.

    Parameters
    ----------
    a, b, c, d : float
        Monomial coefficients, lowest degree first.

    Examples
    --------
    >>> p = CubicPolynomial(1.0, 0.0, 0.0, 1.0)
    >>> p.eval(2.0)
    9.0
    >>> p.deriv(2.0)
    12.0
    >>> p.integ(0.0, 2.0)
    6.0
    """

    __slots__ = ("_coeffs",)

    def __init__(self, a: float = 0.0, b: float = 0.0, c: float = 0.0,
                 d: float = 0.0):
        object.__setattr__(
            self, "_coeffs", (float(a), float(b), float(c), float(d))
        )

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def fit_hermite(cls, x0: float, x1: float, y0: float, y1: float,
                    s0: float, s1: float) -> "CubicPolynomial":
        """Fit the cubic with the given endpoint values and slopes.

        Raises
        ------
        SingularSystemError
            If ``x0 == x1`` or the system is too ill-conditioned.
        """
        matrix, rhs = hermite_system(x0, x1, y0, y1, s0, s1)
        return cls(*solve_dense(matrix, rhs))

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def eval(self, x):
        """Evaluate the polynomial at *x* (float or ndarray).

        The four monomial terms are added with compensated summation, since
        at large ``|x|`` they can nearly cancel.
        """
        acc = CompensatedSum()
        power = 1.0
        for coeff in self._coeffs:
            acc.add(coeff * power)
            power = power * x
        return acc.sum()

    def deriv(self, x):
        """Evaluate the first derivative ``b + 2*c*x + 3*d*x**2``."""
        _, b, c, d = self._coeffs
        return b + 2 * c * x + 3 * d * x * x

    def integ(self, x1: float, x2: float) -> float:
        """Definite integral from *x1* to *x2*.

        No ordering is required; ``integ(x2, x1) == -integ(x1, x2)``.
        """
        return self._antiderivative(x2) - self._antiderivative(x1)

    def _antiderivative(self, x):
        a, b, c, d = self._coeffs
        x2 = x * x
        x3 = x2 * x
        x4 = x3 * x
        return a * x + b * x2 / 2.0 + c * x3 / 3.0 + d * x4 / 4.0

    def __call__(self, x):
        return self.eval(x)

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    @property
    def coefficients(self) -> Tuple[float, float, float, float]:
        """Coefficients ``(a, b, c, d)``."""
        return self._coeffs

    def __iter__(self) -> Iterator[float]:
        return iter(self._coeffs)

    def __eq__(self, other):
        if not isinstance(other, CubicPolynomial):
            return NotImplemented
        return self._coeffs == other._coeffs

    def __hash__(self) -> int:
        return hash(self._coeffs)

    def __reduce__(self):
        return (type(self), self._coeffs)

    def __repr__(self) -> str:
        a, b, c, d = self._coeffs
        return f"CubicPolynomial(a={a!r}, b={b!r}, c={c!r}, d={d!r})"
