"""Dense linear solves for the per-segment Hermite fits.

Each spline segment is fitted by solving a 4x4 system whose rows are
monomial (Vandermonde-like) value and slope constraints.  The solve goes
through LU factorisation with partial pivoting and refuses singular or
numerically singular systems instead of returning meaningless coefficients.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np


class SingularSystemError(np.linalg.LinAlgError):
    """Raised when a linear system has no unique, numerically usable solution."""


def hermite_system(x0: float, x1: float, y0: float, y1: float,
                   s0: float, s1: float) -> Tuple[np.ndarray, np.ndarray]:
    """Build the cubic Hermite system for coefficients ``[a, b, c, d]``.

    Rows enforce ``p(x0) = y0``, ``p(x1) = y1``, ``p'(x0) = s0`` and
    ``p'(x1) = s1`` for ``p(x) = a + b*x + c*x**2 + d*x**3``.

    Returns
    -------
    matrix : ndarray of shape (4, 4)
    rhs : ndarray of shape (4,)
    """
    matrix = np.array([
        [1.0, x0, x0 * x0, x0 * x0 * x0],
        [1.0, x1, x1 * x1, x1 * x1 * x1],
        [0.0, 1.0, 2.0 * x0, 3.0 * x0 * x0],
        [0.0, 1.0, 2.0 * x1, 3.0 * x1 * x1],
    ])
    rhs = np.array([y0, y1, s0, s1], dtype=float)
    return matrix, rhs


def solve_dense(matrix, rhs, rcond: float | None = None) -> np.ndarray:
    """Solve ``matrix @ x = rhs`` for a small dense square system.

    Parameters
    ----------
    matrix : array_like of shape (n, n)
        System matrix.
    rhs : array_like of shape (n,)
        Right-hand side.
    rcond : float, optional
        Smallest acceptable reciprocal condition number (1-norm).  Defaults
        to ``eps**2`` for float64 (about 4.9e-32).  Hermite systems in the
        monomial basis have condition numbers near ``x**6`` even when the
        fit is exact, so only systems past that scale are refused.

    Returns
    -------
    ndarray of shape (n,)
        Solution vector.

    Raises
    ------
    ValueError
        If the shapes are inconsistent or the inputs contain NaN/Inf.
    SingularSystemError
        If the matrix is singular or too ill-conditioned to solve, or the
        solution is not finite.
    """
    from scipy.linalg import lu_factor, lu_solve

    matrix = np.asarray(matrix, dtype=float)
    rhs = np.asarray(rhs, dtype=float)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise ValueError(f"matrix must be square, got shape {matrix.shape}")
    n = matrix.shape[0]
    if rhs.shape != (n,):
        raise ValueError(
            f"rhs has shape {rhs.shape}, expected ({n},)"
        )
    if not (np.all(np.isfinite(matrix)) and np.all(np.isfinite(rhs))):
        raise ValueError("matrix and rhs must not contain NaN or Inf")

    if rcond is None:
        rcond = np.finfo(float).eps ** 2

    # cond() reports inf for an exactly singular matrix
    cond = np.linalg.cond(matrix, 1)
    if not np.isfinite(cond) or 1.0 / cond < rcond:
        raise SingularSystemError(
            f"Matrix is singular or ill-conditioned "
            f"(1-norm condition number {cond:.3e}, rcond {rcond:.3e})"
        )

    solution = lu_solve(lu_factor(matrix), rhs)
    if not np.all(np.isfinite(solution)):
        raise SingularSystemError("Solution contains NaN or Inf")
    return solution
