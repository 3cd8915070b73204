"""Tests for CubicPolynomial."""

import copy
import math
import pickle
from fractions import Fraction

import numpy as np
import pytest

from pyhermite import CubicPolynomial, SingularSystemError


@pytest.fixture
def poly():
    """p(x) = 1 - 2x + 0.5x^2 + 0.25x^3"""
    return CubicPolynomial(1.0, -2.0, 0.5, 0.25)


def p_exact(x):
    return 1.0 - 2.0 * x + 0.5 * x**2 + 0.25 * x**3


def dp_exact(x):
    return -2.0 + x + 0.75 * x**2


def antideriv_exact(x):
    return x - x**2 + x**3 / 6.0 + x**4 / 16.0


# ---------------------------------------------------------------------------
# Evaluation
# ---------------------------------------------------------------------------

class TestEval:
    @pytest.mark.parametrize("x", [-3.0, -1.0, 0.0, 0.5, 2.0, 7.5])
    def test_value(self, poly, x):
        assert abs(poly.eval(x) - p_exact(x)) < 1e-12

    def test_call_alias(self, poly):
        assert poly(2.0) == poly.eval(2.0)

    def test_array_input(self, poly):
        xs = np.linspace(-2.0, 3.0, 11)
        np.testing.assert_allclose(poly.eval(xs), p_exact(xs), rtol=1e-13, atol=1e-13)

    def test_matches_polyval(self):
        rng = np.random.default_rng(11)
        coeffs = rng.normal(size=4)
        p = CubicPolynomial(*coeffs)
        xs = rng.uniform(-10, 10, size=50)
        expected = np.polynomial.polynomial.polyval(xs, coeffs)
        np.testing.assert_allclose([p.eval(x) for x in xs], expected, rtol=1e-12, atol=1e-10)

    def test_cancelling_terms(self):
        """Terms 1, 2**53, 1, -2**53 at x = 1024: naive summation gives 0."""
        p = CubicPolynomial(1.0, 2.0**43, 2.0**-20, -(2.0**23))
        x = 1024.0
        terms = [c * x**k for k, c in enumerate(p.coefficients)]
        exact = float(sum(Fraction(t) for t in terms))
        assert exact == math.fsum(terms) == 2.0

        naive = 0.0
        for t in terms:
            naive += t
        assert naive == 0.0
        assert p.eval(x) == exact

    def test_cancelling_terms_array(self):
        p = CubicPolynomial(1.0, 2.0**43, 2.0**-20, -(2.0**23))
        np.testing.assert_array_equal(p.eval(np.array([1024.0, 1024.0])), [2.0, 2.0])

    def test_zero_polynomial(self):
        p = CubicPolynomial()
        assert p.eval(123.0) == 0.0
        assert p.deriv(123.0) == 0.0
        assert p.integ(-1.0, 5.0) == 0.0


class TestDeriv:
    @pytest.mark.parametrize("x", [-3.0, 0.0, 1.25, 4.0])
    def test_derivative(self, poly, x):
        assert abs(poly.deriv(x) - dp_exact(x)) < 1e-12

    def test_derivative_vs_fd(self, poly):
        h = 1e-6
        x = 0.7
        fd = (poly.eval(x + h) - poly.eval(x - h)) / (2 * h)
        assert abs(poly.deriv(x) - fd) < 1e-6


class TestInteg:
    def test_definite_integral(self, poly):
        expected = antideriv_exact(3.0) - antideriv_exact(-1.0)
        assert abs(poly.integ(-1.0, 3.0) - expected) < 1e-12

    def test_reversed_bounds_negate(self, poly):
        assert poly.integ(3.0, -1.0) == -poly.integ(-1.0, 3.0)

    def test_empty_interval(self, poly):
        assert poly.integ(2.0, 2.0) == 0.0

    def test_vs_scipy_quad(self, poly):
        from scipy.integrate import quad

        expected, _ = quad(p_exact, 0.0, 2.5)
        assert abs(poly.integ(0.0, 2.5) - expected) < 1e-10


# ---------------------------------------------------------------------------
# Hermite fit
# ---------------------------------------------------------------------------

class TestFitHermite:
    def test_recovers_cubic(self, poly):
        """Fitting a cubic's own endpoint data reproduces it."""
        x0, x1 = 0.5, 2.0
        fit = CubicPolynomial.fit_hermite(
            x0, x1, p_exact(x0), p_exact(x1), dp_exact(x0), dp_exact(x1)
        )
        np.testing.assert_allclose(fit.coefficients, poly.coefficients, atol=1e-10)

    def test_endpoint_conditions(self):
        fit = CubicPolynomial.fit_hermite(-1.0, 3.0, 2.0, -1.0, 0.5, 4.0)
        assert abs(fit.eval(-1.0) - 2.0) < 1e-12
        assert abs(fit.eval(3.0) - (-1.0)) < 1e-12
        assert abs(fit.deriv(-1.0) - 0.5) < 1e-12
        assert abs(fit.deriv(3.0) - 4.0) < 1e-12

    def test_coincident_endpoints_raise(self):
        with pytest.raises(SingularSystemError):
            CubicPolynomial.fit_hermite(1.0, 1.0, 0.0, 2.0, 0.0, 0.0)


# ---------------------------------------------------------------------------
# Value semantics
# ---------------------------------------------------------------------------

class TestValueSemantics:
    def test_coefficients(self, poly):
        assert poly.coefficients == (1.0, -2.0, 0.5, 0.25)
        assert list(poly) == [1.0, -2.0, 0.5, 0.25]

    def test_immutable(self, poly):
        with pytest.raises(AttributeError):
            poly.a = 3.0
        with pytest.raises(AttributeError):
            poly._coeffs = (0.0, 0.0, 0.0, 0.0)

    def test_equality_and_hash(self, poly):
        other = CubicPolynomial(1, -2, 0.5, 0.25)
        assert poly == other
        assert hash(poly) == hash(other)
        assert poly != CubicPolynomial(1.0, -2.0, 0.5, 0.0)

    def test_copy_and_pickle(self, poly):
        assert copy.copy(poly) == poly
        assert copy.deepcopy(poly) == poly
        assert pickle.loads(pickle.dumps(poly)) == poly

    def test_repr(self, poly):
        assert repr(poly) == "CubicPolynomial(a=1.0, b=-2.0, c=0.5, d=0.25)"
