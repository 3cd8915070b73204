"""Tests for bisection root finding."""

import math

import pytest

from pyhermite import Bisector, bisection, bisection_prec
from pyhermite.bisection import bisection_steps


class TestBisector:
    def test_exact_root_at_start(self):
        b = Bisector(lambda x: x - 1.0, 1.0, 3.0)
        assert b.done
        assert b.root == 1.0

    def test_exact_root_at_end(self):
        b = Bisector(lambda x: x - 3.0, 1.0, 3.0)
        assert b.done
        assert b.root == 3.0

    def test_exact_root_at_midpoint(self):
        """Hitting zero at a midpoint returns that midpoint, not the value 0."""
        b = Bisector(lambda x: x - 2.0, 1.0, 3.0)
        assert not b.done
        b.step()
        assert b.done
        assert b.root == 2.0

    def test_step_keeps_sign_change(self):
        f = lambda x: x * x - 2.0  # noqa: E731
        b = Bisector(f, 0.0, 2.0)
        for _ in range(20):
            b.step()
            assert f(b.start) < 0 < f(b.end)

    def test_decreasing_function(self):
        b = Bisector(lambda x: 1.0 - x, 0.0, 3.0)
        for _ in range(60):
            b.step()
        assert abs(b.root - 1.0) < 1e-12

    def test_step_after_done_is_noop(self):
        b = Bisector(lambda x: x, 0.0, 1.0)
        b.step()
        assert b.root == 0.0

    def test_bounded(self):
        b = Bisector(lambda x: x - 0.3, 0.0, 1.0)
        assert b.bounded(0.5)
        assert not b.bounded(0.25)
        b.step()
        assert b.bounded(0.25)

    def test_start_after_end_raises(self):
        with pytest.raises(ValueError, match="must not exceed"):
            Bisector(lambda x: x, 1.0, 0.0)

    def test_no_sign_change_raises(self):
        with pytest.raises(ValueError, match="sign"):
            Bisector(lambda x: x * x + 1.0, -1.0, 1.0)


class TestBisectionFunctions:
    def test_sqrt2(self):
        root = bisection_prec(lambda x: x * x - 2.0, 0.0, 2.0, 1e-12)
        assert abs(root - math.sqrt(2.0)) < 1e-12

    def test_fixed_steps(self):
        root = bisection(lambda x: x - 0.3, 0.0, 1.0, 10)
        assert abs(root - 0.3) <= 1.0 / 2**11

    def test_zero_steps_returns_midpoint(self):
        assert bisection(lambda x: x - 0.3, 0.0, 1.0, 0) == 0.5

    def test_cos_root(self):
        root = bisection_prec(math.cos, 0.0, 3.0, 1e-10)
        assert abs(root - math.pi / 2) < 1e-10

    @pytest.mark.parametrize("start, end, prec, expected", [
        (0.0, 1.0, 1e-3, 10),
        (0.0, 2.0, 0.5, 2),
        (0.0, 1.0, 2.0, 0),
    ])
    def test_step_count(self, start, end, prec, expected):
        assert bisection_steps(start, end, prec) == expected

    def test_non_positive_prec_raises(self):
        with pytest.raises(ValueError, match="positive"):
            bisection_prec(lambda x: x, -1.0, 1.0, 0.0)
