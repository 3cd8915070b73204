"""Shared test fixtures for pyhermite tests."""

import math

import numpy as np
import pytest

from pyhermite import CubicSpline


# ---------------------------------------------------------------------------
# Test data
# ---------------------------------------------------------------------------

SIN_XS = [0.0, 0.4, 0.9, 1.5, 2.0, 2.6, 3.1, 3.8, 4.4, 5.0, 5.7, 6.2]
SIN_YS = [math.sin(x) for x in SIN_XS]


def shuffled(xs, ys, seed):
    """Return (xs, ys) in a reproducible random order."""
    order = np.random.default_rng(seed).permutation(len(xs))
    return [xs[i] for i in order], [ys[i] for i in order]


def build(style, xs, ys):
    sp = CubicSpline(style)
    for x, y in zip(xs, ys):
        sp.add(x, y)
    return sp


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def spline_three_points():
    """Standard spline through (0,0), (1,1), (2,0), added in that order."""
    return build("standard", [0.0, 1.0, 2.0], [0.0, 1.0, 0.0])


@pytest.fixture(params=["standard", "midarc"])
def spline_sin(request):
    """sin(x) sampled at 12 knots, inserted in shuffled order."""
    xs, ys = shuffled(SIN_XS, SIN_YS, seed=7)
    return build(request.param, xs, ys)


@pytest.fixture
def spline_empty():
    return CubicSpline()


@pytest.fixture
def spline_single():
    """Single knot (1.5, -2.0)."""
    return build("standard", [1.5], [-2.0])
