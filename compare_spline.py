"""
Compare pyhermite CubicSpline against scipy.interpolate on identical data.

Tests:
1. Accuracy: sin(x) on [0, 2pi], standard/midarc vs scipy CubicHermiteSpline
   (same slopes) and scipy CubicSpline (natural C2 spline)
2. Derivatives and integrals against the analytical values
3. Incremental build: time to add N knots one at a time (pyhermite) vs
   rebuilding the scipy spline after every insertion
4. Summary table

Usage:
    python compare_spline.py

NOTE: This script is for local benchmarking only. It is NOT part of the
test suite.
"""

import math
import time

import numpy as np
from scipy.interpolate import CubicHermiteSpline
from scipy.interpolate import CubicSpline as ScipyCubicSpline

from pyhermite import CubicSpline

RESULTS = {}


# ============================================================================
# Helpers
# ============================================================================

def sample_sin(n, seed=42):
    """n sorted random samples of sin on [0, 2pi], end points included."""
    rng = np.random.default_rng(seed)
    xs = np.sort(np.concatenate([[0.0, 2 * math.pi], rng.uniform(0, 2 * math.pi, n - 2)]))
    return xs, np.sin(xs)


def max_err(values, exact):
    return float(np.max(np.abs(np.asarray(values) - exact)))


# ============================================================================
# Test 1: value accuracy
# ============================================================================

def test_accuracy():
    """Value error of each method on a dense grid."""
    print(f"\n{'=' * 78}")
    print(f"  TEST 1: sin(x) on [0, 2pi]: value accuracy")
    print(f"{'=' * 78}")

    grid = np.linspace(0.0, 2 * math.pi, 2001)
    exact = np.sin(grid)

    print(f"\n  {'Knots':>6s} {'standard':>12s} {'midarc':>12s} {'scipy Hermite':>14s} {'scipy C2':>12s}")
    print(f"  {'─' * 60}")

    for n in (8, 16, 32, 64, 128):
        xs, ys = sample_sin(n)
        std = CubicSpline.from_points(xs, ys, style="standard")
        mid = CubicSpline.from_points(xs, ys, style="midarc")
        herm = CubicHermiteSpline(xs, ys, std.slopes)
        c2 = ScipyCubicSpline(xs, ys, bc_type="natural")

        errs = (
            max_err(std.eval_batch(grid), exact),
            max_err(mid.eval_batch(grid), exact),
            max_err(herm(grid), exact),
            max_err(c2(grid), exact),
        )
        RESULTS.setdefault("accuracy", []).append((n,) + errs)
        print(f"  {n:>6d} {errs[0]:>12.2e} {errs[1]:>12.2e} {errs[2]:>14.2e} {errs[3]:>12.2e}")


# ============================================================================
# Test 2: derivatives and integrals
# ============================================================================

def test_calculus():
    """Derivative and integral accuracy for 32 knots."""
    print(f"\n{'=' * 78}")
    print(f"  TEST 2: derivatives and integrals (32 knots)")
    print(f"{'=' * 78}")

    xs, ys = sample_sin(32)
    grid = np.linspace(0.0, 2 * math.pi, 2001)

    print(f"\n  {'Style':>10s} {'max |d err|':>14s} {'int [0,pi] err':>16s}")
    print(f"  {'─' * 42}")
    for style in ("standard", "midarc"):
        sp = CubicSpline.from_points(xs, ys, style=style)
        d_err = max_err(sp.deriv_batch(grid), np.cos(grid))
        i_err = abs(sp.integ(0.0, math.pi) - 2.0)
        RESULTS.setdefault("calculus", []).append((style, d_err, i_err))
        print(f"  {style:>10s} {d_err:>14.2e} {i_err:>16.2e}")


# ============================================================================
# Test 3: incremental build
# ============================================================================

def test_incremental():
    """Add knots one at a time; scipy has to rebuild from scratch each time."""
    print(f"\n{'=' * 78}")
    print(f"  TEST 3: incremental insertion")
    print(f"{'=' * 78}")

    print(f"\n  {'Knots':>6s} {'pyhermite add':>14s} {'scipy rebuild':>14s}")
    print(f"  {'─' * 36}")

    for n in (50, 200, 800):
        rng = np.random.default_rng(n)
        xs = rng.permutation(np.linspace(0.0, 2 * math.pi, n))
        ys = np.sin(xs)

        start = time.perf_counter()
        sp = CubicSpline()
        for x, y in zip(xs, ys):
            sp.add(x, y)
        t_add = time.perf_counter() - start

        start = time.perf_counter()
        seen_x, seen_y = [], []
        for x, y in zip(xs, ys):
            seen_x.append(x)
            seen_y.append(y)
            if len(seen_x) > 1:
                order = np.argsort(seen_x)
                sx = np.asarray(seen_x)[order]
                sy = np.asarray(seen_y)[order]
                CubicHermiteSpline(sx, sy, np.gradient(sy, sx))
        t_rebuild = time.perf_counter() - start

        RESULTS.setdefault("incremental", []).append((n, t_add, t_rebuild))
        print(f"  {n:>6d} {t_add:>13.4f}s {t_rebuild:>13.4f}s")


# ============================================================================
# Summary
# ============================================================================

def print_summary():
    print(f"\n{'=' * 78}")
    print(f"  SUMMARY")
    print(f"{'=' * 78}")
    if "accuracy" in RESULTS:
        n, std, mid, herm, c2 = RESULTS["accuracy"][-1]
        print(f"\n  {n} knots: standard {std:.2e}, midarc {mid:.2e}, "
              f"scipy Hermite {herm:.2e}, scipy C2 {c2:.2e}")
    if "incremental" in RESULTS:
        n, t_add, t_rebuild = RESULTS["incremental"][-1]
        print(f"  {n} incremental inserts: {t_add:.3f}s vs {t_rebuild:.3f}s rebuild")


def main():
    print("pyhermite vs scipy.interpolate")
    test_accuracy()
    test_calculus()
    test_incremental()
    print_summary()


if __name__ == "__main__":
    main()
