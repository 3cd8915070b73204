"""Quick start example: interpolate sin(x) from a few samples."""

import math

from pyhermite import CubicSpline


# Build spline from 9 samples on [0, pi]
xs = [i * math.pi / 8 for i in range(9)]
sp = CubicSpline.from_points(xs, [math.sin(x) for x in xs], style="standard", verbose=True)

# Evaluate at a point between knots
x = 1.0
print(f"Exact:  {math.sin(x):.10f}")
print(f"Approx: {sp.eval(x):.10f}")
print(f"Error:  {abs(sp.eval(x) - math.sin(x)):.2e}")

# Derivative d/dx sin(x) = cos(x)
print(f"\nd/dx exact:  {math.cos(x):.10f}")
print(f"d/dx approx: {sp.deriv(x):.10f}")

# Integral over [0, pi] = 2
print(f"\nIntegral exact:  {2.0:.10f}")
print(f"Integral approx: {sp.integ(0.0, math.pi):.10f}")
