"""Compensated (Kahan) summation.

References
----------
- Kahan (1965), "Further remarks on reducing truncation errors",
  Communications of the ACM 8(1):40.
"""

from __future__ import annotations

from typing import Iterable


class CompensatedSum:
    """Running sum that carries the rounding error lost by each addition.

    The accumulator only uses ``+`` and ``-``, so it works unchanged for
    Python floats, complex numbers (real and imaginary parts are compensated
    independently) and numpy arrays (compensation is element-wise).

    Parameters
    ----------
    start : float, complex or ndarray, optional
        Initial value of the sum (default 0.0).

    Examples
    --------
    >>> acc = CompensatedSum()
    >>> for _ in range(10):
    ...     _ = acc.add(0.1)
    >>> acc.sum()
    1.0
    """

    __slots__ = ("_sum", "_compensation")

    def __init__(self, start=0.0):
        self._sum = start
        self._compensation = 0.0

    def add(self, value):
        """Add *value* to the sum and return the new running sum."""
        value = value - self._compensation
        total = self._sum + value
        self._compensation = (total - self._sum) - value
        self._sum = total
        return self._sum

    def sum(self):
        """Return the current running sum."""
        return self._sum

    def __iadd__(self, value):
        self.add(value)
        return self

    def __repr__(self) -> str:
        return f"CompensatedSum({self._sum!r})"


def compensated_sum(values: Iterable, start=0.0):
    """Sum *values* through a single :class:`CompensatedSum`."""
    acc = CompensatedSum(start)
    for v in values:
        acc.add(v)
    return acc.sum()
