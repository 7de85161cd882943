"""
Compensated Summation for Polygon Perimeters and Areas.

A polygon with thousands of vertices sums thousands of edge lengths and
area differentials of very different magnitudes. Naive sequential
addition loses the low-order bits of every small term; this module keeps
them in a second (compensation) term so the total is accurate to about
twice the working precision.

Implementation
--------------
Each addition is an error-free transformation (Knuth's two-sum): the
rounded sum and its exact rounding error are both kept. The error is fed
back into the next addition, accumulating from the least significant end
(Shewchuk's ordering).

References
----------
- Knuth, D.E. (1997). The Art of Computer Programming, Vol. 2, 4.2.2.
- Shewchuk, J.R. (1997). Adaptive precision floating-point arithmetic and
  fast robust geometric predicates. Discrete & Computational Geometry,
  18(3), 305-363.
"""

import math
from typing import Tuple, Union


def two_sum(u: float, v: float) -> Tuple[float, float]:
    """Error-free sum of two floats.

    Parameters
    ----------
    u, v : float
        Summands.

    Returns
    -------
    Tuple[float, float]
        (s, t) with s = fl(u + v) and s + t = u + v exactly.
    """
    s = u + v
    up = s - v
    vpp = s - up
    up -= u
    vpp -= v
    t = -(up + vpp)
    return s, t


class Accumulator:
    """Running sum held as a major term plus a compensation term.

    Non-finite inputs are accepted and poison the total under ordinary
    floating-point semantics.

    Examples
    --------
    >>> acc = Accumulator()
    >>> for x in (1e16, 1.0, -1e16):
    ...     acc.add(x)
    >>> acc.value()
    1.0
    """

    __slots__ = ('_s', '_t')

    def __init__(self, value: Union[float, 'Accumulator'] = 0.0):
        self.set(value)

    def set(self, value: Union[float, 'Accumulator']) -> None:
        """Assign a scalar (zero compensation) or copy another accumulator."""
        if isinstance(value, Accumulator):
            self._s, self._t = value._s, value._t
        else:
            self._s, self._t = float(value), 0.0

    def copy(self) -> 'Accumulator':
        """Return an independent accumulator with the same state."""
        return Accumulator(self)

    def add(self, value: float) -> None:
        """Incorporate `value` into the running total."""
        y, u = two_sum(float(value), self._t)
        self._s, self._t = two_sum(y, self._s)
        # The major term can cancel to exactly zero; promote the residue.
        if self._s == 0:
            self._s = u
        else:
            self._t += u

    def value(self, extra: float = 0.0) -> float:
        """Return the total, optionally with `extra` added, as a float.

        Parameters
        ----------
        extra : float
            A value folded in with full compensation without modifying
            this accumulator.

        Returns
        -------
        float
            The best double approximation of the (extended) total.
        """
        if extra == 0.0:
            return self._s + self._t
        tmp = Accumulator(self)
        tmp.add(extra)
        return tmp._s + tmp._t

    def negate(self) -> None:
        """Negate the total in place."""
        self._s = -self._s
        self._t = -self._t

    def remainder(self, divisor: float) -> None:
        """Reduce the total to its IEEE remainder modulo `divisor`.

        The major term is reduced first and the compensation term folded
        back in, so the result stays accurate after the reduction.
        """
        # An infinite total has no remainder.
        self._s = math.nan if math.isinf(self._s) else math.remainder(self._s, divisor)
        self.add(0.0)

    def __float__(self) -> float:
        return self.value()

    def __repr__(self) -> str:
        return f"Accumulator(s={self._s!r}, t={self._t!r})"
