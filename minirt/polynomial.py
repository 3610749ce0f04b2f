"""Quadratic equation helpers used by ray/surface intersection."""

from __future__ import annotations

import math

from .vector import EPS, TMAX


def discriminant(a: float, b: float, c: float) -> float:
    """Discriminant of ``a*x**2 + b*x + c``."""
    return b * b - 4 * a * c


def _in_range(t: float) -> bool:
    return EPS < t <= TMAX


def solve_quadratic(a: float, b: float, c: float) -> tuple[float, ...]:
    """Return the usable roots of ``a*x**2 + b*x + c`` in ascending order.

    A double root is returned alone when it lies in (EPS, TMAX]. Two distinct
    roots are returned only when both lie in that range; otherwise nothing is.
    """
    d = discriminant(a, b, c)
    if d < 0 or a == 0:
        return ()
    sqrt_d = math.sqrt(d)
    t1 = (-b - sqrt_d) / (2 * a)
    t2 = (-b + sqrt_d) / (2 * a)
    if sqrt_d == 0:
        return (t1,) if _in_range(t1) else ()
    if _in_range(t1) and _in_range(t2):
        return (min(t1, t2), max(t1, t2))
    return ()