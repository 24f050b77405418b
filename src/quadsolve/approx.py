"""Epsilon-tolerant comparisons shared by the solver and the formatter."""

PRECISION = 1e-5


def is_approx_equal(value: float, target: float, epsilon: float = PRECISION) -> bool:
    """Return ``True`` when *value* lies strictly within *epsilon* of *target*.

    Every "is this effectively zero" decision in the package goes through
    this predicate. The comparison is strict, so a difference of exactly
    *epsilon* is not considered equal.

    Example
    -------
    >>> is_approx_equal(1e-6, 0)
    True
    >>> is_approx_equal(1e-5, 0)
    False
    """
    return abs(value - target) < epsilon


def snap_to_zero(value: float, epsilon: float = PRECISION) -> float:
    """Replace values approximately equal to zero (``-0.0`` included) with ``0.0``."""
    if is_approx_equal(value, 0, epsilon):
        return 0.0
    return value
