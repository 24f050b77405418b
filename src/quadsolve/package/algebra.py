"""Algebra utilities."""

import dataclasses
import enum
import math
from typing import Tuple

from quadsolve.approx import PRECISION, is_approx_equal, snap_to_zero


class SolutionCount(enum.Enum):
    """How many values of x satisfy the equation."""

    NO_SOLUTION = "no_solution"
    ONE_SOLUTION = "one_solution"
    TWO_SOLUTIONS = "two_solutions"
    INFINITE_SOLUTIONS = "infinite_solutions"


@dataclasses.dataclass(frozen=True)
class QuadraticSolution:
    """Outcome of :func:`solve_quadratic`.

    Attributes
    ----------
    count : SolutionCount
        Which of the four outcomes the coefficients fall into.
    x1, x2 : complex
        The roots, lowest first. Both hold the same value for
        ``ONE_SOLUTION`` and are zero-filled when there is no finite set
        of roots to report.
    """

    count: SolutionCount
    x1: complex = 0j
    x2: complex = 0j

    @property
    def roots(self) -> Tuple[complex, ...]:
        """Return the distinct roots: none, one or two of them."""
        if self.count is SolutionCount.ONE_SOLUTION:
            return (self.x1,)
        if self.count is SolutionCount.TWO_SOLUTIONS:
            return (self.x1, self.x2)
        return ()


def _ordered(x1: complex, x2: complex, epsilon: float) -> Tuple[complex, complex]:
    """Put the root with the smaller real part first, then the smaller imaginary part."""
    x1 = complex(snap_to_zero(x1.real, epsilon), snap_to_zero(x1.imag, epsilon))
    x2 = complex(snap_to_zero(x2.real, epsilon), snap_to_zero(x2.imag, epsilon))
    if is_approx_equal(x1.real, x2.real, epsilon):
        x2 = complex(x1.real, x2.imag)
        if x1.imag > x2.imag:
            return x2, x1
        return x1, x2
    if x1.real > x2.real:
        return x2, x1
    return x1, x2


def _solve_full_quadratic(a: float, b: float, c: float, epsilon: float) -> QuadraticSolution:
    discriminant = b * b - 4 * a * c
    sqrt_disc = math.sqrt(abs(discriminant))
    inverse_double_a = 1 / (2 * a)

    if is_approx_equal(sqrt_disc, 0, epsilon):
        root = complex(-b * inverse_double_a, 0)
        count = SolutionCount.ONE_SOLUTION
        x1, x2 = root, root
    elif discriminant < 0:
        real = -b * inverse_double_a
        imag = sqrt_disc * inverse_double_a
        count = SolutionCount.TWO_SOLUTIONS
        x1, x2 = complex(real, imag), complex(real, -imag)
    else:
        count = SolutionCount.TWO_SOLUTIONS
        x1 = complex((-b - sqrt_disc) * inverse_double_a, 0)
        x2 = complex((-b + sqrt_disc) * inverse_double_a, 0)

    x1, x2 = _ordered(x1, x2, epsilon)
    return QuadraticSolution(count, x1, x2)


def solve_quadratic(a: float, b: float, c: float, epsilon: float = PRECISION) -> QuadraticSolution:
    """Solve ax^2 + bx + c = 0 and return its (possibly complex) roots.

    Coefficients within *epsilon* of zero are treated as zero, so the
    equation may degenerate into a linear one, an identity (``0 = 0``) or
    a contradiction (``c = 0`` with ``c`` non-zero). The checks below are
    evaluated in order and the first match wins.

    Parameters
    ----------
    a, b, c : float
        Coefficients of the equation. Any real value is accepted.
    epsilon : float
        Tolerance used for every comparison against zero.

    Returns
    -------
    QuadraticSolution
        Outcome tag and the two roots ordered by real, then imaginary part.

    Example
    -------
    >>> solve_quadratic(1, 1, -2).roots
    ((-2+0j), (1+0j))
    """
    a_is_zero = is_approx_equal(a, 0, epsilon)
    b_is_zero = is_approx_equal(b, 0, epsilon)
    c_is_zero = is_approx_equal(c, 0, epsilon)

    if a_is_zero and b_is_zero and c_is_zero:
        return QuadraticSolution(SolutionCount.INFINITE_SOLUTIONS)
    if a_is_zero and b_is_zero:
        return QuadraticSolution(SolutionCount.NO_SOLUTION)
    # bx = 0 or ax^2 = 0
    if a_is_zero != b_is_zero and c_is_zero:
        return QuadraticSolution(SolutionCount.ONE_SOLUTION)
    if a_is_zero:
        root = complex(-c / b, 0)
        return QuadraticSolution(SolutionCount.ONE_SOLUTION, root, root)
    return _solve_full_quadratic(a, b, c, epsilon)
