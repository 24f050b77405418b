"""Text rendering of coefficients, roots and solver outcomes."""

from quadsolve.approx import PRECISION, is_approx_equal
from quadsolve.package.algebra import QuadraticSolution, SolutionCount


def format_number(value: float) -> str:
    """Render *value* in general notation with six significant digits.

    Trailing zeros are dropped and very large or very small magnitudes
    switch to exponent form.

    Example
    -------
    >>> format_number(-0.6)
    '-0.6'
    >>> format_number(2.0)
    '2'
    """
    return f"{value:g}"


def format_complex(number: complex, epsilon: float = PRECISION) -> str:
    """Render *number*, omitting the imaginary part when it is approximately zero.

    Parameters
    ----------
    number : complex
        Value to render.
    epsilon : float
        Tolerance below which the imaginary part is not shown.

    Returns
    -------
    str
        ``"<real>"``, ``"<real> + <imag>i"`` or ``"<real> - <|imag|>i"``.
    """
    if is_approx_equal(number.imag, 0, epsilon):
        return format_number(number.real)
    if number.imag > 0:
        return f"{format_number(number.real)} + {format_number(number.imag)}i"
    return f"{format_number(number.real)} - {format_number(-number.imag)}i"


def format_equation(a: float, b: float, c: float) -> str:
    """Echo the coefficients back as an equation, e.g. ``(1) * x2 + (2) * x + (3) = 0``."""
    return f"({format_number(a)}) * x2 + ({format_number(b)}) * x + ({format_number(c)}) = 0"


def describe_solution(solution: QuadraticSolution, epsilon: float = PRECISION) -> str:
    """Return the one-line summary printed for a solver outcome."""
    if solution.count is SolutionCount.NO_SOLUTION:
        return "No solution"
    if solution.count is SolutionCount.ONE_SOLUTION:
        return f"Solution: x = {format_number(solution.x1.real)}"
    if solution.count is SolutionCount.TWO_SOLUTIONS:
        return (
            f"Solution: x = {format_complex(solution.x1, epsilon)}"
            f" OR x = {format_complex(solution.x2, epsilon)}"
        )
    if solution.count is SolutionCount.INFINITE_SOLUTIONS:
        return "Solution is any number"
    raise ValueError(f"unknown solution count: {solution.count!r}")
