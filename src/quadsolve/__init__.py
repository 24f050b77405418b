"""Quadratic equation solver over the complex numbers."""

from .approx import PRECISION, is_approx_equal
from .package.algebra import QuadraticSolution, SolutionCount, solve_quadratic
from .package.formatting import describe_solution, format_complex, format_equation

__all__ = [
    "PRECISION",
    "is_approx_equal",
    "QuadraticSolution",
    "SolutionCount",
    "solve_quadratic",
    "describe_solution",
    "format_complex",
    "format_equation",
]
