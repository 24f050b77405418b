"""Tests for quadsolve.package.formatting."""

import math

from absl.testing import absltest
from absl.testing import parameterized

from quadsolve.package import formatting
from quadsolve.package.algebra import QuadraticSolution, solve_quadratic


class FormatNumberTest(parameterized.TestCase):

    @parameterized.parameters(
        (0.0, "0"),
        (1.0, "1"),
        (-0.6, "-0.6"),
        (math.sqrt(0.6), "0.774597"),
        (1e-7, "1e-07"),
        (123456789.0, "1.23457e+08"),
        (-2.5, "-2.5"),
    )
    def test_format_number(self, value, expected_output):
        self.assertEqual(formatting.format_number(value), expected_output)


class FormatComplexTest(parameterized.TestCase):

    @parameterized.parameters(
        (-2 + 0j, "-2"),
        (complex(1.5, 1e-6), "1.5"),
        (-0.4 + 0.2j, "-0.4 + 0.2i"),
        (-0.4 - 0.2j, "-0.4 - 0.2i"),
        (complex(0, -math.sqrt(0.6)), "0 - 0.774597i"),
    )
    def test_format_complex(self, value, expected_output):
        self.assertEqual(formatting.format_complex(value), expected_output)


class FormatEquationTest(absltest.TestCase):

    def test_format_equation(self):
        self.assertEqual(
            formatting.format_equation(1, -2.5, 3e2),
            "(1) * x2 + (-2.5) * x + (300) = 0",
        )


class DescribeSolutionTest(parameterized.TestCase):

    @parameterized.parameters(
        ((0, 0, 0), "Solution is any number"),
        ((0, 0, 5), "No solution"),
        ((0, 5, 0), "Solution: x = 0"),
        ((0, 5, 3), "Solution: x = -0.6"),
        ((1, 2, 1), "Solution: x = -1"),
        ((1, 1, -2), "Solution: x = -2 OR x = 1"),
        ((5, 4, 1), "Solution: x = -0.4 - 0.2i OR x = -0.4 + 0.2i"),
        ((5, 0, 3), "Solution: x = 0 - 0.774597i OR x = 0 + 0.774597i"),
        ((-5, 3, 0), "Solution: x = 0 OR x = 0.6"),
    )
    def test_describe_solution(self, coefficients, expected_output):
        solution = solve_quadratic(*coefficients)
        self.assertEqual(formatting.describe_solution(solution), expected_output)

    def test_unknown_count(self):
        solution = QuadraticSolution("three_solutions")
        with self.assertRaisesRegex(ValueError, "unknown solution count"):
            formatting.describe_solution(solution)

    def test_never_prints_negative_zero(self):
        for coefficients in ((-5, 3, 0), (-1, 0, 0), (5, 0, 3), (-2, 0, -8)):
            line = formatting.describe_solution(solve_quadratic(*coefficients))
            self.assertNotIn("-0 ", line + " ")


if __name__ == "__main__":
    absltest.main()
