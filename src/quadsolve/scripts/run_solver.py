"""Solve one quadratic equation read from the command line or standard input.

Coefficients come from --coefficients when it is set, otherwise the user is
prompted until a line with three numbers is entered. The equation is echoed
back followed by a single line describing the solution set.
"""

import sys
from typing import Sequence, TextIO

from absl import app
from absl import flags
from absl import logging

from quadsolve.approx import PRECISION
from quadsolve.package.algebra import solve_quadratic
from quadsolve.package.formatting import describe_solution, format_equation
from quadsolve.prompt import (
    CoefficientParseError,
    CoefficientPrompt,
    Coefficients,
    parse_coefficients,
)

_COEFFICIENTS = flags.DEFINE_list(
    "coefficients",
    default=None,
    help="Comma separated a,b,c. When unset the coefficients are read from stdin.",
)
_EPSILON = flags.DEFINE_float(
    "epsilon",
    default=PRECISION,
    help="Values closer than this to zero are treated as zero.",
)
flags.register_validator(
    "epsilon", lambda value: value > 0, message="--epsilon must be positive."
)


def _log_rejected_line(error: CoefficientParseError) -> None:
    logging.warning("Rejected input: %s", error)


def solve_and_report(coefficients: Coefficients, stdout: TextIO, epsilon: float) -> int:
    """Print the equation and its solution set, returning the exit status."""
    a, b, c = coefficients
    stdout.write(format_equation(a, b, c) + "\n")

    solution = solve_quadratic(a, b, c, epsilon=epsilon)
    logging.info("Solved (%r, %r, %r): %s", a, b, c, solution.count.name)
    try:
        stdout.write(describe_solution(solution, epsilon=epsilon) + "\n")
    except ValueError as e:
        logging.error("main(): %s", e)
        return 1
    return 0


def main(argv: Sequence[str]) -> int:
    if len(argv) > 1:
        raise app.UsageError("Too many command-line arguments.")

    if _COEFFICIENTS.value is not None:
        try:
            coefficients = parse_coefficients(" ".join(_COEFFICIENTS.value))
        except CoefficientParseError as e:
            raise app.UsageError(f"--coefficients: {e}") from e
    else:
        prompt = CoefficientPrompt(sys.stdin, sys.stdout, on_error=_log_rejected_line)
        try:
            coefficients = prompt.read()
        except EOFError as e:
            logging.error("%s", e)
            return 1

    return solve_and_report(coefficients, sys.stdout, _EPSILON.value)


def run() -> None:
    app.run(main)


if __name__ == "__main__":
    run()
