"""Reading coefficient triples from a text stream."""

from typing import Callable, Optional, TextIO, Tuple

Coefficients = Tuple[float, float, float]

BANNER = (
    "=== Quadratic equation solver ===\n"
    "=== Equation ax2 + bx + c = 0 ===\n"
)
PROMPT = 'Enter the coefficients in the following format "a b c": '
RETRY_MESSAGE = (
    "Incorrect input format. Note that you are supposed to type in 3 numbers,"
    ' e.g. "1 2 3".\n'
)


class CoefficientParseError(ValueError):
    """Raised when the input does not hold the expected real numbers."""


def parse_number(token: str) -> float:
    """Parse a single real number in decimal or scientific notation.

    ``inf`` and ``nan`` are accepted like C's ``%lg`` accepts them;
    underscore digit grouping is not.
    """
    if "_" in token:
        raise CoefficientParseError(f"not a number: {token!r}")
    try:
        return float(token)
    except ValueError as e:
        raise CoefficientParseError(f"not a number: {token!r}") from e


def parse_coefficients(text: str) -> Coefficients:
    """Parse exactly three whitespace-separated real numbers from *text*.

    Decimal and scientific notation are both accepted, independent of the
    process locale.

    Example
    -------
    >>> parse_coefficients("1 -2.5 3e2")
    (1.0, -2.5, 300.0)
    """
    fields = text.split()
    if len(fields) != 3:
        raise CoefficientParseError(f"expected 3 numbers, got {len(fields)}: {text.strip()!r}")
    a, b, c = (parse_number(field) for field in fields)
    return a, b, c


class CoefficientPrompt:
    """Interactive prompt that keeps asking until three numbers are entered.

    Numbers may be spread over several lines. A token that is not a number
    discards everything read so far along with the rest of its line, and
    the prompt starts over. Anything after the third number on a line is
    ignored.
    """

    def __init__(
        self,
        stdin: TextIO,
        stdout: TextIO,
        on_error: Optional[Callable[[CoefficientParseError], None]] = None,
    ):
        self.stdin = stdin
        self.stdout = stdout
        self.on_error = on_error

    def _reprompt(self, error: CoefficientParseError) -> None:
        if self.on_error is not None:
            self.on_error(error)
        self.stdout.write(RETRY_MESSAGE)
        self.stdout.write(PROMPT)
        self.stdout.flush()

    def read(self) -> Coefficients:
        """Print the banner and prompt, then return the first three numbers read.

        Raises
        ------
        EOFError
            If the input ends before three numbers were read.
        """
        self.stdout.write(BANNER)
        self.stdout.write(PROMPT)
        self.stdout.flush()
        values = []
        while True:
            line = self.stdin.readline()
            if not line:
                raise EOFError("input ended before three coefficients were read")
            for token in line.split():
                try:
                    values.append(parse_number(token))
                except CoefficientParseError as e:
                    values = []
                    self._reprompt(e)
                    break
                if len(values) == 3:
                    a, b, c = values
                    return a, b, c
