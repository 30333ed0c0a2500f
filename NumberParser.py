"""
Strict numeric parsing for user-supplied values.

Accepted grammar (no surrounding whitespace):

    [+-]? ( digits [ "." digits? ] | "." digits ) ( [eE] [+-]? digits )?

Examples: "5", "-3.25", "+2.", ".5", "1e3", "6.02E-23".
Rejected: "", " 5", "1,5", "0x10", "inf", "nan", "1_000", and anything whose
value overflows to infinity (e.g. "1e999").

Numbers that are already `int`/`float` are accepted when finite. Booleans are
rejected even though `bool` subclasses `int`.
"""

import math
import re
from numbers import Real

from ConversionErrors import InvalidNumber

NUMBER_PATTERN = re.compile(r'[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?')


def parse_number(value):
    """
    Convert `value` to a finite float.

    Parameters
    ----------
    value : str | int | float
        A numeric value or a string matching the grammar above.

    Returns
    -------
    float

    Raises
    ------
    InvalidNumber
        If `value` does not match the grammar or is not finite.
    """
    if isinstance(value, bool):
        raise InvalidNumber(value)

    if isinstance(value, str):
        if not NUMBER_PATTERN.fullmatch(value):
            raise InvalidNumber(value)
        number = float(value)
    elif isinstance(value, Real):
        try:
            number = float(value)
        except OverflowError:
            raise InvalidNumber(value) from None
    else:
        raise InvalidNumber(value)

    if not math.isfinite(number):
        raise InvalidNumber(value)
    return number


if __name__ == "__main__":
    for sample in ["5", "-3.25", ".5", "1e3", " 5", "0x10", "1e999"]:
        try:
            print(sample, "->", parse_number(sample))
        except InvalidNumber as e:
            print(sample, "->", e)
