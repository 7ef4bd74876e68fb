"""
Integer helper functions.
"""

import math
import operator
from typing import Iterable


def as_int(x) -> int:
    """Coerce integer-like value (int, bool, numpy ints, ...) to int."""
    try:
        return operator.index(x)
    except TypeError:
        raise TypeError("Expected integer, got {}".format(type(x).__name__)) from None


def get_lcm(xs: Iterable[int]) -> int:
    """Least common multiple of integer sequence, always non-negative."""
    lcm = 1
    for x in xs:
        if x == 0:
            return 0
        lcm = abs(lcm * x) // math.gcd(lcm, x)
    return lcm


def sign(x: int) -> int:
    return (x > 0) - (x < 0)


def is_power_of_two(x: int) -> bool:
    # 1 = 2**0 counts
    return x > 0 and (x & (x - 1)) == 0
