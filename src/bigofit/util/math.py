from __future__ import annotations

import math
from collections.abc import Iterable

LN2 = math.log(2)


def log_magnitude(value: int) -> float:
    # The only int -> float crossing. math.log takes ints of any size
    # directly, so 2**5000 never has to fit in a float first.
    return math.log(value)


def log_log(value: int) -> float:
    # ln(ln n) is undefined at n = 1; clamp the inner log at ln 2.
    return math.log(log_magnitude(max(value, 2)))


def sum_exact(values: Iterable[int]) -> int:
    total = 0
    for v in values:
        total += v
    return total


def sum_float(values: Iterable[float]) -> float:
    # Strict left-to-right accumulation keeps residuals reproducible bit for bit.
    total = 0.0
    for v in values:
        total += v
    return total


def scaled_magnitude(value: int, factor: float) -> float:
    # value * factor for ints beyond float range; saturates at inf.
    try:
        return value * factor
    except OverflowError:
        return math.inf
