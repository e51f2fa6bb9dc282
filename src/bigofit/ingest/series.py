"""Reader for the plain-text sample format.

The first line holds the sample count ``N``; each of the next ``N`` lines
holds ``size cost`` separated by whitespace. Lines after the sample block are
ignored. Values stay exact Python ints.
"""

from __future__ import annotations

from bigofit.errors import ParseFailure
from bigofit.fit.models import Sample
from bigofit.fit.selector import select


def _parse_int(token: str, what: str, line: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise ParseFailure(f"{what} is not an integer: {token!r}", line) from None


def read_series(text: str) -> list[Sample]:
    lines = text.splitlines()
    if not lines or not lines[0].strip():
        raise ParseFailure("missing sample count", 1)
    count = _parse_int(lines[0].strip(), "sample count", 1)
    if count < 0:
        raise ParseFailure(f"sample count must not be negative: {count}", 1)

    series: list[Sample] = []
    for idx in range(count):
        lineno = idx + 2
        if lineno > len(lines):
            raise ParseFailure(f"expected {count} samples, got {idx}", lineno)
        tokens = lines[lineno - 1].split()
        if len(tokens) != 2:
            raise ParseFailure(f"expected 'size cost', got {lines[lineno - 1]!r}", lineno)
        size = _parse_int(tokens[0], "size", lineno)
        cost = _parse_int(tokens[1], "cost", lineno)
        series.append(Sample(size=size, cost=cost))
    return series


def run(text: str, workers: int = 0, min_samples: int = 1) -> str:
    return select(read_series(text), workers=workers, min_samples=min_samples)
