from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class Sample:
    size: int
    cost: int


@dataclass(frozen=True)
class GrowthModel:
    name: str
    log_growth: Callable[[int], float]


@dataclass(frozen=True)
class ScoredModel:
    name: str
    residual: float
