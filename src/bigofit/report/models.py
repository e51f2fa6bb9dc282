from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict, dataclass, field
from typing import Any

from bigofit.fit.models import Sample, ScoredModel
from bigofit.util.math import sum_exact

SCHEMA_VERSION = 1


@dataclass(frozen=True)
class SeriesSummary:
    samples: int
    min_size: int
    max_size: int
    total_cost: int


@dataclass(frozen=True)
class ScoresReport:
    selected: str
    summary: SeriesSummary
    scores: list[ScoredModel] = field(default_factory=list)
    schema_version: int = SCHEMA_VERSION

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def summarize(series: Sequence[Sample]) -> SeriesSummary:
    sizes = [s.size for s in series]
    return SeriesSummary(
        samples=len(series),
        min_size=min(sizes),
        max_size=max(sizes),
        total_cost=sum_exact(s.cost for s in series),
    )
