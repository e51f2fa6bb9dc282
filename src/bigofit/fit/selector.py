from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from bigofit.fit.catalog import CATALOG
from bigofit.fit.fitter import check_series, log_costs, score_logs
from bigofit.fit.models import Sample, ScoredModel

log = logging.getLogger(__name__)


def evaluate(
    series: Sequence[Sample],
    workers: int = 0,
    min_samples: int = 1,
) -> list[ScoredModel]:
    """Score every catalog model against ``series``, in catalog order."""
    check_series(series, min_samples)
    logs = log_costs(series)

    if workers and workers > 1:
        scored: list[ScoredModel | None] = [None] * len(CATALOG)
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {
                executor.submit(score_logs, model, series, logs): idx
                for idx, model in enumerate(CATALOG)
            }
            for future, idx in futures.items():
                scored[idx] = future.result()
        out = [s for s in scored if s is not None]
    else:
        out = [score_logs(model, series, logs) for model in CATALOG]

    for s in out:
        log.debug("%-14s residual=%.6g", s.name, s.residual)
    return out


def best(scored: Sequence[ScoredModel]) -> ScoredModel:
    # Strict less-than: the earliest entry wins an exact tie.
    winner = scored[0]
    for candidate in scored[1:]:
        if candidate.residual < winner.residual:
            winner = candidate
    return winner


def select(series: Sequence[Sample], workers: int = 0, min_samples: int = 1) -> str:
    winner = best(evaluate(series, workers=workers, min_samples=min_samples))
    log.debug("Selected %s over %d samples", winner.name, len(series))
    return winner.name
