from __future__ import annotations

import math
from collections.abc import Sequence

from bigofit.errors import DomainError, MinimumSampleSizeError
from bigofit.fit.models import GrowthModel, Sample, ScoredModel
from bigofit.util.math import log_magnitude, sum_float


def check_series(series: Sequence[Sample], min_samples: int = 1) -> None:
    required = max(1, min_samples)
    if len(series) < required:
        raise MinimumSampleSizeError(len(series), required)
    for idx, s in enumerate(series):
        if s.size <= 0 or s.cost <= 0:
            raise DomainError(idx, s.size, s.cost)


def log_costs(series: Sequence[Sample]) -> list[float]:
    return [log_magnitude(s.cost) for s in series]


def score_logs(model: GrowthModel, series: Sequence[Sample], logs: Sequence[float]) -> ScoredModel:
    """Score ``model`` against ``series`` given precomputed ``logs``.

    ``logs[i]`` must be ``ln(series[i].cost)``, as returned by ``log_costs``;
    a length mismatch raises ValueError. The series is assumed to have passed
    ``check_series``. A model whose log growth leaves float range for some
    size cannot describe the series and scores an infinite residual.
    """
    # ln(cost) ~ log_growth(size) + c, one intercept fit by ordinary least squares.
    deltas = [y - model.log_growth(s.size) for s, y in zip(series, logs, strict=True)]
    if not all(math.isfinite(d) for d in deltas):
        return ScoredModel(name=model.name, residual=math.inf)
    # Dividing each term first keeps the mean finite for deltas near float max.
    count = len(deltas)
    offset = sum_float(d / count for d in deltas)
    errors = [d - offset for d in deltas]
    # e * e saturates to inf; e ** 2 raises OverflowError.
    residual = sum_float(e * e for e in errors)
    return ScoredModel(name=model.name, residual=residual)


def score(model: GrowthModel, series: Sequence[Sample]) -> ScoredModel:
    """Fit ``model`` to ``series`` in log space and return its residual.

    The optimal offset is the mean log deviation, so rescaling every cost by
    the same positive constant leaves the residual unchanged. Residuals are
    summed in sample order.

    Raises MinimumSampleSizeError for an empty series and DomainError for a
    sample with a non-positive size or cost.
    """
    check_series(series)
    return score_logs(model, series, log_costs(series))
