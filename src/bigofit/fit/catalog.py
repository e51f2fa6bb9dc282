"""The fixed catalog of growth classes.

Each entry maps a size ``n`` to the natural log of its growth shape. Additive
constants do not matter: the fitter absorbs them into its offset term. Order
is part of the contract, since the earliest entry wins a tie.
"""

from __future__ import annotations

from bigofit.errors import ModelNotFoundError
from bigofit.fit.models import GrowthModel
from bigofit.util.math import LN2, log_log, log_magnitude, scaled_magnitude


def _constant(n: int) -> float:
    return 0.0


def _logarithmic(n: int) -> float:
    return log_log(n)


def _linear(n: int) -> float:
    return log_magnitude(n)


def _linearithmic(n: int) -> float:
    return log_magnitude(n) + log_log(n)


def _quadratic(n: int) -> float:
    return 2 * log_magnitude(n)


def _quadratic_log(n: int) -> float:
    return 2 * log_magnitude(n) + log_log(n)


def _cubic(n: int) -> float:
    return 3 * log_magnitude(n)


def _exponential(n: int) -> float:
    return scaled_magnitude(n, LN2)


CATALOG: tuple[GrowthModel, ...] = (
    GrowthModel("O(1)", _constant),
    GrowthModel("O(log n)", _logarithmic),
    GrowthModel("O(n)", _linear),
    GrowthModel("O(n log n)", _linearithmic),
    GrowthModel("O(n^2)", _quadratic),
    GrowthModel("O(n^2 log n)", _quadratic_log),
    GrowthModel("O(n^3)", _cubic),
    GrowthModel("O(2^n)", _exponential),
)

_BY_NAME: dict[str, GrowthModel] = {m.name: m for m in CATALOG}


def model_names() -> list[str]:
    return [m.name for m in CATALOG]


def get_model(name: str) -> GrowthModel:
    model = _BY_NAME.get(name)
    if model is None:
        raise ModelNotFoundError(name)
    return model
