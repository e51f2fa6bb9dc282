from __future__ import annotations

import math

import pytest

from bigofit.errors import DomainError, MinimumSampleSizeError
from bigofit.fit.catalog import get_model
from bigofit.fit.fitter import check_series, score
from bigofit.fit.models import Sample


def _series(sizes: list[int], costs: list[int]) -> list[Sample]:
    return [Sample(size=n, cost=c) for n, c in zip(sizes, costs, strict=True)]


def test_exact_shape_has_zero_residual() -> None:
    series = _series([10, 100, 1000], [30, 300, 3000])
    scored = score(get_model("O(n)"), series)
    assert scored.name == "O(n)"
    assert scored.residual < 1e-12


def test_wrong_shape_has_positive_residual() -> None:
    series = _series([10, 100, 1000], [30, 300, 3000])
    assert score(get_model("O(n^2)"), series).residual > 1.0


def test_residual_ignores_cost_scale() -> None:
    sizes = [10, 20, 40, 80]
    costs = [13, 41, 150, 700]
    base = score(get_model("O(n log n)"), _series(sizes, costs)).residual
    scaled = score(get_model("O(n log n)"), _series(sizes, [c * 1000 for c in costs])).residual
    assert scaled == pytest.approx(base, abs=1e-9)


def test_single_sample_residual_is_zero() -> None:
    assert score(get_model("O(n^3)"), [Sample(7, 99)]).residual == 0.0


def test_exponential_costs_beyond_float_range() -> None:
    series = _series([1000, 2000, 3000], [2**1000, 2**2000, 2**3000])
    assert score(get_model("O(2^n)"), series).residual < 1e-9
    assert score(get_model("O(n^3)"), series).residual > 1.0


def test_empty_series_raises_minimum_sample_size() -> None:
    with pytest.raises(MinimumSampleSizeError):
        score(get_model("O(n)"), [])


@pytest.mark.parametrize(
    ("size", "cost"),
    [(0, 5), (5, 0), (-3, 5), (5, -1)],
)
def test_non_positive_sample_raises_domain_error(size: int, cost: int) -> None:
    series = [Sample(1, 1), Sample(size, cost)]
    with pytest.raises(DomainError) as exc:
        score(get_model("O(n)"), series)
    assert exc.value.index == 1


def test_check_series_honours_min_samples() -> None:
    with pytest.raises(MinimumSampleSizeError) as exc:
        check_series([Sample(2, 2)], min_samples=2)
    assert exc.value.required == 2
    check_series([Sample(2, 2)], min_samples=0)


def test_huge_deviations_score_infinite_instead_of_overflowing() -> None:
    series = _series([10**200, 2 * 10**200, 4 * 10**200], [10**200, 2 * 10**200, 4 * 10**200])
    assert score(get_model("O(2^n)"), series).residual == math.inf
    assert score(get_model("O(n)"), series).residual < 1e-9


def test_sizes_beyond_float_range_score_infinite_for_exponential() -> None:
    series = _series([10**400, 10**401], [5, 50])
    assert score(get_model("O(2^n)"), series).residual == math.inf
    assert score(get_model("O(n)"), series).residual < 1e-9
