from __future__ import annotations

import math

import pytest

from bigofit.errors import ModelNotFoundError
from bigofit.fit.catalog import CATALOG, get_model, model_names

EXPECTED_ORDER = [
    "O(1)",
    "O(log n)",
    "O(n)",
    "O(n log n)",
    "O(n^2)",
    "O(n^2 log n)",
    "O(n^3)",
    "O(2^n)",
]


def test_catalog_has_eight_models_in_fixed_order() -> None:
    assert len(CATALOG) == 8
    assert model_names() == EXPECTED_ORDER
    assert isinstance(CATALOG, tuple)


def test_get_model_returns_catalog_entry() -> None:
    for model in CATALOG:
        assert get_model(model.name) is model


@pytest.mark.parametrize("name", ["O(n!)", "o(n)", "", "O(n log n) "])
def test_get_model_unknown_name_raises(name: str) -> None:
    with pytest.raises(ModelNotFoundError) as exc:
        get_model(name)
    assert exc.value.name == name


def test_model_not_found_is_a_lookup_error() -> None:
    with pytest.raises(LookupError):
        get_model("O(n^4)")


def test_log_growth_values() -> None:
    n = 1000
    ln_n = math.log(n)
    ln_ln_n = math.log(ln_n)
    assert get_model("O(1)").log_growth(n) == 0.0
    assert get_model("O(log n)").log_growth(n) == pytest.approx(ln_ln_n)
    assert get_model("O(n)").log_growth(n) == pytest.approx(ln_n)
    assert get_model("O(n log n)").log_growth(n) == pytest.approx(ln_n + ln_ln_n)
    assert get_model("O(n^2)").log_growth(n) == pytest.approx(2 * ln_n)
    assert get_model("O(n^2 log n)").log_growth(n) == pytest.approx(2 * ln_n + ln_ln_n)
    assert get_model("O(n^3)").log_growth(n) == pytest.approx(3 * ln_n)
    assert get_model("O(2^n)").log_growth(n) == pytest.approx(n * math.log(2))


def test_every_model_is_finite_at_size_one() -> None:
    for model in CATALOG:
        assert math.isfinite(model.log_growth(1))


def test_models_accept_huge_sizes() -> None:
    for n in (10**200, 10**400):
        for model in CATALOG:
            value = model.log_growth(n)
            assert value > 0.0 or model.name == "O(1)"
            if model.name != "O(2^n)":
                assert math.isfinite(value)


def test_exponential_growth_saturates_beyond_float_range() -> None:
    exponential = get_model("O(2^n)")
    assert exponential.log_growth(10**200) == pytest.approx(10**200 * math.log(2))
    assert exponential.log_growth(10**400) == math.inf
