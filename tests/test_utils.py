from __future__ import annotations

import numpy as np
import pytest

from resampling.errors import InvalidInput
from resampling.utils import as_sample, check_iterations, make_rng


def test_as_sample_returns_read_only_copy() -> None:
    values = [1, 2, 3]
    sample = as_sample(values)

    assert sample.dtype == float
    assert not sample.flags.writeable
    with pytest.raises(ValueError):
        sample[0] = 10.0
    assert values == [1, 2, 3]


def test_as_sample_does_not_alias_caller_array() -> None:
    arr = np.array([1.0, 2.0])
    sample = as_sample(arr)
    arr[0] = 99.0
    assert sample[0] == 1.0


def test_as_sample_keeps_nan() -> None:
    sample = as_sample([1.0, np.nan])
    assert np.isnan(sample[1])


@pytest.mark.parametrize("bad", [[], [[1.0, 2.0], [3.0, 4.0]], ["a", "b"], 3.0])
def test_as_sample_rejects_bad_input(bad) -> None:
    with pytest.raises(InvalidInput):
        as_sample(bad)


def test_check_iterations_accepts_numpy_integers() -> None:
    assert check_iterations(np.int64(7)) == 7


@pytest.mark.parametrize("bad", [0, -3, 2.5, True, "10", None])
def test_check_iterations_rejects(bad) -> None:
    with pytest.raises(InvalidInput):
        check_iterations(bad)


def test_check_iterations_names_the_argument() -> None:
    with pytest.raises(InvalidInput, match="workers"):
        check_iterations(0, "workers")


def test_make_rng_passes_generator_through() -> None:
    gen = np.random.default_rng(1)
    assert make_rng(gen) is gen


def test_make_rng_seed_is_reproducible() -> None:
    a = make_rng(5).integers(0, 1000, size=10)
    b = make_rng(5).integers(0, 1000, size=10)
    c = make_rng(np.random.SeedSequence(5)).integers(0, 1000, size=10)
    assert np.array_equal(a, b)
    assert np.array_equal(a, c)


def test_make_rng_none_gives_generator() -> None:
    assert isinstance(make_rng(None), np.random.Generator)


@pytest.mark.parametrize("bad", [-1, "seed", 1.5, True])
def test_make_rng_rejects(bad) -> None:
    with pytest.raises(InvalidInput):
        make_rng(bad)
