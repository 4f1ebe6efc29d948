from __future__ import annotations

import logging

import numpy as np
import pytest

from resampling import statistics as st
from resampling.errors import InvalidInput, StatisticError

WITH_NAN = [1.0, np.nan, 3.0]


def test_mean_default_propagates_nan() -> None:
    assert np.isnan(st.mean(WITH_NAN))


def test_mean_omit_uses_remainder() -> None:
    assert st.mean(WITH_NAN, nan_policy="omit") == pytest.approx(2.0)


def test_mean_raise_policy() -> None:
    with pytest.raises(StatisticError, match="1 NaN"):
        st.mean(WITH_NAN, nan_policy="raise")


def test_clean_input_is_unaffected_by_policy() -> None:
    values = [2.0, 4.0, 9.0]
    for policy in st.NAN_POLICIES:
        assert st.mean(values, nan_policy=policy) == pytest.approx(5.0)
        assert st.median(values, nan_policy=policy) == pytest.approx(4.0)


def test_omit_with_only_nan_has_nothing_left() -> None:
    with pytest.raises(StatisticError, match="nothing left"):
        st.mean([np.nan, np.nan], nan_policy="omit")


def test_empty_input_raises() -> None:
    with pytest.raises(StatisticError):
        st.median([])


def test_unknown_policy() -> None:
    with pytest.raises(InvalidInput):
        st.mean([1.0], nan_policy="ignore")


def test_std_matches_numpy() -> None:
    values = [1.0, 2.0, 3.0, 4.0]
    assert st.std(values) == pytest.approx(np.std(values, ddof=1))
    assert st.std(values, ddof=0) == pytest.approx(np.std(values))


def test_std_of_single_value_is_undefined() -> None:
    assert np.isnan(st.std([3.0]))


def test_median_omit() -> None:
    assert st.median([5.0, np.nan, 1.0, 3.0], nan_policy="omit") == pytest.approx(3.0)


def test_with_nan_policy_binds_and_names() -> None:
    stat = st.with_nan_policy(st.mean, "omit")

    assert stat.__name__ == "mean[omit]"
    assert stat.nan_policy == "omit"
    assert stat(WITH_NAN) == pytest.approx(2.0)


def test_with_nan_policy_rejects_unknown_policy() -> None:
    with pytest.raises(InvalidInput):
        st.with_nan_policy(st.mean, "drop")


def test_omitted_values_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="resampling.statistics")
    st.mean(WITH_NAN, nan_policy="omit")
    assert "mean: omitted 1 of 3 values" in caplog.text
