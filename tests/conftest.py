from __future__ import annotations

import logging

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest


@pytest.fixture(autouse=True)
def _cleanup_logging_and_figures():
    root = logging.getLogger()
    level = root.level
    yield
    # drop handlers installed by configure_logging, keep pytest's capture handlers
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            handler.close()
            root.removeHandler(handler)
    root.setLevel(level)
    logging.getLogger("matplotlib").setLevel(logging.NOTSET)
    plt.close("all")


@pytest.fixture
def five() -> np.ndarray:
    return np.array([1.0, 2.0, 3.0, 4.0, 5.0])


@pytest.fixture
def normal_data() -> np.ndarray:
    return np.random.default_rng(2024).normal(10.0, 2.0, size=200)
