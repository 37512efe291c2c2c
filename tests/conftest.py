"""Shared fixtures. Figures are drawn with the non-interactive Agg backend."""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from step_configs import step1, step3  # noqa: E402


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


@pytest.fixture
def step1_text():
    return step1.to_json()


@pytest.fixture
def step3_text():
    return step3.to_json()
