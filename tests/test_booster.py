"""Tests for whitetailed_sirs.booster."""

import numpy as np
import pytest

from whitetailed_sirs.booster import booster_window, stepwise
from whitetailed_sirs.errors import InvalidArgumentError


class TestBoosterWindow:

    def test_window(self):
        boost = booster_window(0.2, start=365, end=730)
        assert boost(0) == 0.0
        assert boost(364.9) == 0.0
        assert boost(365) == 0.2
        assert boost(729.9) == 0.2
        assert boost(730) == 0.0

    def test_open_ended(self):
        boost = booster_window(1.0)
        assert boost(0) == 1.0
        assert boost(1e6) == 1.0

    def test_order_independent(self):
        boost = booster_window(0.5, start=10, end=20)
        assert [boost(t) for t in (15, 5, 25, 15)] == [0.5, 0.0, 0.0, 0.5]

    @pytest.mark.parametrize(
        "rate, start, end",
        [(-0.1, 0, 10), (float("nan"), 0, 10), (np.inf, 0, 10), (0.1, 10, 10), (0.1, 10, 5)],
    )
    def test_invalid(self, rate, start, end):
        with pytest.raises(InvalidArgumentError):
            booster_window(rate, start, end)


class TestStepwise:

    def test_schedule(self):
        f = stepwise([0, 7, 14], [0.01, 0.05, 0.02])
        assert f(-1) == 0.01
        assert f(0) == 0.01
        assert f(6.99) == 0.01
        assert f(7) == 0.05
        assert f(13) == 0.05
        assert f(14) == 0.02
        assert f(1000) == 0.02

    def test_single_value(self):
        assert stepwise([0], [0.3])(42) == 0.3

    def test_returns_float(self):
        assert isinstance(stepwise(np.array([0.0]), np.array([0.3]))(1), float)

    @pytest.mark.parametrize(
        "breakpoints, values",
        [([], []), ([0, 1], [0.1]), ([0, 0], [0.1, 0.2]), ([5, 1], [0.1, 0.2])],
    )
    def test_invalid(self, breakpoints, values):
        with pytest.raises(InvalidArgumentError):
            stepwise(breakpoints, values)
