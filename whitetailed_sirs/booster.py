"""
Time-varying management and forcing terms.

`Params.boost` and `Params.I_human` accept either a constant or a function
of time. The helpers here build the usual shapes:

- `booster_window`: boosters given to captive deer at a fixed rate between a
  start and an end day (e.g. a vaccination campaign starting in year 1).
- `stepwise`: a piecewise-constant schedule, e.g. weekly human positivity
  from surveillance data.

Both are plain functions of t with no state, so the solver may evaluate them
in any order.
"""

from __future__ import annotations

from typing import Callable, Sequence

import numpy as np

from .errors import InvalidArgumentError


def booster_window(rate: float, start: float = 0.0, end: float = np.inf) -> Callable[[float], float]:
    """Return boost(t) = rate for start <= t < end, 0 otherwise."""
    if not np.isfinite(rate) or rate < 0:
        raise InvalidArgumentError(f"Booster rate must be finite and non-negative, got {rate}")
    if end <= start:
        raise InvalidArgumentError(f"Booster window must end after it starts ({start}, {end})")

    def boost(t: float) -> float:
        return rate if start <= t < end else 0.0

    return boost


def stepwise(breakpoints: Sequence[float], values: Sequence[float]) -> Callable[[float], float]:
    """
    Return f(t) equal to values[k] for breakpoints[k] <= t < breakpoints[k+1].

    Before the first breakpoint the first value applies; after the last one
    the last value holds.
    """
    breakpoints = np.asarray(breakpoints, dtype=float)
    values = np.asarray(values, dtype=float)
    if breakpoints.ndim != 1 or breakpoints.size == 0 or breakpoints.shape != values.shape:
        raise InvalidArgumentError("breakpoints and values must be non-empty and of equal length.")
    if np.any(np.diff(breakpoints) <= 0):
        raise InvalidArgumentError("breakpoints must be strictly increasing.")

    def schedule(t: float) -> float:
        k = np.searchsorted(breakpoints, t, side='right') - 1
        return float(values[max(k, 0)])

    return schedule
