"""
Numerical integration of the deer SIRS model.

This module provides:
- `SolverConfig`, the solver method and tolerances.
- `simulate`, which integrates `model_ode` (or `simple_sirs_ode`) with
  `scipy.integrate.solve_ivp` and reports the state at the requested times.
- `results_to_dataframe` / `run_sirs`, which return the trajectory as a
  tidy DataFrame.
- `rk4_step` / `simulate_rk4`, a fixed-step integrator for cross-checks.

Usage (CLI):
    $ python -m whitetailed_sirs.solve

Dependencies:
    numpy, pandas, scipy
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Mapping, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd
from scipy.integrate import solve_ivp

from .errors import InvalidArgumentError, MissingParameterError, SolverFailureError
from .model import (
    SIMPLE_STATE_NAMES,
    STATE_NAMES,
    Params,
    as_params,
    model_ode,
    simple_sirs_ode,
)

logger = logging.getLogger(__name__)

# ---- Config -----------------------------------------------------------------

DEFAULT_METHOD = "LSODA"   # switches between Adams and BDF when the system turns stiff
DEFAULT_RTOL = 1e-6
DEFAULT_ATOL = 1e-9


@dataclass(frozen=True)
class SolverConfig:
    """
    Solver settings, fixed before a run starts.

    method   : any method accepted by `solve_ivp` ("LSODA", "RK45", "BDF", ...)
    rtol     : relative tolerance
    atol     : absolute tolerance
    max_step : largest step the solver may take (days)
    """

    method: str = DEFAULT_METHOD
    rtol: float = DEFAULT_RTOL
    atol: float = DEFAULT_ATOL
    max_step: float = np.inf


# ---- Helpers ----------------------------------------------------------------

def build_y0(IC_dict: Mapping, names: Sequence[str] = STATE_NAMES) -> np.ndarray:
    """
    Map initial conditions to the state order expected by the RHS.

    Accepts plain values (``{"S_wild": 1, ...}``) or the
    ``{"name": "constant", "args": {"value": v}}`` form of params_and_ic.
    """
    missing = [name for name in names if name not in IC_dict]
    if missing:
        raise MissingParameterError(missing)

    y0 = []
    for name in names:
        entry = IC_dict[name]
        if isinstance(entry, Mapping):
            entry = entry['args']['value']
        y0.append(float(entry))
    return np.array(y0, dtype=float)


def _check_times(times: Iterable[float]) -> np.ndarray:
    t_eval = np.asarray(times, dtype=float)
    if t_eval.ndim != 1 or t_eval.size < 2:
        raise InvalidArgumentError("times must be a 1-D sequence of at least two values.")
    if not np.all(np.isfinite(t_eval)):
        raise InvalidArgumentError("times must be finite.")
    if np.any(np.diff(t_eval) <= 0):
        raise InvalidArgumentError("times must be strictly increasing.")
    return t_eval


def _check_y0(y0, names: Sequence[str]) -> np.ndarray:
    if isinstance(y0, Mapping):
        y0 = build_y0(y0, names)
    else:
        y0 = np.array(list(y0), dtype=float)
    if y0.shape != (len(names),):
        raise InvalidArgumentError(f"y0 must have {len(names)} elements {list(names)}.")
    if not np.all(np.isfinite(y0)) or np.any(y0 < 0):
        raise InvalidArgumentError("y0 must contain finite, non-negative proportions.")
    return y0


# ---- Integration ------------------------------------------------------------

def simulate(
    y0: Union[Iterable[float], Mapping],
    times: Iterable[float],
    params: Union[Params, Mapping],
    config: Optional[SolverConfig] = None,
    cumulative: bool = True,
):
    """
    Integrate the ODE system and report the state at each of `times`.

    Args:
        y0: Initial state, in STATE_NAMES order (SIMPLE_STATE_NAMES when
            `cumulative` is False) or a mapping keyed by state name.
        times: Output times (days), at least two and strictly increasing;
            the first is the initial time. A single time is rejected since
            the integration span would be empty.
        params: Params or a mapping with every Params field.
        config: SolverConfig; defaults to LSODA with rtol=1e-6, atol=1e-9.
        cumulative: Integrate `model_ode` (True) or `simple_sirs_ode` (False).

    Returns:
        SciPy `OdeResult` as returned by `solve_ivp`, with `t == times`.

    Raises:
        InvalidArgumentError: bad time grid, state or parameter values.
        MissingParameterError: params or y0 lacks a required key.
        SolverFailureError: the solver did not reach the final time.
    """
    if config is None:
        config = SolverConfig()

    p = as_params(params).validate()
    names = STATE_NAMES if cumulative else SIMPLE_STATE_NAMES
    y0 = _check_y0(y0, names)
    t_eval = _check_times(times)

    rhs_fn = model_ode if cumulative else simple_sirs_ode

    # Wrap RHS with params closed over
    def rhs(t, y):
        return rhs_fn(t, y, p)

    logger.debug(
        "Integrating %s over [%g, %g] with %s (rtol=%g, atol=%g), %d output times",
        rhs_fn.__name__, t_eval[0], t_eval[-1], config.method,
        config.rtol, config.atol, t_eval.size,
    )

    sol = solve_ivp(
        rhs,
        t_span=(float(t_eval[0]), float(t_eval[-1])),
        y0=y0,
        t_eval=t_eval,
        method=config.method,
        rtol=config.rtol,
        atol=config.atol,
        max_step=config.max_step,
        vectorized=False,
    )

    if not sol.success:
        raise SolverFailureError(f"Solver failed: {sol.message}", result=sol)

    # Multistep dense output only approximates the state at t0
    sol.y[:, 0] = y0

    logger.debug("Solver finished: %d RHS evaluations", sol.nfev)
    return sol


def results_to_dataframe(
    sol,
    cumulative: bool = True,
    totals: bool = False,
) -> pd.DataFrame:
    """
    Convert a SciPy OdeResult into a DataFrame with one row per output time.

    Columns produced:
        time, S_wild, I_wild, R_wild, I_wild_cumulative,
        S_captive, I_captive, R_captive, I_captive_cumulative
    (without the cumulative columns when `cumulative` is False), plus, when
    `totals` is True:
        Total_wild, Total_captive, prevalence_I_wild, prevalence_I_captive
    """
    if sol.t is None or sol.y is None:
        raise ValueError("Invalid OdeResult: missing solution arrays.")

    names = STATE_NAMES if cumulative else SIMPLE_STATE_NAMES
    Y = sol.y  # shape (len(names), len(t))
    if Y.shape[0] != len(names):
        raise InvalidArgumentError(f"Expected {len(names)} state rows, got {Y.shape[0]}.")

    df = pd.DataFrame({"time": sol.t})
    for i, name in enumerate(names):
        df[name] = Y[i]

    if totals:
        df["Total_wild"] = df["S_wild"] + df["I_wild"] + df["R_wild"]
        df["Total_captive"] = df["S_captive"] + df["I_captive"] + df["R_captive"]

        # Prevalences (guard against zero totals)
        df["prevalence_I_wild"] = np.where(
            df["Total_wild"] > 0, df["I_wild"] / df["Total_wild"], 0.0
        )
        df["prevalence_I_captive"] = np.where(
            df["Total_captive"] > 0, df["I_captive"] / df["Total_captive"], 0.0
        )

    return df


def run_sirs(
    y0: Union[Iterable[float], Mapping],
    times: Iterable[float],
    params: Union[Params, Mapping],
    config: Optional[SolverConfig] = None,
) -> pd.DataFrame:
    """Integrate the cumulative model and return the trajectory DataFrame."""
    sol = simulate(y0, times, params, config=config)
    return results_to_dataframe(sol)


# ---- Fixed-step integration -------------------------------------------------

def rk4_step(
    rhs_fn: Callable[[float, np.ndarray, Params], np.ndarray],
    t: float,
    y: np.ndarray,
    p: Params,
    dt: float,
) -> np.ndarray:
    """
    Perform one RK4 (Runge-Kutta 4th order) integration step.

    Parameters
    ----------
    rhs_fn : Callable
        Right-hand side with signature rhs(t, y, p) -> dydt.
    t : float
        Current time.
    y : np.ndarray
        Current state vector.
    p : Params
        Model parameters.
    dt : float
        Time step size.

    Returns
    -------
    y_next : np.ndarray
        State at time t + dt.
    """
    k1 = rhs_fn(t, y, p)
    k2 = rhs_fn(t + 0.5 * dt, y + 0.5 * dt * k1, p)
    k3 = rhs_fn(t + 0.5 * dt, y + 0.5 * dt * k2, p)
    k4 = rhs_fn(t + dt, y + dt * k3, p)

    return y + (dt / 6.0) * (k1 + 2.0 * k2 + 2.0 * k3 + k4)


def simulate_rk4(
    y0: Union[Iterable[float], Mapping],
    times: Iterable[float],
    params: Union[Params, Mapping],
    substeps: int = 10,
    cumulative: bool = True,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Integrate with fixed-step RK4, taking `substeps` equal steps between
    consecutive output times. `times` follows the same rules as in
    `simulate`: at least two, strictly increasing.

    Returns
    -------
    ts : np.ndarray
        Output times, shape (N,).
    ys : np.ndarray
        State trajectory, shape (N, n_states). ys[k] is the state at ts[k].
    """
    if substeps < 1:
        raise InvalidArgumentError("substeps must be at least 1.")

    p = as_params(params).validate()
    names = STATE_NAMES if cumulative else SIMPLE_STATE_NAMES
    y = _check_y0(y0, names)
    ts = _check_times(times)
    rhs_fn = model_ode if cumulative else simple_sirs_ode

    ys = np.zeros((ts.size, len(names)), dtype=np.float64)
    ys[0] = y

    for k in range(ts.size - 1):
        dt = (ts[k + 1] - ts[k]) / substeps
        t = ts[k]
        for j in range(substeps):
            y = rk4_step(rhs_fn, t, y, p, dt)
            t = ts[k] + (j + 1) * dt
        ys[k + 1] = y

    return ts, ys


# ---- Main -------------------------------------------------------------------

def main():
    from .params_and_ic import IC, TIMES, params

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    df = run_sirs(IC, TIMES, params)

    for herd in ("wild", "captive"):
        peak = df[f"I_{herd}"].idxmax()
        logger.info(
            "%s deer: peak prevalence %.4f on day %g, final prevalence %.4f, "
            "cumulative infected %.4f",
            herd.capitalize(), df.at[peak, f"I_{herd}"], df.at[peak, "time"],
            df[f"I_{herd}"].iloc[-1], df[f"I_{herd}_cumulative"].iloc[-1],
        )
    return df


if __name__ == "__main__":
    main()
