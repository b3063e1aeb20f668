"""
SIRS model for wild and captive white-tailed deer with direct and indirect
transmission. This file only contains the model structure; the numerical
solver is handled in solve.py.

This module provides:
- A `Params` dataclass containing all model parameters.
- `force_of_infection` / `forces`, the per-population infection pressure.
- `model_ode`, the right-hand side with cumulative-incidence accumulators.
- `simple_sirs_ode`, the same system without accumulators (for steady-state
  solvers, which cannot handle the unbounded cumulative terms).

Dependencies:
    numpy
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass, asdict, fields
from typing import Callable, Dict, Mapping, Tuple, Union

import numpy as np

from .errors import InvalidArgumentError, MissingParameterError

# A rate may be held constant or supplied as a function of time (days).
Rate = Union[float, Callable[[float], float]]


# --------------------------------------------------------------------------------------
# State layout
# --------------------------------------------------------------------------------------

STATE_NAMES: Tuple[str, ...] = (
    "S_wild",
    "I_wild",
    "R_wild",
    "I_wild_cumulative",
    "S_captive",
    "I_captive",
    "R_captive",
    "I_captive_cumulative",
)

SIMPLE_STATE_NAMES: Tuple[str, ...] = (
    "S_wild",
    "I_wild",
    "R_wild",
    "S_captive",
    "I_captive",
    "R_captive",
)


# --------------------------------------------------------------------------------------
# Parameters
# --------------------------------------------------------------------------------------

@dataclass(frozen=True)
class Params:
    """
    Model parameters.

    All rates are per day; subscripts w = wild deer, c = captive deer,
    h = humans.

    Immunity and recovery:
        alpha_immunity : float  Waning immunity rate, R -> S (day^-1)
        gamma_recov    : float  Recovery rate, I -> R (day^-1)

    Aerosol transmission:
        beta_aero_ww : float  wild -> wild
        beta_aero_cw : float  captive <-> wild
        beta_aero_cc : float  captive -> captive
        beta_aero_hw : float  human -> wild
        beta_aero_hc : float  human -> captive

    Direct contact transmission:
        beta_dc_ww : float  wild -> wild
        beta_dc_cw : float  captive <-> wild
        beta_dc_cc : float  captive -> captive

    Indirect transmission (wild deer only):
        beta_wastewater : float  Exposure to wastewater (constant pressure)
        beta_food_waste : float  Human food waste, scaled by I_human
        beta_feed_pile  : float  Shared feed piles, scaled by I_wild

    Forcing and management:
        I_human : float or f(t)  Proportion of infected humans, in [0, 1]
        boost   : float or f(t)  Vaccine booster rate moving captive S -> R;
                                 0 when no booster is applied
    """
    # Immunity and recovery
    alpha_immunity: float
    gamma_recov: float

    # Aerosol
    beta_aero_ww: float
    beta_aero_cw: float
    beta_aero_cc: float
    beta_aero_hw: float
    beta_aero_hc: float

    # Direct contact
    beta_dc_ww: float
    beta_dc_cw: float
    beta_dc_cc: float

    # Indirect
    beta_wastewater: float
    beta_food_waste: float
    beta_feed_pile: float

    # Forcing and management
    I_human: Rate
    boost: Rate

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Rate]) -> "Params":
        """
        Build Params from a dict (or pandas Series). Extra keys are ignored;
        a missing key raises MissingParameterError rather than defaulting.
        """
        names = [f.name for f in fields(cls)]
        missing = [name for name in names if name not in mapping]
        if missing:
            raise MissingParameterError(missing)
        return cls(**{name: mapping[name] for name in names})

    def to_dict(self) -> Dict[str, Rate]:
        return asdict(self)

    def validate(self) -> "Params":
        """
        Check that constant rates are finite and non-negative and that a
        constant I_human lies in [0, 1]. Time-varying entries are not checked.
        """
        for f in fields(self):
            value = getattr(self, f.name)
            if callable(value):
                continue
            if isinstance(value, (str, bytes, bool)) or not isinstance(value, numbers.Real):
                raise InvalidArgumentError(
                    f"Parameter {f.name} must be a real number or a function of time, "
                    f"got {value!r}"
                )
            if not np.isfinite(value) or value < 0:
                raise InvalidArgumentError(
                    f"Parameter {f.name} must be finite and non-negative, got {value}"
                )
        if not callable(self.I_human) and self.I_human > 1:
            raise InvalidArgumentError(f"I_human must lie in [0, 1], got {self.I_human}")
        return self


def as_params(p: Union[Params, Mapping[str, Rate]]) -> Params:
    """Return `p` unchanged if it is already Params, else convert it."""
    if isinstance(p, Params):
        return p
    return Params.from_mapping(p)


def rate_at(value: Rate, t: float) -> float:
    """Evaluate a constant or time-varying rate at time t."""
    return value(t) if callable(value) else value


# --------------------------------------------------------------------------------------
# Force of infection
# --------------------------------------------------------------------------------------

def force_of_infection(
    S: float,
    I_own: float,
    I_other: float,
    beta_own: float,
    beta_cross: float,
    human_term: float,
    environmental: float = 0.0,
) -> float:
    """
    New infections per day in one sub-population:

        S * (beta_own * I_own + beta_cross * I_other + human_term + environmental)
    """
    return S * (beta_own * I_own + beta_cross * I_other + human_term + environmental)


def forces(
    t: float,
    S_wild: float,
    I_wild: float,
    S_captive: float,
    I_captive: float,
    p: Params,
) -> Tuple[float, float]:
    """
    Forces of infection (wild, captive) at time t.

    Wild deer are exposed to aerosol and direct contact from both herds,
    aerosol from humans, wastewater, human food waste and feed piles.
    Captive deer are exposed to aerosol and direct contact from both herds
    and aerosol from humans.
    """
    I_human = rate_at(p.I_human, t)
    beta_cross = p.beta_aero_cw + p.beta_dc_cw

    force_wild = force_of_infection(
        S_wild,
        I_wild,
        I_captive,
        beta_own=p.beta_aero_ww + p.beta_dc_ww + p.beta_feed_pile,
        beta_cross=beta_cross,
        human_term=(p.beta_aero_hw + p.beta_food_waste) * I_human,
        environmental=p.beta_wastewater,
    )
    force_captive = force_of_infection(
        S_captive,
        I_captive,
        I_wild,
        beta_own=p.beta_aero_cc + p.beta_dc_cc,
        beta_cross=beta_cross,
        human_term=p.beta_aero_hc * I_human,
    )
    return force_wild, force_captive


# --------------------------------------------------------------------------------------
# ODE right-hand sides
# --------------------------------------------------------------------------------------

def _sirs_flows(t, S_wild, I_wild, R_wild, S_captive, I_captive, R_captive, p):
    # Shared by both RHS variants; the forces are returned so the cumulative
    # accumulators reuse exactly the values that enter dI/dt.
    force_wild, force_captive = forces(t, S_wild, I_wild, S_captive, I_captive, p)
    boost = rate_at(p.boost, t)

    # Recovery and waning immunity
    recovered_wild = p.gamma_recov * I_wild
    recovered_captive = p.gamma_recov * I_captive
    waned_wild = p.alpha_immunity * R_wild
    waned_captive = p.alpha_immunity * R_captive

    # Boosters (captive S -> R)
    boosted = boost * S_captive

    # ODEs: wild deer
    dS_wild = waned_wild - force_wild
    dI_wild = force_wild - recovered_wild
    dR_wild = recovered_wild - waned_wild

    # ODEs: captive deer
    dS_captive = waned_captive - force_captive - boosted
    dI_captive = force_captive - recovered_captive
    dR_captive = recovered_captive - waned_captive + boosted

    return (dS_wild, dI_wild, dR_wild, dS_captive, dI_captive, dR_captive,
            force_wild, force_captive)


def model_ode(
    t: float,
    y: np.ndarray,
    p: Union[Params, Mapping[str, Rate]],
) -> np.ndarray:
    """
    Right-hand side of the ODE system dy/dt = f(t, y; p).

    State vector y (length 8, proportions):
        0  S_wild                Susceptible wild deer
        1  I_wild                Infected wild deer
        2  R_wild                Recovered wild deer
        3  I_wild_cumulative     Cumulative infected wild deer
        4  S_captive             Susceptible captive deer
        5  I_captive             Infected captive deer
        6  R_captive             Recovered captive deer
        7  I_captive_cumulative  Cumulative infected captive deer

    The cumulative entries integrate the force of infection and never feed
    back into S, I or R; they may exceed 1 over long runs.

    No range checks are made on y: solver overshoot into negative values,
    NaN or inf propagates through the arithmetic untouched.

    Returns:
        dydt: np.ndarray of shape (8,)
    """
    p = as_params(p)
    S_wild, I_wild, R_wild, _, S_captive, I_captive, R_captive, _ = y

    (dS_wild, dI_wild, dR_wild, dS_captive, dI_captive, dR_captive,
     force_wild, force_captive) = _sirs_flows(
        t, S_wild, I_wild, R_wild, S_captive, I_captive, R_captive, p
    )

    return np.array(
        [dS_wild, dI_wild, dR_wild, force_wild,
         dS_captive, dI_captive, dR_captive, force_captive],
        dtype=float,
    )


def simple_sirs_ode(
    t: float,
    y: np.ndarray,
    p: Union[Params, Mapping[str, Rate]],
) -> np.ndarray:
    """
    Right-hand side without cumulative accumulators.

    State vector y (length 6): S_wild, I_wild, R_wild, S_captive, I_captive,
    R_captive. Every trajectory of this system is bounded, so it can be run
    to a numerical steady state.

    Returns:
        dydt: np.ndarray of shape (6,)
    """
    p = as_params(p)
    S_wild, I_wild, R_wild, S_captive, I_captive, R_captive = y

    flows = _sirs_flows(t, S_wild, I_wild, R_wild, S_captive, I_captive, R_captive, p)

    return np.array(flows[:6], dtype=float)
