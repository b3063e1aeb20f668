"""
SIRS model of SARS-CoV-2 in wild and captive white-tailed deer with direct
and indirect transmission, spillover from humans and vaccine boosters for
captive herds.
"""

from .errors import (
    InvalidArgumentError,
    MissingParameterError,
    SIRSError,
    SolverFailureError,
)
from .model import (
    SIMPLE_STATE_NAMES,
    STATE_NAMES,
    Params,
    force_of_infection,
    forces,
    model_ode,
    simple_sirs_ode,
)
from .solve import (
    SolverConfig,
    build_y0,
    results_to_dataframe,
    rk4_step,
    run_sirs,
    simulate,
    simulate_rk4,
)
from .booster import booster_window, stepwise
from .dose_response import K_PFU, p_infect_pfu
from .waste_load import LinearLoadModel, LoadPrediction, predict_waste_load

__all__ = [
    "SIRSError",
    "InvalidArgumentError",
    "MissingParameterError",
    "SolverFailureError",
    "STATE_NAMES",
    "SIMPLE_STATE_NAMES",
    "Params",
    "force_of_infection",
    "forces",
    "model_ode",
    "simple_sirs_ode",
    "SolverConfig",
    "build_y0",
    "results_to_dataframe",
    "rk4_step",
    "run_sirs",
    "simulate",
    "simulate_rk4",
    "booster_window",
    "stepwise",
    "K_PFU",
    "p_infect_pfu",
    "LinearLoadModel",
    "LoadPrediction",
    "predict_waste_load",
]
