import numpy as np
import pytest

from whitetailed_sirs.model import Params

RATE_NAMES = [
    "alpha_immunity",
    "gamma_recov",
    "beta_aero_ww",
    "beta_aero_cw",
    "beta_aero_cc",
    "beta_aero_hw",
    "beta_aero_hc",
    "beta_dc_ww",
    "beta_dc_cw",
    "beta_dc_cc",
    "beta_wastewater",
    "beta_food_waste",
    "beta_feed_pile",
]


@pytest.fixture
def scenario_params() -> dict:
    """All betas 0.01 except beta_aero_hc = 0.2; I_human = 0.05, no boosters."""
    p = {name: 0.01 for name in RATE_NAMES if name.startswith("beta")}
    p.update(
        beta_aero_hc=0.2,
        gamma_recov=0.01,
        alpha_immunity=0.03,
        I_human=0.05,
        boost=0.0,
    )
    return p


@pytest.fixture
def zero_params() -> Params:
    return Params.from_mapping({name: 0.0 for name in RATE_NAMES + ["I_human", "boost"]})


@pytest.fixture
def naive_state() -> np.ndarray:
    """Fully susceptible herds."""
    return np.array([1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0])
