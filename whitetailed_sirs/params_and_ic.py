"""

Parameter dictionary (`params`), initial conditions (`IC`) and output times
(`TIMES`) for the wild / captive deer SIRS model.

This file is intentionally simple (plain dicts) so other scripts can
`import params, IC` without extra dependencies or types.
"""

import numpy as np

# ---------------------------
# Parameters (per day unless noted)
# ---------------------------
params = {
    # Immunity and recovery
    'alpha_immunity': 0.03,     # waning immunity rate (R -> S)
    'gamma_recov': 0.01,        # recovery rate (I -> R)

    # Aerosol transmission (ww: wild-wild, cw: captive-wild, cc: captive-captive,
    # hw: human-wild, hc: human-captive)
    'beta_aero_ww': 0.01,
    'beta_aero_cw': 0.01,
    'beta_aero_cc': 0.02,
    'beta_aero_hw': 0.01,
    'beta_aero_hc': 0.2,

    # Direct contact transmission
    'beta_dc_ww': 0.01,
    'beta_dc_cw': 0.01,
    'beta_dc_cc': 0.01,

    # Indirect (environmental) routes, wild deer only
    'beta_wastewater': 0.001,
    'beta_food_waste': 0.001,
    'beta_feed_pile': 0.001,

    # Proportion of infected humans (spillover forcing)
    'I_human': 0.05,

    # Vaccine booster rate for captive deer (0 = no management)
    'boost': 0,
}

# ---------------------------
# Initial conditions, proportions (state order used by model_ode):
# [S_wild, I_wild, R_wild, I_wild_cumulative,
#  S_captive, I_captive, R_captive, I_captive_cumulative]
# ---------------------------
IC = {
    "S_wild":               {"name": "constant", "args": {"value": 1}},  # Susceptible wild deer
    "I_wild":               {"name": "constant", "args": {"value": 0}},  # Infected wild deer
    "R_wild":               {"name": "constant", "args": {"value": 0}},  # Recovered wild deer
    "I_wild_cumulative":    {"name": "constant", "args": {"value": 0}},  # Cumulative infected wild deer

    "S_captive":            {"name": "constant", "args": {"value": 1}},  # Susceptible captive deer
    "I_captive":            {"name": "constant", "args": {"value": 0}},  # Infected captive deer
    "R_captive":            {"name": "constant", "args": {"value": 0}},  # Recovered captive deer
    "I_captive_cumulative": {"name": "constant", "args": {"value": 0}},  # Cumulative infected captive deer
}

# Daily output over 500 days
TIMES = np.arange(0, 501, 1, dtype=float)
