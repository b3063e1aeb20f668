"""
Dose-response (Wells-Riley) probability of infection for plaque-forming
units (PFU) of virus received by a susceptible deer.
"""

from __future__ import annotations

import numpy as np

from .errors import InvalidArgumentError

# Infectious-dose scaling constant (PFU)
K_PFU = 420.0


def p_infect_pfu(dose, eff=1.0):
    """
    Probability of infection given the dose received and the transfer
    efficiency of ingestion:

        P = 1 - exp(-dose * eff / K_PFU)

    Args:
        dose: PFU received, scalar or sequence, >= 0.
        eff: Transfer efficiency in [0, 1].

    Returns:
        float for a scalar dose, otherwise an np.ndarray in input order.
    """
    dose = np.asarray(dose, dtype=float)
    if np.any(np.isnan(dose)) or np.any(dose < 0):
        raise InvalidArgumentError("dose must be non-negative.")
    if np.ndim(eff) != 0 or not 0.0 <= eff <= 1.0:
        raise InvalidArgumentError(f"eff must be a number in [0, 1], got {eff}")

    p = 1.0 - np.exp(-dose * eff / K_PFU)
    return float(p) if p.ndim == 0 else p
