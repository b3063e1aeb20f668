"""
Prediction of SARS-CoV-2 viral load in raw sewage from human prevalence.

The regression itself is fitted elsewhere; any object with a
``predict(positivity) -> (estimate, standard_error)`` method can be used.
`LinearLoadModel` is the ordinary least-squares fit of load on positivity,
either fitted here or rebuilt from stored coefficients.

Dependencies:
    numpy
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Protocol, Tuple, Union

import numpy as np

from .errors import InvalidArgumentError


class LoadModel(Protocol):
    def predict(self, positivity: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        ...


class LoadPrediction(NamedTuple):
    estimate: Union[float, np.ndarray]
    standard_error: Union[float, np.ndarray]


def predict_waste_load(human_positivity, model: LoadModel) -> LoadPrediction:
    """
    Predict viral load in raw sewage for each human positivity value.

    Args:
        human_positivity: Proportion(s) of the human population infected.
        model: Fitted model; its exceptions propagate unchanged.

    Returns:
        LoadPrediction of floats for a scalar input, of arrays (input order)
        otherwise.
    """
    scalar = np.ndim(human_positivity) == 0
    positivity = np.atleast_1d(np.asarray(human_positivity, dtype=float))

    estimate, standard_error = model.predict(positivity)
    estimate = np.asarray(estimate, dtype=float)
    standard_error = np.asarray(standard_error, dtype=float)

    if scalar:
        return LoadPrediction(float(estimate.reshape(-1)[0]), float(standard_error.reshape(-1)[0]))
    return LoadPrediction(estimate, standard_error)


@dataclass(frozen=True, eq=False)
class LinearLoadModel:
    """
    load = intercept + slope * positivity

    covariance : 2x2 covariance of (intercept, slope), used for the standard
                 error of the fitted mean.
    """

    intercept: float
    slope: float
    covariance: np.ndarray

    @classmethod
    def fit(cls, positivity, load) -> "LinearLoadModel":
        x = np.asarray(positivity, dtype=float).reshape(-1)
        y = np.asarray(load, dtype=float).reshape(-1)
        if x.shape != y.shape:
            raise InvalidArgumentError("positivity and load must have the same length.")
        if x.size < 3:
            raise InvalidArgumentError("At least three observations are needed to fit the model.")

        X = np.column_stack([np.ones_like(x), x])
        coef, _, rank, _ = np.linalg.lstsq(X, y, rcond=None)
        if rank < 2:
            raise InvalidArgumentError("positivity must take at least two distinct values.")

        resid = y - X @ coef
        sigma2 = float(resid @ resid) / (x.size - 2)
        covariance = sigma2 * np.linalg.inv(X.T @ X)
        return cls(float(coef[0]), float(coef[1]), covariance)

    @classmethod
    def from_coefficients(cls, intercept: float, slope: float, covariance) -> "LinearLoadModel":
        covariance = np.asarray(covariance, dtype=float)
        if covariance.shape != (2, 2):
            raise InvalidArgumentError(f"covariance must be 2x2, got {covariance.shape}")
        return cls(float(intercept), float(slope), covariance)

    def predict(self, positivity) -> Tuple[np.ndarray, np.ndarray]:
        x = np.atleast_1d(np.asarray(positivity, dtype=float))
        X = np.column_stack([np.ones_like(x), x])
        estimate = self.intercept + self.slope * x
        # se of the fitted mean: sqrt(x' V x) per row
        standard_error = np.sqrt(np.einsum("ij,jk,ik->i", X, self.covariance, X))
        return estimate, standard_error
