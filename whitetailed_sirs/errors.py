"""
Exceptions raised by the whitetailed_sirs package.
"""

from __future__ import annotations

from typing import Iterable


class SIRSError(Exception):
    """Base class for all package errors."""


class InvalidArgumentError(SIRSError, ValueError):
    """An input lies outside its domain (negative dose, bad time grid, ...)."""


class MissingParameterError(SIRSError, KeyError):
    """A required parameter or state entry is absent."""

    def __init__(self, missing: Iterable[str]):
        self.missing = tuple(missing)
        super().__init__(f"Missing required parameters: {list(self.missing)}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class SolverFailureError(SIRSError, RuntimeError):
    """The ODE solver reported failure; `result` holds its OdeResult."""

    def __init__(self, message: str, result=None):
        self.result = result
        super().__init__(message)
