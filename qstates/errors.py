"""
Errors raised by state constructors and the quadrature adapter.
"""

from typing import Any


class QStatesError(Exception):
    """Base class of errors raised by qstates."""


class InvalidProbability(QStatesError, ValueError):
    """A mixing probability is outside ``[0, 1]``."""

    def __init__(self, p: Any):
        super().__init__(f"probability must be between 0 and 1, got {p!r}")
        self.p = p


class InvalidCopyCount(QStatesError, ValueError):
    """A copy count is not an integer of at least 2, or exceeds the requested size limit."""

    def __init__(self, n: Any, reason: str = "number of copies must be an integer of at least 2"):
        super().__init__(f"{reason}, got {n!r}")
        self.n = n


class QuadratureDidNotConverge(QStatesError, RuntimeError):
    """Adaptive quadrature stopped before meeting the requested tolerance."""

    def __init__(self, message: str, *, estimate: Any, error: float, neval: int):
        super().__init__(f"quadrature did not converge: {message} (error={error:.3g}, neval={neval})")
        self.estimate = estimate
        """Best estimate of the integral."""
        self.error = error
        """Error estimate of ``estimate``."""
        self.neval = neval
        """Number of integrand evaluations."""
        self.message = message
        """Reason reported by the integrator."""
