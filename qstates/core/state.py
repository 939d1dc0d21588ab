"""
Definitions and constants for state vectors and density matrices.
"""

from collections.abc import Iterable
from typing import Literal

import numpy as np

from qstates.errors import InvalidProbability

ATOL = 1e-9
"""Absolute numerical tolerance for floating-point calculations."""

type StateVector = np.ndarray[tuple[int, Literal[1]], np.dtype[np.complex128]]
"""State vector of a ``dim``-dimensional system, shape is (dim, 1)."""

type DensityMatrix = np.ndarray[tuple[int, int], np.dtype[np.complex128]]
"""Density matrix of a ``dim``-dimensional system, shape is (dim, dim)."""


def ensure_probability(p: float) -> float:
    """
    Validate a mixing probability.

    Raises:
        InvalidProbability - ``p`` is not within ``[0, 1]``, or is NaN.

    Returns: Validated input.
    """
    if not 0 <= p <= 1:
        raise InvalidProbability(p)
    return p


def check_state(state: np.ndarray, dim: int) -> StateVector:
    """
    Validate that ``state`` is a normalized state vector of dimension ``dim``.

    Raises:
        AssertionError - ``state`` has wrong shape or is not normalized.

    Returns: Validated input.
    """
    assert np.iscomplexobj(state)
    assert state.shape == (dim, 1)
    assert np.isclose(np.linalg.norm(state), 1.0, atol=ATOL)
    return state


def build_state(amplitudes: Iterable[complex]) -> StateVector:
    """
    Build a normalized state vector.

    Args:
        amplitudes: unnormalized amplitudes in the computational basis.

    Returns: Normalized column vector.
    """
    array = np.array(list(amplitudes), dtype=np.complex128)
    column = array[:, np.newaxis]
    column /= np.linalg.norm(column)
    return check_state(column, len(array))


def state_equal(s0: StateVector, s1: StateVector) -> bool:
    """Compare state vectors for equality."""
    return np.allclose(s0, s1, atol=ATOL)


def check_rho(rho: np.ndarray, dim: int) -> DensityMatrix:
    """
    Validate that ``rho`` is a density matrix of dimension ``dim``.

    Raises:
        AssertionError - ``rho`` has wrong shape, is not normalized, not Hermitian, or not positive semi-definite.

    Returns: Validated input.
    """
    assert np.iscomplexobj(rho)
    assert rho.shape == (dim, dim)
    # Unit Trace: the diagonal is a probability distribution.
    assert np.isclose(np.trace(rho), 1.0, atol=ATOL)
    # Hermiticity: the matrix must equal its own conjugate transpose.
    assert np.allclose(rho, rho.conj().T, atol=ATOL)
    # Positive Semi-Definiteness: no outcome has negative probability.
    assert np.all(np.linalg.eigvalsh(rho) >= -ATOL)
    return rho


def state_to_rho(state: StateVector) -> DensityMatrix:
    """Convert state vector to density matrix."""
    return check_rho(np.outer(state, np.conj(state)), state.shape[0])


def rho_equal(rho0: DensityMatrix, rho1: DensityMatrix) -> bool:
    """Compare density matrices for equality."""
    return np.allclose(rho0, rho1, atol=ATOL)
