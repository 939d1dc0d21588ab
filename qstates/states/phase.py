"""
Phase-mixed two-qubit states, and their averages over a uniformly distributed phase.

``phase_state(p, phi)`` mixes ``(|01> + e^{i phi}|10>)/sqrt(2)`` with the orthogonal product state ``|00>``.
When the phase is unknown but shared by several pairs, the joint state of those pairs is the average of
the tensor power of ``phase_state`` over one period of the phase.
"""

from numbers import Integral

import numpy as np

from qstates.core.linalg import basis_vector, tensor_power, tensor_product
from qstates.core.quadrature import DEFAULT_QUADRATURE, QuadratureOptions, average_over_phase
from qstates.core.state import DensityMatrix, ensure_probability, state_to_rho
from qstates.errors import InvalidCopyCount
from qstates.utils import log

_E0 = basis_vector(2, 0)
_E1 = basis_vector(2, 1)
_V01 = tensor_product(_E0, _E1)
_V10 = tensor_product(_E1, _E0)
_RHO_00 = state_to_rho(tensor_product(_E0, _E0))

PAIR_DIM = 4
"""Dimension of one two-qubit pair."""


def phase_state(p: float, phi: float = 0.0) -> DensityMatrix:
    """
    Mixture of ``(|01> + e^{i phi}|10>)/sqrt(2)`` (with probability ``p``) and ``|00>``.

    At ``phi`` exactly 0 or pi the state vector is real, and the result has no imaginary part.

    Args:
        p: weight of the entangled component.
        phi: relative phase, any real value.

    Raises:
        InvalidProbability - ``p`` is not within ``[0, 1]``.

    Returns: 4x4 density matrix.
    """
    ensure_probability(p)
    vec = (_V01 + np.exp(1j * phi) * _V10) / np.sqrt(2)
    if phi == 0 or phi == np.pi:
        vec = vec.real.astype(np.complex128)
    return p * (vec @ vec.conj().T) + (1 - p) * _RHO_00


def averaged_phase_state(
    p: float,
    *,
    options: QuadratureOptions = DEFAULT_QUADRATURE,
    start: float = 0.0,
) -> DensityMatrix:
    """
    Joint state of two pairs sharing one uniformly random phase::

        rho = (1/2pi) * integral phase_state(p, phi) ⊗ phase_state(p, phi) dphi

    Args:
        p: weight of the entangled component.
        options: quadrature tolerance set.
        start: start of the integration period.

    Raises:
        InvalidProbability - ``p`` is not within ``[0, 1]``.
        QuadratureDidNotConverge - integration failed and ``options.strict`` is set.

    Returns: 16x16 density matrix.
    """
    ensure_probability(p)

    def integrand(phi: float) -> DensityMatrix:
        rho = phase_state(p, phi)
        return tensor_product(rho, rho)

    with log.context(f"averaged_phase_state(p={p})"):
        return average_over_phase(integrand, options, start=start)


def _is_count(n) -> bool:
    return not isinstance(n, bool) and isinstance(n, Integral)


def copies_dimension(n: int) -> int:
    """
    Dimension of ``n`` two-qubit pairs.

    Raises:
        InvalidCopyCount - ``n`` is not a positive integer.
    """
    if not _is_count(n) or n < 1:
        raise InvalidCopyCount(n, "number of copies must be a positive integer")
    return PAIR_DIM ** int(n)


def copies_nbytes(n: int) -> int:
    """Memory of one ``complex128`` density matrix of ``n`` two-qubit pairs, in bytes."""
    return copies_dimension(n) ** 2 * np.dtype(np.complex128).itemsize


def averaged_phase_state_copies(
    p: float,
    n: int,
    *,
    options: QuadratureOptions = DEFAULT_QUADRATURE,
    start: float = 0.0,
    max_dim: int | None = None,
) -> DensityMatrix:
    """
    Joint state of ``n`` pairs sharing one uniformly random phase::

        rho = (1/2pi) * integral phase_state(p, phi)^{⊗n} dphi

    The output dimension is ``4**n``, i.e. ``16**n`` complex entries; see ``copies_nbytes``.

    Args:
        p: weight of the entangled component.
        n: number of pairs, at least 2; ``n = 2`` is the same state as ``averaged_phase_state``.
        options: quadrature tolerance set.
        start: start of the integration period.
        max_dim: if set, refuse ``n`` whose output dimension exceeds this value.

    Raises:
        InvalidProbability - ``p`` is not within ``[0, 1]``.
        InvalidCopyCount - ``n`` is not an integer of at least 2, or exceeds ``max_dim``.
        QuadratureDidNotConverge - integration failed and ``options.strict`` is set.

    Returns: density matrix of dimension ``4**n``.
    """
    ensure_probability(p)
    if not _is_count(n) or n < 2:
        raise InvalidCopyCount(n)
    n = int(n)
    if max_dim is not None and copies_dimension(n) > max_dim:
        raise InvalidCopyCount(n, f"output dimension {copies_dimension(n)} exceeds limit {max_dim}")

    def integrand(phi: float) -> DensityMatrix:
        return tensor_power(phase_state(p, phi), n)

    with log.context(f"averaged_phase_state_copies(p={p}, n={n})"):
        return average_over_phase(integrand, options, start=start)
