"""
Two-term convex mixtures of a maximally entangled state with a fixed noise state.
"""

import numpy as np

from qstates.core.linalg import basis_vector, max_entangled_state, tensor_product
from qstates.core.state import DensityMatrix, ensure_probability, state_to_rho

_RHO_01 = state_to_rho(tensor_product(basis_vector(2, 0), basis_vector(2, 1)))
_RHO_02 = state_to_rho(tensor_product(basis_vector(3, 0), basis_vector(3, 2)))


def ronald_state(p: float) -> DensityMatrix:
    """
    Mixture of the EPR pair (with probability ``p``) and the product state ``|01>``::

        rho = p * |Φ+><Φ+| + (1-p) * |01><01|

    Raises:
        InvalidProbability - ``p`` is not within ``[0, 1]``.
    """
    ensure_probability(p)
    return p * max_entangled_state(2) + (1 - p) * _RHO_01


def ronald_state_qutrit(p: float) -> DensityMatrix:
    """
    Mixture of the two-qutrit maximally entangled state (with probability ``p``)
    and the product state ``|02>``, which is orthogonal to it.

    Raises:
        InvalidProbability - ``p`` is not within ``[0, 1]``.
    """
    ensure_probability(p)
    return p * max_entangled_state(3) + (1 - p) * _RHO_02


def werner_state(p: float, d: int = 2) -> DensityMatrix:
    """
    Werner state: mixture of the maximally entangled state (with probability ``p``)
    and the maximally mixed state, in local dimension ``d``::

        rho = p * |Φd><Φd| + (1-p) * I / d^2

    Raises:
        InvalidProbability - ``p`` is not within ``[0, 1]``.
        ValueError - ``d`` is less than 2.
    """
    ensure_probability(p)
    if d < 2:
        raise ValueError(f"local dimension must be at least 2, got {d}")
    return p * max_entangled_state(d) + (1 - p) * np.identity(d * d, dtype=np.complex128) / (d * d)
