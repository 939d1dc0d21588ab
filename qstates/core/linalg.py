"""
Primitive linear-algebra helpers: basis vectors, maximally entangled states, tensor products.
"""

from functools import reduce

import numpy as np

from qstates.core.state import DensityMatrix, StateVector, state_to_rho


def basis_vector(dim: int, index: int) -> StateVector:
    """
    Build the computational basis vector ``|index>``.

    Args:
        dim: dimension of the system.
        index: zero-based basis index.

    Raises:
        ValueError - ``dim`` is not positive.
        IndexError - ``index`` is outside ``[0, dim)``.
    """
    if dim < 1:
        raise ValueError(f"dimension must be positive, got {dim}")
    if not 0 <= index < dim:
        raise IndexError(f"basis index {index} out of range for dimension {dim}")
    vec = np.zeros((dim, 1), dtype=np.complex128)
    vec[index, 0] = 1
    return vec


def max_entangled_vector(dim: int) -> StateVector:
    """
    Build the maximally entangled vector ``sum_i |ii> / sqrt(dim)`` of two ``dim``-dimensional systems.

    Raises:
        ValueError - ``dim`` is not positive.
    """
    if dim < 1:
        raise ValueError(f"dimension must be positive, got {dim}")
    vec = np.zeros((dim * dim, 1), dtype=np.complex128)
    for i in range(dim):
        vec += tensor_product(basis_vector(dim, i), basis_vector(dim, i))
    return vec / np.sqrt(dim)


def max_entangled_state(dim: int) -> DensityMatrix:
    """Density matrix of ``max_entangled_vector(dim)``."""
    return state_to_rho(max_entangled_vector(dim))


def tensor_product(*operands: np.ndarray) -> np.ndarray:
    """
    Kronecker product of one or more vectors or matrices, from left to right.
    """
    if not operands:
        raise ValueError("tensor_product requires at least one operand")
    first, *rest = operands
    return reduce(np.kron, rest, np.array(first))


def tensor_power(m: np.ndarray, n: int) -> np.ndarray:
    """
    n-fold Kronecker product of ``m`` with itself.

    Raises:
        ValueError - ``n`` is less than 1.
    """
    if n < 1:
        raise ValueError(f"tensor power must be at least 1, got {n}")
    return tensor_product(*([m] * n))
