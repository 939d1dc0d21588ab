from qstates.core.linalg import basis_vector, max_entangled_state, max_entangled_vector, tensor_power, tensor_product
from qstates.core.quadrature import DEFAULT_QUADRATURE, QuadratureOptions, adaptive_integrate, average_over_phase
from qstates.core.state import ATOL, DensityMatrix, StateVector

__all__ = [
    "ATOL",
    "DEFAULT_QUADRATURE",
    "DensityMatrix",
    "QuadratureOptions",
    "StateVector",
    "adaptive_integrate",
    "average_over_phase",
    "basis_vector",
    "max_entangled_state",
    "max_entangled_vector",
    "tensor_power",
    "tensor_product",
]
