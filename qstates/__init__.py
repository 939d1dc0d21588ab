"""
Density matrices of standard two-party test states: Bell states, Werner states,
phase-mixed states, and phase-averaged correlated copies.
"""

from qstates.core import DEFAULT_QUADRATURE, QuadratureOptions
from qstates.errors import InvalidCopyCount, InvalidProbability, QStatesError, QuadratureDidNotConverge
from qstates.states import (
    BELL_RHOS,
    BELL_STATES,
    EPR,
    PROJECTOR_ANTISYMMETRIC,
    PROJECTOR_SYMMETRIC,
    SINGLET,
    averaged_phase_state,
    averaged_phase_state_copies,
    copies_dimension,
    copies_nbytes,
    phase_state,
    ronald_state,
    ronald_state_qutrit,
    werner_state,
)

__all__ = [
    "BELL_RHOS",
    "BELL_STATES",
    "DEFAULT_QUADRATURE",
    "EPR",
    "InvalidCopyCount",
    "InvalidProbability",
    "PROJECTOR_ANTISYMMETRIC",
    "PROJECTOR_SYMMETRIC",
    "QStatesError",
    "QuadratureDidNotConverge",
    "QuadratureOptions",
    "SINGLET",
    "averaged_phase_state",
    "averaged_phase_state_copies",
    "copies_dimension",
    "copies_nbytes",
    "phase_state",
    "ronald_state",
    "ronald_state_qutrit",
    "werner_state",
]
