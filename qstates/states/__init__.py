from qstates.states.bell import (
    BELL_RHOS,
    BELL_STATES,
    EPR,
    PROJECTOR_ANTISYMMETRIC,
    PROJECTOR_SYMMETRIC,
    SINGLET,
)
from qstates.states.mixture import ronald_state, ronald_state_qutrit, werner_state
from qstates.states.phase import (
    averaged_phase_state,
    averaged_phase_state_copies,
    copies_dimension,
    copies_nbytes,
    phase_state,
)

__all__ = [
    "BELL_RHOS",
    "BELL_STATES",
    "EPR",
    "PROJECTOR_ANTISYMMETRIC",
    "PROJECTOR_SYMMETRIC",
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
