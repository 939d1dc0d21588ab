"""
Bell basis of two qubits, and the projectors onto its symmetric and antisymmetric subspaces.
"""

from qstates.core.state import build_state, state_to_rho

BELL_STATE_PHI_P = build_state((1, 0, 0, 1))
"""Two-qubit maximally entangled Bell state: ``|Φ+>`` i.e. ``(|00>+|11>)/sqrt(2)``."""
BELL_STATE_PHI_N = build_state((1, 0, 0, -1))
"""Two-qubit maximally entangled Bell state: ``|Φ->`` i.e. ``(|00>-|11>)/sqrt(2)``."""
BELL_STATE_PSI_P = build_state((0, 1, 1, 0))
"""Two-qubit maximally entangled Bell state: ``|Ψ+>`` i.e. ``(|01>+|10>)/sqrt(2)``."""
BELL_STATE_PSI_N = build_state((0, 1, -1, 0))
"""Two-qubit maximally entangled Bell state: ``|Ψ->`` i.e. ``(|01>-|10>)/sqrt(2)``."""

BELL_STATES = (BELL_STATE_PHI_P, BELL_STATE_PHI_N, BELL_STATE_PSI_P, BELL_STATE_PSI_N)
"""The Bell basis, ordered ``Φ+, Φ-, Ψ+, Ψ-``."""

EPR = BELL_STATE_PHI_P
"""The EPR pair."""
SINGLET = BELL_STATE_PSI_N
"""The singlet."""

BELL_RHO_PHI_P = state_to_rho(BELL_STATE_PHI_P)
"""Density matrix of ``BELL_STATE_PHI_P``."""
BELL_RHO_PHI_N = state_to_rho(BELL_STATE_PHI_N)
"""Density matrix of ``BELL_STATE_PHI_N``."""
BELL_RHO_PSI_P = state_to_rho(BELL_STATE_PSI_P)
"""Density matrix of ``BELL_STATE_PSI_P``."""
BELL_RHO_PSI_N = state_to_rho(BELL_STATE_PSI_N)
"""Density matrix of ``BELL_STATE_PSI_N``."""

BELL_RHOS = (BELL_RHO_PHI_P, BELL_RHO_PHI_N, BELL_RHO_PSI_P, BELL_RHO_PSI_N)
"""Density matrices of ``BELL_STATES``, in the same order."""

PROJECTOR_SYMMETRIC = BELL_RHO_PHI_P + BELL_RHO_PHI_N + BELL_RHO_PSI_P
"""Projector onto the symmetric (triplet) subspace of two qubits."""
PROJECTOR_ANTISYMMETRIC = BELL_RHO_PSI_N.copy()
"""Projector onto the antisymmetric (singlet) subspace of two qubits."""
