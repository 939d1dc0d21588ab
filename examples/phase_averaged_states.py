"""
This script builds phase-averaged states of correlated pairs and reports how
far they are from the corresponding dephased product states.
"""

import numpy as np
from tap import Tap

from qstates import QuadratureOptions, averaged_phase_state_copies, copies_nbytes, phase_state
from qstates.core.linalg import tensor_power
from qstates.utils import log

log.set_default_level("INFO")


class Args(Tap):
    p: list[float] = [0.25, 0.5, 0.75, 1.0]  # weight of the entangled component
    n: int = 2  # number of pairs sharing one phase
    rel_tol: float = 0.01  # relative tolerance of the phase average
    max_bytes: int = 1 << 30  # refuse outputs larger than this


def dephased(p: float, n: int) -> np.ndarray:
    """Product of ``n`` single-pair averages, i.e. independent phases."""
    single = np.diag(np.diag(phase_state(p))).astype(np.complex128)
    return tensor_power(single, n)


def main(args: Args) -> None:
    if copies_nbytes(args.n) > args.max_bytes:
        raise SystemExit(f"{args.n} pairs need {copies_nbytes(args.n)} bytes, above --max_bytes")

    options = QuadratureOptions(rel_tol=args.rel_tol)
    for p in args.p:
        rho = averaged_phase_state_copies(p, args.n, options=options)
        distance = 0.5 * np.sum(np.abs(np.linalg.eigvalsh(rho - dephased(p, args.n))))
        log.info(f"p={p:.3f} n={args.n}: trace={np.trace(rho).real:.6f} distance-to-independent={distance:.6f}")


if __name__ == "__main__":
    main(Args().parse_args())
