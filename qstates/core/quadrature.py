"""
Adaptive quadrature of matrix-valued functions.

This wraps :func:`scipy.integrate.quad_vec`, which integrates the whole matrix at once
and judges convergence on a norm of the matrix rather than entry by entry.
"""

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Literal

import numpy as np
from scipy.integrate import quad_vec

from qstates.core.state import ATOL
from qstates.errors import QuadratureDidNotConverge
from qstates.utils import log

type MapLike = Callable[[Callable[[Any], Any], Iterable[Any]], Iterator[Any]]

_GK_RULES = {7: "gk15", 10: "gk21"}
"""Gauss-Kronrod rule name in scipy, keyed by the order of the Gauss rule."""


@dataclass(frozen=True)
class QuadratureOptions:
    """
    Tolerance set and evaluation budget of an adaptive quadrature.
    """

    rel_tol: float = float(np.sqrt(1e-4))
    """Relative tolerance on the norm of the integral."""
    abs_tol: float = 0.0
    """Absolute tolerance on the norm of the integral; 0 means purely relative convergence."""
    max_evals: int = 10**7
    """Maximum number of integrand evaluations."""
    order: Literal[7, 10] = 7
    """Order of the Gauss rule, paired with a Kronrod rule of ``2 * order + 1`` nodes."""
    norm: Literal["2", "max"] = "2"
    """Norm used to judge convergence: Frobenius norm or largest absolute entry."""
    strict: bool = True
    """Raise ``QuadratureDidNotConverge`` on failure; otherwise log a warning and return the estimate."""
    workers: int | MapLike = 1
    """Parallel node evaluation, passed to ``quad_vec``: process count or a map-like callable."""

    def __post_init__(self):
        if self.order not in _GK_RULES:
            raise ValueError(f"unsupported quadrature order {self.order}, expecting one of {sorted(_GK_RULES)}")
        if self.rel_tol < 0 or self.abs_tol < 0:
            raise ValueError("tolerances must be non-negative")
        if self.rel_tol == 0 and self.abs_tol == 0:
            raise ValueError("at least one tolerance must be positive")
        if self.max_evals < self.nodes:
            raise ValueError(f"max_evals must allow at least one interval of {self.nodes} nodes")
        if self.norm not in ("2", "max"):
            raise ValueError(f"unsupported norm {self.norm!r}")

    @property
    def nodes(self) -> int:
        """Number of integrand evaluations per subinterval."""
        return 2 * self.order + 1

    @property
    def limit(self) -> int:
        """Maximum number of subintervals permitted by ``max_evals``."""
        return self.max_evals // self.nodes


DEFAULT_QUADRATURE = QuadratureOptions()
"""Default tolerance set used by the phase-averaged state generators."""


def _norm(value: np.ndarray, norm: Literal["2", "max"]) -> float:
    if norm == "max":
        return float(np.max(np.abs(value)))
    return float(np.linalg.norm(value))


def adaptive_integrate(
    f: Callable[[float], np.ndarray],
    a: float,
    b: float,
    options: QuadratureOptions = DEFAULT_QUADRATURE,
) -> tuple[np.ndarray, float]:
    """
    Integrate an array-valued function over ``[a, b]``.

    Args:
        f: integrand, returning an array of fixed shape (complex values allowed).
        a: lower bound.
        b: upper bound.
        options: tolerance set and evaluation budget.

    Raises:
        QuadratureDidNotConverge - the tolerance was not met and ``options.strict`` is set.

    Returns: Integral estimate and its error estimate.
    """
    value, error, info = quad_vec(
        f,
        a,
        b,
        epsabs=options.abs_tol,
        epsrel=options.rel_tol,
        norm=options.norm,
        limit=options.limit,
        workers=options.workers,
        quadrature=_GK_RULES[options.order],
        full_output=True,
    )
    log.debug(f"quadrature over [{a:.6g}, {b:.6g}]: neval={info.neval} intervals={len(info.intervals)} error={error:.3g}")

    if not info.success:
        if options.strict:
            raise QuadratureDidNotConverge(info.message, estimate=value, error=error, neval=info.neval)
        log.warning(f"quadrature did not converge: {info.message} (error={error:.3g}, neval={info.neval})")
    return value, error


def average_over_phase(
    f: Callable[[float], np.ndarray],
    options: QuadratureOptions = DEFAULT_QUADRATURE,
    *,
    start: float = 0.0,
) -> np.ndarray:
    """
    Average a matrix-valued function over one period of a phase::

        (1 / 2pi) * integral_{start}^{start + 2pi} f(phi) dphi

    The integral of a Hermitian matrix family whose phase dependence cancels over a full period is real.
    The real part is returned; an imaginary residue larger than the integration error is logged as a warning.

    Args:
        f: matrix-valued function of the phase.
        options: tolerance set and evaluation budget.
        start: start of the integration period.

    Returns: Real part of the average, with ``complex128`` dtype.
    """
    value, error = adaptive_integrate(f, start, start + 2 * np.pi, options)
    value = value / (2 * np.pi)
    error = error / (2 * np.pi)

    result = np.real(value).astype(np.complex128)
    residue = _norm(np.imag(value), options.norm)
    if residue > max(error, options.rel_tol * _norm(result, options.norm), ATOL):
        log.warning(f"discarded imaginary part of phase average is {residue:.3g}, integration error is {error:.3g}")
    return result
