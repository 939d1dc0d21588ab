import numpy as np
import pytest

from qstates.core.state import (
    build_state,
    check_rho,
    check_state,
    ensure_probability,
    rho_equal,
    state_equal,
    state_to_rho,
)
from qstates.errors import InvalidProbability


@pytest.mark.parametrize("p", [0, 0.0, 0.3, 1, 1.0])
def test_ensure_probability(p: float):
    assert ensure_probability(p) == p


@pytest.mark.parametrize("p", [-0.1, 1.1, -1e-12, float("nan"), float("inf")])
def test_ensure_probability_invalid(p: float):
    with pytest.raises(InvalidProbability) as exc_info:
        ensure_probability(p)
    assert isinstance(exc_info.value, ValueError)


def test_build_state():
    s = build_state((1, 1j))
    assert s.shape == (2, 1)
    assert s.dtype == np.complex128
    assert state_equal(s, np.array([[1], [1j]], dtype=np.complex128) / np.sqrt(2))

    with pytest.raises(AssertionError):
        check_state(np.array([[1], [1]], dtype=np.complex128), 2)
    with pytest.raises(AssertionError):
        check_state(s, 3)


def test_state_to_rho():
    rho = state_to_rho(build_state((0, 1, 1, 0)))
    expected = np.zeros((4, 4), dtype=np.complex128)
    expected[1:3, 1:3] = 0.5
    assert rho_equal(rho, expected)


def test_check_rho():
    check_rho(np.identity(3, dtype=np.complex128) / 3, 3)

    with pytest.raises(AssertionError):  # real dtype
        check_rho(np.identity(2) / 2, 2)
    with pytest.raises(AssertionError):  # trace
        check_rho(np.identity(2, dtype=np.complex128), 2)
    with pytest.raises(AssertionError):  # not Hermitian
        check_rho(np.array([[0.5, 0.5], [0, 0.5]], dtype=np.complex128), 2)
    with pytest.raises(AssertionError):  # negative eigenvalue
        check_rho(np.array([[0.5, 0.8], [0.8, 0.5]], dtype=np.complex128), 2)
