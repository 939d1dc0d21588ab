import numpy as np
import pytest

from qstates.core.linalg import basis_vector, max_entangled_state, max_entangled_vector, tensor_power, tensor_product
from qstates.core.state import check_rho, rho_equal, state_equal


def test_basis_vector():
    e = basis_vector(3, 2)
    assert e.shape == (3, 1)
    assert e.dtype == np.complex128
    assert state_equal(e, np.array([[0], [0], [1]]))

    with pytest.raises(IndexError):
        basis_vector(2, 2)
    with pytest.raises(IndexError):
        basis_vector(2, -1)
    with pytest.raises(ValueError):
        basis_vector(0, 0)


def test_max_entangled_vector():
    assert state_equal(max_entangled_vector(2), np.array([[1], [0], [0], [1]]) / np.sqrt(2))

    v = max_entangled_vector(3)
    assert v.shape == (9, 1)
    assert np.isclose(np.linalg.norm(v), 1.0)
    assert np.allclose(v[[0, 4, 8], 0], 1 / np.sqrt(3))


@pytest.mark.parametrize("dim", [2, 3, 4])
def test_max_entangled_state(dim: int):
    rho = max_entangled_state(dim)
    check_rho(rho, dim * dim)
    assert np.isclose(np.trace(rho @ rho), 1.0)  # pure


def test_tensor_product():
    e0 = basis_vector(2, 0)
    e1 = basis_vector(2, 1)
    assert state_equal(tensor_product(e0, e1), basis_vector(4, 1))
    assert state_equal(tensor_product(e1, e0), basis_vector(4, 2))
    assert state_equal(tensor_product(e1, e0, e1), basis_vector(8, 5))

    m = np.array([[1, 2], [3, 4]], dtype=np.complex128)
    single = tensor_product(m)
    assert rho_equal(single, m)
    assert single is not m

    with pytest.raises(ValueError):
        tensor_product()


def test_tensor_power():
    m = np.array([[0, 1], [1, 0]], dtype=np.complex128)
    assert tensor_power(m, 1).shape == (2, 2)
    assert rho_equal(tensor_power(m, 2), np.kron(m, m))
    assert rho_equal(tensor_power(m, 3), np.kron(np.kron(m, m), m))
    assert tensor_power(m, 4).shape == (16, 16)

    with pytest.raises(ValueError):
        tensor_power(m, 0)


@pytest.mark.parametrize("dim", [0, -2])
def test_max_entangled_invalid_dimension(dim: int):
    with pytest.raises(ValueError):
        max_entangled_vector(dim)
    with pytest.raises(ValueError):
        max_entangled_state(dim)
